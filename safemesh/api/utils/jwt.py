import secrets
from datetime import datetime
from typing import Optional

from jose import JWTError, jwt

from config import ApplicationConfig
from safemesh.domain.entities import Principal


def generate_session_token(
    principal: Principal, issued_at: datetime, expires_at: datetime
) -> str:
    """
    Generate the opaque session token handed to the console client

    Args:
        principal: Authenticated identity
        issued_at: Naive UTC issue time
        expires_at: Naive UTC expiry time (issued_at + session ttl)

    Returns:
        JWT token string (HS256). The random jti keeps two sessions issued
        in the same second distinct.
    """
    payload = {
        "sub": principal.id,
        "email": principal.email,
        "role": principal.role,
        "jti": secrets.token_hex(16),
        "iat": issued_at,
        "exp": expires_at,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"]
        )
        return payload
    except JWTError:
        return None

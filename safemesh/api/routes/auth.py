from datetime import datetime

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from safemesh.api.error import ClientError, ServerError
from safemesh.app.services.console import MonitoringConsole
from safemesh.depends import get_console, get_current_session
from safemesh.domain.entities import AuthSession, Principal

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Validates incoming login request.
    """

    email: EmailStr = Field(..., description="Operator email address")
    password: str = Field(..., description="Operator password")
    remember_me: bool = Field(False, description="Keep the session across restarts")


class LoginResponse(BaseModel):
    """Response for console login"""

    token: str
    expires_in_sec: int
    expires_at: datetime
    user: Principal


class SessionResponse(BaseModel):
    """Current session details"""

    user: Principal
    expires_at: datetime
    time_until_expiry_sec: int


class LogoutResponse(BaseModel):
    message: str


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest, console: MonitoringConsole = Depends(get_console)
):
    """
    Console Login

    Issues a time-bounded session for the operator. With remember_me the
    session survives a console restart until it expires.

    Raises:
        - 401 Unauthorized: Invalid credentials
        - 500 Internal Server Error: Server error
    """
    result = await console.login(request.email, request.password, request.remember_me)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    session = result.value
    return LoginResponse(
        token=session.token,
        expires_in_sec=int((session.expires_at - session.issued_at).total_seconds()),
        expires_at=session.expires_at,
        user=session.principal,
    )


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(console: MonitoringConsole = Depends(get_console)):
    """Ends the current session. Always succeeds."""
    await console.logout()
    return {"message": "Logged out"}


@router.get("/session", status_code=status.HTTP_200_OK, response_model=SessionResponse)
async def get_session(
    session: AuthSession = Depends(get_current_session),
    console: MonitoringConsole = Depends(get_console),
):
    """
    Current Session

    Raises:
        - 401 Unauthorized: No valid session
    """
    remaining = await console.time_until_expiry()
    return SessionResponse(
        user=session.principal,
        expires_at=session.expires_at,
        time_until_expiry_sec=int(remaining.total_seconds()),
    )

"""
Bcrypt Credential Verifier

Checks console operator credentials against bcrypt hashes.
"""

from typing import Dict, List, Optional, Tuple

import bcrypt

from safemesh.app.services.credentials import ICredentialVerifier
from safemesh.domain.entities import Principal

MAX_PASSWORD_BYTES = 72


class BcryptCredentialVerifier(ICredentialVerifier):
    """
    Business Rules:
    - Passwords are only held as bcrypt hashes
    - Unknown emails still pay for one hash check (constant-time response)
    - Passwords longer than bcrypt's 72-byte limit never match
    """

    def __init__(self, accounts: List[Tuple[Principal, str]], rounds: int = 12):
        self._accounts: Dict[str, Tuple[Principal, bytes]] = {
            principal.email: (principal, password_hash.encode())
            for principal, password_hash in accounts
        }
        self._dummy_hash = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(rounds))

    @staticmethod
    def hash_password(password: str, rounds: int = 12) -> str:
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds)).decode()

    async def verify(self, email: str, password: str) -> Optional[Principal]:
        secret = password.encode()
        account = self._accounts.get(email)
        if account is None or len(secret) > MAX_PASSWORD_BYTES:
            # Hash dummy password to maintain constant time
            bcrypt.checkpw(secret[:MAX_PASSWORD_BYTES], self._dummy_hash)
            return None

        principal, password_hash = account
        if not bcrypt.checkpw(secret, password_hash):
            return None
        return principal

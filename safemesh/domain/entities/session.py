"""
Session Entity

Time-bounded authentication grant held by the session store.
Not a table: the only durable form is the serialized "remember me" record.
"""

from datetime import datetime, timedelta

from pydantic import BaseModel


class Principal(BaseModel):
    """Authenticated identity"""

    id: str
    name: str
    email: str
    role: str


class AuthSession(BaseModel):
    """
    AuthSession - the current authentication session.

    Business Rules:
    - expires_at = issued_at + ttl
    - Valid iff now < expires_at
    - An expired session is treated as absent and purged on next access
    """

    token: str
    principal: Principal
    issued_at: datetime
    expires_at: datetime

    def is_valid(self, now: datetime) -> bool:
        return now < self.expires_at

    def time_until_expiry(self, now: datetime) -> timedelta:
        return max(timedelta(0), self.expires_at - now)

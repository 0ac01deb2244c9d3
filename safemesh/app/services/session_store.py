"""
Session Store

Owns the single authentication session of one console client context.

Business Rules:
- login creates a session valid for `ttl`; only "remember me" sessions are
  written to the storage slot
- An expired session is purged on the first access after expiry (no timer)
- Storage failures are logged and treated as "no persisted session"
"""

import asyncio
import json
import logging
from datetime import UTC, datetime, timedelta
from typing import Optional

from pydantic import ValidationError

from safemesh.api.utils.jwt import generate_session_token
from safemesh.app.services.clock import IClock
from safemesh.app.services.credentials import ICredentialVerifier
from safemesh.app.services.storage import IKeyValueStorage, StorageUnavailable
from safemesh.domain.entities import AuthSession, Principal
from safemesh.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


def _to_epoch_millis(value: datetime) -> int:
    return int(value.replace(tzinfo=UTC).timestamp() * 1000)


def _from_epoch_millis(value: int) -> datetime:
    return datetime.fromtimestamp(value / 1000, UTC).replace(tzinfo=None)


class SessionStore:
    def __init__(
        self,
        verifier: ICredentialVerifier,
        storage: IKeyValueStorage,
        clock: IClock,
        ttl: timedelta = timedelta(seconds=900),
        storage_key: str = "auth",
    ):
        self.verifier = verifier
        self.storage = storage
        self.clock = clock
        self.ttl = ttl
        self.storage_key = storage_key

        self._session: Optional[AuthSession] = None
        self._restored = False
        self._lock = asyncio.Lock()

    async def login(
        self, email: str, password: str, remember_me: bool = False
    ) -> Result[AuthSession]:
        """
        Authenticate and replace the current session.

        Args:
            email: Operator email
            password: Plain text password
            remember_me: Persist the session so it survives a restart

        Returns:
            Result with the new AuthSession, or INVALID_CREDENTIALS
        """
        principal = await self.verifier.verify(email, password)
        if principal is None:
            logger.info(f"Login rejected for {email}")
            return Return.err(
                Error("INVALID_CREDENTIALS", "Invalid email or password")
            )

        issued_at = self.clock.now()
        expires_at = issued_at + self.ttl
        session = AuthSession(
            token=generate_session_token(principal, issued_at, expires_at),
            principal=principal,
            issued_at=issued_at,
            expires_at=expires_at,
        )

        async with self._lock:
            self._session = session
            # A fresh login supersedes whatever was restored or persisted.
            self._restored = True
            if remember_me:
                await self._save(session)
            else:
                await self._remove_persisted()

        logger.info(f"Session issued for {principal.email} (expires {expires_at.isoformat()})")
        return Return.ok(session)

    async def current_session(self) -> Optional[AuthSession]:
        async with self._lock:
            if not self._restored:
                self._session = await self._load()
                self._restored = True

            if self._session is None:
                return None

            if not self._session.is_valid(self.clock.now()):
                logger.info(f"Session for {self._session.principal.email} expired")
                await self._clear()
                return None

            return self._session

    async def logout(self) -> None:
        async with self._lock:
            if self._session is not None:
                logger.info(f"Session for {self._session.principal.email} ended")
            self._restored = True
            await self._clear()

    async def is_authenticated(self) -> bool:
        return await self.current_session() is not None

    async def time_until_expiry(self) -> timedelta:
        session = await self.current_session()
        if session is None:
            return timedelta(0)
        return session.time_until_expiry(self.clock.now())

    async def _clear(self) -> None:
        self._session = None
        await self._remove_persisted()

    async def _save(self, session: AuthSession) -> None:
        record = {
            "token": session.token,
            "user": session.principal.model_dump(),
            "expiresAt": _to_epoch_millis(session.expires_at),
        }
        try:
            await self.storage.set(self.storage_key, json.dumps(record))
        except StorageUnavailable as exc:
            logger.warning(f"Error saving session to storage: {exc}")

    async def _remove_persisted(self) -> None:
        try:
            await self.storage.delete(self.storage_key)
        except StorageUnavailable as exc:
            logger.warning(f"Error removing session from storage: {exc}")

    async def _load(self) -> Optional[AuthSession]:
        try:
            raw = await self.storage.get(self.storage_key)
        except StorageUnavailable as exc:
            logger.warning(f"Error loading session from storage: {exc}")
            return None

        if raw is None:
            return None

        try:
            record = json.loads(raw)
            expires_at = _from_epoch_millis(int(record["expiresAt"]))
            session = AuthSession(
                token=record["token"],
                principal=Principal.model_validate(record["user"]),
                issued_at=expires_at - self.ttl,
                expires_at=expires_at,
            )
        except (ValueError, TypeError, KeyError, ValidationError) as exc:
            logger.warning(f"Discarding unreadable persisted session: {exc}")
            await self._remove_persisted()
            return None

        if not session.is_valid(self.clock.now()):
            await self._remove_persisted()
            return None

        return session

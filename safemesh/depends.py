"""
Composition root

Builds the engine, the storage slot, the credential verifier and the
MonitoringConsole context object, plus the FastAPI dependencies that hand
that context to route handlers.
"""

from datetime import timedelta
from typing import Optional

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from safemesh.adapter.services.credentials import BcryptCredentialVerifier
from safemesh.adapter.services.seed import seed_demo_data
from safemesh.adapter.services.storage import SqlKeyValueStorage
from safemesh.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from safemesh.api.error import ClientError
from safemesh.api.utils.jwt import verify_jwt
from safemesh.app.services.clock import IClock, SystemClock
from safemesh.app.services.console import MonitoringConsole
from safemesh.app.services.session_store import SessionStore
from safemesh.app.use_cases.errors import unauthenticated
from safemesh.domain.entities import AuthSession, Principal

security = HTTPBearer(auto_error=False)


def create_engine(ApplicationConfig) -> AsyncEngine:
    if ":memory:" in ApplicationConfig.DB_URI:
        # One shared connection, otherwise every session sees an empty database
        return create_async_engine(
            ApplicationConfig.DB_URI,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)


def create_session_factory(engine: AsyncEngine):
    return sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


async def init_db(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


def build_credential_verifier(ApplicationConfig) -> BcryptCredentialVerifier:
    rounds = ApplicationConfig.BCRYPT_ROUNDS
    password_hash = ApplicationConfig.ADMIN_PASSWORD_HASH or (
        BcryptCredentialVerifier.hash_password(ApplicationConfig.ADMIN_PASSWORD, rounds)
    )
    admin = Principal(
        id=ApplicationConfig.ADMIN_ID,
        name=ApplicationConfig.ADMIN_NAME,
        email=ApplicationConfig.ADMIN_EMAIL,
        role=ApplicationConfig.ADMIN_ROLE,
    )
    return BcryptCredentialVerifier([(admin, password_hash)], rounds=rounds)


def build_console(
    ApplicationConfig,
    engine: AsyncEngine,
    clock: Optional[IClock] = None,
) -> MonitoringConsole:
    """Create one console context; call once per client context at startup"""
    clock = clock or SystemClock()
    session_factory = create_session_factory(engine)
    storage = SqlKeyValueStorage(session_factory, clock)

    session_store = SessionStore(
        verifier=build_credential_verifier(ApplicationConfig),
        storage=storage,
        clock=clock,
        ttl=timedelta(seconds=ApplicationConfig.SESSION_TTL_SECONDS),
        storage_key=ApplicationConfig.SESSION_STORAGE_KEY,
    )

    return MonitoringConsole(
        session_store=session_store,
        uow_factory=lambda: SqlAlchemyUnitOfWork(session_factory),
        storage=storage,
        clock=clock,
        settings_key=ApplicationConfig.SETTINGS_STORAGE_KEY,
        network_health_pct=ApplicationConfig.NETWORK_HEALTH_PCT,
        quantum_pairs=ApplicationConfig.QUANTUM_PAIRS,
        recent_relays=ApplicationConfig.RECENT_RELAYS,
    )


async def prepare_database(ApplicationConfig, engine: AsyncEngine) -> None:
    await init_db(engine)
    if ApplicationConfig.SEED_DEMO_DATA:
        await seed_demo_data(create_session_factory(engine))


def get_console(request: Request) -> MonitoringConsole:
    return request.app.state.console


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    """Bearer token if one was sent and is a well-formed, unexpired JWT"""
    if credentials is None:
        return None
    if verify_jwt(credentials.credentials) is None:
        return None
    return credentials.credentials


async def get_current_session(
    token: Optional[str] = Depends(get_bearer_token),
    console: MonitoringConsole = Depends(get_console),
) -> AuthSession:
    """
    Dependency to resolve the console session from the Authorization header.

    Raises:
        ClientError: 401 if the token is missing, invalid, expired or does
        not belong to the current session
    """
    session = await console.authenticate(token) if token is not None else None
    if session is None:
        raise ClientError(
            unauthenticated("request"), status_code=status.HTTP_401_UNAUTHORIZED
        )
    return session

from typing import Callable

from sqlmodel.ext.asyncio.session import AsyncSession

from safemesh.adapter.repositories.alert_repository import AlertRepository
from safemesh.adapter.repositories.audit_log_repository import AuditLogRepository
from safemesh.adapter.repositories.evidence_repository import EvidenceRepository
from safemesh.adapter.repositories.user_repository import UserRepository
from safemesh.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern - one session per unit"""

    def __init__(self, session_factory: Callable[[], AsyncSession]):
        self.session_factory = session_factory
        self.session = None

    async def __aenter__(self):
        self.session = self.session_factory()
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.alerts = AlertRepository(self.session)
        self.evidence = EvidenceRepository(self.session)
        self.audit_logs = AuditLogRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Detach loaded entities first so they stay readable once the
        # session is gone; anything not committed is rolled back.
        self.session.expunge_all()
        await self.rollback()
        await self.session.close()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()

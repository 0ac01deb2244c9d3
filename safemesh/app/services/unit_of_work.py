from abc import ABC, abstractmethod

from safemesh.app.repositories.alert_repository import IAlertRepository
from safemesh.app.repositories.audit_log_repository import IAuditLogRepository
from safemesh.app.repositories.evidence_repository import IEvidenceRepository
from safemesh.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    alerts: IAlertRepository
    evidence: IEvidenceRepository
    audit_logs: IAuditLogRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass

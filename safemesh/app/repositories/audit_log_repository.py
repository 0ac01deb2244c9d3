from abc import ABC, abstractmethod
from typing import List

from safemesh.domain.entities import AuditLogEntry


class IAuditLogRepository(ABC):
    """AuditLog repository interface - application layer"""

    @abstractmethod
    async def append(self, entry: AuditLogEntry) -> AuditLogEntry:
        """Append a new audit entry (immutable)"""
        pass

    @abstractmethod
    async def list_all(self) -> List[AuditLogEntry]:
        """All entries in insertion order (oldest first)"""
        pass

from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from safemesh.app.repositories.audit_log_repository import IAuditLogRepository
from safemesh.domain.entities import AuditLogEntry


class AuditLogRepository(IAuditLogRepository):
    """AuditLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def append(self, entry: AuditLogEntry) -> AuditLogEntry:
        """Append a new audit entry (immutable)"""
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry

    async def list_all(self) -> List[AuditLogEntry]:
        """All entries in insertion order (oldest first)"""
        stmt = select(AuditLogEntry).order_by(AuditLogEntry.id)
        result = await self.session.exec(stmt)
        return list(result.all())

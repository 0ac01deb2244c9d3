from datetime import datetime
from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from safemesh.app.repositories.evidence_repository import IEvidenceRepository
from safemesh.domain.entities import Evidence


class EvidenceRepository(IEvidenceRepository):
    """Evidence repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, evidence_id: str) -> Optional[Evidence]:
        """Get evidence by ID"""
        stmt = select(Evidence).where(Evidence.id == evidence_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_device(
        self,
        device_id: str,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[Evidence]:
        """List evidence for a device ordered by timestamp, bounds inclusive"""
        stmt = select(Evidence).where(Evidence.device_id == device_id)
        if start is not None:
            stmt = stmt.where(Evidence.timestamp >= start)
        if end is not None:
            stmt = stmt.where(Evidence.timestamp <= end)
        stmt = stmt.order_by(Evidence.timestamp, Evidence.id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, evidence: Evidence) -> Evidence:
        """Create a new evidence item"""
        self.session.add(evidence)
        await self.session.flush()
        await self.session.refresh(evidence)
        return evidence

    async def update(self, evidence: Evidence) -> Evidence:
        """Update existing evidence item"""
        self.session.add(evidence)
        await self.session.flush()
        await self.session.refresh(evidence)
        return evidence

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from safemesh.domain.entities import Evidence


class IEvidenceRepository(ABC):
    """Evidence repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, evidence_id: str) -> Optional[Evidence]:
        """Get evidence by ID"""
        pass

    @abstractmethod
    async def list_by_device(
        self,
        device_id: str,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[Evidence]:
        """List evidence for a device ordered by timestamp, bounds inclusive"""
        pass

    @abstractmethod
    async def create(self, evidence: Evidence) -> Evidence:
        """Create a new evidence item"""
        pass

    @abstractmethod
    async def update(self, evidence: Evidence) -> Evidence:
        """Update existing evidence item"""
        pass

from datetime import datetime, timedelta
from typing import List, Optional

from safemesh.app.services.clock import IClock
from safemesh.app.services.unit_of_work import UnitOfWork
from safemesh.app.use_cases.dtos import EvidenceVaultStats
from safemesh.domain.entities import Evidence
from safemesh.libs.result import Result, Return

RECENT_WINDOW = timedelta(hours=24)


class ListEvidenceUseCase:
    """Evidence collected from one device, optionally within [start, end]"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        device_id: str,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> Result[List[Evidence]]:
        async with self.uow:
            items = await self.uow.evidence.list_by_device(device_id, start=start, end=end)
            return Return.ok(items)


class GetEvidenceStatsUseCase:
    """Vault counters for one device, recomputed on every call"""

    def __init__(self, uow: UnitOfWork, clock: IClock):
        self.uow = uow
        self.clock = clock

    async def execute(self, device_id: str) -> Result[EvidenceVaultStats]:
        now = self.clock.now()
        async with self.uow:
            items = await self.uow.evidence.list_by_device(device_id)
            return Return.ok(
                EvidenceVaultStats(
                    total_evidence=len(items),
                    preserved_items=sum(1 for e in items if e.preserved),
                    critical_evidence=sum(1 for e in items if e.type == "location"),
                    recent_captures=sum(
                        1 for e in items if now - e.timestamp < RECENT_WINDOW
                    ),
                )
            )

"""
Audit Log Use Cases

Read side of the audit trail: listing, statistics and export.
"""

from datetime import timedelta
from typing import Any, Dict, List, Optional

from safemesh.app.services.audit_recorder import AuditRecorder, AuditTrailView
from safemesh.app.services.clock import IClock
from safemesh.app.services.unit_of_work import UnitOfWork
from safemesh.app.use_cases.dtos import AuditStats
from safemesh.libs.result import Result, Return

RECENT_WINDOW = timedelta(hours=24)
CRITICAL_KEYWORDS = ("alert", "emergency", "preserve")


class ListAuditLogsUseCase:
    """
    Business Rules:
    - Newest entries first; stored order is never changed
    - filter is a case-insensitive substring over action, user and details
    """

    def __init__(self, uow: UnitOfWork, clock: IClock):
        self.uow = uow
        self.clock = clock

    async def execute(self, needle: Optional[str] = None) -> Result[AuditTrailView]:
        async with self.uow:
            view = await AuditRecorder(self.uow, self.clock).query(needle)
            return Return.ok(view)


class ExportAuditLogsUseCase:
    def __init__(self, uow: UnitOfWork, clock: IClock):
        self.uow = uow
        self.clock = clock

    async def execute(self, needle: Optional[str] = None) -> Result[List[Dict[str, Any]]]:
        async with self.uow:
            records = await AuditRecorder(self.uow, self.clock).export(needle)
            return Return.ok(records)


class GetAuditStatsUseCase:
    def __init__(self, uow: UnitOfWork, clock: IClock):
        self.uow = uow
        self.clock = clock

    async def execute(self) -> Result[AuditStats]:
        now = self.clock.now()
        async with self.uow:
            entries = (await AuditRecorder(self.uow, self.clock).query()).to_list()

        return Return.ok(
            AuditStats(
                total_actions=len(entries),
                unique_users=len({e.user for e in entries}),
                recent_actions=sum(1 for e in entries if now - e.timestamp < RECENT_WINDOW),
                critical_actions=sum(
                    1
                    for e in entries
                    if any(word in e.action.lower() for word in CRITICAL_KEYWORDS)
                ),
            )
        )

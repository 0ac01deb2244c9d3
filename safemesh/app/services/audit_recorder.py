"""
Audit Recorder

Sole writer and reader of the audit trail. Writes go through the caller's
unit of work so an entry commits together with the transition it describes.
"""

from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional

from safemesh.app.services.clock import IClock
from safemesh.app.services.unit_of_work import UnitOfWork
from safemesh.domain.entities import AuditLogEntry


class AuditTrailView:
    """
    Most-recent-first view over a snapshot of the audit trail.

    Iterating filters lazily; every iteration starts again from the first
    entry. The underlying store is never touched.
    """

    def __init__(self, entries: List[AuditLogEntry], needle: Optional[str] = None):
        self._entries = list(reversed(entries))
        self._needle = needle or None

    def __iter__(self) -> Iterator[AuditLogEntry]:
        for entry in self._entries:
            if self._needle is None or entry.matches(self._needle):
                yield entry

    def to_list(self) -> List[AuditLogEntry]:
        return list(self)

    def count(self) -> int:
        return sum(1 for _ in self)


class AuditRecorder:
    def __init__(self, uow: UnitOfWork, clock: IClock):
        self.uow = uow
        self.clock = clock

    async def record(self, action: str, actor: str, details: str) -> AuditLogEntry:
        entry = AuditLogEntry(
            action=action,
            user=actor,
            details=details,
            timestamp=self.clock.now(),
        )
        return await self.uow.audit_logs.append(entry)

    async def query(self, needle: Optional[str] = None) -> AuditTrailView:
        entries = await self.uow.audit_logs.list_all()
        return AuditTrailView(entries, needle)

    async def export(self, needle: Optional[str] = None) -> List[Dict[str, Any]]:
        view = await self.query(needle)
        return [
            {
                "timestamp": _iso(entry.timestamp),
                "action": entry.action,
                "user": entry.user,
                "details": entry.details,
            }
            for entry in view
        ]


def _iso(value: datetime) -> str:
    return value.isoformat() + "Z"

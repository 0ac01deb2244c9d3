"""
Record Login Use Case

Adds the "Login" entry to the audit trail after a successful login.
"""

from safemesh.app.services.audit_recorder import AuditRecorder
from safemesh.app.services.clock import IClock
from safemesh.app.services.unit_of_work import UnitOfWork
from safemesh.domain.entities import AuditAction, AuditLogEntry, Principal
from safemesh.libs.result import Result, Return


class RecordLoginUseCase:
    def __init__(self, uow: UnitOfWork, clock: IClock):
        self.uow = uow
        self.clock = clock

    async def execute(self, principal: Principal) -> Result[AuditLogEntry]:
        async with self.uow:
            entry = await AuditRecorder(self.uow, self.clock).record(
                AuditAction.LOGIN,
                principal.name,
                "Successful admin login",
            )
            await self.uow.commit()
            return Return.ok(entry)

"""
Preserve Evidence Use Case

Marks evidence as immutably secured. Preservation is terminal.
"""

from safemesh.app.services.audit_recorder import AuditRecorder
from safemesh.app.services.clock import IClock
from safemesh.app.services.unit_of_work import UnitOfWork
from safemesh.app.use_cases.dtos import PreserveEvidenceResponse
from safemesh.app.use_cases.errors import not_found
from safemesh.domain.entities import AuditAction
from safemesh.libs.result import Result, Return


class PreserveEvidenceUseCase:
    """
    Preserve an evidence item.

    Business Logic:
    1. Validate evidence exists
    2. Set preserved = True
    3. Create audit entry
    4. Commit

    Idempotent: preserving already-preserved evidence succeeds with
    already_preserved=True and records nothing.
    """

    def __init__(self, uow: UnitOfWork, clock: IClock):
        self.uow = uow
        self.clock = clock

    async def execute(self, evidence_id: str, actor: str) -> Result[PreserveEvidenceResponse]:
        async with self.uow:
            evidence = await self.uow.evidence.get_by_id(evidence_id)
            if evidence is None:
                return Return.err(
                    not_found("evidence", evidence_id, AuditAction.EVIDENCE_PRESERVED)
                )

            if evidence.preserved:
                return Return.ok(
                    PreserveEvidenceResponse(
                        success=True, evidence=evidence, already_preserved=True
                    )
                )

            evidence.preserved = True
            await self.uow.evidence.update(evidence)

            await AuditRecorder(self.uow, self.clock).record(
                AuditAction.EVIDENCE_PRESERVED,
                actor,
                f"Evidence {evidence_id} preserved",
            )

            await self.uow.commit()

            return Return.ok(
                PreserveEvidenceResponse(
                    success=True, evidence=evidence, already_preserved=False
                )
            )

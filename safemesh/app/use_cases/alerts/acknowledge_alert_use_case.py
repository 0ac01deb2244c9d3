"""
Acknowledge Alert Use Case

Moves an active alert to acknowledged and records the transition.
"""

from safemesh.app.services.audit_recorder import AuditRecorder
from safemesh.app.services.clock import IClock
from safemesh.app.services.unit_of_work import UnitOfWork
from safemesh.app.use_cases.dtos import AlertTransitionResponse
from safemesh.app.use_cases.errors import not_found
from safemesh.domain.entities import AlertStatus, AuditAction
from safemesh.libs.result import Result, Return


class AcknowledgeAlertUseCase:
    """
    Acknowledge an alert.

    Business Logic:
    1. Validate alert exists
    2. If active, set status to acknowledged
    3. Create audit entry attributed to the actor
    4. Commit

    Idempotent: acknowledging an acknowledged or resolved alert succeeds,
    leaves the status untouched and records nothing.
    """

    def __init__(self, uow: UnitOfWork, clock: IClock):
        self.uow = uow
        self.clock = clock

    async def execute(self, alert_id: str, actor: str) -> Result[AlertTransitionResponse]:
        async with self.uow:
            alert = await self.uow.alerts.get_by_id(alert_id)
            if alert is None:
                return Return.err(not_found("alert", alert_id, AuditAction.ALERT_ACKNOWLEDGED))

            if not alert.can_advance_to(AlertStatus.acknowledged):
                return Return.ok(
                    AlertTransitionResponse(success=True, alert=alert, changed=False)
                )

            alert.status = AlertStatus.acknowledged
            await self.uow.alerts.update(alert)

            await AuditRecorder(self.uow, self.clock).record(
                AuditAction.ALERT_ACKNOWLEDGED,
                actor,
                f"Alert {alert_id} acknowledged",
            )

            await self.uow.commit()

            return Return.ok(
                AlertTransitionResponse(success=True, alert=alert, changed=True)
            )

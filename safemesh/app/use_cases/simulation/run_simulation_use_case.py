"""
Run Simulation Use Case

Injects a synthetic emergency so operators can rehearse the response flow.
"""

from datetime import timedelta

from safemesh.app.services.audit_recorder import AuditRecorder
from safemesh.app.services.clock import IClock
from safemesh.app.services.unit_of_work import UnitOfWork
from safemesh.app.use_cases.dtos import SimulationResponse
from safemesh.domain.base import generate_uuid
from safemesh.domain.entities import (
    Alert,
    AlertSeverity,
    AlertStatus,
    AlertType,
    AuditAction,
)
from safemesh.libs.result import Result, Return

SIMULATED_TITLE = "Simulated Emergency Event"
SIMULATED_DESCRIPTION = "Tourist in distress - swarm mobilization initiated"
SIMULATED_LOCATION = "Simulation Area"


class RunSimulationUseCase:
    """
    Create a simulated emergency alert.

    Business Rules:
    - New alert: type=emergency, severity=critical, status=active
    - Fresh id that collides with no existing alert
    - Timestamp strictly newer than any earlier simulated alert
    - Lands at the front of the alert listing
    - Actor is "System" when no operator is logged in
    """

    def __init__(self, uow: UnitOfWork, clock: IClock):
        self.uow = uow
        self.clock = clock

    async def execute(self, actor: str) -> Result[SimulationResponse]:
        async with self.uow:
            timestamp = self.clock.now()
            latest = await self.uow.alerts.get_latest_simulated()
            if latest is not None and timestamp <= latest.timestamp:
                timestamp = latest.timestamp + timedelta(microseconds=1)

            alert_id = generate_uuid()
            while await self.uow.alerts.get_by_id(alert_id) is not None:
                alert_id = generate_uuid()

            alert = Alert(
                id=alert_id,
                type=AlertType.emergency,
                title=SIMULATED_TITLE,
                description=SIMULATED_DESCRIPTION,
                timestamp=timestamp,
                status=AlertStatus.active,
                severity=AlertSeverity.critical,
                location=SIMULATED_LOCATION,
                simulated=True,
            )
            await self.uow.alerts.create(alert)

            await AuditRecorder(self.uow, self.clock).record(
                AuditAction.SIMULATION_STARTED,
                actor,
                "Emergency simulation initiated",
            )

            await self.uow.commit()

            return Return.ok(
                SimulationResponse(success=True, alert_id=alert.id, alert=alert)
            )

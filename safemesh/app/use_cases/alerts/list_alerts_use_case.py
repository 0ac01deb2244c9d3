from typing import List

from safemesh.app.services.unit_of_work import UnitOfWork
from safemesh.domain.entities import Alert
from safemesh.libs.result import Result, Return


class ListAlertsUseCase:
    """All alerts, most recent first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[Alert]]:
        async with self.uow:
            alerts = await self.uow.alerts.list_all()
            return Return.ok(alerts)

"""
Toggle User Status Use Case

Suspends an active user or reactivates a suspended one.
"""

from safemesh.app.services.audit_recorder import AuditRecorder
from safemesh.app.services.clock import IClock
from safemesh.app.services.unit_of_work import UnitOfWork
from safemesh.app.use_cases.dtos import ToggleUserStatusResponse
from safemesh.app.use_cases.errors import not_found
from safemesh.domain.entities import AuditAction
from safemesh.libs.result import Result, Return


class ToggleUserStatusUseCase:
    """
    Flip a user between active and suspended.

    Business Logic:
    1. Validate user exists
    2. Set status to the opposite of the current status
    3. Create audit entry ("User {name} {new status}")
    4. Commit

    Applying it twice returns the user to the original status and leaves
    two audit entries.
    """

    def __init__(self, uow: UnitOfWork, clock: IClock):
        self.uow = uow
        self.clock = clock

    async def execute(self, user_id: str, actor: str) -> Result[ToggleUserStatusResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(not_found("user", user_id, AuditAction.USER_STATUS_CHANGED))

            user.status = user.toggled_status()
            await self.uow.users.update(user)

            await AuditRecorder(self.uow, self.clock).record(
                AuditAction.USER_STATUS_CHANGED,
                actor,
                f"User {user.name} {user.status.value}",
            )

            await self.uow.commit()

            return Return.ok(ToggleUserStatusResponse(success=True, user=user))

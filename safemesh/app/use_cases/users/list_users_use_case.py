"""
List Users Use Case

Paginated, searchable listing of mesh users.
"""

from typing import Optional

from safemesh.app.services.unit_of_work import UnitOfWork
from safemesh.app.use_cases.dtos import UserPage
from safemesh.libs.result import Result, Return


class ListUsersUseCase:
    """
    Business Rules:
    - search is a case-insensitive substring over name and email
    - device_id scopes the listing; an unknown device yields an empty page
    - page is 1-based; pages past the end are empty
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        search: str = "",
        page: int = 1,
        page_size: int = 10,
        device_id: Optional[str] = None,
    ) -> Result[UserPage]:
        page = max(page, 1)
        page_size = max(page_size, 1)

        async with self.uow:
            users = await self.uow.users.list_all(device_id=device_id)

            if search:
                needle = search.lower()
                users = [
                    u
                    for u in users
                    if needle in u.name.lower() or needle in u.email.lower()
                ]

            start = (page - 1) * page_size
            return Return.ok(
                UserPage(
                    users=users[start : start + page_size],
                    total=len(users),
                    page=page,
                    page_size=page_size,
                )
            )

from typing import List, Optional

from sqlmodel import func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from safemesh.app.repositories.user_repository import IUserRepository
from safemesh.domain.entities import User, UserStatus


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self, device_id: Optional[str] = None) -> List[User]:
        """List users ordered by ID, optionally scoped to a device"""
        stmt = select(User)
        if device_id is not None:
            stmt = stmt.where(User.device_id == device_id)
        stmt = stmt.order_by(User.id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_by_status(self, status: UserStatus) -> int:
        """Count users with the given status"""
        stmt = select(func.count()).select_from(User).where(User.status == status)
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

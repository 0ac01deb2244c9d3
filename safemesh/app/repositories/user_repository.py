from abc import ABC, abstractmethod
from typing import List, Optional

from safemesh.domain.entities import User, UserStatus


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def list_all(self, device_id: Optional[str] = None) -> List[User]:
        """List users ordered by ID, optionally scoped to a device"""
        pass

    @abstractmethod
    async def count_by_status(self, status: UserStatus) -> int:
        """Count users with the given status"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass

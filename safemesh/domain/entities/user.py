"""
User Entity

A person registered on the mesh network (tourist, guide, administrator).
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel

from safemesh.domain.base import utcnow
from .enums import UserRole, UserStatus


class User(SQLModel, table=True):
    """
    User entity - a person tracked by the console.

    Business Rules:
    - id is unique and stable
    - status is only changed by the toggle transition (active <-> suspended)
    - Users are provisioned externally and never deleted here
    """

    __tablename__ = "users"

    id: str = Field(primary_key=True, max_length=64)
    name: str = Field(max_length=255)
    email: str = Field(index=True, max_length=255)
    role: UserRole = Field(default=UserRole.tourist)
    status: UserStatus = Field(default=UserStatus.active)

    device_id: Optional[str] = Field(default=None, index=True, max_length=64)

    last_seen: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    def toggled_status(self) -> UserStatus:
        if self.status == UserStatus.active:
            return UserStatus.suspended
        return UserStatus.active

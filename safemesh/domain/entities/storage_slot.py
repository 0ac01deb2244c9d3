"""
StorageSlot Entity

Durable key-value slot (remembered session, console settings).
"""

from datetime import datetime

from sqlmodel import Column, DateTime, Field, SQLModel

from safemesh.domain.base import utcnow


class StorageSlot(SQLModel, table=True):
    __tablename__ = "storage_slots"

    key: str = Field(primary_key=True, max_length=100)
    value: str

    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

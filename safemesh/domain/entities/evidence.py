"""
Evidence Entity

Data captured from a device (location fix, mesh interaction, ...).
"""

from datetime import datetime
from typing import Any, Dict, Optional

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from safemesh.domain.base import generate_uuid, utcnow


class Evidence(SQLModel, table=True):
    """
    Evidence entity.

    Business Rules:
    - preserved goes from False to True once and stays True
    - Collected externally, scoped by device_id, never deleted
    """

    __tablename__ = "evidence"

    id: str = Field(default_factory=generate_uuid, primary_key=True, max_length=64)
    device_id: Optional[str] = Field(default=None, max_length=64)

    type: str = Field(max_length=64)  # e.g., "location", "interaction"
    data: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON))
    preserved: bool = Field(default=False)

    timestamp: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_evidence_device_timestamp", "device_id", "timestamp"),)

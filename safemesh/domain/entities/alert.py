"""
Alert Entity

Incident raised on the mesh (SOS signal, low battery, ...).
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from safemesh.domain.base import generate_uuid, utcnow
from .enums import ALERT_STATUS_RANK, AlertSeverity, AlertStatus, AlertType


class Alert(SQLModel, table=True):
    """
    Alert entity.

    Business Rules:
    - Status moves forward only: active -> acknowledged -> resolved
    - Acknowledging or resolving past the target status is a no-op
    - Alerts are never deleted
    - Listed most-recent-first
    """

    __tablename__ = "alerts"

    id: str = Field(default_factory=generate_uuid, primary_key=True, max_length=64)

    type: AlertType = Field(default=AlertType.info)
    title: str = Field(max_length=255)
    description: str = Field(default="")
    status: AlertStatus = Field(default=AlertStatus.active)
    severity: AlertSeverity = Field(default=AlertSeverity.low)
    location: Optional[str] = Field(default=None, max_length=255)

    # True when created by the simulation trigger
    simulated: bool = Field(default=False)

    timestamp: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_alert_timestamp", "timestamp"),
        Index("idx_alert_type_status", "type", "status"),
    )

    def can_advance_to(self, target: AlertStatus) -> bool:
        return ALERT_STATUS_RANK[target] > ALERT_STATUS_RANK[self.status]

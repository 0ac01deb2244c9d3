"""
AuditLogEntry Entity

Immutable record of one privileged action.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from safemesh.domain.base import utcnow

SYSTEM_ACTOR = "System"


class AuditAction:
    """Audit action labels"""

    LOGIN = "Login"
    ALERT_ACKNOWLEDGED = "Alert Acknowledged"
    ALERT_RESOLVED = "Alert Resolved"
    USER_STATUS_CHANGED = "User Status Changed"
    EVIDENCE_PRESERVED = "Evidence Preserved"
    SIMULATION_STARTED = "Simulation Started"
    SETTINGS_UPDATED = "Settings Updated"
    SETTINGS_RESET = "Settings Reset"


class AuditLogEntry(SQLModel, table=True):
    """
    AuditLogEntry entity - append-only trail of privileged actions.

    Business Rules:
    - Immutable (never updated or deleted)
    - id is monotonic, so id order is insertion order
    - user holds the actor's display name, or "System" for automated actions
    """

    __tablename__ = "audit_logs"

    id: Optional[int] = Field(default=None, primary_key=True)

    action: str = Field(max_length=100)
    user: str = Field(max_length=255)
    details: str = Field(default="")

    timestamp: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_audit_log_timestamp", "timestamp"),)

    def matches(self, needle: str) -> bool:
        """Case-insensitive substring match over action, user and details"""
        needle = needle.lower()
        return (
            needle in self.action.lower()
            or needle in self.user.lower()
            or needle in self.details.lower()
        )

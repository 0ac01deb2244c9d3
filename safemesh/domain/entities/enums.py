"""
SafeMesh Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserStatus(str, Enum):
    """Mesh user account status"""

    active = "active"
    suspended = "suspended"


class UserRole(str, Enum):
    """Role of a person registered on the mesh"""

    tourist = "Tourist"
    guide = "Guide"
    administrator = "Administrator"


class AlertType(str, Enum):
    """Alert category"""

    emergency = "emergency"
    warning = "warning"
    info = "info"


class AlertStatus(str, Enum):
    """Alert lifecycle status. Transitions only move forward."""

    active = "active"
    acknowledged = "acknowledged"
    resolved = "resolved"


class AlertSeverity(str, Enum):
    """Alert severity"""

    low = "low"
    medium = "medium"
    high = "high"
    critical = "critical"


class RiskLevel(str, Enum):
    """Behavioral risk level"""

    low = "low"
    medium = "medium"
    high = "high"


# Forward order of alert statuses; a transition may never decrease the rank.
ALERT_STATUS_RANK = {
    AlertStatus.active: 0,
    AlertStatus.acknowledged: 1,
    AlertStatus.resolved: 2,
}

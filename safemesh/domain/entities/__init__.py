"""
SafeMesh Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AlertSeverity,
    AlertStatus,
    AlertType,
    RiskLevel,
    UserRole,
    UserStatus,
)

# Export all entities
from .user import User
from .alert import Alert
from .evidence import Evidence
from .audit_log import SYSTEM_ACTOR, AuditAction, AuditLogEntry
from .storage_slot import StorageSlot
from .session import AuthSession, Principal
from .settings import SystemSettings

__all__ = [
    # Enums
    "AlertSeverity",
    "AlertStatus",
    "AlertType",
    "RiskLevel",
    "UserRole",
    "UserStatus",
    # Entities
    "User",
    "Alert",
    "Evidence",
    "AuditLogEntry",
    "AuditAction",
    "SYSTEM_ACTOR",
    "StorageSlot",
    "AuthSession",
    "Principal",
    "SystemSettings",
]

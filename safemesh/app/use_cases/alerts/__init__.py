"""
Alert Use Cases
"""

from .acknowledge_alert_use_case import AcknowledgeAlertUseCase
from .resolve_alert_use_case import ResolveAlertUseCase
from .list_alerts_use_case import ListAlertsUseCase

__all__ = [
    "AcknowledgeAlertUseCase",
    "ResolveAlertUseCase",
    "ListAlertsUseCase",
]

"""
Audit Log Use Cases
"""

from .list_audit_logs_use_case import (
    ExportAuditLogsUseCase,
    GetAuditStatsUseCase,
    ListAuditLogsUseCase,
)

__all__ = [
    "ListAuditLogsUseCase",
    "ExportAuditLogsUseCase",
    "GetAuditStatsUseCase",
]

"""
Console Use Case DTOs (Data Transfer Objects)

Response classes shared by the ledger use cases and the console facade.
"""

from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel

from safemesh.domain.entities import Alert, Evidence, RiskLevel, User


# ============================================================================
# Command responses
# ============================================================================


class AlertTransitionResponse(BaseModel):
    """Response for acknowledge/resolve alert use cases"""

    success: bool
    alert: Alert
    changed: bool


class ToggleUserStatusResponse(BaseModel):
    """Response for toggle user status use case"""

    success: bool
    user: User


class PreserveEvidenceResponse(BaseModel):
    """Response for preserve evidence use case"""

    success: bool
    evidence: Evidence
    already_preserved: bool


class SimulationResponse(BaseModel):
    """Response for run simulation use case"""

    success: bool
    alert_id: str
    alert: Alert


# ============================================================================
# Query responses
# ============================================================================


class UserPage(BaseModel):
    """One page of the user listing"""

    users: List[User]
    total: int
    page: int
    page_size: int


class DashboardStats(BaseModel):
    active_tourists: int
    recent_sos: int
    recent_alerts: int
    network_health_pct: int


class AuditStats(BaseModel):
    total_actions: int
    unique_users: int
    recent_actions: int
    critical_actions: int


class EvidenceVaultStats(BaseModel):
    total_evidence: int
    preserved_items: int
    critical_evidence: int
    recent_captures: int


class MeshStatus(BaseModel):
    quantum_pairs: int
    recent_relays: int
    network_nodes: int
    last_update: datetime


class BehaviorScore(BaseModel):
    device_id: str
    score: int
    factors: Dict[str, int]
    risk_level: RiskLevel

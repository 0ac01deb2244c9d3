"""
SystemSettings

Console-wide toggles persisted in the settings storage slot.
"""

from pydantic import BaseModel, Field


class SystemSettings(BaseModel):
    real_time_monitoring: bool = True
    alert_notifications: bool = True
    auto_acknowledge: bool = False
    behavior_analysis: bool = True
    evidence_auto_preserve: bool = False
    mesh_optimization: bool = True
    data_retention_days: int = Field(default=90, ge=1, le=365)
    alert_threshold: int = Field(default=75, ge=0, le=100)
    simulation_mode: bool = False

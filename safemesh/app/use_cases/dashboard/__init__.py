from .get_dashboard_stats_use_case import (
    GetBehaviorScoreUseCase,
    GetDashboardStatsUseCase,
    GetMeshStatusUseCase,
)

__all__ = [
    "GetDashboardStatsUseCase",
    "GetMeshStatusUseCase",
    "GetBehaviorScoreUseCase",
]

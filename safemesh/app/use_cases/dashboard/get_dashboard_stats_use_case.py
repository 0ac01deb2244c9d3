"""
Dashboard Use Cases

Derived counters for the console overview. Nothing here is cached: the
collections change independently, so every call recounts.
"""

import random
from datetime import timedelta
from typing import Optional

from safemesh.app.services.clock import IClock
from safemesh.app.services.unit_of_work import UnitOfWork
from safemesh.app.use_cases.dtos import BehaviorScore, DashboardStats, MeshStatus
from safemesh.domain.entities import RiskLevel, UserStatus
from safemesh.libs.result import Result, Return

RECENT_WINDOW = timedelta(hours=24)
BEHAVIOR_FACTORS = (
    "movement_pattern",
    "social_interaction",
    "location_consistency",
    "device_usage",
)


class GetDashboardStatsUseCase:
    def __init__(self, uow: UnitOfWork, clock: IClock, network_health_pct: int = 87):
        self.uow = uow
        self.clock = clock
        self.network_health_pct = network_health_pct

    async def execute(self) -> Result[DashboardStats]:
        now = self.clock.now()
        async with self.uow:
            active_tourists = await self.uow.users.count_by_status(UserStatus.active)
            recent_sos = await self.uow.alerts.count_active_emergencies()
            recent_alerts = await self.uow.alerts.count_since(now - RECENT_WINDOW)

            return Return.ok(
                DashboardStats(
                    active_tourists=active_tourists,
                    recent_sos=recent_sos,
                    recent_alerts=recent_alerts,
                    network_health_pct=self.network_health_pct,
                )
            )


class GetMeshStatusUseCase:
    """Mesh overview; network_nodes counts active users"""

    def __init__(
        self,
        uow: UnitOfWork,
        clock: IClock,
        quantum_pairs: int = 12,
        recent_relays: int = 45,
    ):
        self.uow = uow
        self.clock = clock
        self.quantum_pairs = quantum_pairs
        self.recent_relays = recent_relays

    async def execute(self) -> Result[MeshStatus]:
        async with self.uow:
            nodes = await self.uow.users.count_by_status(UserStatus.active)
            return Return.ok(
                MeshStatus(
                    quantum_pairs=self.quantum_pairs,
                    recent_relays=self.recent_relays,
                    network_nodes=nodes,
                    last_update=self.clock.now(),
                )
            )


class GetBehaviorScoreUseCase:
    """
    Behavioral score for a device.

    Scores are synthetic: the mesh does not yet stream behavior telemetry,
    so values are drawn from the injected random source.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    async def execute(self, device_id: str) -> Result[BehaviorScore]:
        return Return.ok(
            BehaviorScore(
                device_id=device_id,
                score=self.rng.randrange(100),
                factors={name: self.rng.randrange(100) for name in BEHAVIOR_FACTORS},
                risk_level=self.rng.choice(list(RiskLevel)),
            )
        )

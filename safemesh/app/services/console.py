"""
Monitoring Console

Query/command facade consumed by the presentation layer. One instance is one
client context: it owns a SessionStore and serializes writes per collection.

Business Rules:
- Mutating commands resolve the actor from the current session first and
  fail with UNAUTHENTICATED before touching any collection
- run_simulation is the only command allowed without a session; it is
  attributed to "System"
- A caller token that does not match the current session counts as no session
- Reads never require a session here; outer layers may add that check
"""

import asyncio
import logging
import random
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, List, Optional

from safemesh.app.services.audit_recorder import AuditTrailView
from safemesh.app.services.clock import IClock
from safemesh.app.services.session_store import SessionStore
from safemesh.app.services.storage import IKeyValueStorage
from safemesh.app.services.unit_of_work import UnitOfWork
from safemesh.app.use_cases.alerts import (
    AcknowledgeAlertUseCase,
    ListAlertsUseCase,
    ResolveAlertUseCase,
)
from safemesh.app.use_cases.audit import (
    ExportAuditLogsUseCase,
    GetAuditStatsUseCase,
    ListAuditLogsUseCase,
)
from safemesh.app.use_cases.auth import RecordLoginUseCase
from safemesh.app.use_cases.dashboard import (
    GetBehaviorScoreUseCase,
    GetDashboardStatsUseCase,
    GetMeshStatusUseCase,
)
from safemesh.app.use_cases.dtos import (
    AlertTransitionResponse,
    AuditStats,
    BehaviorScore,
    DashboardStats,
    EvidenceVaultStats,
    MeshStatus,
    PreserveEvidenceResponse,
    SimulationResponse,
    ToggleUserStatusResponse,
    UserPage,
)
from safemesh.app.use_cases.errors import unauthenticated
from safemesh.app.use_cases.evidence import (
    GetEvidenceStatsUseCase,
    ListEvidenceUseCase,
    PreserveEvidenceUseCase,
)
from safemesh.app.use_cases.settings import (
    GetSettingsUseCase,
    ResetSettingsUseCase,
    UpdateSettingsUseCase,
)
from safemesh.app.use_cases.simulation import RunSimulationUseCase
from safemesh.app.use_cases.users import ListUsersUseCase, ToggleUserStatusUseCase
from safemesh.domain.entities import (
    SYSTEM_ACTOR,
    Alert,
    AuditAction,
    AuthSession,
    Evidence,
    SystemSettings,
)
from safemesh.libs.result import Result, Return

logger = logging.getLogger(__name__)


class MonitoringConsole:
    def __init__(
        self,
        session_store: SessionStore,
        uow_factory: Callable[[], UnitOfWork],
        storage: IKeyValueStorage,
        clock: IClock,
        settings_key: str = "systemSettings",
        network_health_pct: int = 87,
        quantum_pairs: int = 12,
        recent_relays: int = 45,
        rng: Optional[random.Random] = None,
    ):
        self.session_store = session_store
        self.uow_factory = uow_factory
        self.storage = storage
        self.clock = clock
        self.settings_key = settings_key
        self.network_health_pct = network_health_pct
        self.quantum_pairs = quantum_pairs
        self.recent_relays = recent_relays
        self.rng = rng or random.Random()

        # One lock per collection; audit writes happen inside these.
        self._alerts_lock = asyncio.Lock()
        self._users_lock = asyncio.Lock()
        self._evidence_lock = asyncio.Lock()
        self._settings_lock = asyncio.Lock()

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    async def login(
        self, email: str, password: str, remember_me: bool = False
    ) -> Result[AuthSession]:
        result = await self.session_store.login(email, password, remember_me)
        if result.is_err():
            return result

        session = result.value
        await RecordLoginUseCase(self.uow_factory(), self.clock).execute(session.principal)
        return result

    async def logout(self) -> Result[None]:
        await self.session_store.logout()
        return Return.ok(None)

    async def current_session(self) -> Optional[AuthSession]:
        return await self.session_store.current_session()

    async def is_authenticated(self) -> bool:
        return await self.session_store.is_authenticated()

    async def time_until_expiry(self) -> timedelta:
        return await self.session_store.time_until_expiry()

    async def authenticate(self, token: Optional[str] = None) -> Optional[AuthSession]:
        """Current session, provided the caller's token (if any) matches it"""
        session = await self.session_store.current_session()
        if session is None:
            return None
        if token is not None and token != session.token:
            return None
        return session

    async def _require_actor(self, action: str, token: Optional[str]) -> Result[str]:
        session = await self.authenticate(token)
        if session is None:
            logger.warning(f"Rejected unauthenticated command: {action}")
            return Return.err(unauthenticated(action))
        return Return.ok(session.principal.name)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def acknowledge_alert(
        self, alert_id: str, token: Optional[str] = None
    ) -> Result[AlertTransitionResponse]:
        actor = await self._require_actor(AuditAction.ALERT_ACKNOWLEDGED, token)
        if actor.is_err():
            return actor
        async with self._alerts_lock:
            use_case = AcknowledgeAlertUseCase(self.uow_factory(), self.clock)
            return await use_case.execute(alert_id, actor.value)

    async def resolve_alert(
        self, alert_id: str, token: Optional[str] = None
    ) -> Result[AlertTransitionResponse]:
        actor = await self._require_actor(AuditAction.ALERT_RESOLVED, token)
        if actor.is_err():
            return actor
        async with self._alerts_lock:
            use_case = ResolveAlertUseCase(self.uow_factory(), self.clock)
            return await use_case.execute(alert_id, actor.value)

    async def toggle_user_status(
        self, user_id: str, token: Optional[str] = None
    ) -> Result[ToggleUserStatusResponse]:
        actor = await self._require_actor(AuditAction.USER_STATUS_CHANGED, token)
        if actor.is_err():
            return actor
        async with self._users_lock:
            use_case = ToggleUserStatusUseCase(self.uow_factory(), self.clock)
            return await use_case.execute(user_id, actor.value)

    async def preserve_evidence(
        self, evidence_id: str, token: Optional[str] = None
    ) -> Result[PreserveEvidenceResponse]:
        actor = await self._require_actor(AuditAction.EVIDENCE_PRESERVED, token)
        if actor.is_err():
            return actor
        async with self._evidence_lock:
            use_case = PreserveEvidenceUseCase(self.uow_factory(), self.clock)
            return await use_case.execute(evidence_id, actor.value)

    async def run_simulation(
        self, token: Optional[str] = None, anonymous: bool = False
    ) -> Result[SimulationResponse]:
        """
        Raise a simulated emergency.

        anonymous marks a caller that presented no valid token; such runs are
        attributed to "System" even while an operator is logged in.
        """
        session = None if anonymous else await self.authenticate(token)
        actor = session.principal.name if session is not None else SYSTEM_ACTOR
        async with self._alerts_lock:
            use_case = RunSimulationUseCase(self.uow_factory(), self.clock)
            result = await use_case.execute(actor)
        if result.is_ok():
            logger.info(f"Simulation alert {result.value.alert_id} raised by {actor}")
        return result

    async def update_settings(
        self, changes: Dict[str, Any], token: Optional[str] = None
    ) -> Result[SystemSettings]:
        actor = await self._require_actor(AuditAction.SETTINGS_UPDATED, token)
        if actor.is_err():
            return actor
        async with self._settings_lock:
            use_case = UpdateSettingsUseCase(
                self.uow_factory(), self.clock, self.storage, self.settings_key
            )
            return await use_case.execute(changes, actor.value)

    async def reset_settings(self, token: Optional[str] = None) -> Result[SystemSettings]:
        actor = await self._require_actor(AuditAction.SETTINGS_RESET, token)
        if actor.is_err():
            return actor
        async with self._settings_lock:
            use_case = ResetSettingsUseCase(
                self.uow_factory(), self.clock, self.storage, self.settings_key
            )
            return await use_case.execute(actor.value)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def list_alerts(self) -> Result[List[Alert]]:
        return await ListAlertsUseCase(self.uow_factory()).execute()

    async def list_users(
        self,
        search: str = "",
        page: int = 1,
        page_size: int = 10,
        device_id: Optional[str] = None,
    ) -> Result[UserPage]:
        use_case = ListUsersUseCase(self.uow_factory())
        return await use_case.execute(search, page, page_size, device_id)

    async def list_evidence(
        self,
        device_id: str,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> Result[List[Evidence]]:
        use_case = ListEvidenceUseCase(self.uow_factory())
        return await use_case.execute(device_id, start, end)

    async def get_evidence_stats(self, device_id: str) -> Result[EvidenceVaultStats]:
        return await GetEvidenceStatsUseCase(self.uow_factory(), self.clock).execute(device_id)

    async def list_audit_logs(self, needle: Optional[str] = None) -> Result[AuditTrailView]:
        return await ListAuditLogsUseCase(self.uow_factory(), self.clock).execute(needle)

    async def export_audit_logs(
        self, needle: Optional[str] = None
    ) -> Result[List[Dict[str, Any]]]:
        return await ExportAuditLogsUseCase(self.uow_factory(), self.clock).execute(needle)

    async def get_audit_stats(self) -> Result[AuditStats]:
        return await GetAuditStatsUseCase(self.uow_factory(), self.clock).execute()

    async def get_stats(self) -> Result[DashboardStats]:
        use_case = GetDashboardStatsUseCase(
            self.uow_factory(), self.clock, self.network_health_pct
        )
        return await use_case.execute()

    async def get_mesh_status(self) -> Result[MeshStatus]:
        use_case = GetMeshStatusUseCase(
            self.uow_factory(), self.clock, self.quantum_pairs, self.recent_relays
        )
        return await use_case.execute()

    async def get_behavior_score(self, device_id: str) -> Result[BehaviorScore]:
        return await GetBehaviorScoreUseCase(self.rng).execute(device_id)

    async def get_settings(self) -> Result[SystemSettings]:
        return await GetSettingsUseCase(self.storage, self.settings_key).execute()

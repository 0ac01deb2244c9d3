"""
Unit tests for read-side use cases: listings and derived statistics
"""

import random
import pytest
from datetime import timedelta
from unittest.mock import AsyncMock

from safemesh.app.use_cases.audit import GetAuditStatsUseCase, ListAuditLogsUseCase
from safemesh.app.use_cases.dashboard import (
    GetBehaviorScoreUseCase,
    GetDashboardStatsUseCase,
    GetMeshStatusUseCase,
)
from safemesh.app.use_cases.evidence import GetEvidenceStatsUseCase
from safemesh.app.use_cases.users import ListUsersUseCase
from safemesh.domain.entities import AuditLogEntry, Evidence, RiskLevel, User, UserStatus


def users():
    return [
        User(id="1", name="Alice Johnson", email="alice@example.com", device_id="DEV001"),
        User(id="2", name="Bob Smith", email="bob@example.com", device_id="DEV002"),
        User(id="3", name="Carol Brown", email="carol@example.com", device_id="DEV003",
             status=UserStatus.suspended),
    ]


@pytest.mark.asyncio
async def test_list_users_search_is_case_insensitive(mock_uow):
    mock_uow.users.list_all = AsyncMock(return_value=users())

    result = await ListUsersUseCase(mock_uow).execute(search="BOB")

    assert result.is_ok()
    assert [u.id for u in result.value.users] == ["2"]
    assert result.value.total == 1


@pytest.mark.asyncio
async def test_list_users_search_matches_email(mock_uow):
    mock_uow.users.list_all = AsyncMock(return_value=users())

    result = await ListUsersUseCase(mock_uow).execute(search="carol@")

    assert [u.name for u in result.value.users] == ["Carol Brown"]


@pytest.mark.asyncio
async def test_list_users_pagination(mock_uow):
    mock_uow.users.list_all = AsyncMock(return_value=users())

    result = await ListUsersUseCase(mock_uow).execute(page=2, page_size=2)

    assert [u.id for u in result.value.users] == ["3"]
    assert result.value.total == 3
    assert result.value.page == 2
    assert result.value.page_size == 2


@pytest.mark.asyncio
async def test_list_users_passes_device_scope(mock_uow):
    mock_uow.users.list_all = AsyncMock(return_value=[])

    result = await ListUsersUseCase(mock_uow).execute(device_id="DEV999")

    assert result.is_ok()
    assert result.value.users == []
    mock_uow.users.list_all.assert_called_once_with(device_id="DEV999")


@pytest.mark.asyncio
async def test_list_audit_logs_newest_first_and_filtered(mock_uow, clock):
    entries = [
        AuditLogEntry(id=1, action="Login", user="Admin User", details="Successful admin login"),
        AuditLogEntry(id=2, action="Alert Acknowledged", user="Admin User", details="Alert 1 acknowledged"),
        AuditLogEntry(id=3, action="Simulation Started", user="System", details="Emergency simulation initiated"),
    ]
    mock_uow.audit_logs.list_all = AsyncMock(return_value=entries)

    everything = (await ListAuditLogsUseCase(mock_uow, clock).execute()).value
    assert [e.id for e in everything] == [3, 2, 1]

    by_details = (await ListAuditLogsUseCase(mock_uow, clock).execute("EMERGENCY")).value
    assert [e.id for e in by_details] == [3]

    by_user = (await ListAuditLogsUseCase(mock_uow, clock).execute("admin")).value
    assert [e.id for e in by_user] == [2, 1]

    # The store keeps insertion order
    assert [e.id for e in entries] == [1, 2, 3]


@pytest.mark.asyncio
async def test_audit_stats(mock_uow, clock):
    now = clock.now()
    entries = [
        AuditLogEntry(id=1, action="Login", user="Admin User", details="", timestamp=now - timedelta(days=2)),
        AuditLogEntry(id=2, action="Alert Acknowledged", user="Admin User", details="", timestamp=now - timedelta(hours=1)),
        AuditLogEntry(id=3, action="Evidence Preserved", user="Admin User", details="", timestamp=now),
        AuditLogEntry(id=4, action="Simulation Started", user="System", details="", timestamp=now),
    ]
    mock_uow.audit_logs.list_all = AsyncMock(return_value=entries)

    stats = (await GetAuditStatsUseCase(mock_uow, clock).execute()).value

    assert stats.total_actions == 4
    assert stats.unique_users == 2
    assert stats.recent_actions == 3
    assert stats.critical_actions == 2


@pytest.mark.asyncio
async def test_evidence_stats_recent_window_is_exclusive(mock_uow, clock):
    now = clock.now()
    items = [
        Evidence(id="1", device_id="DEV001", type="location", preserved=True, timestamp=now - timedelta(hours=24)),
        Evidence(id="2", device_id="DEV001", type="interaction", timestamp=now - timedelta(hours=23, minutes=59)),
    ]
    mock_uow.evidence.list_by_device = AsyncMock(return_value=items)

    stats = (await GetEvidenceStatsUseCase(mock_uow, clock).execute("DEV001")).value

    assert stats.total_evidence == 2
    assert stats.preserved_items == 1
    assert stats.critical_evidence == 1
    assert stats.recent_captures == 1


@pytest.mark.asyncio
async def test_dashboard_stats_recounted_every_call(mock_uow, clock):
    mock_uow.users.count_by_status = AsyncMock(side_effect=[2, 1])
    mock_uow.alerts.count_active_emergencies = AsyncMock(side_effect=[1, 2])
    mock_uow.alerts.count_since = AsyncMock(return_value=0)

    use_case = GetDashboardStatsUseCase(mock_uow, clock, network_health_pct=87)
    first = (await use_case.execute()).value
    second = (await use_case.execute()).value

    assert (first.active_tourists, first.recent_sos) == (2, 1)
    assert (second.active_tourists, second.recent_sos) == (1, 2)
    assert first.network_health_pct == 87
    mock_uow.users.count_by_status.assert_called_with(UserStatus.active)
    mock_uow.alerts.count_since.assert_called_with(clock.now() - timedelta(hours=24))


@pytest.mark.asyncio
async def test_mesh_status(mock_uow, clock):
    mock_uow.users.count_by_status = AsyncMock(return_value=2)

    status = (await GetMeshStatusUseCase(mock_uow, clock, 12, 45).execute()).value

    assert status.quantum_pairs == 12
    assert status.recent_relays == 45
    assert status.network_nodes == 2
    assert status.last_update == clock.now()


@pytest.mark.asyncio
async def test_behavior_score_ranges():
    result = await GetBehaviorScoreUseCase(random.Random(7)).execute("DEV001")

    score = result.value
    assert score.device_id == "DEV001"
    assert 0 <= score.score < 100
    assert set(score.factors) == {
        "movement_pattern",
        "social_interaction",
        "location_consistency",
        "device_usage",
    }
    assert all(0 <= v < 100 for v in score.factors.values())
    assert score.risk_level in set(RiskLevel)

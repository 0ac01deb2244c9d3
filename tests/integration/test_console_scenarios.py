"""
End-to-end scenarios through the MonitoringConsole facade, backed by an
in-memory SQLite database seeded with the demo data.
"""

import asyncio
import pytest
from datetime import datetime, timedelta

from safemesh.depends import build_console


async def login(console, test_data, remember_me=False):
    email, password = test_data.credentials()
    result = await console.login(email, password, remember_me)
    assert result.is_ok()
    return result.value


@pytest.mark.asyncio
async def test_acknowledge_is_audited_once(console, test_data):
    await login(console, test_data)

    first = await console.acknowledge_alert("1")
    second = await console.acknowledge_alert("1")

    assert first.is_ok() and first.value.changed is True
    assert first.value.alert.status == "acknowledged"
    assert second.is_ok() and second.value.changed is False

    entries = (await console.list_audit_logs("Alert")).value.to_list()
    assert len(entries) == 1
    assert entries[0].action == "Alert Acknowledged"
    assert entries[0].user == "Admin User"
    assert entries[0].details == "Alert 1 acknowledged"


@pytest.mark.asyncio
async def test_login_is_audited(console, test_data):
    await login(console, test_data)

    entries = (await console.list_audit_logs()).value.to_list()
    assert [(e.action, e.user) for e in entries] == [("Login", "Admin User")]


@pytest.mark.asyncio
async def test_invalid_login_leaves_no_trace(console):
    result = await console.login("admin@gmail.com", "wrong")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert await console.is_authenticated() is False
    assert (await console.list_audit_logs()).value.count() == 0


@pytest.mark.asyncio
async def test_preserve_twice_records_once(console, test_data):
    await login(console, test_data)

    first = await console.preserve_evidence("2")
    second = await console.preserve_evidence("2")

    assert first.value.already_preserved is False
    assert first.value.evidence.preserved is True
    assert second.is_ok()
    assert second.value.already_preserved is True
    assert (await console.list_audit_logs("Evidence Preserved")).value.count() == 1


@pytest.mark.asyncio
async def test_unauthenticated_command_changes_nothing(console):
    result = await console.toggle_user_status("1")

    assert result.is_err()
    assert result.error.code == "UNAUTHENTICATED"

    users = (await console.list_users()).value.users
    assert next(u for u in users if u.id == "1").status == "active"
    assert (await console.list_audit_logs()).value.count() == 0


@pytest.mark.asyncio
async def test_toggle_user_twice_restores_status(console, test_data):
    await login(console, test_data)

    first = await console.toggle_user_status("3")
    second = await console.toggle_user_status("3")

    assert first.value.user.status == "active"
    assert second.value.user.status == "suspended"
    details = [e.details for e in (await console.list_audit_logs("User Status")).value]
    assert details == ["User Carol Brown suspended", "User Carol Brown active"]


@pytest.mark.asyncio
async def test_unknown_ids_are_not_found(console, test_data):
    await login(console, test_data)

    for result in (
        await console.acknowledge_alert("999"),
        await console.resolve_alert("999"),
        await console.toggle_user_status("999"),
        await console.preserve_evidence("999"),
    ):
        assert result.is_err()
        assert result.error.code == "NOT_FOUND"

    assert (await console.list_audit_logs()).value.count() == 1


@pytest.mark.asyncio
async def test_simulation_without_session_is_system(console):
    result = await console.run_simulation()

    assert result.is_ok()
    alerts = (await console.list_alerts()).value
    assert alerts[0].id == result.value.alert_id
    assert alerts[0].type == "emergency"
    assert alerts[0].severity == "critical"
    assert alerts[0].status == "active"

    entries = (await console.list_audit_logs()).value.to_list()
    assert [(e.action, e.user) for e in entries] == [("Simulation Started", "System")]


@pytest.mark.asyncio
async def test_simulation_with_session_is_attributed(console, test_data):
    await login(console, test_data)

    await console.run_simulation()

    entry = (await console.list_audit_logs("Simulation")).value.to_list()[0]
    assert entry.user == "Admin User"


@pytest.mark.asyncio
async def test_back_to_back_simulations_order(console):
    first = (await console.run_simulation()).value
    second = (await console.run_simulation()).value

    assert first.alert_id != second.alert_id
    assert second.alert.timestamp > first.alert.timestamp

    alerts = (await console.list_alerts()).value
    assert [a.id for a in alerts[:2]] == [second.alert_id, first.alert_id]


@pytest.mark.asyncio
async def test_resolve_then_acknowledge_is_noop(console, test_data):
    await login(console, test_data)

    resolved = await console.resolve_alert("1")
    acknowledged = await console.acknowledge_alert("1")

    assert resolved.value.changed is True
    assert acknowledged.value.changed is False
    assert acknowledged.value.alert.status == "resolved"


@pytest.mark.asyncio
async def test_concurrent_acknowledges_record_one_entry(console, test_data):
    await login(console, test_data)

    results = await asyncio.gather(*(console.acknowledge_alert("1") for _ in range(5)))

    assert sum(1 for r in results if r.value.changed) == 1
    assert (await console.list_audit_logs("Acknowledged")).value.count() == 1


@pytest.mark.asyncio
async def test_session_expiry_blocks_commands(console, test_data, clock, config):
    await login(console, test_data)

    clock.advance(seconds=config.SESSION_TTL_SECONDS)

    assert await console.is_authenticated() is False
    assert await console.time_until_expiry() == timedelta(0)
    result = await console.preserve_evidence("2")
    assert result.error.code == "UNAUTHENTICATED"


@pytest.mark.asyncio
async def test_logout_then_command_fails(console, test_data):
    await login(console, test_data)
    await console.logout()

    result = await console.acknowledge_alert("1")

    assert result.error.code == "UNAUTHENTICATED"


@pytest.mark.asyncio
async def test_foreign_token_counts_as_no_session(console, test_data):
    await login(console, test_data)

    result = await console.acknowledge_alert("1", token="not-the-session-token")

    assert result.error.code == "UNAUTHENTICATED"


@pytest.mark.asyncio
async def test_remembered_session_survives_restart(engine, console, test_data, clock, config):
    session = await login(console, test_data, remember_me=True)

    restarted = build_console(config, engine, clock=clock)
    restored = await restarted.current_session()

    assert restored is not None
    assert restored.token == session.token
    assert restored.principal.name == "Admin User"


@pytest.mark.asyncio
async def test_unremembered_session_lost_on_restart(engine, console, test_data, clock, config):
    await login(console, test_data, remember_me=True)
    await login(console, test_data)

    restarted = build_console(config, engine, clock=clock)

    assert await restarted.is_authenticated() is False


@pytest.mark.asyncio
async def test_settings_roundtrip_is_audited(console, test_data):
    await login(console, test_data)

    updated = await console.update_settings({"alert_threshold": 60})
    assert updated.value.alert_threshold == 60
    assert (await console.get_settings()).value.alert_threshold == 60

    reset = await console.reset_settings()
    assert reset.value.alert_threshold == 75

    actions = [e.action for e in (await console.list_audit_logs("Settings")).value]
    assert actions == ["Settings Reset", "Settings Updated"]


@pytest.mark.asyncio
async def test_dashboard_counts_follow_commands(console, test_data):
    before = (await console.get_stats()).value
    assert before.active_tourists == 2
    assert before.recent_sos == 1
    assert before.recent_alerts == 0

    await login(console, test_data)
    await console.toggle_user_status("3")
    await console.run_simulation()

    after = (await console.get_stats()).value
    assert after.active_tourists == 3
    assert after.recent_sos == 2
    assert after.recent_alerts == 1
    assert (await console.get_mesh_status()).value.network_nodes == 3


@pytest.mark.asyncio
async def test_evidence_listing_by_device(console):
    items = (await console.list_evidence("DEV001")).value
    assert {e.id for e in items} == {"1", "2"}

    assert (await console.list_evidence("DEV999")).value == []

    stats = (await console.get_evidence_stats("DEV001")).value
    assert stats.total_evidence == 2
    assert stats.preserved_items == 1
    assert stats.critical_evidence == 1


@pytest.mark.asyncio
async def test_settings_visible_to_restarted_console(engine, console, test_data, clock, config):
    await login(console, test_data)
    await console.update_settings({"auto_acknowledge": True})

    restarted = build_console(config, engine, clock=clock)

    assert (await restarted.get_settings()).value.auto_acknowledge is True


@pytest.mark.asyncio
async def test_evidence_time_range_is_inclusive(console):
    items = (
        await console.list_evidence(
            "DEV001",
            start=datetime(2024, 1, 15, 10, 15),
            end=datetime(2024, 1, 15, 12, 0),
        )
    ).value

    assert [e.id for e in items] == ["2"]


@pytest.mark.asyncio
async def test_overlong_password_is_invalid_credentials(console):
    result = await console.login("admin@gmail.com", "x" * 80)

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert await console.is_authenticated() is False


@pytest.mark.asyncio
async def test_anonymous_simulation_ignores_current_session(console, test_data):
    await login(console, test_data)

    await console.run_simulation(anonymous=True)

    entry = (await console.list_audit_logs("Simulation")).value.to_list()[0]
    assert entry.user == "System"

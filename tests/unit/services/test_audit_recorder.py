import pytest
from unittest.mock import AsyncMock

from safemesh.app.services.audit_recorder import AuditRecorder, AuditTrailView
from safemesh.domain.entities import AuditLogEntry


def make_entries(clock):
    return [
        AuditLogEntry(id=1, action="Login", user="Admin User", details="Successful admin login", timestamp=clock.now()),
        AuditLogEntry(id=2, action="Evidence Preserved", user="Admin User", details="Evidence 2 preserved", timestamp=clock.now()),
        AuditLogEntry(id=3, action="Simulation Started", user="System", details="Emergency simulation initiated", timestamp=clock.now()),
    ]


def test_view_is_newest_first(clock):
    view = AuditTrailView(make_entries(clock))

    assert [e.id for e in view] == [3, 2, 1]
    assert view.count() == 3


def test_view_can_be_iterated_again(clock):
    view = AuditTrailView(make_entries(clock), "admin")

    first = [e.id for e in view]
    second = [e.id for e in view]

    assert first == second == [2, 1]


def test_view_is_a_snapshot(clock):
    entries = make_entries(clock)
    view = AuditTrailView(entries)

    entries.append(AuditLogEntry(id=4, action="Login", user="Admin User", details=""))

    assert view.count() == 3
    assert [e.id for e in entries] == [1, 2, 3, 4]


def test_empty_needle_matches_everything(clock):
    assert AuditTrailView(make_entries(clock), "").count() == 3


def test_needle_without_match(clock):
    assert AuditTrailView(make_entries(clock), "nothing-like-this").to_list() == []


@pytest.mark.asyncio
async def test_record_stamps_entry_with_clock(mock_uow, clock):
    entry = await AuditRecorder(mock_uow, clock).record("Login", "Admin User", "Successful admin login")

    assert entry.action == "Login"
    assert entry.user == "Admin User"
    assert entry.timestamp == clock.now()
    mock_uow.audit_logs.append.assert_called_once_with(entry)


@pytest.mark.asyncio
async def test_export_rows(mock_uow, clock):
    mock_uow.audit_logs.list_all = AsyncMock(return_value=make_entries(clock))

    rows = await AuditRecorder(mock_uow, clock).export("preserve")

    assert rows == [
        {
            "timestamp": clock.now().isoformat() + "Z",
            "action": "Evidence Preserved",
            "user": "Admin User",
            "details": "Evidence 2 preserved",
        }
    ]

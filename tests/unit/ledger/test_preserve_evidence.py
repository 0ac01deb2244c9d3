"""
Unit tests for Preserve Evidence Use Case
"""

import pytest
from unittest.mock import AsyncMock

from safemesh.app.use_cases.evidence import PreserveEvidenceUseCase
from safemesh.domain.entities import Evidence


def make_evidence(preserved=False):
    return Evidence(
        id="2",
        device_id="DEV001",
        type="interaction",
        data={"interaction": "mesh_relay", "target": "DEV002"},
        preserved=preserved,
    )


@pytest.mark.asyncio
async def test_preserve_evidence(mock_uow, clock):
    evidence = make_evidence()
    mock_uow.evidence.get_by_id = AsyncMock(return_value=evidence)
    mock_uow.evidence.update = AsyncMock(return_value=evidence)

    result = await PreserveEvidenceUseCase(mock_uow, clock).execute("2", "Admin User")

    assert result.is_ok()
    assert result.value.already_preserved is False
    assert evidence.preserved is True
    entry = mock_uow.audit_logs.append.call_args[0][0]
    assert entry.action == "Evidence Preserved"
    assert entry.details == "Evidence 2 preserved"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_preserve_already_preserved_is_noop(mock_uow, clock):
    """Preservation is terminal: a second call records nothing"""
    evidence = make_evidence(preserved=True)
    mock_uow.evidence.get_by_id = AsyncMock(return_value=evidence)
    mock_uow.evidence.update = AsyncMock()

    result = await PreserveEvidenceUseCase(mock_uow, clock).execute("2", "Admin User")

    assert result.is_ok()
    assert result.value.success is True
    assert result.value.already_preserved is True
    mock_uow.evidence.update.assert_not_called()
    mock_uow.audit_logs.append.assert_not_called()


@pytest.mark.asyncio
async def test_preserve_unknown_evidence(mock_uow, clock):
    mock_uow.evidence.get_by_id = AsyncMock(return_value=None)

    result = await PreserveEvidenceUseCase(mock_uow, clock).execute("404", "Admin User")

    assert result.is_err()
    assert result.error.code == "NOT_FOUND"
    assert result.error.context["action"] == "Evidence Preserved"

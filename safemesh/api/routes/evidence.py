from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from safemesh.api.error import ClientError, ServerError
from safemesh.app.services.console import MonitoringConsole
from safemesh.app.use_cases.dtos import EvidenceVaultStats, PreserveEvidenceResponse
from safemesh.depends import get_console, get_current_session
from safemesh.domain.entities import AuthSession, Evidence

router = APIRouter(prefix="/evidence", tags=["Evidence"])


@router.get("", status_code=status.HTTP_200_OK, response_model=List[Evidence])
async def list_evidence(
    session: AuthSession = Depends(get_current_session),
    console: MonitoringConsole = Depends(get_console),
    device_id: str = Query(..., description="Device the evidence was collected from"),
    start: Optional[datetime] = Query(None),
    end: Optional[datetime] = Query(None),
):
    """Evidence for one device; an unknown device returns an empty list"""
    result = await console.list_evidence(device_id, start, end)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/stats", status_code=status.HTTP_200_OK, response_model=EvidenceVaultStats)
async def get_evidence_stats(
    session: AuthSession = Depends(get_current_session),
    console: MonitoringConsole = Depends(get_console),
    device_id: str = Query(...),
):
    result = await console.get_evidence_stats(device_id)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.post(
    "/{evidence_id}/preserve",
    status_code=status.HTTP_200_OK,
    response_model=PreserveEvidenceResponse,
)
async def preserve_evidence(
    evidence_id: str,
    session: AuthSession = Depends(get_current_session),
    console: MonitoringConsole = Depends(get_console),
):
    """
    Preserve Evidence

    Preservation is terminal. Preserving again returns already_preserved=true
    and leaves no new audit entry.

    Raises:
        - 401 Unauthorized: No valid session
        - 404 Not Found: Evidence not found
    """
    result = await console.preserve_evidence(evidence_id, token=session.token)

    if result.is_err():
        error = result.error
        if error.code == "UNAUTHENTICATED":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value

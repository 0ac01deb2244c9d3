"""
Audit API Routes

Handles audit trail retrieval endpoints.
"""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from safemesh.api.error import ServerError
from safemesh.app.services.console import MonitoringConsole
from safemesh.app.use_cases.dtos import AuditStats
from safemesh.depends import get_console, get_current_session
from safemesh.domain.entities import AuthSession

router = APIRouter(prefix="/audit", tags=["Audit"])


class AuditLogResponse(BaseModel):
    """Single audit entry in response"""

    id: int
    timestamp: datetime
    action: str
    user: str
    details: str


@router.get(
    "/logs",
    status_code=status.HTTP_200_OK,
    response_model=List[AuditLogResponse],
)
async def list_audit_logs(
    session: AuthSession = Depends(get_current_session),
    console: MonitoringConsole = Depends(get_console),
    filter: Optional[str] = Query(None, description="Substring of action, user or details"),
):
    """
    Audit Trail

    Returns entries newest first. Filtering never changes the stored trail.
    """
    result = await console.list_audit_logs(filter)
    if result.is_err():
        raise ServerError(result.error)

    return [
        AuditLogResponse(
            id=entry.id,
            timestamp=entry.timestamp,
            action=entry.action,
            user=entry.user,
            details=entry.details,
        )
        for entry in result.value
    ]


@router.get("/stats", status_code=status.HTTP_200_OK, response_model=AuditStats)
async def get_audit_stats(
    session: AuthSession = Depends(get_current_session),
    console: MonitoringConsole = Depends(get_console),
):
    result = await console.get_audit_stats()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/export", status_code=status.HTTP_200_OK)
async def export_audit_logs(
    session: AuthSession = Depends(get_current_session),
    console: MonitoringConsole = Depends(get_console),
    filter: Optional[str] = Query(None),
):
    """Download the (filtered) trail as a JSON attachment"""
    result = await console.export_audit_logs(filter)
    if result.is_err():
        raise ServerError(result.error)

    filename = f"audit-log-{console.clock.now().date().isoformat()}.json"
    return JSONResponse(
        content=result.value,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )

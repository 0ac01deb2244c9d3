from fastapi import APIRouter, Depends, status

from safemesh.api.error import ServerError
from safemesh.app.services.console import MonitoringConsole
from safemesh.app.use_cases.dtos import BehaviorScore, DashboardStats, MeshStatus
from safemesh.depends import get_console, get_current_session
from safemesh.domain.entities import AuthSession

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", status_code=status.HTTP_200_OK, response_model=DashboardStats)
async def get_stats(
    session: AuthSession = Depends(get_current_session),
    console: MonitoringConsole = Depends(get_console),
):
    result = await console.get_stats()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/mesh", status_code=status.HTTP_200_OK, response_model=MeshStatus)
async def get_mesh_status(
    session: AuthSession = Depends(get_current_session),
    console: MonitoringConsole = Depends(get_console),
):
    result = await console.get_mesh_status()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get(
    "/behavior/{device_id}", status_code=status.HTTP_200_OK, response_model=BehaviorScore
)
async def get_behavior_score(
    device_id: str,
    session: AuthSession = Depends(get_current_session),
    console: MonitoringConsole = Depends(get_console),
):
    result = await console.get_behavior_score(device_id)
    if result.is_err():
        raise ServerError(result.error)
    return result.value

from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from safemesh.api.error import ClientError, ServerError
from safemesh.app.services.console import MonitoringConsole
from safemesh.app.use_cases.errors import ErrorCode
from safemesh.depends import get_console, get_current_session
from safemesh.domain.entities import AuthSession, SystemSettings

router = APIRouter(prefix="/settings", tags=["Settings"])


class UpdateSettingsRequest(BaseModel):
    """Partial settings update; omitted fields keep their value"""

    real_time_monitoring: Optional[bool] = None
    alert_notifications: Optional[bool] = None
    auto_acknowledge: Optional[bool] = None
    behavior_analysis: Optional[bool] = None
    evidence_auto_preserve: Optional[bool] = None
    mesh_optimization: Optional[bool] = None
    data_retention_days: Optional[int] = None
    alert_threshold: Optional[int] = None
    simulation_mode: Optional[bool] = None


def _raise_for(error):
    if error.code == ErrorCode.UNAUTHENTICATED:
        raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
    elif error.code == ErrorCode.INVALID_SETTINGS:
        raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
    elif error.code == ErrorCode.STORAGE_UNAVAILABLE:
        raise ClientError(error, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
    raise ServerError(error)


@router.get("", status_code=status.HTTP_200_OK, response_model=SystemSettings)
async def get_settings(
    session: AuthSession = Depends(get_current_session),
    console: MonitoringConsole = Depends(get_console),
):
    result = await console.get_settings()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.put("", status_code=status.HTTP_200_OK, response_model=SystemSettings)
async def update_settings(
    request: UpdateSettingsRequest,
    session: AuthSession = Depends(get_current_session),
    console: MonitoringConsole = Depends(get_console),
):
    """
    Update Settings

    Raises:
        - 401 Unauthorized: No valid session
        - 422 Unprocessable Entity: Value out of range
        - 503 Service Unavailable: Settings could not be saved
    """
    changes = request.model_dump(exclude_none=True)
    result = await console.update_settings(changes, token=session.token)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.post("/reset", status_code=status.HTTP_200_OK, response_model=SystemSettings)
async def reset_settings(
    session: AuthSession = Depends(get_current_session),
    console: MonitoringConsole = Depends(get_console),
):
    result = await console.reset_settings(token=session.token)
    if result.is_err():
        _raise_for(result.error)
    return result.value

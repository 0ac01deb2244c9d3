from typing import List

from fastapi import APIRouter, Depends, status

from safemesh.api.error import ClientError, ServerError
from safemesh.app.services.console import MonitoringConsole
from safemesh.app.use_cases.dtos import AlertTransitionResponse
from safemesh.depends import get_console, get_current_session
from safemesh.domain.entities import Alert, AuthSession

router = APIRouter(prefix="/alerts", tags=["Alerts"])


@router.get("", status_code=status.HTTP_200_OK, response_model=List[Alert])
async def list_alerts(
    session: AuthSession = Depends(get_current_session),
    console: MonitoringConsole = Depends(get_console),
):
    """All alerts, most recent first"""
    result = await console.list_alerts()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.post(
    "/{alert_id}/acknowledge",
    status_code=status.HTTP_200_OK,
    response_model=AlertTransitionResponse,
)
async def acknowledge_alert(
    alert_id: str,
    session: AuthSession = Depends(get_current_session),
    console: MonitoringConsole = Depends(get_console),
):
    """
    Acknowledge Alert

    Idempotent: acknowledging an acknowledged or resolved alert returns
    changed=false.

    Raises:
        - 401 Unauthorized: No valid session
        - 404 Not Found: Alert not found
    """
    result = await console.acknowledge_alert(alert_id, token=session.token)

    if result.is_err():
        error = result.error
        if error.code == "UNAUTHENTICATED":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.post(
    "/{alert_id}/resolve",
    status_code=status.HTTP_200_OK,
    response_model=AlertTransitionResponse,
)
async def resolve_alert(
    alert_id: str,
    session: AuthSession = Depends(get_current_session),
    console: MonitoringConsole = Depends(get_console),
):
    """
    Resolve Alert

    Raises:
        - 401 Unauthorized: No valid session
        - 404 Not Found: Alert not found
    """
    result = await console.resolve_alert(alert_id, token=session.token)

    if result.is_err():
        error = result.error
        if error.code == "UNAUTHENTICATED":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value

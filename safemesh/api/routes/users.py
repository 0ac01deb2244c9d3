from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from safemesh.api.error import ClientError, ServerError
from safemesh.app.services.console import MonitoringConsole
from safemesh.app.use_cases.dtos import ToggleUserStatusResponse, UserPage
from safemesh.depends import get_console, get_current_session
from safemesh.domain.entities import AuthSession

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", status_code=status.HTTP_200_OK, response_model=UserPage)
async def list_users(
    session: AuthSession = Depends(get_current_session),
    console: MonitoringConsole = Depends(get_console),
    search: str = Query("", description="Substring of name or email"),
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100),
    device_id: Optional[str] = Query(None, description="Only users on this device"),
):
    result = await console.list_users(search, page, page_size, device_id)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.post(
    "/{user_id}/toggle-status",
    status_code=status.HTTP_200_OK,
    response_model=ToggleUserStatusResponse,
)
async def toggle_user_status(
    user_id: str,
    session: AuthSession = Depends(get_current_session),
    console: MonitoringConsole = Depends(get_console),
):
    """
    Suspend / Reactivate User

    Flips the user between active and suspended.

    Raises:
        - 401 Unauthorized: No valid session
        - 404 Not Found: User not found
    """
    result = await console.toggle_user_status(user_id, token=session.token)

    if result.is_err():
        error = result.error
        if error.code == "UNAUTHENTICATED":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value

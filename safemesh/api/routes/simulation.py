from typing import Optional

from fastapi import APIRouter, Depends, status

from safemesh.api.error import ServerError
from safemesh.app.services.console import MonitoringConsole
from safemesh.app.use_cases.dtos import SimulationResponse
from safemesh.depends import get_bearer_token, get_console

router = APIRouter(prefix="/simulation", tags=["Simulation"])


@router.post("/run", status_code=status.HTTP_201_CREATED, response_model=SimulationResponse)
async def run_simulation(
    token: Optional[str] = Depends(get_bearer_token),
    console: MonitoringConsole = Depends(get_console),
):
    """
    Run Emergency Simulation

    Creates a critical emergency alert. Allowed without a session. Only a
    bearer token for the current session attributes the run to the operator;
    otherwise the audit entry is attributed to "System".
    """
    result = await console.run_simulation(token=token, anonymous=token is None)
    if result.is_err():
        raise ServerError(result.error)
    return result.value

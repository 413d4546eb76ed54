"""Health check endpoint. No dependencies; used for liveness checks."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.controllers import HealthCheckControllerImpl
from app.api.dependencies import get_health_check_controller
from app.schemas.envelope import SuccessResponse

router = APIRouter()


@router.get("", response_model=SuccessResponse[str])
def health_check(
    controller: Annotated[HealthCheckControllerImpl, Depends(get_health_check_controller)],
) -> SuccessResponse[str]:
    """Return the literal liveness envelope."""
    return controller.check_health()

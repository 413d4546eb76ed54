"""Service info endpoint: configured name and version plus server time."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.controllers import ServiceInfoControllerImpl
from app.api.dependencies import get_service_info_controller
from app.schemas.envelope import SuccessResponse
from app.schemas.service_info import ServiceInfoResponse

router = APIRouter()


@router.get("", response_model=SuccessResponse[ServiceInfoResponse])
async def get_service_info(
    controller: Annotated[ServiceInfoControllerImpl, Depends(get_service_info_controller)],
) -> SuccessResponse[ServiceInfoResponse]:
    """Return {serviceName, appVersion, timestamp}. Failures go to the shared handlers."""
    return await controller.get_service_info()

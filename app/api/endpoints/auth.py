"""Auth API: login.

Returns the sanitized user and a Bearer access/refresh token pair. Unknown
email and wrong password surface as 404 and 401 via the exception handlers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.controllers import UserAuthControllerImpl
from app.api.dependencies import get_user_auth_controller
from app.schemas.auth import LoginRequest, LoginResponse
from app.schemas.envelope import ErrorResponse, SuccessResponse

router = APIRouter()


@router.post(
    "",
    response_model=SuccessResponse[LoginResponse],
    responses={
        400: {"description": "Malformed body", "model": ErrorResponse},
        401: {"description": "Wrong password", "model": ErrorResponse},
        404: {"description": "Unknown email", "model": ErrorResponse},
    },
)
async def login(
    body: LoginRequest,
    controller: Annotated[UserAuthControllerImpl, Depends(get_user_auth_controller)],
) -> SuccessResponse[LoginResponse]:
    """Authenticate with email and password."""
    return await controller.login(body.email, body.password)

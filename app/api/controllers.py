"""Controllers: thin adapters between HTTP routes and application services.

Each method invokes exactly one service operation and wraps the result in the
success envelope. Errors are never caught here; they propagate to the
registered exception handlers, which are the only place a status code is
chosen from an error kind.
"""

from __future__ import annotations

from app.application.interfaces.services import IServiceInfoService, IUserAuthService
from app.schemas.auth import LoginResponse
from app.schemas.envelope import SuccessResponse, success_response
from app.schemas.service_info import ServiceInfoResponse
from app.shared.logging import ContextLogger

HEALTH_MESSAGE = "I'm alive!"
LOGIN_SUCCESS_MESSAGE = "Login successfully"


class HealthCheckControllerImpl:
    """Liveness. No dependencies, so it answers regardless of store state."""

    def check_health(self) -> SuccessResponse[str]:
        return success_response(200, HEALTH_MESSAGE)


class ServiceInfoControllerImpl:
    def __init__(self, logger: ContextLogger, service: IServiceInfoService) -> None:
        self._logger = logger
        self._service = service

    async def get_service_info(self) -> SuccessResponse[ServiceInfoResponse]:
        info = await self._service.get_service_info()
        return success_response(200, ServiceInfoResponse.from_dto(info))


class UserAuthControllerImpl:
    def __init__(self, logger: ContextLogger, service: IUserAuthService) -> None:
        self._logger = logger
        self._service = service

    async def login(self, email: str, password: str) -> SuccessResponse[LoginResponse]:
        """Authenticate and return {user, token}; failures propagate unchanged."""
        result = await self._service.login(email, password)
        self._logger.debug(
            "Issued token pair for user id %s", result.user.id, method_name="login"
        )
        return success_response(
            200, LoginResponse.from_result(result), LOGIN_SUCCESS_MESSAGE
        )

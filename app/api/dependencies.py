"""FastAPI dependencies: pull controllers out of the registry on app.state.

Routes depend only on these, never on concrete implementations.
"""

from typing import Annotated

from fastapi import Depends, Request

from app.api.controllers import (
    HealthCheckControllerImpl,
    ServiceInfoControllerImpl,
    UserAuthControllerImpl,
)
from app.core.container import Capability, Container


def get_container(request: Request) -> Container:
    """Return the registry built by create_app()."""
    return request.app.state.container


ContainerDep = Annotated[Container, Depends(get_container)]


def get_health_check_controller(container: ContainerDep) -> HealthCheckControllerImpl:
    return container.resolve(Capability.HEALTH_CHECK_CONTROLLER)


def get_service_info_controller(container: ContainerDep) -> ServiceInfoControllerImpl:
    return container.resolve(Capability.SERVICE_INFO_CONTROLLER)


def get_user_auth_controller(container: ContainerDep) -> UserAuthControllerImpl:
    return container.resolve(Capability.USER_AUTH_CONTROLLER)

"""Service-info snapshot: configured name and version plus the current time."""

from collections.abc import Callable

from app.application.dtos.service_info import ServiceInfo
from app.shared.logging import ContextLogger
from app.shared.utils.datetime import epoch_millis


class ServiceInfoServiceImpl:
    """Build a ServiceInfo on every call; nothing is cached or persisted."""

    def __init__(
        self,
        logger: ContextLogger,
        service_name: str,
        app_version: str,
        clock: Callable[[], int] = epoch_millis,
    ) -> None:
        self._logger = logger
        self._service_name = service_name
        self._app_version = app_version
        self._clock = clock

    async def get_service_info(self) -> ServiceInfo:
        self._logger.info("getting service info", method_name="get_service_info")
        return ServiceInfo(
            service_name=self._service_name,
            app_version=self._app_version,
            timestamp=str(self._clock()),
        )

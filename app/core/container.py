"""Dependency registry (composition root).

Binds each capability (an abstract controller, service, repository, or the
store) to one factory. Factories receive the container, to resolve their own
dependencies, and a fresh ContextLogger tagged with the implementation's
declared name. Every binding is a singleton: it is built on first resolve and
cached, so after startup the registry is a fixed object graph.

Bindings are registered once, while the process starts; freeze() then rejects
further registration.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from app.core.config import Settings
from app.domain.exceptions import BindingNotFoundError
from app.shared.logging import ContextLogger, create_logger, get_logger

logger = get_logger(__name__)

Factory = Callable[["Container", ContextLogger], Any]


class Capability(StrEnum):
    """Abstract capabilities that can be resolved from the registry."""

    DATABASE = "Database"
    USER_AUTH_REPOSITORY = "UserAuthRepository"
    SERVICE_INFO_SERVICE = "ServiceInfoService"
    USER_AUTH_SERVICE = "UserAuthService"
    HEALTH_CHECK_CONTROLLER = "HealthCheckController"
    SERVICE_INFO_CONTROLLER = "ServiceInfoController"
    USER_AUTH_CONTROLLER = "UserAuthController"


@dataclass(frozen=True)
class Binding:
    """One registry entry: capability -> factory, plus the name its logger is tagged with."""

    capability: Capability
    factory: Factory
    name: str


class Container:
    """Registry of capability bindings with cached (singleton) resolution."""

    def __init__(self) -> None:
        self._bindings: dict[Capability, Binding] = {}
        self._instances: dict[Capability, Any] = {}
        self._resolving: list[Capability] = []
        self._frozen = False
        logger.debug("Dependency registry created")

    def __contains__(self, capability: object) -> bool:
        return capability in self._bindings or capability in self._instances

    def __iter__(self) -> Iterator[Capability]:
        return iter(self._bindings)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(
        self,
        capability: Capability,
        factory: Factory,
        *,
        name: str | None = None,
    ) -> None:
        """Bind capability to factory.

        Args:
            capability: What is being provided.
            factory: Callable (container, logger) -> instance.
            name: Implementation name used to tag the injected logger;
                defaults to the factory's __name__.

        Raises:
            RuntimeError: If the registry is frozen or capability is already bound.
        """
        if self._frozen:
            raise RuntimeError(f"Registry is frozen; cannot register {capability}")
        if capability in self._bindings:
            raise RuntimeError(f"Capability already registered: {capability}")
        self._bindings[capability] = Binding(
            capability=capability,
            factory=factory,
            name=name or getattr(factory, "__name__", str(capability)),
        )

    def override(self, capability: Capability, instance: Any) -> None:
        """Pin capability to a prebuilt instance (tests and local tooling).

        Raises:
            RuntimeError: If the registry is frozen.
        """
        if self._frozen:
            raise RuntimeError(f"Registry is frozen; cannot override {capability}")
        self._instances[capability] = instance

    def resolve(self, capability: Capability) -> Any:
        """Return the instance bound to capability, building it on first use.

        Raises:
            BindingNotFoundError: If capability was never registered.
            RuntimeError: On a dependency cycle.
        """
        if capability in self._instances:
            return self._instances[capability]
        binding = self._bindings.get(capability)
        if binding is None:
            raise BindingNotFoundError(capability)
        if capability in self._resolving:
            cycle = " -> ".join([*self._resolving, capability])
            raise RuntimeError(f"Dependency cycle: {cycle}")
        self._resolving.append(capability)
        try:
            instance = binding.factory(self, create_logger(binding.name))
        finally:
            self._resolving.pop()
        self._instances[capability] = instance
        logger.debug("Resolved %s -> %s", capability, binding.name)
        return instance

    def resolve_all(self) -> None:
        """Build every registered binding (fail fast at startup, not on first request)."""
        for capability in self._bindings:
            self.resolve(capability)

    def freeze(self) -> None:
        """Reject any further register/override calls."""
        self._frozen = True


def build_container(settings: Settings, *, database: Any | None = None) -> Container:
    """Register every binding for the application.

    Args:
        settings: Loaded settings (token TTLs, secret, service name, store).
        database: Optional prebuilt store; by default a pooled Database
            for settings.database_backend.

    Returns:
        An unfrozen Container; the lifespan freezes it.
    """
    from app.api.controllers import (
        HealthCheckControllerImpl,
        ServiceInfoControllerImpl,
        UserAuthControllerImpl,
    )
    from app.application.services.auth_service import UserAuthServiceImpl
    from app.application.services.service_info_service import ServiceInfoServiceImpl
    from app.infrastructure.persistence.database import Database
    from app.infrastructure.persistence.repositories.user_auth_repo import (
        UserAuthRepositoryImpl,
    )

    container = Container()

    # Store
    if database is not None:
        container.override(Capability.DATABASE, database)
    else:
        container.register(
            Capability.DATABASE,
            lambda c, log: Database(settings, log),
            name=Database.__name__,
        )

    # Repository
    container.register(
        Capability.USER_AUTH_REPOSITORY,
        lambda c, log: UserAuthRepositoryImpl(c.resolve(Capability.DATABASE), log),
        name=UserAuthRepositoryImpl.__name__,
    )

    # Service
    container.register(
        Capability.SERVICE_INFO_SERVICE,
        lambda c, log: ServiceInfoServiceImpl(
            log,
            service_name=settings.app_name,
            app_version=settings.app_version,
        ),
        name=ServiceInfoServiceImpl.__name__,
    )
    container.register(
        Capability.USER_AUTH_SERVICE,
        lambda c, log: UserAuthServiceImpl(
            log,
            c.resolve(Capability.USER_AUTH_REPOSITORY),
            secret_key=settings.secret_key.get_secret_value(),
            algorithm=settings.algorithm,
            access_token_ttl=settings.access_token_ttl,
            refresh_token_ttl=settings.refresh_token_ttl,
        ),
        name=UserAuthServiceImpl.__name__,
    )

    # Controller
    container.register(
        Capability.HEALTH_CHECK_CONTROLLER,
        lambda c, log: HealthCheckControllerImpl(),
        name=HealthCheckControllerImpl.__name__,
    )
    container.register(
        Capability.SERVICE_INFO_CONTROLLER,
        lambda c, log: ServiceInfoControllerImpl(
            log, c.resolve(Capability.SERVICE_INFO_SERVICE)
        ),
        name=ServiceInfoControllerImpl.__name__,
    )
    container.register(
        Capability.USER_AUTH_CONTROLLER,
        lambda c, log: UserAuthControllerImpl(
            log, c.resolve(Capability.USER_AUTH_SERVICE)
        ),
        name=UserAuthControllerImpl.__name__,
    )

    return container

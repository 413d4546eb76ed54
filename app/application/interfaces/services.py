"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP). Controllers depend
on these, never on the concrete implementations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.service_info import ServiceInfo
    from app.application.dtos.user import LoginResult


# Service info interface
class IServiceInfoService(Protocol):
    """Protocol for the service-info snapshot."""

    async def get_service_info(self) -> ServiceInfo:
        """Return service name, version, and current epoch-millis timestamp."""


# User authentication interface
class IUserAuthService(Protocol):
    """Protocol for credential verification and token issuance."""

    async def login(self, email: str, password: str) -> LoginResult:
        """Verify credentials and return the user projection with a token pair.

        Raises RecordNotFoundError for an unknown email and UnauthorizedError
        for a wrong password.
        """

"""DTO for the service-info snapshot."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceInfo:
    """Service name and version from configuration, stamped with the current time.

    timestamp is epoch milliseconds rendered as a string.
    """

    service_name: str
    app_version: str
    timestamp: str

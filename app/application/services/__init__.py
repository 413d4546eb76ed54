"""Application services: authentication and service info."""

from app.application.services.auth_service import UserAuthServiceImpl
from app.application.services.service_info_service import ServiceInfoServiceImpl

__all__ = ["ServiceInfoServiceImpl", "UserAuthServiceImpl"]

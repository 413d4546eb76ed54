"""Application DTOs: plain data passed between services and controllers."""

from app.application.dtos.service_info import ServiceInfo
from app.application.dtos.user import LoginResult, TokenPair, UserDTO

__all__ = ["LoginResult", "ServiceInfo", "TokenPair", "UserDTO"]

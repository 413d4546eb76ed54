"""API schemas (request/response bodies)."""

from app.schemas.auth import LoginRequest, LoginResponse, TokenResponse, UserResponse
from app.schemas.envelope import (
    ErrorResponse,
    SuccessResponse,
    error_response,
    success_response,
)
from app.schemas.service_info import ServiceInfoResponse

__all__ = [
    "ErrorResponse",
    "LoginRequest",
    "LoginResponse",
    "ServiceInfoResponse",
    "SuccessResponse",
    "TokenResponse",
    "UserResponse",
    "error_response",
    "success_response",
]

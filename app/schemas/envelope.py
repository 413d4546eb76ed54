"""Response envelope shared by every endpoint.

Success: {"code", "status": "success", "data", "message"}.
Error:   {"code", "status": "error", "message"} (never carries data).
"""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")

DEFAULT_SUCCESS_MESSAGE = "Successful"


class SuccessResponse(BaseModel, Generic[T]):
    """Envelope for a successful call; data is always present."""

    code: int = Field(default=200, description="HTTP status code")
    status: Literal["success"] = "success"
    data: T
    message: str = DEFAULT_SUCCESS_MESSAGE


class ErrorResponse(BaseModel):
    """Envelope for a failed call."""

    code: int = Field(..., description="HTTP status code")
    status: Literal["error"] = "error"
    message: str


def success_response(
    code: int, data: T, message: str = DEFAULT_SUCCESS_MESSAGE
) -> SuccessResponse[T]:
    """Wrap data in a success envelope."""
    return SuccessResponse(code=code, data=data, message=message)


def error_response(code: int, message: str) -> ErrorResponse:
    """Build an error envelope."""
    return ErrorResponse(code=code, message=message)

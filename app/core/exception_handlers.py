"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). This is the only place an
HTTP status is chosen from an error kind: controllers, services and
repositories let errors propagate, and each one is classified here once.
Every response uses the error envelope.
"""

import logging
from collections.abc import Mapping

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import (
    BadRequestError,
    ConflictError,
    DomainException,
    ForbiddenError,
    RecordNotFoundError,
    UnauthorizedError,
)
from app.schemas.envelope import error_response

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"

# Error kind -> HTTP status. Anything not listed is a 500.
ERROR_STATUS: dict[type[DomainException], int] = {
    RecordNotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    BadRequestError: status.HTTP_400_BAD_REQUEST,
}


def status_for(exc: BaseException) -> int:
    """Return the HTTP status for an error kind (500 when unlisted)."""
    for kind in type(exc).__mro__:
        code = ERROR_STATUS.get(kind)  # type: ignore[arg-type]
        if code is not None:
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _envelope(
    code: int, message: str, headers: Mapping[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=code,
        content=error_response(code, message).model_dump(),
        headers=headers,
    )


def _domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Map a domain error kind to its status; the message is returned as-is."""
    code = status_for(exc)
    if code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        return unhandled_exception_response(request, exc)
    logger.warning(
        "%s on %s %s: %s",
        exc.error_code,
        request.method,
        request.url.path,
        exc.message,
    )
    return _envelope(code, exc.message)


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request body: classified as a bad request (400)."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    detail = first.get("msg", "Request validation failed")
    message = f"{location}: {detail}" if location else detail
    logger.warning(
        "Validation failed on %s %s: %s", request.method, request.url.path, message
    )
    return _envelope(status.HTTP_400_BAD_REQUEST, message)


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Framework HTTP errors (unknown route, wrong method) in envelope form.

    Headers the framework attached (e.g. Allow on a 405) are kept.
    """
    return _envelope(exc.status_code, str(exc.detail), headers=exc.headers)


def unhandled_exception_response(request: Request, exc: Exception) -> JSONResponse:
    """Log exc once and return the 500 envelope; detail only when debug is True.

    Called by UnhandledErrorMiddleware inside the request scope, so the log
    line carries the request id and the response still passes through the
    request-id and CORS middleware. Registered for Exception as well, which
    only sees errors raised outside that scope (e.g. in middleware).
    """
    logger.exception(
        "Unhandled exception on %s %s: %s", request.method, request.url.path, exc
    )
    settings = get_settings()
    message = str(exc) if settings.debug else INTERNAL_ERROR_MESSAGE
    return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: DomainException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(DomainException, _domain_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_response)

"""Domain exceptions.

Defines the closed set of domain error kinds. They are independent of HTTP;
the presentation layer maps them to status codes in exactly one place
(app.core.exception_handlers). Repositories and services raise them and never
catch their own errors.
"""


class DomainException(Exception):
    """Base exception for all domain error kinds.

    Attributes:
        message: Human-readable error description (safe to return to clients).
        error_code: Machine-readable error code.
    """

    def __init__(self, message: str, error_code: str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        super().__init__(self.message)


class RecordNotFoundError(DomainException):
    """Raised when a lookup matches no stored record."""


class ConflictError(DomainException):
    """Raised when a write would conflict with existing state."""


class UnauthorizedError(DomainException):
    """Raised when presented credentials or tokens are not valid."""


class ForbiddenError(DomainException):
    """Raised when the caller is authenticated but not allowed to act."""


class BadRequestError(DomainException):
    """Raised when the request is malformed or fails validation."""


class BindingNotFoundError(LookupError):
    """Raised when resolving a capability that was never registered.

    Not a domain kind: reaching the HTTP boundary it is unclassified (500).
    """

    def __init__(self, capability: object) -> None:
        self.capability = capability
        super().__init__(f"No binding registered for capability: {capability}")


class StoreClosedError(RuntimeError):
    """Raised when a query is attempted after the connection pool was disposed."""

    def __init__(self) -> None:
        super().__init__(
            "Relational store is closed: the connection pool was disposed at shutdown."
        )

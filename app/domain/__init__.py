"""Domain layer: entities and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import UserEntity
from app.domain.exceptions import (
    BadRequestError,
    ConflictError,
    DomainException,
    ForbiddenError,
    RecordNotFoundError,
    UnauthorizedError,
)

__all__ = [
    # Entities
    "UserEntity",
    # Exceptions
    "BadRequestError",
    "ConflictError",
    "DomainException",
    "ForbiddenError",
    "RecordNotFoundError",
    "UnauthorizedError",
]

"""Domain entities.

Pure domain models; no ORM or persistence concerns.
"""

from app.domain.entities.user import UserEntity

__all__ = ["UserEntity"]

"""DTOs for user authentication use cases (no dependency on the store)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.entities.user import UserEntity


@dataclass(frozen=True)
class UserDTO:
    """Sanitized projection of UserEntity. No password, no salt."""

    id: int
    username: str
    email: str
    active: bool
    display_name: str
    first_name: str
    last_name: str

    @classmethod
    def from_entity(cls, user: UserEntity) -> UserDTO:
        """Build a fresh DTO from a credential record."""
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            active=user.active,
            display_name=user.display_name,
            first_name=user.first_name,
            last_name=user.last_name,
        )

    def to_claims(self) -> dict[str, Any]:
        """Token claims for this user, keyed the way clients read them (camelCase)."""
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "active": self.active,
            "displayName": self.display_name,
            "firstName": self.first_name,
            "lastName": self.last_name,
        }


@dataclass(frozen=True)
class TokenPair:
    """Signed access/refresh token pair returned by login."""

    token: str
    refresh_token: str
    type: str = "Bearer"


@dataclass(frozen=True)
class LoginResult:
    """Result of a successful login."""

    user: UserDTO
    token: TokenPair

"""Auth API schemas. Wire names are camelCase (displayName, refreshToken)."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.application.dtos.user import LoginResult, TokenPair, UserDTO


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoginRequest(BaseModel):
    """Request body for POST /login."""

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


class UserResponse(_CamelModel):
    """Sanitized user projection. There is no password or salt field to leak."""

    id: int
    username: str
    email: str
    active: bool
    display_name: str
    first_name: str
    last_name: str

    @classmethod
    def from_dto(cls, user: UserDTO) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            active=user.active,
            display_name=user.display_name,
            first_name=user.first_name,
            last_name=user.last_name,
        )


class TokenResponse(_CamelModel):
    """Signed token pair."""

    type: str = "Bearer"
    token: str
    refresh_token: str

    @classmethod
    def from_dto(cls, pair: TokenPair) -> "TokenResponse":
        return cls(type=pair.type, token=pair.token, refresh_token=pair.refresh_token)


class LoginResponse(BaseModel):
    """Payload of a successful login: {user, token}."""

    user: UserResponse
    token: TokenResponse

    @classmethod
    def from_result(cls, result: LoginResult) -> "LoginResponse":
        return cls(
            user=UserResponse.from_dto(result.user),
            token=TokenResponse.from_dto(result.token),
        )

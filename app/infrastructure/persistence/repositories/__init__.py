"""Repositories over the relational store."""

from app.infrastructure.persistence.repositories.user_auth_repo import (
    USER_COLUMNS,
    UserAuthRepositoryImpl,
)

__all__ = ["USER_COLUMNS", "UserAuthRepositoryImpl"]

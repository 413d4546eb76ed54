"""Unit tests for UserAuthRepositoryImpl against the in-memory store."""

import pytest

from app.domain.entities.user import UserEntity
from app.domain.exceptions import RecordNotFoundError
from app.infrastructure.persistence.repositories.user_auth_repo import (
    USER_COLUMNS,
    UserAuthRepositoryImpl,
)
from app.shared.logging import create_logger
from tests.conftest import FakeDatabase, make_user_row


def _repo(db: FakeDatabase) -> UserAuthRepositoryImpl:
    return UserAuthRepositoryImpl(db, create_logger("UserAuthRepositoryImpl"))


def test_column_map_covers_every_entity_field() -> None:
    """The projection and the entity shape can only drift by editing USER_COLUMNS."""
    assert tuple(USER_COLUMNS) == UserEntity.field_names()


async def test_find_by_email_maps_row_to_entity() -> None:
    db = FakeDatabase([make_user_row(id="42", active=0)])
    user = await _repo(db).find_by_email("jane@example.com")
    assert isinstance(user, UserEntity)
    assert user.id == 42
    assert user.active is False
    assert user.display_name == "Jane D."
    assert user.salt == "pepper"


async def test_find_by_email_binds_parameter_and_projects_columns() -> None:
    db = FakeDatabase([make_user_row()])
    await _repo(db).find_by_email("jane@example.com")
    sql, params = db.queries[0]
    assert params == {"email": "jane@example.com"}
    assert "jane@example.com" not in sql
    assert sql.startswith("SELECT id, username, email, active, display_name")
    assert "FROM users WHERE email = :email" in sql


async def test_find_by_email_missing_raises_not_found() -> None:
    db = FakeDatabase([])
    with pytest.raises(RecordNotFoundError, match="User with email ghost@example.com is not found"):
        await _repo(db).find_by_email("ghost@example.com")


async def test_null_columns_become_empty_strings() -> None:
    db = FakeDatabase([make_user_row(display_name=None, first_name=None, last_name=None)])
    user = await _repo(db).find_by_email("jane@example.com")
    assert (user.display_name, user.first_name, user.last_name) == ("", "", "")

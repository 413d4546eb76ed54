"""User credential repository over the relational store.

The SELECT projection comes from an explicit field -> column map, so renaming
an entity field or a column is a one-line change here and never silently
drifts the query away from the entity shape.
"""

from __future__ import annotations

from typing import Any

from app.application.interfaces.repositories import IDatabase
from app.domain.entities.user import UserEntity
from app.domain.exceptions import RecordNotFoundError
from app.shared.logging import ContextLogger

USERS_TABLE = "users"

# UserEntity field -> users column
USER_COLUMNS: dict[str, str] = {
    "id": "id",
    "username": "username",
    "email": "email",
    "active": "active",
    "display_name": "display_name",
    "first_name": "first_name",
    "last_name": "last_name",
    "password": "password",
    "salt": "salt",
}


def _select_clause(columns: dict[str, str]) -> str:
    """Render `column AS field` pairs; bare column when the names match."""
    parts = [
        column if column == field else f"{column} AS {field}"
        for field, column in columns.items()
    ]
    return ", ".join(parts)


def _row_to_entity(row: dict[str, Any]) -> UserEntity:
    """Map a row keyed by entity field names onto UserEntity."""
    return UserEntity(
        id=int(row["id"]),
        username=row["username"] or "",
        email=row["email"] or "",
        active=bool(row["active"]),
        display_name=row["display_name"] or "",
        first_name=row["first_name"] or "",
        last_name=row["last_name"] or "",
        password=row["password"] or "",
        salt=row["salt"] or "",
    )


class UserAuthRepositoryImpl:
    """Read-only credential lookups. Errors propagate to the caller untouched."""

    _FIND_BY_EMAIL_SQL = (
        f"SELECT {_select_clause(USER_COLUMNS)} FROM {USERS_TABLE} "
        f"WHERE {USER_COLUMNS['email']} = :email LIMIT 1"
    )

    def __init__(self, db: IDatabase, logger: ContextLogger) -> None:
        self._db = db
        self._logger = logger

    async def find_by_email(self, email: str) -> UserEntity:
        """Return the credential record for email.

        Raises:
            RecordNotFoundError: When no row matches.
        """
        self._logger.debug(self._FIND_BY_EMAIL_SQL, method_name="find_by_email")
        rows = await self._db.query(self._FIND_BY_EMAIL_SQL, {"email": email})
        if not rows:
            raise RecordNotFoundError(f"User with email {email} is not found")
        return _row_to_entity(dict(rows[0]))

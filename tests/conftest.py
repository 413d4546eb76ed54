"""Pytest configuration and fixtures.

HTTP tests run create_app() through httpx's ASGITransport with a registry
whose store is an in-memory fake, so no database server is required.
"""

import os

os.environ.setdefault("APPLICATION_NAME", "boilerplate")
os.environ.setdefault("APP_VERSION", "1.0.1")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-signing-tokens")
os.environ.setdefault("TOKEN_EXPIRES_IN", "15m")
os.environ.setdefault("REFRESH_TOKEN_EXPIRES_IN", "7d")

from collections.abc import Iterable
from contextlib import asynccontextmanager
from typing import Any

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.core.config import Settings, get_settings
from app.core.container import Container, build_container
from app.infrastructure.security.password import get_password_hash
from app.main import create_app

TEST_EMAIL = "jane@example.com"
TEST_PASSWORD = "correct-horse-battery-staple"

# Low cost factor keeps the suite fast; verification does not depend on it.
TEST_PASSWORD_HASH = get_password_hash(TEST_PASSWORD, rounds=4)


def make_user_row(**overrides: Any) -> dict[str, Any]:
    """A users row as the store returns it (keys are entity field names)."""
    row: dict[str, Any] = {
        "id": 42,
        "username": "jane",
        "email": TEST_EMAIL,
        "active": 1,
        "display_name": "Jane D.",
        "first_name": "Jane",
        "last_name": "Doe",
        "password": TEST_PASSWORD_HASH,
        "salt": "pepper",
    }
    row.update(overrides)
    return row


class FakeDatabase:
    """In-memory stand-in for Database: filters rows by the :email parameter."""

    def __init__(self, rows: Iterable[dict[str, Any]] = ()) -> None:
        self.rows = [dict(r) for r in rows]
        self.queries: list[tuple[str, dict[str, Any]]] = []
        self.disposed = False

    @asynccontextmanager
    async def connection(self):
        yield self

    async def query(self, sql: str, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        params = dict(params or {})
        self.queries.append((sql, params))
        return [dict(r) for r in self.rows if r.get("email") == params.get("email")]

    async def dispose(self) -> None:
        self.disposed = True


@pytest.fixture
def settings() -> Settings:
    """Fresh settings from the test environment."""
    get_settings.cache_clear()
    return get_settings()


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase([make_user_row()])


@pytest.fixture
def container(settings: Settings, fake_db: FakeDatabase) -> Container:
    """Production bindings, with the store swapped for the in-memory fake."""
    return build_container(settings, database=fake_db)


@pytest.fixture
def app(container: Container) -> FastAPI:
    return create_app(container)


@pytest.fixture
async def client(app: FastAPI) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI).

    raise_app_exceptions=False so unhandled errors come back as the 500
    envelope instead of being re-raised into the test.
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

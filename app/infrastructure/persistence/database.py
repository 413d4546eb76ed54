"""Persistence: async engine and scoped connections for the relational store.

Two interchangeable backends are supported, selected by DATABASE_BACKEND:
'postgres' (asyncpg) and 'mysql' (aiomysql). Only the pool and the
query(sql, params) -> rows boundary live here; schema is owned elsewhere.

The engine is created lazily on first use so constructing a Database (e.g.
while building the dependency registry) does not open connections.
"""

import asyncio
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from app.core.config import Settings
from app.domain.exceptions import StoreClosedError
from app.shared.logging import ContextLogger


class Database:
    """Pooled connection source for one backend.

    Every query runs on a connection acquired from the pool and released on
    exit, including when the statement raises or times out.
    """

    def __init__(self, settings: Settings, logger: ContextLogger) -> None:
        self._settings = settings
        self._logger = logger
        self._engine: AsyncEngine | None = None
        self._closed = False

    @property
    def backend(self) -> str:
        return self._settings.database_backend

    def _ensure_engine(self) -> AsyncEngine:
        """Create the engine on first use."""
        if self._closed:
            raise StoreClosedError()
        if self._engine is None:
            settings = self._settings
            self._engine = create_async_engine(
                settings.database_url,
                pool_pre_ping=True,
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_recycle=3600,
            )
            self._logger.info(
                "Connection pool created for %s at %s",
                self.backend,
                self._engine.url.render_as_string(hide_password=True),
            )
        return self._engine

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[AsyncConnection]:
        """Acquire a pooled connection; it goes back to the pool when the block exits.

        Uncommitted work is rolled back on exit; call ``await conn.commit()`` to keep it.
        """
        engine = self._ensure_engine()
        async with engine.connect() as conn:
            yield conn

    async def query(
        self, sql: str, params: Mapping[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        """Run one statement with bound parameters and return rows as dicts.

        Statements use named placeholders (``:email``). Each call is its own
        transaction: rows are read, then the transaction commits, so writes
        persist the same way a driver-level autocommit query would. On error
        the transaction rolls back. The call is bounded by
        DB_QUERY_TIMEOUT_SECONDS; on timeout the statement is cancelled, the
        connection is released, and TimeoutError propagates.
        """
        timeout = self._settings.db_query_timeout_seconds
        engine = self._ensure_engine()
        async with engine.begin() as conn:
            async with asyncio.timeout(timeout):
                result = await conn.execute(text(sql), dict(params or {}))
                if not result.returns_rows:
                    return []
                return [dict(row) for row in result.mappings().all()]

    async def dispose(self) -> None:
        """Close all pooled connections. Further queries raise StoreClosedError."""
        self._closed = True
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._logger.info("Connection pool disposed")

"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
No infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from contextlib import AbstractAsyncContextManager
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.entities.user import UserEntity


# Relational store boundary
class IDatabase(Protocol):
    """Protocol for the relational store: scoped connections and one-shot queries."""

    def connection(self) -> AbstractAsyncContextManager[Any]:
        """Acquire a pooled connection; released when the context exits, on every path."""

    async def query(
        self, sql: str, params: Mapping[str, Any] | None = None
    ) -> Sequence[Mapping[str, Any]]:
        """Run one statement on a scoped connection and return rows as mappings."""

    async def dispose(self) -> None:
        """Close the pool."""


# User credential repository interface
class IUserAuthRepository(Protocol):
    """Protocol for credential lookup (DIP)."""

    async def find_by_email(self, email: str) -> UserEntity:
        """Return the credential record for email. Raises RecordNotFoundError if none."""

"""Application lifespan: startup and shutdown.

Single place for startup/shutdown logic. No business logic here, only
wiring: freeze the registry and build its object graph on startup, close
the store's connection pool on shutdown.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.container import Capability, Container

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown."""
    container: Container = app.state.container

    # ---- Startup ----
    container.resolve_all()
    container.freeze()
    logger.info("Dependency registry frozen with %d bindings", len(list(container)))

    yield

    # ---- Shutdown ----
    if Capability.DATABASE in container:
        database = container.resolve(Capability.DATABASE)
        await database.dispose()
        logger.info("Database pool closed")

"""FastAPI application entry point.

Wiring only: logging, dependency registry, exception handlers, middleware,
routers. No business logic here. See app.core.container, app.core.lifespan
and app.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before calling it, or pass a prebuilt container.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import api_router
from app.core.config import get_settings
from app.core.container import Container, build_container
from app.core.exception_handlers import register_exception_handlers
from app.core.lifespan import create_lifespan
from app.middleware import RequestIDMiddleware, UnhandledErrorMiddleware
from app.shared.logging import setup_logging


def create_app(container: Container | None = None) -> FastAPI:
    """Build and return the FastAPI application.

    Args:
        container: Prebuilt registry (tests); by default build_container(settings).
    """
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    app.state.container = container if container is not None else build_container(settings)

    register_exception_handlers(app)

    # Last added runs outermost: request id, then CORS, then unhandled errors.
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router)

    return app


app = create_app()

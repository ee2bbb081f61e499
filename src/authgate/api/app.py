"""FastAPI application setup."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from authgate import __version__
from authgate.api.dependencies import (
    close_config,
    close_session_store,
    init_config,
    init_session_store,
)
from authgate.api.middleware import RequestLoggingMiddleware
from authgate.api.models import APIResponse
from authgate.api.routes import auth, health
from authgate.config import GatewayConfig
from authgate.session_store import SessionStoreError, SessionSweeper

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    config: GatewayConfig = app.state.config

    # Startup
    init_config(config)
    store = init_session_store(config.session.ttl_seconds)

    sweeper: SessionSweeper | None = None
    if config.session.sweep_interval_seconds > 0:
        sweeper = SessionSweeper(store, interval_seconds=config.session.sweep_interval_seconds)
        sweeper.start()

    logger.info(
        "authgate %s ready (ttl=%ss, cookie=%s)",
        __version__,
        config.session.ttl_seconds,
        config.session.cookie_name,
    )

    yield
    # Shutdown
    if sweeper is not None:
        sweeper.stop()
    close_session_store()
    close_config()


def create_app(config: GatewayConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="authgate",
        description="Session authentication gateway",
        version=__version__,
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.config = config if config is not None else GatewayConfig()

    app.add_middleware(RequestLoggingMiddleware)

    # Exception handlers
    @app.exception_handler(SessionStoreError)
    async def session_store_error_handler(
        _request: Request, exc: SessionStoreError
    ) -> JSONResponse:
        logger.error("Session store failure: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=APIResponse[None](data=None, error="Internal server error").model_dump(),
        )

    # Include routers
    app.include_router(auth.router)
    app.include_router(health.router)

    return app


# Default app instance
app = create_app()

"""FastAPI application factory for dockercheck."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from dockercheck import __version__
from dockercheck.api.middleware import RequestBodyLimitMiddleware, RequestTimingMiddleware
from dockercheck.api.routers import keywords, validate
from dockercheck.api.schemas import HealthResponse
from dockercheck.settings import Settings


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="dockercheck",
        description="Positioned syntax and structure diagnostics for Dockerfiles.",
        version=__version__,
    )
    app.state.settings = settings

    # Middleware
    app.add_middleware(RequestBodyLimitMiddleware)
    app.add_middleware(RequestTimingMiddleware)

    app.include_router(validate.router, prefix="/validate", tags=["validate"])
    app.include_router(keywords.router, prefix="/keywords", tags=["keywords"])

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    return app


def main() -> None:
    """Run the REST API server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger = logging.getLogger("dockercheck.api")
    logger.info(
        "dockercheck API Server v%s starting (host=%s, port=%d)",
        __version__, settings.api_server_host, settings.effective_port,
    )

    uvicorn.run(
        "dockercheck.api.app:create_app",
        factory=True,
        host=settings.api_server_host,
        port=settings.effective_port,
        log_level=settings.log_level.lower(),
    )

"""
music_catalog.api.app

FastAPI app factory for the music catalog service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Create the process-wide music service and stash it on app.state.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from music_catalog import __version__
from music_catalog.api.routers.auth import router as auth_router
from music_catalog.api.routers.dev import router as dev_router
from music_catalog.api.routers.health import router as health_router
from music_catalog.api.routers.library import router as library_router
from music_catalog.observability.logging import configure_logging, get_logger
from music_catalog.observability.middleware import RequestContextMiddleware
from music_catalog.services.music_service import InMemoryMusicService
from music_catalog.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.log_json,
    )

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, token_scheme=settings.token_scheme)
        yield
        log.info("shutdown")

    app = FastAPI(
        title="Music Catalog",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Built eagerly so in-process clients work without running the lifespan.
    app.state.settings = settings
    app.state.music_service = InMemoryMusicService.from_settings(settings)

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(auth_router)
    app.include_router(library_router)
    app.include_router(dev_router)

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; catalog and session logic stay in the service layer.

"""
app.py - FastAPI application factory and startup lifecycle.

This is the ASGI application object imported by uvicorn.
It wires the repository and services, registers routers, and prepares the
venue catalog on startup.

Usage (via launcher):
    python main.py

Usage (direct uvicorn):
    uvicorn app:app --reload
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from venue_engine.controllers.matching_controller import router as matching_router
from venue_engine.repository.data_repository import DataRepository
from venue_engine.services.event_service import EventService
from venue_engine.services.matching_service import VenueMatchingService
from venue_engine.utils.config import Settings, get_settings
from venue_engine.utils.logger import get_logger


logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build and wire the FastAPI application.

    Services are attached to app.state so controllers resolve them through
    dependency providers rather than module globals.
    """
    settings = settings or get_settings()

    repository = DataRepository(settings)
    matching_service = VenueMatchingService(repository=repository, settings=settings)
    event_service = EventService(repository=repository, settings=settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Run startup initialization before accepting requests."""
        _startup(app)
        yield

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.include_router(matching_router)

    app.state.repository = repository
    app.state.matching_service = matching_service
    app.state.event_service = event_service

    return app


def _startup(app: FastAPI) -> None:
    """Idempotent startup sequence: schema first, then the demo catalog."""
    repository: DataRepository = app.state.repository

    logger.info("Startup: initializing database schema")
    repository.initialize_database()

    logger.info("Startup: seeding venue catalog (skipped if Venues table not empty)")
    repository.seed_venues_if_empty()

    logger.info("Startup complete - system ready")


# Module-level app object for uvicorn
app = create_app()

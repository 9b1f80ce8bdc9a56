"""Shared FastAPI dependency providers for controller layer."""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from venue_engine.services.event_service import EventService
from venue_engine.services.matching_service import VenueMatchingService


def get_matching_service(request: Request) -> VenueMatchingService:
    service = getattr(request.app.state, "matching_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Matching service is not initialized",
        )
    return service


def get_event_service(request: Request) -> EventService:
    service = getattr(request.app.state, "event_service", None)
    if service is None:
        repository = getattr(request.app.state, "repository", None)
        if repository is not None:
            service = EventService(repository=repository)
            request.app.state.event_service = service
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Event service is not initialized",
        )
    return service

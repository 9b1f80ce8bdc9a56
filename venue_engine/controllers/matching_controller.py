"""HTTP controller layer for venue matching, slot suggestion and event capture."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field, field_validator

from venue_engine.controllers.dependencies import get_event_service, get_matching_service
from venue_engine.domain.models import (
    EventCategory,
    EventRequirements,
    Priority,
    Venue,
    VenueMatch,
)
from venue_engine.services.event_service import EventService
from venue_engine.services.matching_service import (
    MatchingValidationError,
    VenueMatchingService,
    VenueNotFoundError,
)
from venue_engine.utils.config import get_settings
from venue_engine.utils.logger import get_logger


logger = get_logger(__name__)
settings = get_settings()

router = APIRouter(tags=["matching"])


class VenueResponse(BaseModel):
    venue_id: int
    name: str
    venue_type: str
    capacity: int = Field(ge=0)
    area_sqft: int = Field(ge=0)
    facilities: list[str]
    booked_slots: list[str]

    @classmethod
    def from_venue(cls, venue: Venue) -> "VenueResponse":
        return cls(
            venue_id=venue.venue_id,
            name=venue.name,
            venue_type=venue.venue_type,
            capacity=venue.capacity,
            area_sqft=venue.area_sqft,
            facilities=list(venue.facilities),
            booked_slots=list(venue.booked_slots),
        )


class VenueMatchResponse(BaseModel):
    venue: VenueResponse
    score: int = Field(ge=0)
    reason: str
    alternative: bool

    @classmethod
    def from_match(cls, match: VenueMatch) -> "VenueMatchResponse":
        return cls(
            venue=VenueResponse.from_venue(match.venue),
            score=match.score,
            reason=match.reason,
            alternative=match.alternative,
        )


class MatchVenuesRequest(BaseModel):
    """Input DTO validated before entering service layer."""

    participants: int = Field(gt=0)
    facilities_required: list[str] = Field(default_factory=list)
    preferred_datetime: datetime
    priority: Priority = Priority.MEDIUM
    event_type: EventCategory = EventCategory.TECHNICAL
    space_type: Optional[str] = None

    @field_validator("facilities_required")
    @classmethod
    def validate_facility_labels(cls, value: list[str]) -> list[str]:
        cleaned = [label.strip() for label in value]
        if any(not label for label in cleaned):
            raise ValueError("facility labels must be non-empty")
        return cleaned

    def to_requirements(self) -> EventRequirements:
        return EventRequirements(
            participants=self.participants,
            preferred_datetime=self.preferred_datetime,
            facilities_required=tuple(self.facilities_required),
            priority=self.priority,
            event_type=self.event_type,
            space_type=self.space_type,
        )


class MatchVenuesResponse(BaseModel):
    exact_matches: list[VenueMatchResponse]
    alternatives: list[VenueMatchResponse]
    no_match: bool


class SuggestSlotsRequest(BaseModel):
    venue_id: int = Field(gt=0)
    date: date


class SuggestSlotsResponse(BaseModel):
    venue_id: int
    date: date
    slots: list[str]


class CreateEventRequest(BaseModel):
    title: str = Field(min_length=1)
    event_type: EventCategory
    venue_id: int = Field(gt=0)
    participants: int = Field(gt=0)
    event_date: date
    time_slot: str = Field(pattern=settings.booking_time_regex)
    duration_hours: int = Field(default=2, gt=0)
    facilities_required: list[str] = Field(default_factory=list)
    priority: Priority = Priority.MEDIUM
    space_type: Optional[str] = None


class CreateEventResponse(BaseModel):
    event_id: int
    venue_id: int
    status: str


@router.get(
    "/venues",
    response_model=list[VenueResponse],
    status_code=status.HTTP_200_OK,
)
async def list_venues(
    service: VenueMatchingService = Depends(get_matching_service),
) -> list[VenueResponse]:
    return [VenueResponse.from_venue(venue) for venue in service.list_venues()]


@router.post(
    "/match_venues",
    response_model=MatchVenuesResponse,
    status_code=status.HTTP_200_OK,
)
async def match_venues(
    payload: MatchVenuesRequest,
    service: VenueMatchingService = Depends(get_matching_service),
) -> MatchVenuesResponse:
    """Rank the stored catalog against the submitted event requirements."""
    try:
        result = service.match_catalog(payload.to_requirements())
        return MatchVenuesResponse(
            exact_matches=[VenueMatchResponse.from_match(item) for item in result.exact_matches],
            alternatives=[VenueMatchResponse.from_match(item) for item in result.alternatives],
            no_match=result.no_match,
        )
    except MatchingValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    except Exception as exc:  # pragma: no cover - defensive fallback
        logger.exception("Unexpected venue matching failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to match venues",
        ) from exc


@router.post(
    "/suggest_slots",
    response_model=SuggestSlotsResponse,
    status_code=status.HTTP_200_OK,
)
async def suggest_slots(
    payload: SuggestSlotsRequest,
    service: VenueMatchingService = Depends(get_matching_service),
) -> SuggestSlotsResponse:
    try:
        slots = service.suggest_slots(payload.venue_id, payload.date.isoformat())
        return SuggestSlotsResponse(venue_id=payload.venue_id, date=payload.date, slots=slots)
    except MatchingValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    except VenueNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    except Exception as exc:  # pragma: no cover - defensive fallback
        logger.exception("Unexpected slot suggestion failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to suggest slots",
        ) from exc


@router.post(
    "/events",
    response_model=CreateEventResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_event(
    payload: CreateEventRequest,
    service: EventService = Depends(get_event_service),
) -> CreateEventResponse:
    """Persist the venue chosen from a match list with the event's fields."""
    try:
        record = service.create_event(
            title=payload.title,
            event_type=payload.event_type,
            venue_id=payload.venue_id,
            participants=payload.participants,
            event_date=payload.event_date.isoformat(),
            time_slot=payload.time_slot,
            duration_hours=payload.duration_hours,
            facilities_required=payload.facilities_required,
            priority=payload.priority,
            space_type=payload.space_type,
        )
        return CreateEventResponse(
            event_id=record.event_id,
            venue_id=record.venue_id,
            status=record.status,
        )
    except MatchingValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    except VenueNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    except Exception as exc:  # pragma: no cover - defensive fallback
        logger.exception("Unexpected event persistence failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to record event",
        ) from exc

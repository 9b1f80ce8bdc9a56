"""Persists an event against the venue picked from a match list."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Optional, Sequence

from venue_engine.domain.models import EventCategory, Priority
from venue_engine.repository.data_repository import DataRepository, EventRecord
from venue_engine.services.matching_service import MatchingValidationError, VenueNotFoundError
from venue_engine.utils.config import Settings, get_settings
from venue_engine.utils.logger import get_logger


logger = get_logger(__name__)


class EventService:
    """Stores chosen venues; booking exclusivity is left to the caller."""

    def __init__(
        self,
        repository: Optional[DataRepository] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._repository = repository or DataRepository(self._settings)

    def create_event(
        self,
        *,
        title: str,
        event_type: EventCategory,
        venue_id: int,
        participants: int,
        event_date: str,
        time_slot: str,
        duration_hours: int = 2,
        facilities_required: Sequence[str] = (),
        priority: Priority = Priority.MEDIUM,
        space_type: Optional[str] = None,
    ) -> EventRecord:
        if not title.strip():
            raise MatchingValidationError("title must be non-empty")
        if participants <= 0:
            raise MatchingValidationError("participants must be a positive integer")
        if duration_hours <= 0:
            raise MatchingValidationError("duration_hours must be > 0")
        try:
            datetime.strptime(event_date, "%Y-%m-%d")
        except ValueError as exc:
            raise MatchingValidationError("event_date must follow YYYY-MM-DD format") from exc
        if re.fullmatch(self._settings.booking_time_regex, time_slot) is None:
            raise MatchingValidationError("time_slot must follow HH:MM format")
        if self._repository.get_venue(venue_id) is None:
            raise VenueNotFoundError(f"Venue {venue_id} not found")

        event_id = self._repository.create_event(
            title=title.strip(),
            event_type=event_type.value,
            venue_id=venue_id,
            participants=participants,
            event_date=event_date,
            time_slot=time_slot,
            duration_hours=duration_hours,
            facilities_required=facilities_required,
            priority=priority.value,
            space_type=space_type,
        )
        logger.info(
            "Event recorded | event_id=%s | venue_id=%s | date=%s | time_slot=%s",
            event_id,
            venue_id,
            event_date,
            time_slot,
        )
        record = self._repository.get_event(event_id)
        if record is None:  # pragma: no cover - row was just inserted
            raise RuntimeError(f"Event {event_id} missing after insert")
        return record

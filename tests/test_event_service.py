from __future__ import annotations

from dataclasses import replace

import pytest

from venue_engine.domain.models import EventCategory, Priority
from venue_engine.repository.data_repository import DataRepository
from venue_engine.services.event_service import EventService
from venue_engine.services.matching_service import MatchingValidationError, VenueNotFoundError
from venue_engine.utils.config import get_settings


def _build_service(tmp_path, filename: str) -> tuple[EventService, int]:
    settings = replace(get_settings(), database_path=tmp_path / filename)
    repository = DataRepository(settings)
    repository.initialize_database()
    venue_id = repository.add_venue("Seminar Hall A", "seminar_hall", 200, 2000, ["Projector"])
    return EventService(repository=repository, settings=settings), venue_id


def _event_fields(venue_id: int, **overrides) -> dict:
    fields = {
        "title": "Guest Lecture",
        "event_type": EventCategory.NON_TECHNICAL,
        "venue_id": venue_id,
        "participants": 120,
        "event_date": "2025-09-26",
        "time_slot": "10:00",
        "priority": Priority.LOW,
    }
    fields.update(overrides)
    return fields


def test_create_event_returns_stored_record(tmp_path) -> None:
    service, venue_id = _build_service(tmp_path, "event_ok.db")

    record = service.create_event(**_event_fields(venue_id, space_type="seminar_hall"))

    assert record.title == "Guest Lecture"
    assert record.event_type == "non-technical"
    assert record.priority == "low"
    assert record.duration_hours == 2
    assert record.space_type == "seminar_hall"


@pytest.mark.parametrize(
    "overrides",
    [
        {"title": "   "},
        {"participants": 0},
        {"duration_hours": 0},
        {"event_date": "2025/09/26"},
        {"time_slot": "9am"},
    ],
)
def test_create_event_validation(tmp_path, overrides) -> None:
    service, venue_id = _build_service(tmp_path, "event_invalid.db")
    with pytest.raises(MatchingValidationError):
        service.create_event(**_event_fields(venue_id, **overrides))


def test_create_event_unknown_venue(tmp_path) -> None:
    service, venue_id = _build_service(tmp_path, "event_missing_venue.db")
    with pytest.raises(VenueNotFoundError):
        service.create_event(**_event_fields(venue_id + 100))

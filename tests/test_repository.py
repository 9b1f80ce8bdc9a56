from __future__ import annotations

from dataclasses import replace

from venue_engine.repository.data_repository import DEMO_VENUES, DataRepository
from venue_engine.utils.config import get_settings


def _build_repository(tmp_path, filename: str) -> DataRepository:
    settings = replace(get_settings(), database_path=tmp_path / filename)
    repository = DataRepository(settings)
    repository.initialize_database()
    return repository


def test_seed_is_idempotent(tmp_path) -> None:
    repository = _build_repository(tmp_path, "seed.db")

    assert repository.seed_venues_if_empty() == len(DEMO_VENUES)
    assert repository.seed_venues_if_empty() == 0
    assert len(repository.list_venues()) == len(DEMO_VENUES)


def test_list_venues_restores_facilities_and_bookings(tmp_path) -> None:
    repository = _build_repository(tmp_path, "list.db")
    repository.seed_venues_if_empty()

    venues = repository.list_venues()
    names = [venue.name for venue in venues]
    assert names == sorted(names)

    auditorium = next(venue for venue in venues if venue.name == "Main Auditorium")
    assert auditorium.capacity == 800
    assert auditorium.area_sqft == 5000
    assert "Projector" in auditorium.facilities
    assert auditorium.booked_slots == ("2025-09-26 10:00-12:00",)


def test_get_venue_unknown_returns_none(tmp_path) -> None:
    repository = _build_repository(tmp_path, "missing.db")
    assert repository.get_venue(42) is None


def test_add_venue_and_booked_slot(tmp_path) -> None:
    repository = _build_repository(tmp_path, "add.db")
    venue_id = repository.add_venue("Studio", "studio", 30, 400, facilities=["Mirror"])

    assert repository.add_booked_slot(venue_id, "2025-10-01 09:00-10:00") is True
    assert repository.add_booked_slot(venue_id + 1, "2025-10-01 09:00-10:00") is False

    venue = repository.get_venue(venue_id)
    assert venue is not None
    assert venue.facilities == ("Mirror",)
    assert venue.booked_slots == ("2025-10-01 09:00-10:00",)


def test_create_event_persists_pending_record(tmp_path) -> None:
    repository = _build_repository(tmp_path, "events.db")
    venue_id = repository.add_venue("Lab", "computer_lab", 60, 1200)

    event_id = repository.create_event(
        title="Hackathon",
        event_type="technical",
        venue_id=venue_id,
        participants=50,
        event_date="2025-09-26",
        time_slot="14:00",
        duration_hours=3,
        facilities_required=["Computers", "WiFi"],
        priority="high",
        space_type="computer_lab",
    )

    record = repository.get_event(event_id)
    assert record is not None
    assert record.venue_id == venue_id
    assert record.facilities_required == ("Computers", "WiFi")
    assert record.status == "pending"
    assert repository.count_events() == 1

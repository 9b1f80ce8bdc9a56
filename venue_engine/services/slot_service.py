"""Candidate start-time suggestions that keep clear of booked boundaries."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from venue_engine.domain.booking import booked_times_on
from venue_engine.domain.constraints import MatchingConfig
from venue_engine.domain.models import Venue


REFERENCE_DAY = "2000-01-01"


def _on_reference_day(time_text: str) -> Optional[datetime]:
    try:
        return datetime.strptime(f"{REFERENCE_DAY} {time_text.strip()}", "%Y-%m-%d %H:%M")
    except ValueError:
        return None


def _too_close(candidate: datetime, booked: list[datetime], buffer: timedelta) -> bool:
    return any(abs(candidate - booked_time) < buffer for booked_time in booked)


def suggest_slots(venue: Venue, date_text: str, config: MatchingConfig | None = None) -> list[str]:
    """Return the fixed candidates that sit at least the buffer away from bookings.

    Unparseable booked times never exclude a candidate.
    """
    config = config or MatchingConfig()
    candidates = list(config.slot_candidate_times)
    if not venue.booked_slots:
        return candidates

    booked = [
        parsed
        for parsed in (_on_reference_day(value) for value in booked_times_on(venue.booked_slots, date_text))
        if parsed is not None
    ]
    buffer = timedelta(minutes=config.slot_buffer_minutes)
    return [
        candidate
        for candidate in candidates
        if not _too_close(_on_reference_day(candidate), booked, buffer)
    ]

"""Point-in-time availability check against a venue's booked slots."""

from __future__ import annotations

from datetime import datetime

from venue_engine.domain.booking import iter_booking_intervals
from venue_engine.domain.models import Venue


def requested_date_and_time(requested_datetime: datetime) -> tuple[str, str]:
    """Split an instant into ``YYYY-MM-DD`` and zero-padded 24h ``HH:MM``."""
    return (
        requested_datetime.date().isoformat(),
        requested_datetime.strftime("%H:%M"),
    )


def is_available(venue: Venue, requested_datetime: datetime) -> bool:
    """Return False when any booking on the requested day covers the instant.

    Only the start instant is checked; the event's duration is not compared
    against booked ranges.
    """
    if not venue.booked_slots:
        return True

    requested_date, requested_time = requested_date_and_time(requested_datetime)
    return not any(
        interval.mentions(requested_date) and interval.covers(requested_time)
        for interval in iter_booking_intervals(venue.booked_slots)
    )

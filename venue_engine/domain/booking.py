"""Adapter for the storage layer's booking-interval strings.

Bookings travel as ``"YYYY-MM-DD HH:MM-HH:MM"``. Anything that does not carry
a ``start-end`` token after the first space is not a restriction, so parsing
never raises; it returns ``None`` instead.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from venue_engine.domain.models import BookingInterval


def parse_booking_interval(raw: str) -> Optional[BookingInterval]:
    parts = raw.split(" ")
    if len(parts) < 2:
        return None
    time_range = parts[1]
    if not time_range or "-" not in time_range:
        return None
    bounds = time_range.split("-")
    return BookingInterval(day=parts[0], start=bounds[0], end=bounds[1], raw=raw)


def format_booking_interval(day: str, start: str, end: str) -> str:
    return f"{day} {start}-{end}"


def iter_booking_intervals(raw_slots: Iterable[str]) -> Iterator[BookingInterval]:
    """Yield parsed bookings, skipping entries that carry no time range."""
    for raw in raw_slots:
        interval = parse_booking_interval(raw)
        if interval is not None:
            yield interval


def booked_times_on(raw_slots: Iterable[str], date_text: str) -> list[str]:
    """Flatten every boundary time of bookings mentioning ``date_text``."""
    times: list[str] = []
    for raw in raw_slots:
        if date_text not in raw:
            continue
        parts = raw.split(" ")
        if len(parts) < 2 or not parts[1]:
            continue
        times.extend(parts[1].split("-"))
    return times

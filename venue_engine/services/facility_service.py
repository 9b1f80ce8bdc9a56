"""Facility requirement checks using loose case-insensitive substring matching."""

from __future__ import annotations

from typing import Sequence

from venue_engine.domain.models import Venue


def _labels_overlap(required: str, available: str) -> bool:
    required_lower = required.lower()
    available_lower = available.lower()
    return required_lower in available_lower or available_lower in required_lower


def has_facilities(venue: Venue, required: Sequence[str]) -> bool:
    if not required:
        return True
    if not venue.facilities:
        return False
    return all(
        any(_labels_overlap(label, available) for available in venue.facilities)
        for label in required
    )


def missing_facilities(venue: Venue, required: Sequence[str]) -> list[str]:
    """Required labels not contained in any venue facility label."""
    return [
        label
        for label in required
        if not any(label.lower() in available.lower() for available in venue.facilities)
    ]

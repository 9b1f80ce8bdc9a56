"""Domain models for venue matching and slot suggestion."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class EventCategory(str, Enum):
    TECHNICAL = "technical"
    NON_TECHNICAL = "non-technical"


@dataclass(frozen=True)
class Venue:
    venue_id: int
    name: str
    venue_type: str
    capacity: int
    area_sqft: int
    facilities: tuple[str, ...] = field(default_factory=tuple)
    booked_slots: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class BookingInterval:
    """One parsed ``"YYYY-MM-DD HH:MM-HH:MM"`` booking."""

    day: str
    start: str
    end: str
    raw: str

    def mentions(self, date_text: str) -> bool:
        return date_text in self.raw

    def covers(self, time_text: str) -> bool:
        return self.start <= time_text <= self.end


@dataclass(frozen=True)
class EventRequirements:
    participants: int
    preferred_datetime: datetime
    facilities_required: tuple[str, ...] = field(default_factory=tuple)
    priority: Priority = Priority.MEDIUM
    event_type: EventCategory = EventCategory.TECHNICAL
    space_type: Optional[str] = None


@dataclass(frozen=True)
class ScoreBreakdown:
    score: int
    reason: str
    area_match: bool
    is_available: bool
    has_facilities: bool

    @property
    def alternative(self) -> bool:
        return not (self.area_match and self.is_available and self.has_facilities)


@dataclass(frozen=True)
class VenueMatch:
    venue: Venue
    score: int
    reason: str
    alternative: bool


@dataclass(frozen=True)
class MatchResult:
    exact_matches: list[VenueMatch]
    alternatives: list[VenueMatch]
    no_match: bool

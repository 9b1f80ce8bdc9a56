"""Venue scoring and ranking rationale."""

from __future__ import annotations

import math

from venue_engine.domain.constraints import MatchingConfig
from venue_engine.domain.models import EventRequirements, Priority, ScoreBreakdown, Venue
from venue_engine.services.facility_service import missing_facilities


AREA_FIT_MAX_POINTS = 100.0
OVERSIZE_PENALTY_PER_RATIO = 20.0
AVAILABILITY_POINTS = 50
FACILITY_POINTS = 30
CAPACITY_POINTS = 20
HIGH_PRIORITY_POINTS = 10

PERFECT_MATCH_REASON = "Perfect match: Adequate space, available, and has required facilities"
BOOKED_REASON = "Venue is booked at requested time"


def required_area(participants: int, config: MatchingConfig | None = None) -> int:
    area_per_participant = (config or MatchingConfig()).area_per_participant
    return participants * area_per_participant


def area_fit_points(area_sqft: int, needed_area: int) -> float:
    """Full points at an exact fit, shrinking as the venue gets oversized."""
    if needed_area <= 0:
        return 0.0
    efficiency = area_sqft / needed_area
    return max(0.0, AREA_FIT_MAX_POINTS - (efficiency - 1) * OVERSIZE_PENALTY_PER_RATIO)


def _reason(
    venue: Venue,
    requirements: EventRequirements,
    needed_area: int,
    *,
    is_available: bool,
    has_facilities: bool,
    area_match: bool,
) -> str:
    if area_match and is_available and has_facilities:
        return PERFECT_MATCH_REASON
    if not area_match:
        return f"Too small: Needs {needed_area} sq ft, has {venue.area_sqft} sq ft"
    if not is_available:
        return BOOKED_REASON
    missing = missing_facilities(venue, requirements.facilities_required)
    return f"Missing facilities: {', '.join(missing)}"


def score_venue(
    venue: Venue,
    requirements: EventRequirements,
    *,
    is_available: bool,
    has_facilities: bool,
    area_match: bool,
    config: MatchingConfig | None = None,
) -> ScoreBreakdown:
    needed_area = required_area(requirements.participants, config)

    score = 0.0
    if area_match:
        score += area_fit_points(venue.area_sqft, needed_area)
    if is_available:
        score += AVAILABILITY_POINTS
    if has_facilities:
        score += FACILITY_POINTS
    if venue.capacity >= requirements.participants:
        score += CAPACITY_POINTS
    if requirements.priority == Priority.HIGH:
        score += HIGH_PRIORITY_POINTS

    return ScoreBreakdown(
        # Halves round up, never to even.
        score=math.floor(score + 0.5),
        reason=_reason(
            venue,
            requirements,
            needed_area,
            is_available=is_available,
            has_facilities=has_facilities,
            area_match=area_match,
        ),
        area_match=area_match,
        is_available=is_available,
        has_facilities=has_facilities,
    )

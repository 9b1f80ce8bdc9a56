from __future__ import annotations

from datetime import datetime
from itertools import product

import pytest

from venue_engine.domain.constraints import MatchingConfig
from venue_engine.domain.models import EventRequirements, Priority, Venue
from venue_engine.services.scoring_service import (
    BOOKED_REASON,
    PERFECT_MATCH_REASON,
    area_fit_points,
    required_area,
    score_venue,
)


def _venue(area_sqft: int = 1000, capacity: int = 100, facilities: tuple[str, ...] = ()) -> Venue:
    return Venue(
        venue_id=1,
        name="Seminar Hall A",
        venue_type="seminar_hall",
        capacity=capacity,
        area_sqft=area_sqft,
        facilities=facilities,
    )


def _requirements(
    participants: int = 100,
    priority: Priority = Priority.MEDIUM,
    facilities: tuple[str, ...] = (),
) -> EventRequirements:
    return EventRequirements(
        participants=participants,
        preferred_datetime=datetime(2025, 9, 26, 11, 0),
        facilities_required=facilities,
        priority=priority,
    )


def test_required_area_is_six_per_participant() -> None:
    assert required_area(100) == 600
    assert required_area(500) == 3000
    assert required_area(10, MatchingConfig(area_per_participant=10)) == 100


def test_exact_fit_earns_full_area_points() -> None:
    assert area_fit_points(600, 600) == 100.0


def test_oversized_venue_area_points_floor_at_zero() -> None:
    assert area_fit_points(6000, 600) == 0.0


def test_perfect_match_scenario() -> None:
    breakdown = score_venue(
        _venue(),
        _requirements(),
        is_available=True,
        has_facilities=True,
        area_match=True,
    )

    # 100 - (1000/600 - 1) * 20 = 86.67, plus 50 + 30 + 20
    assert breakdown.score == 187
    assert breakdown.reason == PERFECT_MATCH_REASON
    assert not breakdown.alternative


def test_maximum_score_is_210() -> None:
    breakdown = score_venue(
        _venue(area_sqft=600),
        _requirements(priority=Priority.HIGH),
        is_available=True,
        has_facilities=True,
        area_match=True,
    )
    assert breakdown.score == 210


def test_too_small_scenario() -> None:
    breakdown = score_venue(
        _venue(),
        _requirements(participants=500),
        is_available=True,
        has_facilities=True,
        area_match=False,
    )

    assert breakdown.reason == "Too small: Needs 3000 sq ft, has 1000 sq ft"
    assert breakdown.score == 80
    assert breakdown.alternative


def test_too_small_takes_precedence_over_booked() -> None:
    breakdown = score_venue(
        _venue(),
        _requirements(participants=500),
        is_available=False,
        has_facilities=False,
        area_match=False,
    )
    assert breakdown.reason.startswith("Too small:")


def test_booked_reason() -> None:
    breakdown = score_venue(
        _venue(),
        _requirements(),
        is_available=False,
        has_facilities=False,
        area_match=True,
    )
    assert breakdown.reason == BOOKED_REASON
    assert breakdown.alternative


def test_missing_facilities_reason_lists_unmatched_labels() -> None:
    breakdown = score_venue(
        _venue(facilities=("Projector",)),
        _requirements(facilities=("Projector", "Stage", "Lighting")),
        is_available=True,
        has_facilities=False,
        area_match=True,
    )
    assert breakdown.reason == "Missing facilities: Stage, Lighting"


def test_high_priority_bonus_applies_unconditionally() -> None:
    breakdown = score_venue(
        _venue(area_sqft=100, capacity=1),
        _requirements(priority=Priority.HIGH),
        is_available=False,
        has_facilities=False,
        area_match=False,
    )
    assert breakdown.score == 10


@pytest.mark.parametrize("flag", ["is_available", "has_facilities", "area_match"])
def test_enabling_a_condition_never_lowers_score(flag: str) -> None:
    venue = _venue(area_sqft=5000)
    requirements = _requirements()
    for available, facilities, area in product([True, False], repeat=3):
        flags = {"is_available": available, "has_facilities": facilities, "area_match": area}
        disabled = score_venue(venue, requirements, **{**flags, flag: False}).score
        enabled = score_venue(venue, requirements, **{**flags, flag: True}).score
        assert enabled >= disabled


def test_half_point_scores_round_up() -> None:
    # 825 / 600 = 1.375 -> 92.5 area points, 192.5 in total.
    breakdown = score_venue(
        _venue(area_sqft=825),
        _requirements(),
        is_available=True,
        has_facilities=True,
        area_match=True,
    )
    assert breakdown.score == 193


def test_zero_required_area_earns_no_area_points() -> None:
    assert area_fit_points(1000, 0) == 0.0

    breakdown = score_venue(
        _venue(),
        _requirements(participants=0),
        is_available=True,
        has_facilities=True,
        area_match=True,
    )
    assert breakdown.score == 100

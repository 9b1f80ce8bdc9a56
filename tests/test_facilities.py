from __future__ import annotations

from venue_engine.domain.models import Venue
from venue_engine.services.facility_service import has_facilities, missing_facilities


def _venue(*facilities: str) -> Venue:
    return Venue(
        venue_id=4,
        name="Computer Lab 1",
        venue_type="computer_lab",
        capacity=60,
        area_sqft=1200,
        facilities=tuple(facilities),
    )


def test_empty_requirements_always_satisfied() -> None:
    assert has_facilities(_venue(), [])
    assert has_facilities(_venue("Projector"), [])


def test_venue_without_facilities_fails_any_requirement() -> None:
    assert not has_facilities(_venue(), ["Projector"])


def test_matching_is_case_insensitive_substring() -> None:
    venue = _venue("Computers", "High-Speed WiFi", "AC", "Projector")
    assert has_facilities(venue, ["wifi", "projector"])


def test_matching_is_bidirectional() -> None:
    venue = _venue("Sound System")
    assert has_facilities(venue, ["Sound System Pro"])


def test_every_required_label_must_match() -> None:
    venue = _venue("Projector", "AC")
    assert not has_facilities(venue, ["Projector", "Stage"])


def test_no_semantic_synonyms() -> None:
    assert not has_facilities(_venue("Air Conditioning"), ["AC"])


def test_missing_facilities_lists_unmatched_labels_in_order() -> None:
    venue = _venue("Projector", "AC")
    assert missing_facilities(venue, ["Stage", "projector", "Lighting"]) == ["Stage", "Lighting"]


def test_missing_facilities_without_venue_facilities() -> None:
    assert missing_facilities(_venue(), ["WiFi", "AC"]) == ["WiFi", "AC"]

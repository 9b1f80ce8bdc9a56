"""Venue ranking into exact matches and capped alternatives."""

from __future__ import annotations

from datetime import datetime
from functools import cmp_to_key
from typing import Optional, Sequence

from venue_engine.domain.constraints import MatchingConfig, validate_matching_config
from venue_engine.domain.models import (
    EventCategory,
    EventRequirements,
    MatchResult,
    Priority,
    Venue,
    VenueMatch,
)
from venue_engine.repository.data_repository import DataRepository
from venue_engine.services.availability_service import is_available
from venue_engine.services.facility_service import has_facilities
from venue_engine.services.scoring_service import required_area, score_venue
from venue_engine.services.slot_service import suggest_slots
from venue_engine.utils.config import Settings, get_settings
from venue_engine.utils.logger import get_logger


logger = get_logger(__name__)


class MatchingError(Exception):
    """Base exception for venue matching failures."""


class MatchingValidationError(MatchingError):
    """Raised when event requirements are invalid."""


class VenueNotFoundError(MatchingError):
    """Raised when a venue id does not exist in the catalog."""


def _validate_date(date_value: str) -> None:
    try:
        datetime.strptime(date_value, "%Y-%m-%d")
    except ValueError as exc:
        raise MatchingValidationError("date must follow YYYY-MM-DD format") from exc


def validate_requirements(requirements: EventRequirements) -> None:
    if requirements.participants <= 0:
        raise MatchingValidationError("participants must be a positive integer")
    if not isinstance(requirements.priority, Priority):
        raise MatchingValidationError("priority must be one of high, medium, low")
    if not isinstance(requirements.event_type, EventCategory):
        raise MatchingValidationError("event_type must be technical or non-technical")
    if any(not label.strip() for label in requirements.facilities_required):
        raise MatchingValidationError("facility labels must be non-empty")


def evaluate_venue(
    venue: Venue,
    requirements: EventRequirements,
    config: MatchingConfig,
) -> VenueMatch:
    breakdown = score_venue(
        venue,
        requirements,
        is_available=is_available(venue, requirements.preferred_datetime),
        has_facilities=has_facilities(venue, requirements.facilities_required),
        area_match=venue.area_sqft >= required_area(requirements.participants, config),
        config=config,
    )
    return VenueMatch(
        venue=venue,
        score=breakdown.score,
        reason=breakdown.reason,
        alternative=breakdown.alternative,
    )


def _prefer_tighter_fit(tie_window: int):
    def compare(left: VenueMatch, right: VenueMatch) -> int:
        if abs(left.score - right.score) < tie_window:
            return left.venue.area_sqft - right.venue.area_sqft
        return right.score - left.score

    return compare


def rank_venues(
    venues: Sequence[Venue],
    requirements: EventRequirements,
    config: MatchingConfig | None = None,
) -> MatchResult:
    """Score every venue and split them into exact matches and alternatives.

    Sorting is stable, so equal scores keep catalog order. High-priority
    requests reorder near-equal exact matches toward the smallest venue.
    """
    config = config or MatchingConfig()
    exact_matches: list[VenueMatch] = []
    alternatives: list[VenueMatch] = []
    for venue in venues:
        match = evaluate_venue(venue, requirements, config)
        if match.alternative:
            alternatives.append(match)
        else:
            exact_matches.append(match)

    exact_matches.sort(key=lambda item: item.score, reverse=True)
    alternatives.sort(key=lambda item: item.score, reverse=True)

    if requirements.priority == Priority.HIGH and exact_matches:
        exact_matches.sort(key=cmp_to_key(_prefer_tighter_fit(config.priority_tie_window)))

    return MatchResult(
        exact_matches=exact_matches,
        alternatives=alternatives[: config.max_alternatives],
        no_match=not exact_matches and not alternatives,
    )


class VenueMatchingService:
    """Runs the matching engine against the stored venue catalog."""

    def __init__(
        self,
        repository: Optional[DataRepository] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._repository = repository or DataRepository(self._settings)
        self._config = MatchingConfig.from_settings(self._settings)
        validate_matching_config(self._config)

    @property
    def config(self) -> MatchingConfig:
        return self._config

    def list_venues(self) -> list[Venue]:
        return self._repository.list_venues()

    def rank(self, venues: Sequence[Venue], requirements: EventRequirements) -> MatchResult:
        validate_requirements(requirements)
        result = rank_venues(venues, requirements, self._config)
        logger.info(
            (
                "Venue ranking completed | participants=%s | priority=%s | venues=%s | "
                "exact_matches=%s | alternatives=%s | no_match=%s"
            ),
            requirements.participants,
            requirements.priority.value,
            len(venues),
            len(result.exact_matches),
            len(result.alternatives),
            result.no_match,
        )
        return result

    def match_catalog(self, requirements: EventRequirements) -> MatchResult:
        return self.rank(self._repository.list_venues(), requirements)

    def suggest_slots(self, venue_id: int, date_value: str) -> list[str]:
        _validate_date(date_value)
        venue = self._repository.get_venue(venue_id)
        if venue is None:
            raise VenueNotFoundError(f"Venue {venue_id} not found")
        slots = suggest_slots(venue, date_value, self._config)
        logger.info(
            "Slot suggestion completed | venue_id=%s | date=%s | slots=%s",
            venue_id,
            date_value,
            len(slots),
        )
        return slots

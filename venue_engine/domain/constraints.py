"""Validated tuning knobs for scoring, ranking and slot suggestion."""

from __future__ import annotations

import re
from dataclasses import dataclass

from venue_engine.utils.config import DEFAULT_SLOT_CANDIDATES, Settings


_CANDIDATE_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


@dataclass(frozen=True)
class MatchingConfig:
    area_per_participant: int = 6
    max_alternatives: int = 3
    priority_tie_window: int = 10
    slot_buffer_minutes: int = 120
    slot_candidate_times: tuple[str, ...] = DEFAULT_SLOT_CANDIDATES

    @classmethod
    def from_settings(cls, settings: Settings) -> "MatchingConfig":
        return cls(
            area_per_participant=settings.matching_area_per_participant,
            max_alternatives=settings.matching_max_alternatives,
            priority_tie_window=settings.matching_priority_tie_window,
            slot_buffer_minutes=settings.slot_buffer_minutes,
            slot_candidate_times=tuple(settings.slot_candidate_times),
        )


def validate_matching_config(config: MatchingConfig) -> None:
    if config.area_per_participant <= 0:
        raise ValueError("area_per_participant must be > 0")
    if config.max_alternatives < 0:
        raise ValueError("max_alternatives must be >= 0")
    if config.priority_tie_window < 0:
        raise ValueError("priority_tie_window must be >= 0")
    if config.slot_buffer_minutes < 0:
        raise ValueError("slot_buffer_minutes must be >= 0")
    if not config.slot_candidate_times:
        raise ValueError("slot_candidate_times must not be empty")
    for candidate in config.slot_candidate_times:
        if _CANDIDATE_TIME_PATTERN.fullmatch(candidate) is None:
            raise ValueError(f"slot candidate {candidate!r} must follow HH:MM format")

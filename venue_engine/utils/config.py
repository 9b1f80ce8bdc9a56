"""Environment-driven runtime settings."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path


DEFAULT_SLOT_CANDIDATES = ("09:00", "10:00", "11:00", "14:00", "15:00", "16:00")


def _env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value is not None and value.strip() else default


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_tuple(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    app_name: str = "Venue Matching Engine"
    app_version: str = "1.0.0"
    database_path: Path = Path("data/venues.db")
    log_level: str = "INFO"

    # Scoring and ranking
    matching_area_per_participant: int = 6
    matching_max_alternatives: int = 3
    matching_priority_tie_window: int = 10

    # Slot suggestion
    slot_buffer_minutes: int = 120
    slot_candidate_times: tuple[str, ...] = field(default=DEFAULT_SLOT_CANDIDATES)

    # API validation
    booking_date_regex: str = r"^\d{4}-\d{2}-\d{2}$"
    booking_time_regex: str = r"^([01]\d|2[0-3]):[0-5]\d$"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build settings from the environment once per process."""
    return Settings(
        app_name=_env("APP_NAME", "Venue Matching Engine"),
        app_version=_env("APP_VERSION", "1.0.0"),
        database_path=Path(_env("VENUE_DB_PATH", "data/venues.db")),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
        matching_area_per_participant=_env_int("MATCHING_AREA_PER_PARTICIPANT", 6),
        matching_max_alternatives=_env_int("MATCHING_MAX_ALTERNATIVES", 3),
        matching_priority_tie_window=_env_int("MATCHING_PRIORITY_TIE_WINDOW", 10),
        slot_buffer_minutes=_env_int("SLOT_BUFFER_MINUTES", 120),
        slot_candidate_times=_env_tuple("SLOT_CANDIDATE_TIMES", DEFAULT_SLOT_CANDIDATES),
    )

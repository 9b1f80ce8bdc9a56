"""Repository layer responsible for all database access."""

from __future__ import annotations

import json
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from venue_engine.domain.models import Venue
from venue_engine.utils.config import Settings, get_settings
from venue_engine.utils.logger import get_logger


logger = get_logger(__name__)


DEMO_VENUES: tuple[tuple[str, int, str, int, tuple[str, ...], tuple[str, ...]], ...] = (
    ("Main Auditorium", 800, "auditorium", 5000,
     ("Stage", "Projector", "Sound System", "AC", "Lighting"),
     ("2025-09-26 10:00-12:00",)),
    ("Seminar Hall A", 200, "seminar_hall", 2000,
     ("Projector", "AC", "Sound System", "WiFi"), ()),
    ("Seminar Hall B", 150, "seminar_hall", 1800,
     ("Projector", "AC", "WiFi"),
     ("2025-09-26 11:00-13:00",)),
    ("Computer Lab 1", 60, "computer_lab", 1200,
     ("Computers", "High-Speed WiFi", "AC", "Projector"), ()),
    ("Computer Lab 2", 50, "computer_lab", 1000,
     ("Computers", "High-Speed WiFi", "AC"), ()),
    ("Central Library Hall", 300, "library_hall", 2500,
     ("Seating", "Projector", "AC", "WiFi"),
     ("2025-09-26 14:00-16:00",)),
    ("Open Ground A", 3000, "outdoor_ground", 20000,
     ("Stage Setup Possible", "Open Air", "Temporary Stalls"), ()),
    ("Basketball Court", 400, "sports_court", 4500,
     ("Open Space", "Seating", "Sound Setup Possible"),
     ("2025-09-26 09:00-11:00",)),
    ("Classroom Block 101", 40, "classroom", 900,
     ("Projector", "Whiteboard", "WiFi"), ()),
    ("Cafeteria Hall", 500, "cafeteria", 3000,
     ("Seating", "Food Stalls", "Sound System"), ()),
)


@dataclass(frozen=True)
class EventRecord:
    """Persisted event referencing the venue chosen from a match list."""

    event_id: int
    title: str
    event_type: str
    venue_id: int
    participants: int
    event_date: str
    time_slot: str
    duration_hours: int
    facilities_required: tuple[str, ...]
    priority: str
    space_type: Optional[str]
    status: str


class DataRepository:
    """Encapsulates SQLite access so the matching engine stays storage-agnostic."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self._db_path = Path(self._settings.database_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def database_path(self) -> Path:
        return self._db_path

    def _connect(self) -> sqlite3.Connection:
        connection = sqlite3.connect(self._db_path)
        connection.row_factory = sqlite3.Row
        connection.execute("PRAGMA foreign_keys = ON;")
        return connection

    def initialize_database(self) -> None:
        """Create tables before the API starts serving requests."""
        try:
            with self._connect() as conn:
                cursor = conn.cursor()
                cursor.execute(
                    """
                    CREATE TABLE IF NOT EXISTS Venues (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        name TEXT NOT NULL,
                        venue_type TEXT NOT NULL,
                        capacity INTEGER NOT NULL CHECK (capacity > 0),
                        area_sqft INTEGER NOT NULL DEFAULT 1000,
                        facilities TEXT NOT NULL DEFAULT '[]',
                        booked_slots TEXT NOT NULL DEFAULT '[]',
                        created_at DATETIME DEFAULT CURRENT_TIMESTAMP
                    );
                    """
                )
                cursor.execute(
                    """
                    CREATE TABLE IF NOT EXISTS Events (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        title TEXT NOT NULL,
                        event_type TEXT NOT NULL
                            CHECK (event_type IN ('technical', 'non-technical')),
                        venue_id INTEGER NOT NULL,
                        participants INTEGER NOT NULL CHECK (participants > 0),
                        event_date TEXT NOT NULL,
                        time_slot TEXT NOT NULL,
                        duration_hours INTEGER NOT NULL DEFAULT 2,
                        facilities_required TEXT NOT NULL DEFAULT '[]',
                        priority TEXT NOT NULL DEFAULT 'medium'
                            CHECK (priority IN ('high', 'medium', 'low')),
                        space_type TEXT,
                        status TEXT NOT NULL DEFAULT 'pending',
                        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
                        FOREIGN KEY (venue_id) REFERENCES Venues(id)
                    );
                    """
                )
                cursor.execute(
                    """
                    CREATE INDEX IF NOT EXISTS idx_events_venue_date
                    ON Events(venue_id, event_date);
                    """
                )
                conn.commit()
            logger.info("Database initialized at %s", self._db_path)
        except sqlite3.Error as exc:
            raise RuntimeError(f"Database initialization failed: {exc}") from exc

    def seed_venues_if_empty(self) -> int:
        """Insert the demo catalog when no venues exist; return rows inserted."""
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT COUNT(*) AS count FROM Venues;")
            if int(cursor.fetchone()["count"]) > 0:
                logger.info("Venue catalog already present; skipping seed")
                return 0
            cursor.executemany(
                """
                INSERT INTO Venues (name, capacity, venue_type, area_sqft, facilities, booked_slots)
                VALUES (?, ?, ?, ?, ?, ?);
                """,
                [
                    (name, capacity, venue_type, area, json.dumps(list(facilities)), json.dumps(list(slots)))
                    for name, capacity, venue_type, area, facilities, slots in DEMO_VENUES
                ],
            )
            conn.commit()
        logger.info("Seeded venue catalog | venues=%s", len(DEMO_VENUES))
        return len(DEMO_VENUES)

    @staticmethod
    def _row_to_venue(row: sqlite3.Row) -> Venue:
        return Venue(
            venue_id=int(row["id"]),
            name=str(row["name"]),
            venue_type=str(row["venue_type"]),
            capacity=int(row["capacity"]),
            area_sqft=int(row["area_sqft"]),
            facilities=tuple(json.loads(row["facilities"] or "[]")),
            booked_slots=tuple(json.loads(row["booked_slots"] or "[]")),
        )

    def list_venues(self) -> list[Venue]:
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT id, name, venue_type, capacity, area_sqft, facilities, booked_slots
                FROM Venues
                ORDER BY name ASC;
                """
            )
            return [self._row_to_venue(row) for row in cursor.fetchall()]

    def get_venue(self, venue_id: int) -> Optional[Venue]:
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT id, name, venue_type, capacity, area_sqft, facilities, booked_slots
                FROM Venues
                WHERE id = ?;
                """,
                (venue_id,),
            )
            row = cursor.fetchone()
            if row is None:
                return None
            return self._row_to_venue(row)

    def add_venue(
        self,
        name: str,
        venue_type: str,
        capacity: int,
        area_sqft: int,
        facilities: Sequence[str] = (),
        booked_slots: Sequence[str] = (),
    ) -> int:
        """Insert a venue row and return the created id."""
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO Venues (name, venue_type, capacity, area_sqft, facilities, booked_slots)
                VALUES (?, ?, ?, ?, ?, ?);
                """,
                (
                    name,
                    venue_type,
                    capacity,
                    area_sqft,
                    json.dumps(list(facilities)),
                    json.dumps(list(booked_slots)),
                ),
            )
            conn.commit()
            return int(cursor.lastrowid)

    def add_booked_slot(self, venue_id: int, slot: str) -> bool:
        """Append a serialized booking to a venue; False when the venue is unknown."""
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT booked_slots FROM Venues WHERE id = ?;", (venue_id,))
            row = cursor.fetchone()
            if row is None:
                return False
            slots = json.loads(row["booked_slots"] or "[]")
            slots.append(slot)
            cursor.execute(
                "UPDATE Venues SET booked_slots = ? WHERE id = ?;",
                (json.dumps(slots), venue_id),
            )
            conn.commit()
            return True

    def create_event(
        self,
        *,
        title: str,
        event_type: str,
        venue_id: int,
        participants: int,
        event_date: str,
        time_slot: str,
        duration_hours: int,
        facilities_required: Sequence[str],
        priority: str,
        space_type: Optional[str],
    ) -> int:
        """Insert a pending event row and return the created id."""
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO Events (
                    title,
                    event_type,
                    venue_id,
                    participants,
                    event_date,
                    time_slot,
                    duration_hours,
                    facilities_required,
                    priority,
                    space_type
                )
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?);
                """,
                (
                    title,
                    event_type,
                    venue_id,
                    participants,
                    event_date,
                    time_slot,
                    duration_hours,
                    json.dumps(list(facilities_required)),
                    priority,
                    space_type,
                ),
            )
            conn.commit()
            return int(cursor.lastrowid)

    def get_event(self, event_id: int) -> Optional[EventRecord]:
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM Events WHERE id = ?;", (event_id,))
            row = cursor.fetchone()
            if row is None:
                return None
            return EventRecord(
                event_id=int(row["id"]),
                title=str(row["title"]),
                event_type=str(row["event_type"]),
                venue_id=int(row["venue_id"]),
                participants=int(row["participants"]),
                event_date=str(row["event_date"]),
                time_slot=str(row["time_slot"]),
                duration_hours=int(row["duration_hours"]),
                facilities_required=tuple(json.loads(row["facilities_required"] or "[]")),
                priority=str(row["priority"]),
                space_type=row["space_type"],
                status=str(row["status"]),
            )

    def count_events(self) -> int:
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT COUNT(*) AS count FROM Events;")
            return int(cursor.fetchone()["count"])

#!/usr/bin/env python3
"""Validate local venue matching environment readiness."""

from __future__ import annotations

import importlib
import shutil
import sys
import tempfile
from dataclasses import replace
from datetime import datetime
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from venue_engine.domain.models import EventRequirements
from venue_engine.repository.data_repository import DEMO_VENUES, DataRepository
from venue_engine.services.matching_service import VenueMatchingService
from venue_engine.utils.config import get_settings

SEPARATOR_LINE = "=" * 44


def _print_result(name: str, success: bool, detail: str = "") -> tuple[bool, str]:
    if success:
        return True, f"[PASS] {name}{detail}"
    return False, f"[FAIL] {name}: {detail}"


def main() -> int:
    results: list[str] = []
    all_passed = True
    temp_dir = tempfile.mkdtemp(prefix="venue-env-")

    # CHECK 1 - Python version >= 3.10
    if sys.version_info >= (3, 10):
        ok, line = _print_result("Python " + sys.version.split()[0], True)
    else:
        ok, line = _print_result(
            "Python version >= 3.10",
            False,
            f"found {sys.version.split()[0]}",
        )
    results.append(line)
    all_passed = all_passed and ok

    # CHECK 2 - Required packages importable
    package_names = ["fastapi", "uvicorn", "pydantic", "httpx", "pytest"]
    import_errors: list[str] = []
    for module_name in package_names:
        try:
            importlib.import_module(module_name)
        except ImportError as exc:
            import_errors.append(f"{module_name} ({exc})")
    if import_errors:
        ok, line = _print_result(
            "Required packages",
            False,
            "missing/unimportable -> " + "; ".join(import_errors),
        )
    else:
        ok, line = _print_result("Required packages: all importable", True)
    results.append(line)
    all_passed = all_passed and ok

    try:
        validation_settings = replace(
            get_settings(),
            database_path=Path(temp_dir) / "venue_validation.db",
        )
        repository = DataRepository(validation_settings)

        # CHECK 3 - Database initialization
        try:
            repository.initialize_database()
            ok, line = _print_result("Database initialization", True)
        except RuntimeError as exc:
            ok, line = _print_result("Database initialization", False, str(exc))
        results.append(line)
        all_passed = all_passed and ok

        # CHECK 4 - Venue catalog seeding
        try:
            seeded = repository.seed_venues_if_empty()
            if seeded != len(DEMO_VENUES):
                raise RuntimeError(f"expected {len(DEMO_VENUES)} venues, got {seeded}")
            ok, line = _print_result(f"Venue catalog: {seeded} venues", True)
        except Exception as exc:
            ok, line = _print_result("Venue catalog", False, str(exc))
        results.append(line)
        all_passed = all_passed and ok

        # CHECK 5 - Ranking pass
        try:
            service = VenueMatchingService(repository=repository, settings=validation_settings)
            result = service.match_catalog(
                EventRequirements(
                    participants=100,
                    preferred_datetime=datetime(2025, 9, 26, 11, 0),
                    facilities_required=("Projector",),
                )
            )
            if result.no_match:
                raise RuntimeError("seeded catalog produced no candidates")
            ok, line = _print_result(
                "Venue ranking",
                True,
                f": exact={len(result.exact_matches)} alternatives={len(result.alternatives)}",
            )
        except Exception as exc:
            ok, line = _print_result("Venue ranking", False, str(exc))
        results.append(line)
        all_passed = all_passed and ok

    finally:
        shutil.rmtree(temp_dir, ignore_errors=True)

    print(SEPARATOR_LINE)
    print(" Venue Matching Environment Validation")
    print(SEPARATOR_LINE)
    for line in results:
        print(f" {line}")
    print(SEPARATOR_LINE)
    if all_passed:
        print(" All checks passed. Environment is ready.")
        print(SEPARATOR_LINE)
        return 0
    print(" One or more checks failed.")
    print(SEPARATOR_LINE)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())

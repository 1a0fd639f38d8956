"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- Fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeMaxLogRepository, make_max_log

    repo = FakeMaxLogRepository()
    repo.seed([make_max_log("bench", 100, 5, date(2024, 3, 1))])
"""
import uuid
from datetime import date, datetime, time, timedelta, timezone
from typing import List, Optional, Tuple

from domain.models import MaxLog

from tests.fakes.max_log_repository import FakeMaxLogRepository

DEFAULT_PROFILE_ID = "test-profile"


def make_max_log(
    exercise_id: str,
    weight: float,
    reps: int,
    achieved: date,
    *,
    profile_id: str = DEFAULT_PROFILE_ID,
    notes: Optional[str] = None,
    max_log_id: Optional[str] = None,
    created_at: Optional[datetime] = None,
) -> MaxLog:
    """
    Build a MaxLog for a past date without going through the clock check.

    ``created_at`` defaults to noon UTC on the achieved date.
    """
    created = created_at or datetime.combine(achieved, time(12), tzinfo=timezone.utc)
    return MaxLog.hydrate(
        {
            "id": max_log_id or str(uuid.uuid4()),
            "profile_id": profile_id,
            "exercise_id": exercise_id,
            "weight": weight,
            "reps": reps,
            "date": achieved,
            "notes": notes,
            "created_at": created,
            "updated_at": created,
        }
    )


def create_max_log_repo(
    entries: List[Tuple[str, float, int, int]],
    *,
    today: date,
    profile_id: str = DEFAULT_PROFILE_ID,
) -> FakeMaxLogRepository:
    """
    Create a fake repository from (exercise_id, weight, reps, days_ago) tuples.

    Args:
        entries: Lifts to seed, dated ``days_ago`` before ``today``
        today: Reference date
        profile_id: Owning profile
    """
    repo = FakeMaxLogRepository()
    repo.seed(
        [
            make_max_log(
                exercise_id,
                weight,
                reps,
                today - timedelta(days=days_ago),
                profile_id=profile_id,
            )
            for exercise_id, weight, reps, days_ago in entries
        ]
    )
    return repo


__all__ = [
    "FakeMaxLogRepository",
    "make_max_log",
    "create_max_log_repo",
    "DEFAULT_PROFILE_ID",
]

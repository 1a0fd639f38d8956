"""
Domain models for the max-log service.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- MaxLog: A recorded lift with its derived 1RM estimates
- PersonalRecord: The best lift per exercise (derived)
- PRAlert: A record achieved in a completed workout (derived)
- CompletedWorkout: The workout a PR check runs against

Usage:
    >>> from datetime import date
    >>> from domain.models import MaxLog

    >>> log = MaxLog.create(
    ...     profile_id="profile-1",
    ...     exercise_id="squat",
    ...     weight=140,
    ...     reps=3,
    ...     date=date(2024, 3, 1),
    ... )

    >>> # Serialize for persistence
    >>> record = log.to_record()

    >>> # Rebuild from storage
    >>> same = MaxLog.hydrate(record)
"""

from domain.models.max_log import LogComparison, MaxLog
from domain.models.records import (
    AlertImprovement,
    MaxLogSummary,
    PerformanceComparison,
    PersonalRecord,
    PRAlert,
    PRType,
    RecordHistory,
    RecordImprovement,
    RecordSnapshot,
    Trend,
)
from domain.models.workout import CompletedWorkout, PerformedExercise, WorkoutSet

__all__ = [
    # Main entities
    "MaxLog",
    "LogComparison",
    # Derived records
    "PersonalRecord",
    "RecordImprovement",
    "PRAlert",
    "RecordSnapshot",
    "AlertImprovement",
    "PerformanceComparison",
    "RecordHistory",
    "MaxLogSummary",
    # Workout input
    "CompletedWorkout",
    "PerformedExercise",
    "WorkoutSet",
    # Enums
    "PRType",
    "Trend",
]

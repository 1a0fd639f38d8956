"""
Domain layer for the max-log service.

This package contains pure domain models, the 1RM estimation formulas and
domain exceptions. Nothing here performs I/O.
"""

from domain.exceptions import ValidationError
from domain.models import (
    CompletedWorkout,
    MaxLog,
    PerformedExercise,
    PersonalRecord,
    PRAlert,
    PRType,
    Trend,
    WorkoutSet,
)

__all__ = [
    "ValidationError",
    "MaxLog",
    "PersonalRecord",
    "PRAlert",
    "PRType",
    "Trend",
    "CompletedWorkout",
    "PerformedExercise",
    "WorkoutSet",
]

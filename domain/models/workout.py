"""
Completed workout - the input to personal-record detection.

Only the fields record detection needs are modelled: which exercises were
performed, the sets with their weight/reps/completion flag, and when the
session ended.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class WorkoutSet(BaseModel):
    """
    A single performed set.

    Weight and reps are optional because a set can be logged before it is
    filled in. Only completed sets with a positive weight and positive reps
    count toward records (see ``is_eligible``).
    """

    weight: Optional[float] = Field(default=None, description="Weight lifted")
    reps: Optional[int] = Field(default=None, description="Repetitions performed")
    completed: bool = Field(default=False, description="Whether the set was finished")

    def is_eligible(self) -> bool:
        """True if the set can produce a personal record."""
        return (
            self.completed
            and self.weight is not None
            and self.weight > 0
            and self.reps is not None
            and self.reps > 0
        )


class PerformedExercise(BaseModel):
    """An exercise performed in a workout with its sets."""

    exercise_id: str = Field(..., min_length=1)
    exercise_name: str = Field(default="")
    sets: List[WorkoutSet] = Field(default_factory=list)

    @property
    def display_name(self) -> str:
        return self.exercise_name or f"Exercise {self.exercise_id}"

    def eligible_sets(self) -> List[WorkoutSet]:
        return [s for s in self.sets if s.is_eligible()]


class CompletedWorkout(BaseModel):
    """
    A logged workout session.

    ``end_time`` is None while the session is still in progress; such a
    workout is never checked for records.

    Examples:
        >>> workout = CompletedWorkout(
        ...     id="w-1",
        ...     profile_id="profile-1",
        ...     start_time=datetime(2024, 3, 1, 17, 0),
        ...     end_time=datetime(2024, 3, 1, 18, 0),
        ...     exercises=[
        ...         PerformedExercise(
        ...             exercise_id="bench",
        ...             exercise_name="Bench Press",
        ...             sets=[WorkoutSet(weight=100, reps=5, completed=True)],
        ...         )
        ...     ],
        ... )
        >>> workout.is_finished
        True
    """

    id: Optional[str] = None
    profile_id: str = Field(..., min_length=1)
    name: str = Field(default="")
    start_time: datetime
    end_time: Optional[datetime] = None
    exercises: List[PerformedExercise] = Field(default_factory=list)

    @property
    def is_finished(self) -> bool:
        return self.end_time is not None

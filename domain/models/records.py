"""
Derived record models.

Nothing here is persisted: personal records, alerts and summaries are
recomputed from the max-log history whenever they are needed.
"""

import datetime as dt
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from domain.models.max_log import MaxLog


class PRType(str, Enum):
    """Classification of a personal-record alert, in precedence order."""

    FIRST_PR = "first_pr"
    NEW_PR = "new_pr"
    REP_PR = "rep_pr"
    VOLUME_PR = "volume_pr"


class Trend(str, Enum):
    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"
    INSUFFICIENT_DATA = "insufficient_data"


class RecordImprovement(BaseModel):
    """How a personal record compares to the best that preceded it."""

    model_config = ConfigDict(frozen=True)

    previous_weight: float
    previous_date: dt.date
    # May be zero or negative: records are ranked by estimated 1RM, not weight
    weight_increase: float
    days_between: int


class PersonalRecord(BaseModel):
    """
    Best known lift for one exercise, ranked by estimated 1RM.

    ``improvement`` is only set when an earlier best existed.
    """

    model_config = ConfigDict(frozen=True)

    exercise_id: str
    weight: float
    reps: int
    estimated_1rm: float
    date: dt.date
    max_log_id: str
    improvement: Optional[RecordImprovement] = None

    @classmethod
    def from_log(
        cls, log: MaxLog, improvement: Optional[RecordImprovement] = None
    ) -> "PersonalRecord":
        return cls(
            exercise_id=log.exercise_id,
            weight=log.weight,
            reps=log.reps,
            estimated_1rm=log.estimated_1rm,
            date=log.date,
            max_log_id=log.id,
            improvement=improvement,
        )


class RecordSnapshot(BaseModel):
    """Weight, reps and date of a record referenced by an alert."""

    model_config = ConfigDict(frozen=True)

    weight: float
    reps: int
    date: dt.date


class AlertImprovement(BaseModel):
    model_config = ConfigDict(frozen=True)

    weight_increase: float
    percentage_increase: float


class PRAlert(BaseModel):
    """
    A personal record achieved in a workout.

    Alerts are ephemeral: they are produced per workout and the application
    layer turns them into new max logs.
    """

    model_config = ConfigDict(frozen=True)

    exercise_id: str
    exercise_name: str
    type: PRType
    new_record: RecordSnapshot
    previous_record: Optional[RecordSnapshot] = None
    improvement: AlertImprovement


class PerformanceComparison(BaseModel):
    """Trend of an exercise's estimated 1RM over a lookback window."""

    trend: Trend
    change: float = Field(default=0.0, description="Percentage change, recent vs previous")
    recent: Optional[MaxLog] = None
    previous: Optional[MaxLog] = None


class RecordHistory(BaseModel):
    """All logs of one exercise, newest first."""

    exercise_id: str
    logs: List[MaxLog] = Field(default_factory=list)
    total: int = 0
    last_date: dt.date


class MaxLogSummary(BaseModel):
    """Dashboard-style overview of a profile's max logs."""

    total_logs: int = 0
    personal_records: List[PersonalRecord] = Field(default_factory=list)
    recent_activity: List[MaxLog] = Field(default_factory=list)
    strongest_exercises: List[PersonalRecord] = Field(default_factory=list)
    progress_trend: Trend = Trend.INSUFFICIENT_DATA
    last_log_date: Optional[dt.date] = None

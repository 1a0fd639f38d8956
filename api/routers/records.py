"""
Records router for personal-record tracking.

This router provides endpoints for:
- Current personal records and the strongest exercises
- Record history and dashboard summary
- Per-exercise trend over a week, month or quarter
- Checking a finished workout for new records
"""
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from pydantic import BaseModel, Field

from api.deps import (
    get_current_profile,
    get_record_workout_prs_use_case,
    get_records_service,
)
from api.errors import raise_for_result, validation_http_error
from application.use_cases import RecordWorkoutPRsUseCase
from backend.core.records_service import RecordsService
from domain.exceptions import ValidationError
from domain.models import (
    CompletedWorkout,
    MaxLog,
    MaxLogSummary,
    PerformanceComparison,
    PerformedExercise,
    PersonalRecord,
    PRAlert,
    RecordHistory,
    Trend,
)

router = APIRouter(
    prefix="/records",
    tags=["Records"],
)


# =============================================================================
# Request / Response Models
# =============================================================================


class PersonalRecordsResponse(BaseModel):
    """Response model for personal records endpoint."""
    records: List[PersonalRecord]
    total: int
    progress_trend: Trend


class StrongestExercisesResponse(BaseModel):
    records: List[PersonalRecord]


class RecordHistoryResponse(BaseModel):
    exercises: List[RecordHistory]
    total: int


class RecentRecordsResponse(BaseModel):
    max_logs: List[MaxLog]
    total: int


class ExerciseTrendResponse(BaseModel):
    exercise_id: str
    timeframe: str
    comparison: PerformanceComparison


class CheckWorkoutRequest(BaseModel):
    """A workout to check; the profile comes from authentication."""
    id: Optional[str] = None
    name: str = ""
    start_time: datetime
    end_time: Optional[datetime] = None
    exercises: List[PerformedExercise] = Field(default_factory=list)
    persist: bool = Field(default=True, description="Save detected records as max logs")


class CheckWorkoutResponse(BaseModel):
    alerts: List[PRAlert]
    max_logs: List[MaxLog]
    records: List[PersonalRecord]


# =============================================================================
# Endpoints
# =============================================================================


@router.get("", response_model=PersonalRecordsResponse)
def get_personal_records(
    profile_id: str = Depends(get_current_profile),
    service: RecordsService = Depends(get_records_service),
) -> PersonalRecordsResponse:
    """
    Get the current personal record for every exercise.

    Records are ranked by estimated 1RM; ``improvement`` is set when the
    record beat an earlier best.
    """
    records = service.get_records(profile_id)
    ordered = sorted(records.values(), key=lambda r: r.date, reverse=True)
    return PersonalRecordsResponse(
        records=ordered,
        total=len(ordered),
        progress_trend=service.get_progress_trend(profile_id),
    )


@router.get("/strongest", response_model=StrongestExercisesResponse)
def get_strongest_exercises(
    limit: Optional[int] = Query(None, ge=1, le=100, description="Maximum records to return"),
    profile_id: str = Depends(get_current_profile),
    service: RecordsService = Depends(get_records_service),
) -> StrongestExercisesResponse:
    """Records ranked by estimated 1RM, strongest first."""
    return StrongestExercisesResponse(
        records=service.get_strongest_exercises(profile_id, limit=limit)
    )


@router.get("/summary", response_model=MaxLogSummary)
def get_records_summary(
    profile_id: str = Depends(get_current_profile),
    service: RecordsService = Depends(get_records_service),
) -> MaxLogSummary:
    return service.get_summary(profile_id)


@router.get("/history", response_model=RecordHistoryResponse)
def get_record_history(
    profile_id: str = Depends(get_current_profile),
    service: RecordsService = Depends(get_records_service),
) -> RecordHistoryResponse:
    """All logs grouped by exercise, most recently trained first."""
    history = service.get_history(profile_id)
    return RecordHistoryResponse(exercises=history, total=len(history))


@router.get("/recent", response_model=RecentRecordsResponse)
def get_recent_records(
    profile_id: str = Depends(get_current_profile),
    service: RecordsService = Depends(get_records_service),
) -> RecentRecordsResponse:
    """Logs from the recent lookback window, newest first."""
    recent = service.get_recent_records(profile_id)
    return RecentRecordsResponse(max_logs=recent, total=len(recent))


@router.get("/exercises/{exercise_id}", response_model=PersonalRecord)
def get_exercise_record(
    exercise_id: str = Path(..., description="Exercise ID"),
    profile_id: str = Depends(get_current_profile),
    service: RecordsService = Depends(get_records_service),
) -> PersonalRecord:
    record = service.get_record(profile_id, exercise_id)
    if record is None:
        raise HTTPException(
            status_code=404,
            detail=f"No personal record for exercise '{exercise_id}'",
        )
    return record


@router.get("/exercises/{exercise_id}/trend", response_model=ExerciseTrendResponse)
def get_exercise_trend(
    exercise_id: str = Path(..., description="Exercise ID"),
    timeframe: str = Query("month", description="Lookback window: week, month or quarter"),
    profile_id: str = Depends(get_current_profile),
    service: RecordsService = Depends(get_records_service),
) -> ExerciseTrendResponse:
    """
    Trend of an exercise's estimated 1RM.

    Compares the newest log in the window with the oldest: more than 5%
    better is improving, more than 5% worse is declining.
    """
    try:
        comparison = service.compare_performance(profile_id, exercise_id, timeframe)
    except ValidationError as e:
        raise validation_http_error(e)
    return ExerciseTrendResponse(
        exercise_id=exercise_id,
        timeframe=timeframe,
        comparison=comparison,
    )


@router.post("/check-workout", response_model=CheckWorkoutResponse)
def check_workout(
    body: CheckWorkoutRequest,
    profile_id: str = Depends(get_current_profile),
    use_case: RecordWorkoutPRsUseCase = Depends(get_record_workout_prs_use_case),
) -> CheckWorkoutResponse:
    """
    Check a workout for personal records.

    Detected records are saved as new max logs dated to the workout's end
    (unless ``persist`` is false). A workout without ``end_time`` is still
    in progress and yields no alerts.
    """
    workout = CompletedWorkout(
        id=body.id,
        profile_id=profile_id,
        name=body.name,
        start_time=body.start_time,
        end_time=body.end_time,
        exercises=body.exercises,
    )
    result = use_case.execute(workout, persist=body.persist)
    raise_for_result(result)
    return CheckWorkoutResponse(
        alerts=result.alerts,
        max_logs=result.max_logs,
        records=list(result.records.values()),
    )

"""
Max logs router for recording and reading lifts.

This router provides endpoints for:
- Logging lifts, singly or in batches
- Listing, reading, updating and deleting max logs
- Per-log calculations (summary, bodyweight ratio, comparison)
"""
import datetime as dt
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response
from pydantic import BaseModel, Field

from api.deps import (
    get_current_profile,
    get_delete_max_log_use_case,
    get_get_max_logs_use_case,
    get_log_max_lift_use_case,
    get_update_max_log_use_case,
)
from api.errors import raise_for_result
from application.use_cases import (
    DeleteMaxLogUseCase,
    GetMaxLogsUseCase,
    LogMaxLiftUseCase,
    MaxLogInput,
    UpdateMaxLogUseCase,
)
from domain.models import MaxLog

router = APIRouter(
    prefix="/max-logs",
    tags=["Max Logs"],
)


# =============================================================================
# Request / Response Models
# =============================================================================


class CreateMaxLogRequest(BaseModel):
    """Request body for logging a lift."""
    exercise_id: str
    weight: float
    reps: int
    date: dt.date
    notes: Optional[str] = None


class BatchCreateMaxLogsRequest(BaseModel):
    max_logs: List[CreateMaxLogRequest] = Field(..., min_length=1)


class UpdateMaxLogRequest(BaseModel):
    """Fields to replace; omitted fields keep their value. An explicit null clears notes."""
    weight: Optional[float] = None
    reps: Optional[int] = None
    date: Optional[dt.date] = None
    notes: Optional[str] = None


class CreateMaxLogResponse(BaseModel):
    max_log: MaxLog
    is_personal_record: bool = False


class MaxLogListResponse(BaseModel):
    max_logs: List[MaxLog]
    total: int


class LatestMaxLogsResponse(BaseModel):
    """Most recent log keyed by exercise ID."""
    latest: Dict[str, MaxLog]


class MaxLogSummaryResponse(BaseModel):
    max_log_id: str
    summary: str


class BodyweightRatioResponse(BaseModel):
    max_log_id: str
    bodyweight: float
    ratio: float


class CompareMaxLogsResponse(BaseModel):
    max_log_id: str
    other_id: str
    difference: float
    percentage_improvement: float


# =============================================================================
# Endpoints
# =============================================================================


@router.post("", response_model=CreateMaxLogResponse, status_code=201)
def create_max_log(
    body: CreateMaxLogRequest,
    profile_id: str = Depends(get_current_profile),
    use_case: LogMaxLiftUseCase = Depends(get_log_max_lift_use_case),
) -> CreateMaxLogResponse:
    """
    Log a lift.

    Estimated 1RMs are computed server-side. ``is_personal_record`` tells
    whether the lift beats the current record for the exercise.
    """
    result = use_case.execute(
        profile_id=profile_id,
        exercise_id=body.exercise_id,
        weight=body.weight,
        reps=body.reps,
        date=body.date,
        notes=body.notes,
    )
    raise_for_result(result)
    return CreateMaxLogResponse(
        max_log=result.max_log,
        is_personal_record=result.is_personal_record,
    )


@router.post("/batch", response_model=MaxLogListResponse, status_code=201)
def create_max_logs_batch(
    body: BatchCreateMaxLogsRequest,
    profile_id: str = Depends(get_current_profile),
    use_case: LogMaxLiftUseCase = Depends(get_log_max_lift_use_case),
) -> MaxLogListResponse:
    """
    Log several lifts at once.

    If any entry is invalid nothing is saved and every error is returned.
    """
    entries = [
        MaxLogInput(
            exercise_id=item.exercise_id,
            weight=item.weight,
            reps=item.reps,
            date=item.date,
            notes=item.notes,
        )
        for item in body.max_logs
    ]
    result = use_case.execute_batch(profile_id, entries)
    raise_for_result(result)
    return MaxLogListResponse(max_logs=result.max_logs, total=len(result.max_logs))


@router.get("", response_model=MaxLogListResponse)
def list_max_logs(
    exercise_id: Optional[str] = Query(None, description="Filter by exercise ID"),
    older_than: Optional[dt.date] = Query(
        None, description="Only logs achieved before this date"
    ),
    profile_id: str = Depends(get_current_profile),
    use_case: GetMaxLogsUseCase = Depends(get_get_max_logs_use_case),
) -> MaxLogListResponse:
    """List max logs, newest first."""
    result = use_case.list_max_logs(
        profile_id, exercise_id=exercise_id, older_than=older_than
    )
    raise_for_result(result)
    return MaxLogListResponse(max_logs=result.max_logs, total=result.count)


@router.get("/latest", response_model=LatestMaxLogsResponse)
def get_latest_max_logs(
    profile_id: str = Depends(get_current_profile),
    use_case: GetMaxLogsUseCase = Depends(get_get_max_logs_use_case),
) -> LatestMaxLogsResponse:
    """Most recent log for each exercise."""
    result = use_case.get_latest_by_exercise(profile_id)
    raise_for_result(result)
    return LatestMaxLogsResponse(latest=result.latest)


@router.get("/{max_log_id}", response_model=MaxLog)
def get_max_log(
    max_log_id: str = Path(..., description="Max log ID"),
    profile_id: str = Depends(get_current_profile),
    use_case: GetMaxLogsUseCase = Depends(get_get_max_logs_use_case),
) -> MaxLog:
    result = use_case.get_max_log(profile_id, max_log_id)
    raise_for_result(result)
    return result.max_log


@router.patch("/{max_log_id}", response_model=MaxLog)
def update_max_log(
    body: UpdateMaxLogRequest,
    max_log_id: str = Path(..., description="Max log ID"),
    profile_id: str = Depends(get_current_profile),
    use_case: UpdateMaxLogUseCase = Depends(get_update_max_log_use_case),
) -> MaxLog:
    """
    Update a max log.

    Estimated 1RMs are recomputed from the resulting weight and reps.
    Sending `"notes": null` removes the notes.
    """
    result = use_case.execute(
        profile_id,
        max_log_id,
        weight=body.weight,
        reps=body.reps,
        date=body.date,
        notes=body.notes,
        clear_notes="notes" in body.model_fields_set and body.notes is None,
    )
    raise_for_result(result)
    return result.max_log


@router.delete("/{max_log_id}", status_code=204)
def delete_max_log(
    max_log_id: str = Path(..., description="Max log ID"),
    profile_id: str = Depends(get_current_profile),
    use_case: DeleteMaxLogUseCase = Depends(get_delete_max_log_use_case),
) -> Response:
    """Delete a max log. Succeeds even if it does not exist."""
    result = use_case.execute(profile_id, max_log_id)
    raise_for_result(result)
    return Response(status_code=204)


@router.get("/{max_log_id}/summary", response_model=MaxLogSummaryResponse)
def get_max_log_summary(
    max_log_id: str = Path(..., description="Max log ID"),
    profile_id: str = Depends(get_current_profile),
    use_case: GetMaxLogsUseCase = Depends(get_get_max_logs_use_case),
) -> MaxLogSummaryResponse:
    result = use_case.summary(profile_id, max_log_id)
    raise_for_result(result)
    return MaxLogSummaryResponse(max_log_id=max_log_id, summary=result.summary)


@router.get("/{max_log_id}/bodyweight-ratio", response_model=BodyweightRatioResponse)
def get_bodyweight_ratio(
    max_log_id: str = Path(..., description="Max log ID"),
    bodyweight: float = Query(..., description="Lifter's bodyweight in the same unit"),
    profile_id: str = Depends(get_current_profile),
    use_case: GetMaxLogsUseCase = Depends(get_get_max_logs_use_case),
) -> BodyweightRatioResponse:
    """Estimated 1RM divided by bodyweight (0 for a non-positive bodyweight)."""
    result = use_case.bodyweight_ratio(profile_id, max_log_id, bodyweight)
    raise_for_result(result)
    return BodyweightRatioResponse(
        max_log_id=max_log_id, bodyweight=bodyweight, ratio=result.ratio
    )


@router.get("/{max_log_id}/compare/{other_id}", response_model=CompareMaxLogsResponse)
def compare_max_logs(
    max_log_id: str = Path(..., description="Max log ID"),
    other_id: str = Path(..., description="Max log to compare against"),
    profile_id: str = Depends(get_current_profile),
    use_case: GetMaxLogsUseCase = Depends(get_get_max_logs_use_case),
) -> CompareMaxLogsResponse:
    """Difference in estimated 1RM, relative to ``other_id``."""
    result = use_case.compare(profile_id, max_log_id, other_id)
    raise_for_result(result)
    return CompareMaxLogsResponse(
        max_log_id=max_log_id,
        other_id=other_id,
        difference=result.comparison.difference,
        percentage_improvement=result.comparison.percentage_improvement,
    )

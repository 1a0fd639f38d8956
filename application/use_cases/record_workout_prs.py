"""
RecordWorkoutPRs Use Case.

Runs personal-record detection on a finished workout, saves each alert as a
new max log dated to the workout's end, then recomputes the profile's
records so callers see the updated state.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from application.ports import MaxLogRepository
from application.use_cases.result import UseCaseResult
from backend.core.personal_records import compute_records
from backend.core.pr_detection import check_for_records
from domain.exceptions import ValidationError
from domain.models import CompletedWorkout, MaxLog, PersonalRecord, PRAlert

logger = logging.getLogger(__name__)


@dataclass
class RecordWorkoutPRsResult(UseCaseResult):
    """Result of checking a workout for personal records."""

    alerts: List[PRAlert] = field(default_factory=list)
    max_logs: List[MaxLog] = field(default_factory=list)
    records: Dict[str, PersonalRecord] = field(default_factory=dict)


class RecordWorkoutPRsUseCase:
    """
    Use case for turning a completed workout into personal records.

    Orchestrates the following workflow:
    1. Load the profile's max-log history
    2. Detect records in the workout (at most one per exercise)
    3. Persist each record as a new max log
    4. Recompute personal records from the updated history

    An unfinished workout succeeds with no alerts.
    """

    def __init__(
        self,
        max_log_repo: MaxLogRepository,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._max_log_repo = max_log_repo
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def execute(
        self,
        workout: CompletedWorkout,
        *,
        persist: bool = True,
    ) -> RecordWorkoutPRsResult:
        """
        Check a workout for personal records.

        Args:
            workout: Workout to check
            persist: Save alerts as max logs (False only reports them)

        Returns:
            RecordWorkoutPRsResult with alerts, created logs and fresh records
        """
        profile_id = workout.profile_id
        try:
            history = self._max_log_repo.find_all(profile_id)
        except Exception as e:
            logger.exception("Failed to load max logs for profile %s", profile_id)
            return RecordWorkoutPRsResult(success=False, error=f"Failed to load max logs: {e}")

        alerts = check_for_records(workout, history)
        if not alerts or not persist:
            return RecordWorkoutPRsResult(
                success=True, alerts=alerts, records=compute_records(history)
            )

        now = self._clock()
        try:
            new_logs = [self._alert_to_log(workout, alert, now) for alert in alerts]
        except ValidationError as e:
            logger.warning("PR max logs rejected for workout %s: %s", workout.id, e.errors)
            return RecordWorkoutPRsResult(
                success=False,
                error=e.message,
                validation_errors=e.errors,
                alerts=alerts,
            )

        saved: List[MaxLog] = []
        try:
            for max_log in new_logs:
                saved.append(self._max_log_repo.save(max_log))
        except Exception as e:
            logger.exception("Failed to save PR max logs for workout %s", workout.id)
            return RecordWorkoutPRsResult(
                success=False,
                error=f"Failed to save personal records: {e}",
                alerts=alerts,
                max_logs=saved,
            )

        logger.info(
            "Recorded %d personal record(s) from workout %s for profile %s",
            len(saved),
            workout.id,
            profile_id,
        )
        return RecordWorkoutPRsResult(
            success=True,
            alerts=alerts,
            max_logs=saved,
            records=compute_records([*history, *saved]),
        )

    @staticmethod
    def _alert_to_log(
        workout: CompletedWorkout,
        alert: PRAlert,
        now: datetime,
    ) -> MaxLog:
        label = alert.type.value.replace("_", " ").upper()
        notes = f"{label} from workout {workout.name}".strip() if workout.name else label
        return MaxLog.create(
            profile_id=workout.profile_id,
            exercise_id=alert.exercise_id,
            weight=alert.new_record.weight,
            reps=alert.new_record.reps,
            date=alert.new_record.date,
            notes=notes,
            now=now,
        )

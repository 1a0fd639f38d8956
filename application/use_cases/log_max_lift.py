"""
LogMaxLift Use Case.

Creates max logs, singly or in batches. A batch is validated in full
before anything is persisted: one invalid entry rejects the whole batch.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Callable, List, Optional

from application.ports import MaxLogRepository
from application.use_cases.result import UseCaseResult
from backend.core.personal_records import compute_records, is_new_record
from domain.exceptions import ValidationError
from domain.models import MaxLog

logger = logging.getLogger(__name__)


@dataclass
class MaxLogInput:
    """Raw input for one max log."""

    exercise_id: str
    weight: float
    reps: int
    date: date
    notes: Optional[str] = None


@dataclass
class LogMaxLiftResult(UseCaseResult):
    """Result of logging a single lift."""

    max_log: Optional[MaxLog] = None
    is_personal_record: bool = False


@dataclass
class LogMaxLiftBatchResult(UseCaseResult):
    """Result of logging several lifts at once."""

    max_logs: List[MaxLog] = field(default_factory=list)


class LogMaxLiftUseCase:
    """
    Use case for recording lifts.

    Orchestrates the following workflow:
    1. Build the MaxLog entity (validates input, computes estimates)
    2. Check it against the current personal record for the exercise
    3. Persist via repository

    Usage:
        >>> use_case = LogMaxLiftUseCase(max_log_repo=repo)
        >>> result = use_case.execute(
        ...     profile_id="profile-1",
        ...     exercise_id="bench",
        ...     weight=100,
        ...     reps=5,
        ...     date=date(2024, 3, 1),
        ... )
        >>> if result.success:
        ...     print(result.max_log.estimated_1rm)
    """

    def __init__(
        self,
        max_log_repo: MaxLogRepository,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            max_log_repo: Repository for persisting max logs
            clock: Returns the current UTC time (overridable for tests)
        """
        self._max_log_repo = max_log_repo
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def execute(
        self,
        profile_id: str,
        exercise_id: str,
        weight: float,
        reps: int,
        date: date,
        notes: Optional[str] = None,
    ) -> LogMaxLiftResult:
        """
        Record a single lift.

        Returns:
            LogMaxLiftResult with the saved max log
        """
        try:
            max_log = MaxLog.create(
                profile_id=profile_id,
                exercise_id=exercise_id,
                weight=weight,
                reps=reps,
                date=date,
                notes=notes,
                now=self._clock(),
            )
        except ValidationError as e:
            logger.warning("Max log validation failed: %s", e.errors)
            return LogMaxLiftResult(
                success=False, error=e.message, validation_errors=e.errors
            )

        try:
            records = compute_records(self._max_log_repo.find_all(profile_id))
            personal_record = is_new_record(max_log, records)
            saved = self._max_log_repo.save(max_log)
        except Exception as e:
            logger.exception("Failed to save max log for profile %s", profile_id)
            return LogMaxLiftResult(success=False, error=f"Failed to save max log: {e}")

        logger.info(
            "Logged max lift %s for profile %s (%s)",
            saved.id,
            profile_id,
            saved.summary(),
        )
        return LogMaxLiftResult(
            success=True, max_log=saved, is_personal_record=personal_record
        )

    def execute_batch(
        self,
        profile_id: str,
        entries: List[MaxLogInput],
    ) -> LogMaxLiftBatchResult:
        """
        Record several lifts.

        Every entry is validated first; nothing is saved unless all are valid.
        Validation errors are prefixed with the entry's position.

        Returns:
            LogMaxLiftBatchResult with the saved max logs
        """
        if not entries:
            return LogMaxLiftBatchResult(success=True)

        now = self._clock()
        built: List[MaxLog] = []
        errors: List[str] = []
        for index, entry in enumerate(entries):
            try:
                built.append(
                    MaxLog.create(
                        profile_id=profile_id,
                        exercise_id=entry.exercise_id,
                        weight=entry.weight,
                        reps=entry.reps,
                        date=entry.date,
                        notes=entry.notes,
                        now=now,
                    )
                )
            except ValidationError as e:
                errors.extend(f"[{index}] {message}" for message in e.errors)

        if errors:
            logger.warning(
                "Rejected batch of %d max logs for profile %s: %s",
                len(entries),
                profile_id,
                errors,
            )
            return LogMaxLiftBatchResult(
                success=False,
                error="Max log batch validation failed",
                validation_errors=errors,
            )

        saved: List[MaxLog] = []
        try:
            for max_log in built:
                saved.append(self._max_log_repo.save(max_log))
        except Exception as e:
            logger.exception(
                "Failed to save max log batch for profile %s after %d of %d",
                profile_id,
                len(saved),
                len(built),
            )
            return LogMaxLiftBatchResult(
                success=False,
                error=f"Failed to save max logs: {e}",
                max_logs=saved,
            )

        logger.info("Logged %d max lifts for profile %s", len(saved), profile_id)
        return LogMaxLiftBatchResult(success=True, max_logs=saved)

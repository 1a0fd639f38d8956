"""
Records Service for personal-record tracking.

This module provides the read side of personal-record tracking on top of
the max-log repository:
- Current records and strongest exercises
- Per-exercise trend over a lookback window
- Record history and recent activity
- Dashboard summary

Every call works on a fresh snapshot of the profile's max logs.
"""
from typing import Dict, List, Optional
from datetime import datetime
import logging

from application.ports.max_log_repository import MaxLogRepository
from backend.core import personal_records
from domain.models import (
    MaxLog,
    MaxLogSummary,
    PerformanceComparison,
    PersonalRecord,
    RecordHistory,
    Trend,
)

logger = logging.getLogger(__name__)


class RecordsService:
    """
    Service for personal-record queries.

    Provides business logic on top of repository data access, including:
    - Record aggregation per exercise
    - Trend classification
    - Summaries for dashboards
    """

    def __init__(
        self,
        max_log_repo: MaxLogRepository,
        *,
        recent_days: int = personal_records.DEFAULT_RECENT_DAYS,
        strongest_limit: int = personal_records.DEFAULT_STRONGEST_LIMIT,
    ):
        """
        Initialize the records service.

        Args:
            max_log_repo: Repository for max-log data access
            recent_days: Lookback for recent records
            strongest_limit: Size of the strongest-exercises list
        """
        self._max_log_repo = max_log_repo
        self._recent_days = recent_days
        self._strongest_limit = strongest_limit

    def _logs(self, profile_id: str) -> List[MaxLog]:
        return self._max_log_repo.find_all(profile_id)

    def get_records(self, profile_id: str) -> Dict[str, PersonalRecord]:
        """Current personal record per exercise."""
        return personal_records.compute_records(self._logs(profile_id))

    def get_record(self, profile_id: str, exercise_id: str) -> Optional[PersonalRecord]:
        """
        Current personal record for one exercise.

        Returns:
            PersonalRecord or None if the exercise was never logged
        """
        record = self.get_records(profile_id).get(exercise_id)
        if record is None:
            logger.warning(f"No personal record for exercise {exercise_id} (profile {profile_id})")
        return record

    def get_strongest_exercises(
        self,
        profile_id: str,
        limit: Optional[int] = None,
    ) -> List[PersonalRecord]:
        """Records ranked by estimated 1RM, strongest first."""
        return personal_records.get_strongest_exercises(
            self.get_records(profile_id),
            limit if limit is not None else self._strongest_limit,
        )

    def get_progress_trend(self, profile_id: str) -> Trend:
        return personal_records.progress_trend(self.get_records(profile_id))

    def compare_performance(
        self,
        profile_id: str,
        exercise_id: str,
        timeframe: str = "month",
        *,
        now: Optional[datetime] = None,
    ) -> PerformanceComparison:
        """
        Trend of one exercise over a lookback window.

        Raises:
            ValidationError: For an unknown timeframe.
        """
        return personal_records.compare_performance(
            self._logs(profile_id), exercise_id, timeframe, now=now
        )

    def get_history(self, profile_id: str) -> List[RecordHistory]:
        """Logs grouped per exercise, most recently trained first."""
        return personal_records.record_history(self._logs(profile_id))

    def get_recent_records(
        self,
        profile_id: str,
        *,
        now: Optional[datetime] = None,
    ) -> List[MaxLog]:
        """Logs from the recent lookback window, newest first."""
        return personal_records.recent_records(
            self._logs(profile_id),
            days=self._recent_days,
            limit=personal_records.DEFAULT_RECENT_LIMIT,
            now=now,
        )

    def get_summary(self, profile_id: str) -> MaxLogSummary:
        """Dashboard summary of the profile's max logs."""
        summary = personal_records.summarize(
            self._logs(profile_id),
            strongest_limit=self._strongest_limit,
        )
        logger.debug(
            f"Summary for profile {profile_id}: {summary.total_logs} logs, "
            f"{len(summary.personal_records)} records"
        )
        return summary

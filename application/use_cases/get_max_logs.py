"""
Get Max Logs Use Case.

This use case handles reading max logs and the per-log calculations
(comparison between two logs, bodyweight ratio, summary line).
"""
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from application.ports import MaxLogRepository
from application.use_cases.result import UseCaseResult
from backend.core.personal_records import latest_by_exercise
from domain.models import LogComparison, MaxLog

logger = logging.getLogger(__name__)


@dataclass
class GetMaxLogResult(UseCaseResult):
    """Result of getting a single max log."""

    max_log: Optional[MaxLog] = None


@dataclass
class ListMaxLogsResult(UseCaseResult):
    """Result of listing max logs."""

    max_logs: List[MaxLog] = field(default_factory=list)
    count: int = 0


@dataclass
class LatestMaxLogsResult(UseCaseResult):
    """Most recent log per exercise."""

    latest: Dict[str, MaxLog] = field(default_factory=dict)


@dataclass
class CompareMaxLogsResult(UseCaseResult):
    """Comparison of two max logs."""

    comparison: Optional[LogComparison] = None
    max_log: Optional[MaxLog] = None
    other: Optional[MaxLog] = None


@dataclass
class BodyweightRatioResult(UseCaseResult):
    ratio: float = 0.0
    max_log: Optional[MaxLog] = None


@dataclass
class MaxLogSummaryResult(UseCaseResult):
    summary: Optional[str] = None
    max_log: Optional[MaxLog] = None


class GetMaxLogsUseCase:
    """
    Use case for retrieving max logs.

    Encapsulates getting individual logs, listing with filters, the latest
    log per exercise and per-log calculations.
    """

    def __init__(self, max_log_repo: MaxLogRepository):
        """
        Initialize with required dependencies.

        Args:
            max_log_repo: Repository for max-log persistence
        """
        self._max_log_repo = max_log_repo

    def _load(self, profile_id: str, max_log_id: str) -> GetMaxLogResult:
        try:
            max_log = self._max_log_repo.find_by_id(profile_id, max_log_id)
        except Exception as e:
            logger.exception("Failed to load max log %s", max_log_id)
            return GetMaxLogResult(success=False, error=f"Failed to load max log: {e}")

        if max_log is None:
            logger.warning("Max log not found: %s (profile %s)", max_log_id, profile_id)
            return GetMaxLogResult(
                success=False,
                error=f"Max log not found: {max_log_id}",
                not_found=True,
            )
        return GetMaxLogResult(success=True, max_log=max_log)

    def _load_all(self, profile_id: str) -> ListMaxLogsResult:
        try:
            max_logs = self._max_log_repo.find_all(profile_id)
        except Exception as e:
            logger.exception("Failed to list max logs for profile %s", profile_id)
            return ListMaxLogsResult(success=False, error=f"Failed to list max logs: {e}")
        return ListMaxLogsResult(success=True, max_logs=max_logs, count=len(max_logs))

    def get_max_log(self, profile_id: str, max_log_id: str) -> GetMaxLogResult:
        """
        Get a single max log by ID.

        Returns:
            GetMaxLogResult with the log, or ``not_found`` set
        """
        return self._load(profile_id, max_log_id)

    def list_max_logs(
        self,
        profile_id: str,
        exercise_id: Optional[str] = None,
        older_than: Optional[date] = None,
    ) -> ListMaxLogsResult:
        """
        List max logs for a profile, newest first.

        Args:
            profile_id: Owning profile
            exercise_id: Optional exercise filter
            older_than: Only logs achieved strictly before this date
        """
        result = self._load_all(profile_id)
        if not result.success:
            return result

        max_logs = result.max_logs
        if exercise_id:
            max_logs = [m for m in max_logs if m.exercise_id == exercise_id]
        if older_than:
            max_logs = [m for m in max_logs if m.is_older_than(older_than)]
        max_logs = sorted(max_logs, key=lambda m: (m.date, m.created_at), reverse=True)

        return ListMaxLogsResult(success=True, max_logs=max_logs, count=len(max_logs))

    def get_latest_by_exercise(self, profile_id: str) -> LatestMaxLogsResult:
        """Most recent log for every exercise the profile has logged."""
        result = self._load_all(profile_id)
        if not result.success:
            return LatestMaxLogsResult(success=False, error=result.error)
        return LatestMaxLogsResult(success=True, latest=latest_by_exercise(result.max_logs))

    def compare(
        self,
        profile_id: str,
        max_log_id: str,
        other_id: str,
    ) -> CompareMaxLogsResult:
        """
        Compare the estimated 1RM of ``max_log_id`` against ``other_id``.
        """
        loaded = []
        for log_id in (max_log_id, other_id):
            result = self._load(profile_id, log_id)
            if not result.success:
                return CompareMaxLogsResult(
                    success=False, error=result.error, not_found=result.not_found
                )
            loaded.append(result.max_log)

        max_log, other = loaded
        return CompareMaxLogsResult(
            success=True,
            comparison=max_log.compare_performance(other),
            max_log=max_log,
            other=other,
        )

    def bodyweight_ratio(
        self,
        profile_id: str,
        max_log_id: str,
        bodyweight: float,
    ) -> BodyweightRatioResult:
        """Estimated 1RM relative to the lifter's bodyweight."""
        result = self._load(profile_id, max_log_id)
        if not result.success:
            return BodyweightRatioResult(
                success=False, error=result.error, not_found=result.not_found
            )
        return BodyweightRatioResult(
            success=True,
            ratio=result.max_log.bodyweight_ratio(bodyweight),
            max_log=result.max_log,
        )

    def summary(self, profile_id: str, max_log_id: str) -> MaxLogSummaryResult:
        """One-line human-readable summary of a max log."""
        result = self._load(profile_id, max_log_id)
        if not result.success:
            return MaxLogSummaryResult(
                success=False, error=result.error, not_found=result.not_found
            )
        return MaxLogSummaryResult(
            success=True, summary=result.max_log.summary(), max_log=result.max_log
        )

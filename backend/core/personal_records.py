"""
Personal-record aggregation over a profile's max-log history.

This module provides pure functions over in-memory lists of MaxLog entities:
- Best record per exercise with improvement deltas
- Trend classification over a lookback window
- Strongest exercises, recent activity and per-exercise history
- Dashboard summary

None of these functions raise for empty input.
"""
import calendar
import logging
from datetime import date, datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional, Tuple

from domain.exceptions import ValidationError
from domain.models import (
    MaxLog,
    MaxLogSummary,
    PerformanceComparison,
    PersonalRecord,
    RecordHistory,
    RecordImprovement,
    Trend,
)

logger = logging.getLogger(__name__)

# Percentage change needed before a comparison counts as a trend
TREND_THRESHOLD_PERCENT = 5.0

# Share of records with an improvement needed for an "improving" profile
IMPROVING_RATIO = 0.6

DEFAULT_RECENT_DAYS = 30
DEFAULT_STRONGEST_LIMIT = 10
DEFAULT_RECENT_LIMIT = 10

TIMEFRAMES = ("week", "month", "quarter")


# =============================================================================
# Helpers
# =============================================================================


def _today(now: Optional[datetime]) -> date:
    return (now or datetime.now(timezone.utc)).date()


def _chronological_key(log: MaxLog) -> Tuple[date, datetime]:
    return (log.date, log.created_at)


def _group_by_exercise(max_logs: Iterable[MaxLog]) -> Dict[str, List[MaxLog]]:
    grouped: Dict[str, List[MaxLog]] = {}
    for log in max_logs:
        grouped.setdefault(log.exercise_id, []).append(log)
    return grouped


def subtract_months(day: date, months: int) -> date:
    """
    Move ``day`` back by whole calendar months.

    The day of month is clamped to the target month's length, so
    31 March minus one month is 28 (or 29) February.
    """
    month_index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def window_start(timeframe: str, today: date) -> date:
    """
    First date included in a lookback window ending today.

    Raises:
        ValidationError: For an unknown timeframe.
    """
    if timeframe == "week":
        return today - timedelta(days=7)
    if timeframe == "month":
        return subtract_months(today, 1)
    if timeframe == "quarter":
        return subtract_months(today, 3)
    raise ValidationError(
        f"Unknown timeframe: {timeframe}",
        [f"Timeframe must be one of: {', '.join(TIMEFRAMES)}"],
    )


# =============================================================================
# Records
# =============================================================================


def compute_records(max_logs: Iterable[MaxLog]) -> Dict[str, PersonalRecord]:
    """
    Compute the current personal record for every exercise.

    Logs are evaluated oldest first (by date, then creation time). A later
    log only replaces the record when its estimated 1RM is strictly greater,
    so ties keep the earlier record.

    Args:
        max_logs: Any number of logs for one profile

    Returns:
        Mapping of exercise_id -> PersonalRecord
    """
    records: Dict[str, PersonalRecord] = {}

    for log in sorted(max_logs, key=_chronological_key):
        current = records.get(log.exercise_id)
        if current is None:
            records[log.exercise_id] = PersonalRecord.from_log(log)
            continue

        if log.estimated_1rm > current.estimated_1rm:
            improvement = RecordImprovement(
                previous_weight=current.weight,
                previous_date=current.date,
                weight_increase=log.weight - current.weight,
                days_between=(log.date - current.date).days,
            )
            records[log.exercise_id] = PersonalRecord.from_log(log, improvement)

    logger.debug("Computed %d personal records", len(records))
    return records


def is_new_record(max_log: MaxLog, records: Dict[str, PersonalRecord]) -> bool:
    """True if ``max_log`` would beat the current record for its exercise."""
    current = records.get(max_log.exercise_id)
    if current is None:
        return True
    return max_log.estimated_1rm > current.estimated_1rm


def get_strongest_exercises(
    records: Iterable[PersonalRecord],
    limit: int = DEFAULT_STRONGEST_LIMIT,
) -> List[PersonalRecord]:
    """Records sorted by estimated 1RM, strongest first."""
    if isinstance(records, dict):
        records = records.values()
    ranked = sorted(records, key=lambda r: r.estimated_1rm, reverse=True)
    return ranked[: max(limit, 0)]


def progress_trend(records: Iterable[PersonalRecord]) -> Trend:
    """
    Overall trend across exercises.

    Improving when more than 60% of records beat an earlier best.
    """
    if isinstance(records, dict):
        records = records.values()
    records = list(records)
    if not records:
        return Trend.INSUFFICIENT_DATA

    improved = sum(1 for r in records if r.improvement is not None)
    if improved / len(records) > IMPROVING_RATIO:
        return Trend.IMPROVING
    return Trend.STABLE


# =============================================================================
# Performance comparison
# =============================================================================


def compare_performance(
    max_logs: Iterable[MaxLog],
    exercise_id: str,
    timeframe: str = "month",
    *,
    now: Optional[datetime] = None,
) -> PerformanceComparison:
    """
    Classify an exercise's trend over a lookback window.

    Compares the newest log in the window against the oldest one:
    a change above +5% is improving, below -5% declining, otherwise stable.

    Args:
        max_logs: Logs for the profile (any exercise)
        exercise_id: Exercise to compare
        timeframe: "week" (7 days), "month" or "quarter" (calendar months)
        now: Clock override

    Returns:
        PerformanceComparison. With fewer than two logs in the window the
        trend is insufficient_data and ``recent`` is the only log (if any).

    Raises:
        ValidationError: For an unknown timeframe.
    """
    start = window_start(timeframe, _today(now))

    in_window = sorted(
        (
            log
            for log in max_logs
            if log.exercise_id == exercise_id and log.date >= start
        ),
        key=_chronological_key,
    )

    if len(in_window) < 2:
        return PerformanceComparison(
            trend=Trend.INSUFFICIENT_DATA,
            change=0.0,
            recent=in_window[-1] if in_window else None,
            previous=None,
        )

    previous = in_window[0]
    recent = in_window[-1]
    if previous.estimated_1rm > 0:
        change = (recent.estimated_1rm - previous.estimated_1rm) / previous.estimated_1rm * 100
    else:
        change = 0.0

    if change > TREND_THRESHOLD_PERCENT:
        trend = Trend.IMPROVING
    elif change < -TREND_THRESHOLD_PERCENT:
        trend = Trend.DECLINING
    else:
        trend = Trend.STABLE

    return PerformanceComparison(trend=trend, change=change, recent=recent, previous=previous)


# =============================================================================
# History and activity
# =============================================================================


def latest_by_exercise(max_logs: Iterable[MaxLog]) -> Dict[str, MaxLog]:
    """Most recent log per exercise."""
    return {
        exercise_id: max(logs, key=_chronological_key)
        for exercise_id, logs in _group_by_exercise(max_logs).items()
    }


def record_history(max_logs: Iterable[MaxLog]) -> List[RecordHistory]:
    """
    Logs grouped per exercise, newest first.

    Exercises are ordered by their most recent log date, newest first.
    """
    histories = []
    for exercise_id, logs in _group_by_exercise(max_logs).items():
        ordered = sorted(logs, key=_chronological_key, reverse=True)
        histories.append(
            RecordHistory(
                exercise_id=exercise_id,
                logs=ordered,
                total=len(ordered),
                last_date=ordered[0].date,
            )
        )
    histories.sort(key=lambda h: h.last_date, reverse=True)
    return histories


def recent_records(
    max_logs: Iterable[MaxLog],
    days: int = DEFAULT_RECENT_DAYS,
    limit: int = DEFAULT_RECENT_LIMIT,
    *,
    now: Optional[datetime] = None,
) -> List[MaxLog]:
    """Logs achieved within the last ``days`` days, newest first."""
    cutoff = _today(now) - timedelta(days=days)
    recent = [log for log in max_logs if log.date >= cutoff]
    recent.sort(key=_chronological_key, reverse=True)
    return recent[: max(limit, 0)]


def summarize(
    max_logs: Iterable[MaxLog],
    *,
    strongest_limit: int = DEFAULT_STRONGEST_LIMIT,
    recent_limit: int = DEFAULT_RECENT_LIMIT,
) -> MaxLogSummary:
    """
    Overview of a profile's max logs.

    ``recent_activity`` holds the newest logs regardless of age.
    """
    max_logs = list(max_logs)
    if not max_logs:
        return MaxLogSummary()

    records = compute_records(max_logs)
    newest_first = sorted(max_logs, key=_chronological_key, reverse=True)

    return MaxLogSummary(
        total_logs=len(max_logs),
        personal_records=sorted(records.values(), key=lambda r: r.date, reverse=True),
        recent_activity=newest_first[:recent_limit],
        strongest_exercises=get_strongest_exercises(records, strongest_limit),
        progress_trend=progress_trend(records),
        last_log_date=newest_first[0].date,
    )

"""
Unit tests for personal-record aggregation.

Tests cover:
- Record computation with strict-improvement replacement
- Performance comparison over week/month/quarter windows
- Strongest exercises, progress trend, history and summary
"""
from datetime import date, datetime, timedelta, timezone

import pytest

from backend.core.personal_records import (
    compare_performance,
    compute_records,
    get_strongest_exercises,
    is_new_record,
    latest_by_exercise,
    progress_trend,
    recent_records,
    record_history,
    subtract_months,
    summarize,
    window_start,
)
from domain.exceptions import ValidationError
from domain.models import Trend
from tests.fakes import make_max_log

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)
TODAY = NOW.date()


def days_ago(days: int) -> date:
    return TODAY - timedelta(days=days)


# =============================================================================
# compute_records
# =============================================================================


@pytest.mark.unit
class TestComputeRecords:
    """Tests for compute_records."""

    def test_empty_input(self):
        assert compute_records([]) == {}

    def test_single_log_has_no_improvement(self):
        log = make_max_log("bench", 100, 5, days_ago(10))
        records = compute_records([log])

        record = records["bench"]
        assert record.max_log_id == log.id
        assert record.weight == 100
        assert record.reps == 5
        assert record.estimated_1rm == pytest.approx(log.estimated_1rm)
        assert record.improvement is None

    def test_later_better_log_replaces_record(self):
        first = make_max_log("bench", 100, 5, date(2024, 1, 1))
        second = make_max_log("bench", 110, 5, date(2024, 1, 31))

        record = compute_records([second, first])["bench"]

        assert record.max_log_id == second.id
        assert record.improvement is not None
        assert record.improvement.previous_weight == 100
        assert record.improvement.previous_date == date(2024, 1, 1)
        assert record.improvement.weight_increase == pytest.approx(10)
        assert record.improvement.days_between == 30

    def test_later_weaker_log_does_not_replace(self):
        best = make_max_log("squat", 150, 3, date(2024, 1, 1))
        weaker = make_max_log("squat", 140, 3, date(2024, 2, 1))

        record = compute_records([best, weaker])["squat"]

        assert record.max_log_id == best.id
        assert record.improvement is None

    def test_tie_keeps_earlier_record(self):
        earlier = make_max_log("deadlift", 200, 1, date(2024, 1, 1))
        later = make_max_log("deadlift", 200, 1, date(2024, 3, 1))

        record = compute_records([later, earlier])["deadlift"]

        assert record.max_log_id == earlier.id

    def test_improvement_can_have_lower_weight(self):
        heavy_single = make_max_log("bench", 120, 1, date(2024, 1, 1))
        rep_set = make_max_log("bench", 110, 5, date(2024, 2, 1))  # e1RM ~126

        record = compute_records([heavy_single, rep_set])["bench"]

        assert record.max_log_id == rep_set.id
        assert record.improvement.weight_increase == pytest.approx(-10)

    def test_same_date_uses_creation_order(self):
        day = date(2024, 1, 1)
        first = make_max_log(
            "bench", 100, 1, day,
            created_at=datetime(2024, 1, 1, 9, tzinfo=timezone.utc),
        )
        second = make_max_log(
            "bench", 100, 1, day,
            created_at=datetime(2024, 1, 1, 10, tzinfo=timezone.utc),
        )

        assert compute_records([second, first])["bench"].max_log_id == first.id

    def test_record_is_maximum_up_to_its_date(self):
        logs = [
            make_max_log("bench", w, r, date(2024, 1, 1) + timedelta(days=7 * i))
            for i, (w, r) in enumerate([(100, 5), (95, 8), (105, 3), (90, 10), (102, 6)])
        ]
        record = compute_records(logs)["bench"]

        eligible = [l for l in logs if l.date <= record.date]
        assert record.estimated_1rm == max(l.estimated_1rm for l in eligible)
        assert record.estimated_1rm == max(l.estimated_1rm for l in logs)

    def test_running_best_never_decreases(self):
        logs = [
            make_max_log("bench", w, r, date(2024, 1, 1) + timedelta(days=7 * i))
            for i, (w, r) in enumerate(
                [(100, 5), (95, 8), (105, 3), (90, 10), (105, 3), (102, 6), (110, 2)]
            )
        ]

        running = [
            compute_records(logs[: i + 1])["bench"].estimated_1rm for i in range(len(logs))
        ]

        assert running == sorted(running)
        assert running[-1] == max(l.estimated_1rm for l in logs)

    def test_groups_by_exercise(self):
        logs = [
            make_max_log("bench", 100, 5, days_ago(3)),
            make_max_log("squat", 140, 5, days_ago(2)),
        ]
        assert set(compute_records(logs)) == {"bench", "squat"}

    def test_is_new_record(self):
        log = make_max_log("bench", 100, 5, days_ago(3))
        records = compute_records([log])

        assert is_new_record(make_max_log("bench", 105, 5, days_ago(1)), records)
        assert not is_new_record(make_max_log("bench", 100, 5, days_ago(1)), records)
        assert is_new_record(make_max_log("row", 60, 8, days_ago(1)), records)


# =============================================================================
# compare_performance
# =============================================================================


@pytest.mark.unit
class TestComparePerformance:
    """Tests for compare_performance."""

    def test_no_logs(self):
        result = compare_performance([], "bench", now=NOW)

        assert result.trend == Trend.INSUFFICIENT_DATA
        assert result.change == 0
        assert result.recent is None
        assert result.previous is None

    def test_single_log_in_window(self):
        log = make_max_log("bench", 100, 5, days_ago(3))
        result = compare_performance([log], "bench", now=NOW)

        assert result.trend == Trend.INSUFFICIENT_DATA
        assert result.recent == log
        assert result.previous is None

    def test_improving(self):
        old = make_max_log("bench", 100, 5, days_ago(20))
        new = make_max_log("bench", 110, 5, days_ago(2))

        result = compare_performance([new, old], "bench", now=NOW)

        assert result.trend == Trend.IMPROVING
        assert result.change == pytest.approx(10)
        assert result.recent == new
        assert result.previous == old

    def test_declining(self):
        old = make_max_log("bench", 100, 5, days_ago(20))
        new = make_max_log("bench", 90, 5, days_ago(2))

        result = compare_performance([old, new], "bench", now=NOW)

        assert result.trend == Trend.DECLINING
        assert result.change == pytest.approx(-10)

    def test_small_change_is_stable(self):
        old = make_max_log("bench", 100, 5, days_ago(20))
        new = make_max_log("bench", 104, 5, days_ago(2))

        assert compare_performance([old, new], "bench", now=NOW).trend == Trend.STABLE

    def test_exactly_five_percent_is_stable(self):
        old = make_max_log("bench", 100, 1, days_ago(20))
        new = make_max_log("bench", 105, 1, days_ago(2))

        assert compare_performance([old, new], "bench", now=NOW).trend == Trend.STABLE

    def test_uses_oldest_and_newest_in_window(self):
        logs = [
            make_max_log("bench", 100, 1, days_ago(25)),
            make_max_log("bench", 130, 1, days_ago(15)),
            make_max_log("bench", 101, 1, days_ago(1)),
        ]
        result = compare_performance(logs, "bench", now=NOW)

        assert result.previous.weight == 100
        assert result.recent.weight == 101
        assert result.trend == Trend.STABLE

    def test_week_window_excludes_older_logs(self):
        logs = [
            make_max_log("bench", 80, 1, days_ago(10)),
            make_max_log("bench", 100, 1, days_ago(5)),
        ]
        week = compare_performance(logs, "bench", "week", now=NOW)
        month = compare_performance(logs, "bench", "month", now=NOW)

        assert week.trend == Trend.INSUFFICIENT_DATA
        assert month.trend == Trend.IMPROVING

    def test_quarter_window(self):
        logs = [
            make_max_log("bench", 100, 1, days_ago(80)),
            make_max_log("bench", 120, 1, days_ago(1)),
        ]
        assert compare_performance(logs, "bench", "month", now=NOW).trend == Trend.INSUFFICIENT_DATA
        assert compare_performance(logs, "bench", "quarter", now=NOW).trend == Trend.IMPROVING

    def test_ignores_other_exercises(self):
        logs = [
            make_max_log("squat", 100, 1, days_ago(10)),
            make_max_log("bench", 100, 1, days_ago(5)),
        ]
        assert compare_performance(logs, "bench", now=NOW).trend == Trend.INSUFFICIENT_DATA

    def test_unknown_timeframe(self):
        with pytest.raises(ValidationError):
            compare_performance([], "bench", "year", now=NOW)


@pytest.mark.unit
class TestWindows:
    """Tests for calendar month arithmetic."""

    def test_subtract_month_clamps_day(self):
        assert subtract_months(date(2024, 3, 31), 1) == date(2024, 2, 29)
        assert subtract_months(date(2023, 3, 31), 1) == date(2023, 2, 28)

    def test_subtract_months_crosses_year(self):
        assert subtract_months(date(2024, 2, 15), 3) == date(2023, 11, 15)

    def test_window_starts(self):
        today = date(2024, 6, 15)
        assert window_start("week", today) == date(2024, 6, 8)
        assert window_start("month", today) == date(2024, 5, 15)
        assert window_start("quarter", today) == date(2024, 3, 15)


# =============================================================================
# Strongest, trend, history, summary
# =============================================================================


@pytest.mark.unit
class TestRecordViews:
    """Tests for the derived views over records and logs."""

    def test_strongest_exercises_sorted_and_limited(self):
        logs = [
            make_max_log(f"ex-{i}", 50 + i * 10, 1, days_ago(i + 1))
            for i in range(12)
        ]
        strongest = get_strongest_exercises(compute_records(logs))

        assert len(strongest) == 10
        assert strongest[0].exercise_id == "ex-11"
        values = [r.estimated_1rm for r in strongest]
        assert values == sorted(values, reverse=True)

    def test_strongest_with_custom_limit(self):
        logs = [make_max_log("a", 100, 1, days_ago(1)), make_max_log("b", 50, 1, days_ago(1))]
        assert [r.exercise_id for r in get_strongest_exercises(compute_records(logs), 1)] == ["a"]

    def test_progress_trend_no_records(self):
        assert progress_trend({}) == Trend.INSUFFICIENT_DATA

    def test_progress_trend_improving(self):
        logs = [
            make_max_log("bench", 100, 1, days_ago(20)),
            make_max_log("bench", 110, 1, days_ago(10)),
            make_max_log("squat", 140, 1, days_ago(20)),
            make_max_log("squat", 150, 1, days_ago(10)),
        ]
        assert progress_trend(compute_records(logs)) == Trend.IMPROVING

    def test_progress_trend_stable_at_sixty_percent(self):
        logs = []
        for i, exercise in enumerate(["a", "b", "c", "d", "e"]):
            logs.append(make_max_log(exercise, 100, 1, days_ago(20)))
            if i < 3:
                logs.append(make_max_log(exercise, 110, 1, days_ago(10)))

        assert progress_trend(compute_records(logs)) == Trend.STABLE

    def test_latest_by_exercise(self):
        older = make_max_log("bench", 120, 1, days_ago(10))
        newer = make_max_log("bench", 100, 5, days_ago(2))
        squat = make_max_log("squat", 140, 3, days_ago(4))

        latest = latest_by_exercise([older, squat, newer])

        assert latest == {"bench": newer, "squat": squat}

    def test_record_history(self):
        logs = [
            make_max_log("bench", 100, 5, days_ago(10)),
            make_max_log("bench", 105, 5, days_ago(3)),
            make_max_log("squat", 140, 5, days_ago(1)),
        ]
        history = record_history(logs)

        assert [h.exercise_id for h in history] == ["squat", "bench"]
        bench = history[1]
        assert bench.total == 2
        assert bench.last_date == days_ago(3)
        assert [l.weight for l in bench.logs] == [105, 100]

    def test_recent_records(self):
        logs = [
            make_max_log("bench", 100, 5, days_ago(45)),
            make_max_log("bench", 105, 5, days_ago(20)),
            make_max_log("squat", 140, 5, days_ago(1)),
        ]
        recent = recent_records(logs, now=NOW)

        assert [l.exercise_id for l in recent] == ["squat", "bench"]

    def test_recent_records_limit(self):
        logs = [make_max_log("bench", 100 + i, 1, days_ago(i)) for i in range(15)]
        assert len(recent_records(logs, now=NOW)) == 10

    def test_summary_empty(self):
        summary = summarize([])

        assert summary.total_logs == 0
        assert summary.personal_records == []
        assert summary.progress_trend == Trend.INSUFFICIENT_DATA
        assert summary.last_log_date is None

    def test_summary(self):
        logs = [
            make_max_log("bench", 100, 5, days_ago(10)),
            make_max_log("bench", 110, 5, days_ago(3)),
            make_max_log("squat", 140, 5, days_ago(1)),
        ]
        summary = summarize(logs)

        assert summary.total_logs == 3
        assert len(summary.personal_records) == 2
        assert summary.recent_activity[0].exercise_id == "squat"
        assert summary.strongest_exercises[0].exercise_id == "squat"
        assert summary.last_log_date == days_ago(1)
        # 1 of 2 records improved
        assert summary.progress_trend == Trend.STABLE

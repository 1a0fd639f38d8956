"""
Unit tests for RecordsService using the fake max-log repository.
"""
from datetime import datetime, timezone

import pytest

from backend.core.records_service import RecordsService
from domain.exceptions import ValidationError
from domain.models import Trend
from tests.fakes import DEFAULT_PROFILE_ID, create_max_log_repo

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def service():
    repo = create_max_log_repo(
        [
            ("bench", 100, 5, 40),
            ("bench", 110, 5, 10),
            ("squat", 150, 3, 20),
            ("row", 60, 10, 2),
        ],
        today=NOW.date(),
    )
    return RecordsService(repo, recent_days=30, strongest_limit=2)


@pytest.mark.unit
class TestRecordsService:
    """Tests for RecordsService."""

    def test_get_records(self, service):
        records = service.get_records(DEFAULT_PROFILE_ID)

        assert set(records) == {"bench", "squat", "row"}
        assert records["bench"].weight == 110
        assert records["bench"].improvement.previous_weight == 100

    def test_records_are_profile_scoped(self, service):
        assert service.get_records("nobody") == {}

    def test_get_record(self, service):
        assert service.get_record(DEFAULT_PROFILE_ID, "squat").weight == 150
        assert service.get_record(DEFAULT_PROFILE_ID, "curl") is None

    def test_strongest_uses_configured_limit(self, service):
        strongest = service.get_strongest_exercises(DEFAULT_PROFILE_ID)

        assert [r.exercise_id for r in strongest] == ["squat", "bench"]

    def test_strongest_explicit_limit(self, service):
        assert len(service.get_strongest_exercises(DEFAULT_PROFILE_ID, limit=3)) == 3

    def test_progress_trend(self, service):
        # 1 of 3 records improved
        assert service.get_progress_trend(DEFAULT_PROFILE_ID) == Trend.STABLE

    def test_compare_performance(self, service):
        month = service.compare_performance(DEFAULT_PROFILE_ID, "bench", "month", now=NOW)
        quarter = service.compare_performance(DEFAULT_PROFILE_ID, "bench", "quarter", now=NOW)

        assert month.trend == Trend.INSUFFICIENT_DATA
        assert quarter.trend == Trend.IMPROVING

    def test_compare_performance_unknown_timeframe(self, service):
        with pytest.raises(ValidationError):
            service.compare_performance(DEFAULT_PROFILE_ID, "bench", "decade", now=NOW)

    def test_history(self, service):
        history = service.get_history(DEFAULT_PROFILE_ID)

        assert [h.exercise_id for h in history] == ["row", "bench", "squat"]
        assert history[1].total == 2

    def test_recent_records(self, service):
        recent = service.get_recent_records(DEFAULT_PROFILE_ID, now=NOW)

        assert [l.exercise_id for l in recent] == ["row", "bench", "squat"]

    def test_summary(self, service):
        summary = service.get_summary(DEFAULT_PROFILE_ID)

        assert summary.total_logs == 4
        assert len(summary.personal_records) == 3
        assert len(summary.strongest_exercises) == 2
        assert summary.recent_activity[0].exercise_id == "row"

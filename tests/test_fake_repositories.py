"""
Tests for the in-memory fake repository used across the suite.
"""
from datetime import date

import pytest

from tests.fakes import (
    DEFAULT_PROFILE_ID,
    FakeMaxLogRepository,
    create_max_log_repo,
    make_max_log,
)

pytestmark = pytest.mark.unit


class TestFakeMaxLogRepository:
    """Tests for FakeMaxLogRepository."""

    def test_save_and_find(self):
        repo = FakeMaxLogRepository()
        log = make_max_log("bench", 100, 5, date(2024, 3, 1))

        repo.save(log)

        assert repo.find_by_id(DEFAULT_PROFILE_ID, log.id) == log
        assert repo.save_calls == [log]

    def test_find_is_profile_scoped(self):
        log = make_max_log("bench", 100, 5, date(2024, 3, 1))
        repo = FakeMaxLogRepository([log])

        assert repo.find_by_id("other", log.id) is None
        assert repo.find_all("other") == []

    def test_find_all_is_chronological(self):
        later = make_max_log("bench", 100, 5, date(2024, 3, 5))
        earlier = make_max_log("squat", 120, 5, date(2024, 3, 1))
        repo = FakeMaxLogRepository([later, earlier])

        assert repo.find_all(DEFAULT_PROFILE_ID) == [earlier, later]

    def test_delete(self):
        log = make_max_log("bench", 100, 5, date(2024, 3, 1))
        repo = FakeMaxLogRepository([log])

        repo.delete("other", log.id)
        assert repo.count() == 1

        repo.delete(DEFAULT_PROFILE_ID, log.id)
        assert repo.count() == 0

    def test_simulated_failures(self):
        repo = FakeMaxLogRepository()
        repo.fail_on_save = True
        repo.fail_on_read = True

        with pytest.raises(RuntimeError):
            repo.save(make_max_log("bench", 100, 5, date(2024, 3, 1)))
        with pytest.raises(RuntimeError):
            repo.find_all(DEFAULT_PROFILE_ID)

    def test_reset(self):
        repo = FakeMaxLogRepository([make_max_log("bench", 100, 5, date(2024, 3, 1))])
        repo.fail_on_read = True

        repo.reset()

        assert repo.count() == 0
        assert repo.fail_on_read is False


class TestFactories:
    """Tests for the fake factory helpers."""

    def test_make_max_log_computes_estimates(self):
        log = make_max_log("bench", 100, 1, date(2024, 3, 1))
        assert log.estimated_1rm == 100

    def test_create_max_log_repo(self):
        repo = create_max_log_repo(
            [("bench", 100, 5, 3), ("squat", 140, 3, 1)],
            today=date(2024, 3, 10),
        )

        logs = repo.find_all(DEFAULT_PROFILE_ID)
        assert [(l.exercise_id, l.date) for l in logs] == [
            ("bench", date(2024, 3, 7)),
            ("squat", date(2024, 3, 9)),
        ]

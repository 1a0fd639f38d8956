"""
Personal-record detection for completed workouts.

Given a finished workout and the profile's max-log history, decide which
performed sets set a new record and classify them:

- first_pr:  no earlier log for the exercise
- new_pr:    heavier than the best logged weight
- rep_pr:    same weight as the best, more reps than logged at that weight
- volume_pr: weight x reps beats the best logged volume

A set gets the first classification that applies. At most one alert is
emitted per exercise: the heaviest, then by the order above, then the
first encountered.
"""
import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Dict, Iterable, List, Optional

from domain.models import (
    AlertImprovement,
    CompletedWorkout,
    MaxLog,
    PerformedExercise,
    PRAlert,
    PRType,
    RecordSnapshot,
)

logger = logging.getLogger(__name__)

# Loads are stored to 0.01; anything closer than half of that is the same weight
WEIGHT_TOLERANCE = 0.005

PRECEDENCE: Dict[PRType, int] = {
    PRType.FIRST_PR: 0,
    PRType.NEW_PR: 1,
    PRType.REP_PR: 2,
    PRType.VOLUME_PR: 3,
}


@dataclass
class ExerciseBest:
    """Best marks for one exercise before the workout."""

    weight_log: MaxLog  # heaviest log, most reps among equal weights
    volume_log: MaxLog  # highest weight x reps

    @property
    def best_weight(self) -> float:
        return self.weight_log.weight

    @property
    def reps_at_best_weight(self) -> int:
        return self.weight_log.reps

    @property
    def best_volume(self) -> float:
        return self.volume_log.volume


def _same_weight(a: float, b: float) -> bool:
    return abs(a - b) <= WEIGHT_TOLERANCE


def _snapshot(log: MaxLog) -> RecordSnapshot:
    return RecordSnapshot(weight=log.weight, reps=log.reps, date=log.date)


def find_exercise_best(logs: List[MaxLog]) -> Optional[ExerciseBest]:
    """Best weight, reps at that weight and best volume, or None without history."""
    if not logs:
        return None

    best_weight = max(log.weight for log in logs)
    at_best = [log for log in logs if _same_weight(log.weight, best_weight)]
    weight_log = max(at_best, key=lambda log: log.reps)
    volume_log = max(logs, key=lambda log: log.volume)
    return ExerciseBest(weight_log=weight_log, volume_log=volume_log)


def classify_set(
    weight: float,
    reps: int,
    best: Optional[ExerciseBest],
) -> Optional[tuple]:
    """
    Classify a single eligible set against the exercise's history.

    Returns:
        (PRType, previous MaxLog or None, AlertImprovement), or None when the
        set is not a record.
    """
    if best is None:
        return (
            PRType.FIRST_PR,
            None,
            AlertImprovement(weight_increase=weight, percentage_increase=100.0),
        )

    if weight > best.best_weight and not _same_weight(weight, best.best_weight):
        increase = weight - best.best_weight
        return (
            PRType.NEW_PR,
            best.weight_log,
            AlertImprovement(
                weight_increase=increase,
                percentage_increase=increase / best.best_weight * 100,
            ),
        )

    if _same_weight(weight, best.best_weight) and reps > best.reps_at_best_weight:
        return (
            PRType.REP_PR,
            best.weight_log,
            AlertImprovement(
                weight_increase=0.0,
                percentage_increase=(reps - best.reps_at_best_weight)
                / best.reps_at_best_weight
                * 100,
            ),
        )

    volume = weight * reps
    if volume > best.best_volume:
        return (
            PRType.VOLUME_PR,
            best.volume_log,
            AlertImprovement(
                weight_increase=0.0,
                percentage_increase=(volume - best.best_volume) / best.best_volume * 100,
            ),
        )

    return None


def _outranks(candidate: PRAlert, current: PRAlert) -> bool:
    if candidate.new_record.weight != current.new_record.weight:
        return candidate.new_record.weight > current.new_record.weight
    return PRECEDENCE[candidate.type] < PRECEDENCE[current.type]


def record_date_for(end_time: datetime) -> date:
    """UTC calendar date of a workout end; naive times are taken as UTC."""
    if end_time.tzinfo is not None:
        end_time = end_time.astimezone(timezone.utc)
    return end_time.date()


def _check_exercise(
    workout: CompletedWorkout,
    performed: PerformedExercise,
    history: List[MaxLog],
) -> Optional[PRAlert]:
    best = find_exercise_best(history)
    record_date = record_date_for(workout.end_time)

    winner: Optional[PRAlert] = None
    for workout_set in performed.eligible_sets():
        result = classify_set(workout_set.weight, workout_set.reps, best)
        if result is None:
            continue

        pr_type, previous, improvement = result
        alert = PRAlert(
            exercise_id=performed.exercise_id,
            exercise_name=performed.display_name,
            type=pr_type,
            new_record=RecordSnapshot(
                weight=workout_set.weight, reps=workout_set.reps, date=record_date
            ),
            previous_record=_snapshot(previous) if previous is not None else None,
            improvement=improvement,
        )
        if winner is None or _outranks(alert, winner):
            winner = alert

    return winner


def check_for_records(
    workout: CompletedWorkout,
    history: Iterable[MaxLog],
) -> List[PRAlert]:
    """
    Detect personal records achieved in a finished workout.

    Args:
        workout: The workout to check; skipped while ``end_time`` is unset
        history: The profile's max logs recorded before this workout

    Returns:
        At most one PRAlert per exercise, in workout order
    """
    if workout.end_time is None:
        logger.debug("Workout %s still in progress, skipping PR check", workout.id)
        return []

    by_exercise: Dict[str, List[MaxLog]] = {}
    for log in history:
        by_exercise.setdefault(log.exercise_id, []).append(log)

    alerts: List[PRAlert] = []
    seen: Dict[str, int] = {}
    for performed in workout.exercises:
        alert = _check_exercise(
            workout, performed, by_exercise.get(performed.exercise_id, [])
        )
        if alert is None:
            continue

        # Same exercise listed twice in a workout still yields one alert
        if performed.exercise_id in seen:
            index = seen[performed.exercise_id]
            if _outranks(alert, alerts[index]):
                alerts[index] = alert
            continue

        seen[performed.exercise_id] = len(alerts)
        alerts.append(alert)

    logger.info(
        "PR check for workout %s found %d record(s)", workout.id, len(alerts)
    )
    return alerts

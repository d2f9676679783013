"""Threshold rules that turn performance metrics into adaptation proposals."""

import logging
from collections import Counter

from ..models.adaptation import AdaptationProposal, AdaptationType, PerformanceMetrics
from ..models.workout import Workout, WorkoutExercise

logger = logging.getLogger(__name__)

INCREASE_THRESHOLD = 0.9
INCREASE_STREAK = 3
DECREASE_THRESHOLD = 0.7
DECREASE_STREAK = 2
REST_COMPLETION_THRESHOLD = 0.6
REST_CONSISTENCY_THRESHOLD = 0.8
UNDERPERFORMANCE_RATIO = 0.7
FAILURES_BEFORE_SWAP = 3


def _fell_short(planned: WorkoutExercise, completed: WorkoutExercise) -> bool:
    """True if a completed entry missed its planned reps or duration by 30%+."""
    if (
        planned.reps is not None
        and completed.reps is not None
        and completed.reps < planned.reps * UNDERPERFORMANCE_RATIO
    ):
        return True
    if (
        planned.duration_seconds is not None
        and completed.duration_seconds is not None
        and completed.duration_seconds < planned.duration_seconds * UNDERPERFORMANCE_RATIO
    ):
        return True
    return False


def _failed_exercise_ids(workout: Workout) -> list[str]:
    """Exercises in one workout that were skipped or clearly underperformed.

    The n-th planned occurrence of an exercise is matched with the n-th
    completed occurrence of the same exercise.
    """
    completed_by_id: dict[str, list[WorkoutExercise]] = {}
    for entry in workout.completed_exercises:
        completed_by_id.setdefault(entry.exercise_id, []).append(entry)

    seen: Counter[str] = Counter()
    failed: dict[str, None] = {}
    for planned in workout.planned_exercises:
        occurrence = seen[planned.exercise_id]
        seen[planned.exercise_id] += 1

        matches = completed_by_id.get(planned.exercise_id, [])
        if occurrence >= len(matches) or _fell_short(planned, matches[occurrence]):
            failed[planned.exercise_id] = None

    return list(failed)


def find_consistently_failed_exercises(workouts: list[Workout]) -> list[str]:
    """Exercise ids that failed in at least three of the given workouts.

    Returned in the order each exercise first failed.
    """
    failures: Counter[str] = Counter()
    for workout in workouts:
        for exercise_id in _failed_exercise_ids(workout):
            failures[exercise_id] += 1

    return [
        exercise_id
        for exercise_id, count in failures.items()
        if count >= FAILURES_BEFORE_SWAP
    ]


def _tail_all(workouts: list[Workout], count: int, predicate) -> bool:
    return all(predicate(w.completion_ratio) for w in workouts[-count:])


def decide_adaptations(metrics: PerformanceMetrics) -> list[AdaptationProposal]:
    """Apply every adaptation rule to the metrics.

    All rules are evaluated independently. Matching proposals are returned in
    a fixed order: increase, decrease, exercise swaps, rest.
    """
    workouts = metrics.recent_workouts
    proposals: list[AdaptationProposal] = []

    # Aggregate and per-workout tail must both clear the bar
    if (
        metrics.completion_rate >= INCREASE_THRESHOLD
        and len(workouts) >= INCREASE_STREAK
        and _tail_all(workouts, INCREASE_STREAK, lambda r: r >= INCREASE_THRESHOLD)
    ):
        proposals.append(
            AdaptationProposal(
                adaptation_type=AdaptationType.INCREASE_DIFFICULTY,
                reason="3+ consecutive workouts with 90%+ completion rate",
                previous_value={"current_level": "previous"},
                new_value={"difficulty_increase": 1},
            )
        )

    if (
        metrics.completion_rate < DECREASE_THRESHOLD
        and len(workouts) >= DECREASE_STREAK
        and _tail_all(workouts, DECREASE_STREAK, lambda r: r < DECREASE_THRESHOLD)
    ):
        proposals.append(
            AdaptationProposal(
                adaptation_type=AdaptationType.DECREASE_DIFFICULTY,
                reason="2+ consecutive workouts with <70% completion rate",
                previous_value={"current_level": "previous"},
                new_value={"difficulty_decrease": 1},
            )
        )

    for exercise_id in find_consistently_failed_exercises(workouts):
        proposals.append(
            AdaptationProposal(
                adaptation_type=AdaptationType.CHANGE_EXERCISE,
                reason=f"Exercise {exercise_id} failed 3 times in a row",
                previous_value={"original_exercise": exercise_id},
                new_value={"replace_exercise": exercise_id},
            )
        )

    # Regular training that still isn't finished reads as overtraining
    if (
        metrics.completion_rate < REST_COMPLETION_THRESHOLD
        and metrics.consistency_score > REST_CONSISTENCY_THRESHOLD
    ):
        proposals.append(
            AdaptationProposal(
                adaptation_type=AdaptationType.ADD_REST,
                reason="High consistency but low completion suggests overtraining",
                previous_value={"current_schedule": "daily"},
                new_value={"add_rest_day": True},
            )
        )

    logger.debug(
        "Adaptation rules fired: %s",
        [p.adaptation_type.value for p in proposals] or "none",
    )
    return proposals

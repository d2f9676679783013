"""Single-workout performance scoring."""

from ..models.exercises import Exercise
from ..models.workout import Workout

COMPLETION_WEIGHT = 0.6
DIFFICULTY_WEIGHT = 0.3
QUALITY_WEIGHT = 0.1


def _achieved_fraction(done: float | None, target: float | None) -> float | None:
    """Capped done/target ratio, or None when either side is not tracked."""
    if done is None or target is None or target <= 0:
        return None
    return min(1.0, done / target)


def score_performance(workout: Workout, catalog: list[Exercise]) -> float:
    """Score how well a workout was performed.

    Blends the completion ratio, the planned difficulty and a quality factor
    comparing each completed entry against the planned entry at the same
    position. Realistic inputs land in [0, 1]; the value is never negative.

    Args:
        workout: The workout to score
        catalog: Exercise catalog (unused by the current formula)

    Returns:
        Weighted performance score
    """
    difficulty_factor = workout.difficulty_score / 10

    quality_score = 1.0
    for planned, completed in zip(workout.planned_exercises, workout.completed_exercises):
        reps_fraction = _achieved_fraction(completed.reps, planned.reps)
        if reps_fraction is not None:
            quality_score *= reps_fraction

        duration_fraction = _achieved_fraction(
            completed.duration_seconds, planned.duration_seconds
        )
        if duration_fraction is not None:
            quality_score *= duration_fraction

    return (
        workout.completion_ratio * COMPLETION_WEIGHT
        + difficulty_factor * DIFFICULTY_WEIGHT
        + quality_score * QUALITY_WEIGHT
    )

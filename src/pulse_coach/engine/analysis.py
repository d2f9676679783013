"""Aggregate recent workouts into trend metrics."""

import logging

from ..models.adaptation import PerformanceMetrics
from ..models.exercises import Exercise
from ..models.user_profile import UserProfile
from ..models.workout import Workout

logger = logging.getLogger(__name__)

# Gap variance (in days squared) at which consistency drops to zero
CONSISTENCY_VARIANCE_SCALE = 10


def _mean(values: list[float]) -> float:
    return sum(values) / len(values)


def _by_date(workouts: list[Workout]) -> list[Workout]:
    return sorted(workouts, key=lambda w: w.date)


def calculate_consistency_score(workouts: list[Workout]) -> float:
    """Score how evenly spaced the workout dates are, in [0, 1].

    Only the variance of the gaps matters, not their size: training every
    seven days is as consistent as training every day.
    """
    if len(workouts) < 2:
        return 0.0

    dates = [w.date for w in _by_date(workouts)]
    gaps = [(later - earlier).days for earlier, later in zip(dates, dates[1:])]

    avg_gap = _mean(gaps)
    variance = _mean([(gap - avg_gap) ** 2 for gap in gaps])

    return min(1.0, max(0.0, 1 - variance / CONSISTENCY_VARIANCE_SCALE))


def calculate_difficulty_trend(workouts: list[Workout]) -> float:
    """Mean difficulty of the later half minus that of the earlier half.

    Positive means workouts are getting harder. On odd counts the earlier
    half is the smaller one.
    """
    if len(workouts) < 3:
        return 0.0

    ordered = _by_date(workouts)
    midpoint = len(ordered) // 2
    first_half = [w.difficulty_score for w in ordered[:midpoint]]
    second_half = [w.difficulty_score for w in ordered[midpoint:]]

    return _mean(second_half) - _mean(first_half)


def analyze_workout_pattern(
    recent_workouts: list[Workout],
    catalog: list[Exercise],
    user: UserProfile,
) -> PerformanceMetrics:
    """Compute performance metrics over a window of recent workouts.

    Args:
        recent_workouts: Workouts in the analysis window, any order
        catalog: Exercise catalog
        user: The user the workouts belong to

    Returns:
        PerformanceMetrics whose workout list is ordered oldest to newest
    """
    if not recent_workouts:
        return PerformanceMetrics()

    completion_rate = _mean([w.completion_ratio for w in recent_workouts])
    metrics = PerformanceMetrics(
        completion_rate=completion_rate,
        consistency_score=calculate_consistency_score(recent_workouts),
        difficulty_trend=calculate_difficulty_trend(recent_workouts),
        recent_workouts=_by_date(recent_workouts),
    )

    logger.debug(
        "Analysed %d workouts for %s: completion=%.2f consistency=%.2f trend=%.2f",
        len(recent_workouts),
        user.id,
        metrics.completion_rate,
        metrics.consistency_score,
        metrics.difficulty_trend,
    )
    return metrics

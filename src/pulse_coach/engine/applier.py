"""Apply an adaptation proposal to a workout."""

import logging
import math
import random
from dataclasses import replace

from ..models.adaptation import AdaptationProposal, AdaptationType
from ..models.exercises import Exercise
from ..models.workout import Workout, WorkoutExercise, completion_ratio

logger = logging.getLogger(__name__)

MAX_DIFFICULTY = 10
MIN_DIFFICULTY = 1
MAX_SETS = 4
MIN_REPS = 5
MIN_DURATION_SECONDS = 15
ALTERNATIVE_DIFFICULTY_RANGE = 2


def increase_exercise_difficulty(entry: WorkoutExercise) -> WorkoutExercise:
    """+10% reps and duration, +5% weight, one more set up to four."""
    changes = {}
    if entry.reps is not None:
        changes["reps"] = math.floor(entry.reps * 1.1)
    if entry.weight is not None:
        changes["weight"] = math.floor(entry.weight * 1.05)
    if entry.duration_seconds is not None:
        changes["duration_seconds"] = math.floor(entry.duration_seconds * 1.1)
    if entry.sets is not None and entry.sets < MAX_SETS:
        changes["sets"] = entry.sets + 1
    return replace(entry, **changes)


def decrease_exercise_difficulty(entry: WorkoutExercise) -> WorkoutExercise:
    """-10% reps and duration, -5% weight, one set fewer, within floors."""
    changes = {}
    if entry.reps is not None and entry.reps > MIN_REPS:
        changes["reps"] = max(MIN_REPS, math.floor(entry.reps * 0.9))
    if entry.weight is not None and entry.weight > 0:
        changes["weight"] = math.floor(entry.weight * 0.95)
    if entry.duration_seconds is not None and entry.duration_seconds > MIN_DURATION_SECONDS:
        changes["duration_seconds"] = max(
            MIN_DURATION_SECONDS, math.floor(entry.duration_seconds * 0.9)
        )
    if entry.sets is not None and entry.sets > 1:
        changes["sets"] = entry.sets - 1
    return replace(entry, **changes)


def find_alternative_exercises(original: Exercise, catalog: list[Exercise]) -> list[Exercise]:
    """Catalog exercises that can stand in for ``original``.

    Same category, at least one shared muscle group and a base difficulty
    within two points.
    """
    return [
        exercise
        for exercise in catalog
        if exercise.id != original.id
        and exercise.category == original.category
        and exercise.shares_muscles_with(original)
        and abs(exercise.difficulty_base - original.difficulty_base)
        <= ALTERNATIVE_DIFFICULTY_RANGE
    ]


def replace_with_alternative(
    entry: WorkoutExercise,
    catalog: list[Exercise],
    rng: random.Random,
) -> WorkoutExercise:
    """Swap the entry's exercise for a random alternative, if there is one."""
    original = next((e for e in catalog if e.id == entry.exercise_id), None)
    if original is None:
        return entry

    alternatives = find_alternative_exercises(original, catalog)
    if not alternatives:
        logger.debug("No alternative for %s, keeping it", entry.exercise_id)
        return entry

    alternative = rng.choice(alternatives)
    return replace(entry, exercise_id=alternative.id)


def apply_adaptation(
    proposal: AdaptationProposal,
    catalog: list[Exercise],
    workout: Workout,
    rng: random.Random | None = None,
) -> Workout:
    """Return a copy of ``workout`` with the proposal applied.

    The argument is left untouched. ``rng`` picks replacement exercises for
    ``change_exercise``; a fresh generator is used when none is given.

    Raises:
        ValueError: If the proposal carries an unknown adaptation type
    """
    if rng is None:
        rng = random.Random()

    kind = proposal.adaptation_type
    planned = workout.planned_exercises

    if kind == AdaptationType.INCREASE_DIFFICULTY:
        adapted = replace(
            workout,
            planned_exercises=[increase_exercise_difficulty(e) for e in planned],
            difficulty_score=min(MAX_DIFFICULTY, workout.difficulty_score + 1),
        )
    elif kind == AdaptationType.DECREASE_DIFFICULTY:
        adapted = replace(
            workout,
            planned_exercises=[decrease_exercise_difficulty(e) for e in planned],
            difficulty_score=max(MIN_DIFFICULTY, workout.difficulty_score - 1),
        )
    elif kind == AdaptationType.CHANGE_EXERCISE:
        target = proposal.target_exercise_id
        adapted = replace(
            workout,
            planned_exercises=[
                replace_with_alternative(e, catalog, rng) if e.exercise_id == target else replace(e)
                for e in planned
            ],
        )
    elif kind == AdaptationType.ADD_REST:
        # Stand-in for real rest-day scheduling: shorten today's session
        adapted = replace(workout, planned_exercises=[replace(e) for e in planned[:-1]])
    else:
        raise ValueError(f"Unknown adaptation type: {kind}")

    adapted.completed_exercises = list(workout.completed_exercises)
    adapted.completion_rate = completion_ratio(
        len(adapted.planned_exercises), len(adapted.completed_exercises)
    )
    logger.debug("Applied %s to workout %s", kind.value, workout.id)
    return adapted

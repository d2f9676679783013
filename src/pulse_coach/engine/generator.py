"""Procedural workout generation from the exercise catalog."""

import logging
import math
import random
from dataclasses import dataclass, field
from datetime import date
from uuid import uuid4

from ..models.exercises import EquipmentType, Exercise, ExerciseCategory
from ..models.user_profile import FitnessGoal, FitnessLevel, UserProfile
from ..models.workout import (
    Prescription,
    StrengthPrescription,
    TimedPrescription,
    Workout,
    WorkoutExercise,
)

logger = logging.getLogger(__name__)

MINUTES_PER_EXERCISE = 6  # including rest
REST_SECONDS = 60
STRENGTH_SETS = 3
MIN_REPS = 5
DEFAULT_DIFFICULTY = 5
REPEAT_HISTORY_THRESHOLD = 3
FLEXIBILITY_HOLD_SECONDS = 30
ADVANCED_HOLD_BONUS_SECONDS = 15

DIFFICULTY_BANDS: dict[FitnessLevel, tuple[int, int]] = {
    FitnessLevel.BEGINNER: (1, 4),
    FitnessLevel.INTERMEDIATE: (3, 7),
    FitnessLevel.ADVANCED: (6, 10),
}
DEFAULT_DIFFICULTY_BAND = (1, 5)

BASE_REPS: dict[FitnessLevel, int] = {
    FitnessLevel.BEGINNER: 8,
    FitnessLevel.INTERMEDIATE: 12,
    FitnessLevel.ADVANCED: 15,
}
DEFAULT_BASE_REPS = 10

BASE_DURATIONS: dict[FitnessLevel, int] = {
    FitnessLevel.BEGINNER: 30,
    FitnessLevel.INTERMEDIATE: 45,
    FitnessLevel.ADVANCED: 60,
}
DEFAULT_BASE_DURATION = 30

CATEGORY_ORDER = [
    ExerciseCategory.STRENGTH,
    ExerciseCategory.CARDIO,
    ExerciseCategory.FLEXIBILITY,
]


@dataclass
class ExercisePerformance:
    """What the user recently achieved on one exercise."""

    completions: int = 0
    weights: list[float] = field(default_factory=list)
    reps: list[int] = field(default_factory=list)
    durations: list[int] = field(default_factory=list)

    @staticmethod
    def _mean(values: list) -> float | None:
        return sum(values) / len(values) if values else None

    @property
    def avg_weight(self) -> float | None:
        return self._mean(self.weights)

    @property
    def avg_reps(self) -> float | None:
        return self._mean(self.reps)

    @property
    def avg_duration(self) -> float | None:
        return self._mean(self.durations)


def get_difficulty_band(fitness_level: FitnessLevel | str) -> tuple[int, int]:
    """Inclusive base-difficulty range suitable for a fitness level."""
    return DIFFICULTY_BANDS.get(fitness_level, DEFAULT_DIFFICULTY_BAND)


def filter_available_exercises(
    catalog: list[Exercise],
    fitness_level: FitnessLevel | str,
    equipment: list[EquipmentType],
) -> list[Exercise]:
    """Exercises the user has the kit for and that suit their level."""
    low, high = get_difficulty_band(fitness_level)
    return [
        exercise
        for exercise in catalog
        if exercise.requires_only(equipment) and low <= exercise.difficulty_base <= high
    ]


def summarize_recent_performance(
    recent_workouts: list[Workout],
) -> dict[str, ExercisePerformance]:
    """Collect completed-entry stats per exercise id.

    Untracked fields are left out of the corresponding mean rather than
    counted as zero.
    """
    performance: dict[str, ExercisePerformance] = {}
    for workout in recent_workouts:
        for entry in workout.completed_exercises:
            perf = performance.setdefault(entry.exercise_id, ExercisePerformance())
            perf.completions += 1
            if entry.weight is not None:
                perf.weights.append(entry.weight)
            if entry.reps is not None:
                perf.reps.append(entry.reps)
            if entry.duration_seconds is not None:
                perf.durations.append(entry.duration_seconds)
    return performance


def allocate_category_quotas(
    target_count: int,
    goals: list[FitnessGoal | str],
) -> dict[ExerciseCategory, int]:
    """Split the exercise count across categories according to the goals.

    Flexibility always gets at least one slot.
    """
    if FitnessGoal.STRENGTH in goals or FitnessGoal.MUSCLE_GAIN in goals:
        strength = math.ceil(target_count * 0.6)
        cardio = math.floor(target_count * 0.3)
    elif FitnessGoal.CARDIO in goals or FitnessGoal.WEIGHT_LOSS in goals:
        cardio = math.ceil(target_count * 0.6)
        strength = math.floor(target_count * 0.3)
    else:
        strength = math.floor(target_count * 0.4)
        cardio = math.floor(target_count * 0.4)

    return {
        ExerciseCategory.STRENGTH: strength,
        ExerciseCategory.CARDIO: cardio,
        ExerciseCategory.FLEXIBILITY: max(1, target_count - strength - cardio),
    }


def select_varied_exercises(
    candidates: list[Exercise],
    count: int,
    rng: random.Random,
) -> list[Exercise]:
    """Pick up to ``count`` exercises, spreading them across muscle groups.

    Walks the muscle groups once, taking one random unpicked exercise for
    each, then fills any remaining slots at random.
    """
    by_muscle: dict[str, list[Exercise]] = {}
    for exercise in candidates:
        for muscle in exercise.muscle_groups:
            by_muscle.setdefault(muscle, []).append(exercise)

    selected: list[Exercise] = []
    selected_ids: set[str] = set()

    for options in by_muscle.values():
        if len(selected) >= count:
            break
        available = [e for e in options if e.id not in selected_ids]
        if available:
            choice = rng.choice(available)
            selected.append(choice)
            selected_ids.add(choice.id)

    while len(selected) < count:
        remaining = [e for e in candidates if e.id not in selected_ids]
        if not remaining:
            break
        choice = rng.choice(remaining)
        selected.append(choice)
        selected_ids.add(choice.id)

    return selected


def select_exercises_for_workout(
    exercises: list[Exercise],
    goals: list[FitnessGoal | str],
    recent_performance: dict[str, ExercisePerformance],
    target_duration_minutes: int,
    rng: random.Random,
) -> list[Exercise]:
    """Choose the exercises for a new workout.

    Recently performed exercises are avoided once at least three distinct
    exercises have history. Category quotas are filled first; if they leave
    the workout short, random unpicked candidates make up the difference.
    """
    target_count = target_duration_minutes // MINUTES_PER_EXERCISE
    quotas = allocate_category_quotas(target_count, goals)
    allow_repeats = len(recent_performance) < REPEAT_HISTORY_THRESHOLD

    pools: dict[ExerciseCategory, list[Exercise]] = {}
    for category in CATEGORY_ORDER:
        pools[category] = [
            e
            for e in exercises
            if e.category == category
            and (allow_repeats or e.id not in recent_performance)
        ]

    selected: list[Exercise] = []
    for category in CATEGORY_ORDER:
        selected.extend(select_varied_exercises(pools[category], quotas[category], rng))

    selected_ids = {e.id for e in selected}
    leftovers = [
        e for category in CATEGORY_ORDER for e in pools[category] if e.id not in selected_ids
    ]
    while len(selected) < target_count and leftovers:
        choice = rng.choice(leftovers)
        leftovers.remove(choice)
        selected.append(choice)

    logger.debug(
        "Selected %d of %d candidates (target %d, quotas %s)",
        len(selected[:target_count]),
        len(exercises),
        target_count,
        {c.value: n for c, n in quotas.items()},
    )
    return selected[:target_count]


def base_reps_for_level(fitness_level: FitnessLevel | str, difficulty_base: int) -> int:
    """Starting reps, fewer for harder exercises, never below five."""
    base = BASE_REPS.get(fitness_level, DEFAULT_BASE_REPS)
    return max(MIN_REPS, math.floor(base * (11 - difficulty_base) / 10))


def base_duration_for_level(fitness_level: FitnessLevel | str) -> int:
    """Starting work interval in seconds for cardio exercises."""
    return BASE_DURATIONS.get(fitness_level, DEFAULT_BASE_DURATION)


def build_prescription(
    exercise: Exercise,
    fitness_level: FitnessLevel | str,
    previous: ExercisePerformance | None,
) -> Prescription:
    """Work out the target for one exercise, progressing on past results."""
    if exercise.category == ExerciseCategory.STRENGTH:
        reps = base_reps_for_level(fitness_level, exercise.difficulty_base)
        weight = None
        if previous is not None:
            if previous.avg_reps is not None:
                reps = max(reps, math.floor(previous.avg_reps * 1.1))
            if previous.avg_weight is not None and previous.avg_weight > 0:
                weight = math.floor(previous.avg_weight * 1.05)
        return StrengthPrescription(sets=STRENGTH_SETS, reps=reps, weight=weight)

    if exercise.category == ExerciseCategory.CARDIO:
        duration = base_duration_for_level(fitness_level)
        if previous is not None and previous.avg_duration is not None:
            duration = max(duration, math.floor(previous.avg_duration * 1.1))
        return TimedPrescription(duration_seconds=duration)

    # Flexibility: a fixed hold
    hold = FLEXIBILITY_HOLD_SECONDS
    if fitness_level == FitnessLevel.ADVANCED:
        hold += ADVANCED_HOLD_BONUS_SECONDS
    return TimedPrescription(duration_seconds=hold)


def build_exercise_plan(
    exercise: Exercise,
    fitness_level: FitnessLevel | str,
    recent_performance: dict[str, ExercisePerformance],
) -> WorkoutExercise:
    """Planned entry for one selected exercise."""
    prescription = build_prescription(
        exercise, fitness_level, recent_performance.get(exercise.id)
    )
    return prescription.to_entry(exercise.id, rest_seconds=REST_SECONDS)


def calculate_workout_difficulty(
    planned_exercises: list[WorkoutExercise],
    catalog: list[Exercise],
) -> int:
    """Overall 1-10 difficulty of a plan.

    Each entry scores its base difficulty plus one point per 20 total reps
    and one per 30 seconds, capped at 10. Entries whose exercise is missing
    from the catalog add nothing but still count toward the average.
    """
    if not planned_exercises:
        return DEFAULT_DIFFICULTY

    by_id = {e.id: e for e in catalog}
    total = 0
    for entry in planned_exercises:
        exercise = by_id.get(entry.exercise_id)
        if exercise is None:
            continue

        difficulty = exercise.difficulty_base
        if entry.sets is not None and entry.reps is not None:
            difficulty += (entry.sets * entry.reps) // 20
        if entry.duration_seconds is not None:
            difficulty += entry.duration_seconds // 30
        total += min(10, difficulty)

    return min(10, total // len(planned_exercises))


def generate_workout(
    user: UserProfile,
    catalog: list[Exercise],
    recent_workouts: list[Workout],
    target_duration_minutes: int = 30,
    equipment: list[EquipmentType] | None = None,
    rng: random.Random | None = None,
    today: date | None = None,
) -> Workout:
    """Build a brand-new workout for ``user``.

    Args:
        user: Profile supplying fitness level and goals
        catalog: Every known exercise
        recent_workouts: History used for progression and variety
        target_duration_minutes: Session length; about six minutes per exercise
        equipment: Equipment available for this session (none by default)
        rng: Random source for tie-breaking; a fresh one when omitted
        today: Date stamped on the workout, defaults to today

    Returns:
        An unstarted Workout with no completed exercises
    """
    if rng is None:
        rng = random.Random()
    equipment = equipment or []

    available = filter_available_exercises(catalog, user.fitness_level, equipment)
    recent_performance = summarize_recent_performance(recent_workouts)
    selected = select_exercises_for_workout(
        available, user.goals, recent_performance, target_duration_minutes, rng
    )

    planned = [
        build_exercise_plan(exercise, user.fitness_level, recent_performance)
        for exercise in selected
    ]

    workout = Workout(
        id=f"workout-{uuid4().hex[:12]}",
        user_id=user.id,
        planned_exercises=planned,
        completed_exercises=[],
        difficulty_score=calculate_workout_difficulty(planned, catalog),
        completion_rate=0.0,
        duration_minutes=0,
        date=today or date.today(),
    )
    logger.debug(
        "Generated workout %s for %s: %d of %d catalog exercises eligible, %d planned",
        workout.id,
        user.id,
        len(available),
        len(catalog),
        len(planned),
    )
    return workout

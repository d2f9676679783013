"""Tests for workout generation."""

import random
from datetime import date

import pytest

from pulse_coach.engine import calculate_workout_difficulty, generate_workout
from pulse_coach.engine.generator import (
    ExercisePerformance,
    allocate_category_quotas,
    base_reps_for_level,
    build_prescription,
    filter_available_exercises,
    get_difficulty_band,
    select_exercises_for_workout,
    select_varied_exercises,
    summarize_recent_performance,
)
from pulse_coach.models.exercises import (
    EquipmentType,
    Exercise,
    ExerciseCategory,
    MuscleGroup,
)
from pulse_coach.models.user_profile import FitnessGoal, FitnessLevel, UserProfile
from pulse_coach.models.workout import (
    StrengthPrescription,
    TimedPrescription,
    Workout,
    WorkoutExercise,
)


def _strength(exercise_id, difficulty, muscles=(MuscleGroup.CHEST,)):
    return Exercise(
        id=exercise_id,
        name=exercise_id.title(),
        category=ExerciseCategory.STRENGTH,
        muscle_groups=list(muscles),
        difficulty_base=difficulty,
    )


def _exercise(catalog, exercise_id):
    return next(e for e in catalog if e.id == exercise_id)


class TestFiltering:
    """Tests for level and equipment filtering."""

    def test_difficulty_bands(self):
        """Test each level has its own band and unknown levels fall back."""
        assert get_difficulty_band(FitnessLevel.BEGINNER) == (1, 4)
        assert get_difficulty_band(FitnessLevel.INTERMEDIATE) == (3, 7)
        assert get_difficulty_band(FitnessLevel.ADVANCED) == (6, 10)
        assert get_difficulty_band("elite") == (1, 5)

    def test_filter_by_equipment_and_level(self, catalog):
        """Test unavailable equipment and out-of-band exercises are dropped."""
        available = filter_available_exercises(catalog, FitnessLevel.BEGINNER, [])

        assert available
        assert all(not e.equipment_needed for e in available)
        assert all(1 <= e.difficulty_base <= 4 for e in available)

    def test_filter_with_equipment(self, catalog):
        """Test owned equipment unlocks exercises."""
        available = filter_available_exercises(
            catalog, FitnessLevel.BEGINNER, [EquipmentType.YOGA_MAT]
        )

        assert "cat-cow" in {e.id for e in available}


class TestCategoryQuotas:
    """Tests for allocate_category_quotas."""

    def test_strength_goal(self):
        """Test strength goals favour strength."""
        quotas = allocate_category_quotas(5, [FitnessGoal.STRENGTH])

        assert quotas == {
            ExerciseCategory.STRENGTH: 3,
            ExerciseCategory.CARDIO: 1,
            ExerciseCategory.FLEXIBILITY: 1,
        }

    def test_cardio_goal(self):
        """Test cardio goals favour cardio."""
        quotas = allocate_category_quotas(10, [FitnessGoal.WEIGHT_LOSS])

        assert quotas[ExerciseCategory.CARDIO] == 6
        assert quotas[ExerciseCategory.STRENGTH] == 3
        assert quotas[ExerciseCategory.FLEXIBILITY] == 1

    def test_balanced(self):
        """Test other goals split evenly."""
        quotas = allocate_category_quotas(5, [FitnessGoal.GENERAL_FITNESS])

        assert quotas[ExerciseCategory.STRENGTH] == 2
        assert quotas[ExerciseCategory.CARDIO] == 2
        assert quotas[ExerciseCategory.FLEXIBILITY] == 1

    def test_flexibility_always_present(self):
        """Test flexibility keeps a slot even when the others use everything."""
        quotas = allocate_category_quotas(1, [FitnessGoal.STRENGTH])

        assert quotas[ExerciseCategory.FLEXIBILITY] == 1


class TestSelection:
    """Tests for exercise selection."""

    def test_varied_selection_has_no_duplicates(self, catalog):
        """Test the same exercise isn't picked twice."""
        picked = select_varied_exercises(catalog, 10, random.Random(1))

        assert len(picked) == 10
        assert len({e.id for e in picked}) == 10

    def test_varied_selection_short_pool(self):
        """Test asking for more than exists returns what there is."""
        pool = [_strength("a", 2), _strength("b", 2)]

        assert len(select_varied_exercises(pool, 5, random.Random(1))) == 2

    def test_varied_selection_spreads_muscles(self):
        """Test one exercise per muscle group before doubling up."""
        pool = [
            _strength("chest-1", 2, [MuscleGroup.CHEST]),
            _strength("chest-2", 2, [MuscleGroup.CHEST]),
            _strength("legs-1", 2, [MuscleGroup.QUADS]),
        ]

        picked = select_varied_exercises(pool, 2, random.Random(3))

        assert "legs-1" in {e.id for e in picked}

    def test_recent_exercises_avoided(self):
        """Test exercises with history are skipped once three have history."""
        pool = [_strength(f"s{i}", 2) for i in range(5)]
        recent = {f"s{i}": ExercisePerformance(completions=1) for i in range(3)}

        picked = select_exercises_for_workout(
            pool, [FitnessGoal.STRENGTH], recent, 12, random.Random(0)
        )

        assert {e.id for e in picked} == {"s3", "s4"}

    def test_short_history_allows_repeats(self):
        """Test fewer than three exercises of history doesn't restrict choice."""
        pool = [_strength("s0", 2), _strength("s1", 2)]
        recent = {"s0": ExercisePerformance(completions=1)}

        picked = select_exercises_for_workout(
            pool, [FitnessGoal.STRENGTH], recent, 12, random.Random(0)
        )

        assert {e.id for e in picked} == {"s0", "s1"}

    def test_count_matches_target(self, catalog):
        """Test a full catalog fills every slot."""
        picked = select_exercises_for_workout(
            catalog, [FitnessGoal.GENERAL_FITNESS], {}, 30, random.Random(0)
        )

        assert len(picked) == 5


class TestPrescriptions:
    """Tests for building prescriptions."""

    def test_base_reps(self):
        """Test base reps shrink with exercise difficulty but not below five."""
        assert base_reps_for_level(FitnessLevel.BEGINNER, 2) == 7
        assert base_reps_for_level(FitnessLevel.INTERMEDIATE, 1) == 12
        assert base_reps_for_level(FitnessLevel.ADVANCED, 10) == 5
        assert base_reps_for_level("elite", 1) == 10

    def test_strength_without_history(self, catalog):
        """Test a first-time strength exercise gets three sets and no weight."""
        prescription = build_prescription(
            _exercise(catalog, "push-up"), FitnessLevel.BEGINNER, None
        )

        assert prescription == StrengthPrescription(sets=3, reps=6)

    def test_strength_progression(self, catalog):
        """Test reps and weight build on recent averages."""
        previous = ExercisePerformance(completions=2, reps=[18, 22], weights=[40, 40])

        prescription = build_prescription(
            _exercise(catalog, "push-up"), FitnessLevel.BEGINNER, previous
        )

        assert prescription == StrengthPrescription(sets=3, reps=22, weight=42)

    def test_zero_weight_history_omits_weight(self, catalog):
        """Test a zero average weight doesn't prescribe load."""
        previous = ExercisePerformance(completions=1, reps=[3], weights=[0])

        prescription = build_prescription(
            _exercise(catalog, "push-up"), FitnessLevel.BEGINNER, previous
        )

        assert prescription.weight is None
        assert prescription.reps == 6

    def test_cardio_progression(self, catalog):
        """Test cardio duration builds on the recent average."""
        jacks = _exercise(catalog, "jumping-jacks")

        assert build_prescription(jacks, FitnessLevel.BEGINNER, None) == TimedPrescription(30)
        previous = ExercisePerformance(completions=1, durations=[60])
        assert build_prescription(jacks, FitnessLevel.BEGINNER, previous) == TimedPrescription(66)

    def test_flexibility_hold(self, catalog):
        """Test advanced users hold stretches longer."""
        stretch = _exercise(catalog, "hamstring-stretch")

        assert build_prescription(stretch, FitnessLevel.BEGINNER, None).duration_seconds == 30
        assert build_prescription(stretch, FitnessLevel.ADVANCED, None).duration_seconds == 45

    def test_summarize_skips_untracked(self):
        """Test missing values don't drag averages toward zero."""
        workout = Workout(
            id="w1",
            user_id="u1",
            completed_exercises=[
                WorkoutExercise(exercise_id="a", reps=10),
                WorkoutExercise(exercise_id="a", reps=20, weight=50),
            ],
            date=date(2024, 1, 1),
        )

        performance = summarize_recent_performance([workout])

        assert performance["a"].completions == 2
        assert performance["a"].avg_reps == 15
        assert performance["a"].avg_weight == 50
        assert performance["a"].avg_duration is None


class TestWorkoutDifficulty:
    """Tests for calculate_workout_difficulty."""

    def test_empty_plan(self, catalog):
        """Test an empty plan has the default difficulty."""
        assert calculate_workout_difficulty([], catalog) == 5

    def test_volume_adds_difficulty(self):
        """Test total reps and seconds add to base difficulty."""
        catalog = [_strength("a", 4)]
        planned = [WorkoutExercise(exercise_id="a", sets=3, reps=10)]

        assert calculate_workout_difficulty(planned, catalog) == 5

    def test_unknown_exercise_dilutes(self):
        """Test entries missing from the catalog still count in the average."""
        catalog = [_strength("a", 4)]
        planned = [
            WorkoutExercise(exercise_id="a", sets=3, reps=10),
            WorkoutExercise(exercise_id="ghost", sets=3, reps=10),
        ]

        assert calculate_workout_difficulty(planned, catalog) == 2

    def test_capped_at_ten(self, catalog):
        """Test the score never exceeds ten."""
        planned = [WorkoutExercise(exercise_id="sprint-intervals", duration_seconds=600)]

        assert calculate_workout_difficulty(planned, catalog) == 10


class TestGenerateWorkout:
    """Tests for generate_workout."""

    def test_beginner_strength_session(self, beginner_profile):
        """Test an 18-minute beginner strength session from a strength catalog."""
        catalog = [
            _strength("glute-bridge", 1, [MuscleGroup.GLUTES]),
            _strength("squat", 2, [MuscleGroup.QUADS]),
            _strength("push-up", 3, [MuscleGroup.CHEST]),
        ]

        workout = generate_workout(
            beginner_profile,
            catalog,
            [],
            target_duration_minutes=18,
            rng=random.Random(0),
            today=date(2024, 5, 1),
        )

        assert len(workout.planned_exercises) == 3
        assert {e.exercise_id for e in workout.planned_exercises} == {
            "glute-bridge",
            "squat",
            "push-up",
        }
        for entry in workout.planned_exercises:
            assert entry.sets == 3
            assert entry.reps >= 5
            assert entry.rest_seconds == 60
            assert entry.duration_seconds is None
        # (1+24//20) + (2+21//20) + (3+18//20) = 8, over 3 entries
        assert workout.difficulty_score == 2
        assert workout.date == date(2024, 5, 1)
        assert workout.completed_exercises == []
        assert workout.completion_rate == 0.0
        assert workout.user_id == beginner_profile.id

    @pytest.mark.parametrize("minutes", [0, 5, 6, 13, 30, 45, 90])
    def test_count_never_exceeds_target(self, beginner_profile, catalog, minutes):
        """Test the plan has at most one exercise per six minutes."""
        workout = generate_workout(
            beginner_profile, catalog, [], target_duration_minutes=minutes, rng=random.Random(minutes)
        )

        assert len(workout.planned_exercises) <= minutes // 6

    def test_too_short_is_empty(self, beginner_profile, catalog):
        """Test sessions under six minutes are empty with default difficulty."""
        workout = generate_workout(beginner_profile, catalog, [], target_duration_minutes=5)

        assert workout.planned_exercises == []
        assert workout.difficulty_score == 5

    def test_respects_equipment_and_level(self, catalog):
        """Test every planned exercise fits the user's kit and level."""
        user = UserProfile(
            id="u2",
            fitness_level=FitnessLevel.INTERMEDIATE,
            goals=[FitnessGoal.CARDIO],
        )
        by_id = {e.id: e for e in catalog}

        for seed in range(5):
            workout = generate_workout(
                user,
                catalog,
                [],
                target_duration_minutes=60,
                equipment=[EquipmentType.DUMBBELLS],
                rng=random.Random(seed),
            )
            for entry in workout.planned_exercises:
                exercise = by_id[entry.exercise_id]
                assert exercise.requires_only([EquipmentType.DUMBBELLS])
                assert 3 <= exercise.difficulty_base <= 7

    def test_no_duplicates(self, beginner_profile, catalog):
        """Test no exercise appears twice in a plan."""
        workout = generate_workout(
            beginner_profile, catalog, [], target_duration_minutes=60, rng=random.Random(4)
        )
        ids = [e.exercise_id for e in workout.planned_exercises]

        assert len(ids) == len(set(ids))

    def test_seeded_generation_is_repeatable(self, beginner_profile, catalog):
        """Test the same seed gives the same plan."""
        first = generate_workout(beginner_profile, catalog, [], rng=random.Random(11))
        second = generate_workout(beginner_profile, catalog, [], rng=random.Random(11))

        assert first.planned_exercises == second.planned_exercises
        assert first.id != second.id

    def test_history_drives_progression(self, beginner_profile):
        """Test prior results raise the new prescription."""
        catalog = [_strength("push-up", 3)]
        history = [
            Workout(
                id="old",
                user_id=beginner_profile.id,
                planned_exercises=[WorkoutExercise(exercise_id="push-up", sets=3, reps=6)],
                completed_exercises=[WorkoutExercise(exercise_id="push-up", sets=3, reps=20)],
                date=date(2024, 4, 30),
            )
        ]

        workout = generate_workout(
            beginner_profile, catalog, history, target_duration_minutes=6, rng=random.Random(0)
        )

        assert workout.planned_exercises[0].reps == 22
        assert history[0].completed_exercises[0].reps == 20

    def test_empty_catalog(self, beginner_profile):
        """Test an empty catalog gives an empty plan."""
        workout = generate_workout(beginner_profile, [], [], rng=random.Random(0))

        assert workout.planned_exercises == []

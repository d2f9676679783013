"""Tests for the workout and adaptation services."""

import asyncio
import random
from datetime import date, timedelta

import pytest

from pulse_coach.db import init_db, seed_exercises
from pulse_coach.db.repositories import (
    AdaptationHistoryRepository,
    ExerciseRepository,
    ProgressRepository,
    WorkoutRepository,
)
from pulse_coach.exceptions import NoWorkoutTodayError, WorkoutNotFoundError
from pulse_coach.models.adaptation import AdaptationType, PerformanceMetrics
from pulse_coach.models.progress import ProgressEntry
from pulse_coach.models.workout import Workout, WorkoutExercise
from pulse_coach.services import AdaptationService, WorkoutService, generate_recommendations

TODAY = date(2024, 6, 10)


@pytest.fixture
def db_path(temp_db_path):
    """An initialized database with the built-in catalog."""
    asyncio.run(init_db(temp_db_path))
    asyncio.run(seed_exercises(temp_db_path))
    return temp_db_path


@pytest.fixture
def workout_service(db_path):
    return WorkoutService(
        WorkoutRepository(db_path),
        ProgressRepository(db_path),
        ExerciseRepository(db_path),
    )


@pytest.fixture
def adaptation_service(db_path):
    return AdaptationService(
        WorkoutRepository(db_path),
        ExerciseRepository(db_path),
        AdaptationHistoryRepository(db_path),
        ProgressRepository(db_path),
    )


def _store(db_path, workouts):
    repo = WorkoutRepository(db_path)
    for workout in workouts:
        asyncio.run(repo.create(workout))


class TestWorkoutService:
    """Tests for WorkoutService."""

    def test_generate_todays_workout(self, workout_service, beginner_profile):
        """Test today's workout is generated from the stored catalog and saved."""
        workout = asyncio.run(
            workout_service.generate_todays_workout(
                beginner_profile, target_duration_minutes=30, rng=random.Random(0), today=TODAY
            )
        )

        assert workout.date == TODAY
        assert 0 < len(workout.planned_exercises) <= 5
        stored = asyncio.run(workout_service.get_todays_workout(beginner_profile.id, TODAY))
        assert stored == workout

    def test_generate_is_once_per_day(self, workout_service, beginner_profile):
        """Test asking again the same day returns the stored workout."""
        first = asyncio.run(workout_service.generate_todays_workout(beginner_profile, today=TODAY))
        second = asyncio.run(workout_service.generate_todays_workout(beginner_profile, today=TODAY))

        assert first.id == second.id

    def test_complete_exercise(self, workout_service, db_path, make_workout):
        """Test completing an exercise updates the workout and progress log."""
        workout = make_workout(planned=2, completed=0, on=TODAY)
        _store(db_path, [workout])

        updated = asyncio.run(
            workout_service.complete_exercise(
                workout.id,
                WorkoutExercise(exercise_id="ex-0", sets=3, reps=8, weight=20),
                perceived_difficulty=9,
                today=TODAY,
            )
        )

        assert updated.completion_rate == 0.5
        progress = asyncio.run(
            workout_service.get_progress("user-1", "ex-0", days=7, today=TODAY)
        )
        assert len(progress) == 1
        assert progress[0].reps_completed == 8
        assert progress[0].weight_used == 20
        assert progress[0].perceived_difficulty == 9

    def test_complete_unknown_workout(self, workout_service):
        """Test completing against a missing workout raises."""
        with pytest.raises(WorkoutNotFoundError):
            asyncio.run(
                workout_service.complete_exercise("nope", WorkoutExercise(exercise_id="a"))
            )

    def test_recent_workouts_window(self, workout_service, db_path, make_workout):
        """Test only workouts inside the window are returned."""
        _store(
            db_path,
            [
                make_workout(on=TODAY - timedelta(days=40)),
                make_workout(on=TODAY - timedelta(days=3)),
            ],
        )

        recent = asyncio.run(workout_service.get_recent_workouts("user-1", days=30, today=TODAY))

        assert [w.date for w in recent] == [TODAY - timedelta(days=3)]


class TestAdaptationService:
    """Tests for AdaptationService."""

    def test_suggest_on_strong_history(self, adaptation_service, db_path, beginner_profile, make_workout):
        """Test three complete daily workouts suggest an increase."""
        _store(db_path, [make_workout(on=TODAY - timedelta(days=d)) for d in (3, 2, 1)])

        insights = asyncio.run(adaptation_service.suggest(beginner_profile, days=30, today=TODAY))

        assert insights.workout_count == 3
        assert insights.metrics.consistency_score == 1.0
        assert [p.adaptation_type for p in insights.suggested_adaptations] == [
            AdaptationType.INCREASE_DIFFICULTY
        ]
        assert "recommendations" in insights.to_dict()

    def test_adapt_todays_workout(self, adaptation_service, db_path, beginner_profile, make_workout):
        """Test today's unstarted workout is judged on earlier days only."""
        history = [make_workout(on=TODAY - timedelta(days=d)) for d in (3, 2, 1)]
        today = Workout(
            id="today",
            user_id=beginner_profile.id,
            planned_exercises=[WorkoutExercise(exercise_id="push-up", sets=3, reps=10, rest_seconds=60)],
            difficulty_score=5,
            date=TODAY,
        )
        _store(db_path, [*history, today])

        adapted, records = asyncio.run(
            adaptation_service.adapt_todays_workout(beginner_profile, today=TODAY)
        )

        assert adapted.planned_exercises[0].reps == 11
        assert adapted.planned_exercises[0].sets == 4
        assert adapted.difficulty_score == 6
        assert [r.change_type for r in records] == [AdaptationType.INCREASE_DIFFICULTY]
        assert records[0].previous_value["difficulty_score"] == 5
        assert records[0].new_value["difficulty_score"] == 6

        stored = asyncio.run(WorkoutRepository(db_path).get("today"))
        assert stored == adapted
        logged = asyncio.run(adaptation_service.history(beginner_profile.id))
        assert [r.id for r in logged] == [records[0].id]

    def test_adapt_without_workout(self, adaptation_service, beginner_profile):
        """Test adapting with no workout today raises."""
        with pytest.raises(NoWorkoutTodayError):
            asyncio.run(adaptation_service.adapt_todays_workout(beginner_profile, today=TODAY))

    def test_no_history_no_changes(self, adaptation_service, db_path, beginner_profile, make_workout):
        """Test a first workout is left alone."""
        _store(db_path, [make_workout(planned=3, completed=0, on=TODAY)])

        adapted, records = asyncio.run(
            adaptation_service.adapt_todays_workout(beginner_profile, today=TODAY)
        )

        assert records == []
        assert len(adapted.planned_exercises) == 3

    def test_analyze_averages_perceived_difficulty(self, adaptation_service, db_path, beginner_profile):
        """Test user_feedback is the mean logged effort over the window."""
        progress = ProgressRepository(db_path)
        for days_ago, effort in ((2, 4), (1, 8), (0, 10)):
            asyncio.run(
                progress.create(
                    ProgressEntry(
                        user_id=beginner_profile.id,
                        exercise_id="push-up",
                        reps_completed=10,
                        perceived_difficulty=effort,
                        date=TODAY - timedelta(days=days_ago),
                    )
                )
            )

        earlier = asyncio.run(
            adaptation_service.analyze(beginner_profile, today=TODAY, include_today=False)
        )
        everything = asyncio.run(adaptation_service.analyze(beginner_profile, today=TODAY))

        assert earlier.user_feedback == 6.0
        assert everything.user_feedback == pytest.approx(22 / 3)

    def test_analyze_without_progress_log(self, adaptation_service, beginner_profile):
        """Test user_feedback stays unset when nothing was logged."""
        metrics = asyncio.run(adaptation_service.analyze(beginner_profile, today=TODAY))

        assert metrics.user_feedback is None


class TestRecommendations:
    """Tests for generate_recommendations."""

    def test_struggling(self):
        """Test low completion and consistency produce advice."""
        tips = generate_recommendations(PerformanceMetrics(completion_rate=0.3, consistency_score=0.2))

        assert "Consider reducing workout intensity or duration" in tips
        assert "Try to maintain a more regular workout schedule" in tips

    def test_thriving(self):
        """Test high completion suggests a challenge."""
        tips = generate_recommendations(
            PerformanceMetrics(completion_rate=0.95, consistency_score=0.9, difficulty_trend=3)
        )

        assert "You're ready for more challenging workouts" in tips
        assert "Rapid difficulty increases detected - ensure adequate recovery" in tips

    def test_steady(self):
        """Test steady training gets encouragement."""
        tips = generate_recommendations(PerformanceMetrics(completion_rate=0.8, consistency_score=0.9))

        assert tips == ["Great progress! Keep up the consistent effort"]

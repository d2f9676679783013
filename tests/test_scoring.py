"""Tests for single-workout performance scoring."""

from datetime import date

import pytest

from pulse_coach.engine import score_performance
from pulse_coach.models.workout import Workout, WorkoutExercise


def _workout(planned, completed, difficulty=5):
    return Workout(
        id="w1",
        user_id="u1",
        planned_exercises=planned,
        completed_exercises=completed,
        difficulty_score=difficulty,
        date=date(2024, 1, 1),
    )


class TestScorePerformance:
    """Tests for score_performance."""

    def test_fully_completed(self, catalog):
        """Test a fully completed workout at difficulty 5."""
        entries = [WorkoutExercise(exercise_id="push-up", sets=3, reps=10)]
        workout = _workout(entries, list(entries))

        assert score_performance(workout, catalog) == pytest.approx(0.6 + 0.15 + 0.1)

    def test_partial_completion_and_quality(self, catalog):
        """Test half the plan done at half the reps."""
        workout = _workout(
            [
                WorkoutExercise(exercise_id="push-up", sets=3, reps=10),
                WorkoutExercise(exercise_id="plank", duration_seconds=30),
            ],
            [WorkoutExercise(exercise_id="push-up", sets=3, reps=5)],
        )

        assert score_performance(workout, catalog) == pytest.approx(0.3 + 0.15 + 0.05)

    def test_duration_shortfall(self, catalog):
        """Test duration quality multiplies in."""
        workout = _workout(
            [WorkoutExercise(exercise_id="plank", duration_seconds=60)],
            [WorkoutExercise(exercise_id="plank", duration_seconds=15)],
            difficulty=10,
        )

        assert score_performance(workout, catalog) == pytest.approx(0.6 + 0.3 + 0.025)

    def test_overperformance_capped(self, catalog):
        """Test doing more than planned doesn't raise quality above 1."""
        workout = _workout(
            [WorkoutExercise(exercise_id="push-up", reps=10)],
            [WorkoutExercise(exercise_id="push-up", reps=25)],
        )

        assert score_performance(workout, catalog) == pytest.approx(0.85)

    def test_untracked_fields_ignored(self, catalog):
        """Test missing completed values leave quality unchanged."""
        workout = _workout(
            [WorkoutExercise(exercise_id="push-up", sets=3, reps=10)],
            [WorkoutExercise(exercise_id="push-up")],
        )

        assert score_performance(workout, catalog) == pytest.approx(0.85)

    def test_zero_reps_is_tracked(self, catalog):
        """Test zero completed reps counts as a real result."""
        workout = _workout(
            [WorkoutExercise(exercise_id="push-up", reps=10)],
            [WorkoutExercise(exercise_id="push-up", reps=0)],
        )

        assert score_performance(workout, catalog) == pytest.approx(0.6 + 0.15)

    def test_empty_workout(self, catalog):
        """Test an empty workout scores only its difficulty and quality."""
        workout = _workout([], [])

        assert score_performance(workout, catalog) == pytest.approx(0.15 + 0.1)

    def test_never_negative(self, catalog):
        """Test the score stays non-negative at the lowest settings."""
        workout = _workout(
            [WorkoutExercise(exercise_id="push-up", reps=10)],
            [],
            difficulty=1,
        )

        assert score_performance(workout, catalog) >= 0

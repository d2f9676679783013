"""Pytest configuration and fixtures."""

import pytest
import tempfile
from datetime import date, timedelta
from pathlib import Path

from pulse_coach.models.exercises import COMMON_EXERCISES
from pulse_coach.models.user_profile import FitnessGoal, FitnessLevel, UserProfile
from pulse_coach.models.workout import Workout, WorkoutExercise


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def catalog():
    """The built-in exercise catalog."""
    return list(COMMON_EXERCISES)


@pytest.fixture
def beginner_profile():
    """A beginner with a strength goal and no equipment."""
    return UserProfile(
        id="user-1",
        name="Test User",
        fitness_level=FitnessLevel.BEGINNER,
        goals=[FitnessGoal.STRENGTH],
        equipment=[],
    )


@pytest.fixture
def make_workout():
    """Factory for workouts with a given number of planned and completed entries."""

    def _make(
        planned: int = 4,
        completed: int = 4,
        on: date | None = None,
        difficulty: int = 5,
        workout_id: str | None = None,
        user_id: str = "user-1",
    ) -> Workout:
        on = on or date(2024, 1, 1)
        planned_entries = [
            WorkoutExercise(exercise_id=f"ex-{i}", sets=3, reps=10, rest_seconds=60)
            for i in range(planned)
        ]
        completed_entries = [
            WorkoutExercise(exercise_id=f"ex-{i}", sets=3, reps=10)
            for i in range(completed)
        ]
        return Workout(
            id=workout_id or f"w-{on.isoformat()}",
            user_id=user_id,
            planned_exercises=planned_entries,
            completed_exercises=completed_entries,
            difficulty_score=difficulty,
            completion_rate=completed / max(1, planned),
            date=on,
        )

    return _make


@pytest.fixture
def weekly_dates():
    """Factory for evenly spaced dates."""

    def _dates(count: int, start: date = date(2024, 1, 1), step: int = 7) -> list[date]:
        return [start + timedelta(days=step * i) for i in range(count)]

    return _dates

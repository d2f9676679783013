"""Database layer for pulse-coach."""

from .engine import get_db_path, init_db, seed_exercises
from .repositories import (
    AdaptationHistoryRepository,
    ExerciseRepository,
    ProgressRepository,
    UserProfileRepository,
    WorkoutRepository,
)

__all__ = [
    "AdaptationHistoryRepository",
    "ExerciseRepository",
    "get_db_path",
    "init_db",
    "ProgressRepository",
    "seed_exercises",
    "UserProfileRepository",
    "WorkoutRepository",
]

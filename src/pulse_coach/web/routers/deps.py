"""Shared router dependencies."""

from fastapi import Request

from ...db.repositories import (
    AdaptationHistoryRepository,
    ExerciseRepository,
    ProgressRepository,
    UserProfileRepository,
    WorkoutRepository,
)
from ...exceptions import ProfileNotFoundError
from ...models.user_profile import UserProfile
from ...services.adaptation import AdaptationService
from ...services.workouts import WorkoutService


def get_profile_repo(request: Request) -> UserProfileRepository:
    return UserProfileRepository(request.app.state.db_path)


def get_workout_service(request: Request) -> WorkoutService:
    db_path = request.app.state.db_path
    return WorkoutService(
        WorkoutRepository(db_path),
        ProgressRepository(db_path),
        ExerciseRepository(db_path),
    )


def get_adaptation_service(request: Request) -> AdaptationService:
    db_path = request.app.state.db_path
    return AdaptationService(
        WorkoutRepository(db_path),
        ExerciseRepository(db_path),
        AdaptationHistoryRepository(db_path),
        ProgressRepository(db_path),
    )


async def load_profile(request: Request, user_id: str) -> UserProfile:
    """Fetch a profile or raise ProfileNotFoundError."""
    profile = await get_profile_repo(request).get(user_id)
    if profile is None:
        raise ProfileNotFoundError(user_id)
    return profile

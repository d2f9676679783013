"""Workout routes."""

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from ...config import get_settings
from ...exceptions import NoWorkoutTodayError
from ...models.workout import WorkoutExercise
from ...services.workouts import WorkoutService
from .deps import get_workout_service, load_profile

router = APIRouter(prefix="/workouts", tags=["workouts"])


class GenerateIn(BaseModel):
    """Request body for generating today's workout."""

    target_duration_minutes: int | None = Field(default=None, ge=0)


class CompletedExerciseIn(BaseModel):
    """What the user actually did for one exercise."""

    exercise_id: str
    sets: int | None = None
    reps: int | None = None
    weight: float | None = None
    duration_seconds: int | None = None
    perceived_difficulty: int | None = Field(default=None, ge=1, le=10)


@router.get("/{user_id}/today")
async def get_today(
    request: Request,
    user_id: str,
    service: WorkoutService = Depends(get_workout_service),
):
    """Get today's workout without generating one."""
    await load_profile(request, user_id)
    workout = await service.get_todays_workout(user_id)
    if workout is None:
        raise NoWorkoutTodayError(user_id)
    return workout.to_dict()


@router.post("/{user_id}/today")
async def generate_today(
    request: Request,
    user_id: str,
    body: GenerateIn | None = None,
    service: WorkoutService = Depends(get_workout_service),
):
    """Get today's workout, generating it if there is none yet."""
    settings = get_settings()
    user = await load_profile(request, user_id)
    minutes = body.target_duration_minutes if body else None
    workout = await service.generate_todays_workout(
        user,
        target_duration_minutes=minutes if minutes is not None else settings.default_target_minutes,
        history_days=settings.history_days,
    )
    return workout.to_dict()


@router.post("/{workout_id}/complete")
async def complete_exercise(
    workout_id: str,
    body: CompletedExerciseIn,
    service: WorkoutService = Depends(get_workout_service),
):
    """Record a completed exercise."""
    entry = WorkoutExercise(
        exercise_id=body.exercise_id,
        sets=body.sets,
        reps=body.reps,
        weight=body.weight,
        duration_seconds=body.duration_seconds,
    )
    workout = await service.complete_exercise(
        workout_id, entry, perceived_difficulty=body.perceived_difficulty
    )
    return workout.to_dict()


@router.get("/{user_id}/recent")
async def recent_workouts(
    request: Request,
    user_id: str,
    days: int = 30,
    service: WorkoutService = Depends(get_workout_service),
):
    """Workouts from the last ``days`` days, newest first."""
    await load_profile(request, user_id)
    workouts = await service.get_recent_workouts(user_id, days)
    return [w.to_dict() for w in workouts]

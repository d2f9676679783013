"""Workout lifecycle service: today's workout, completions and history."""

import logging
import random
from datetime import date, timedelta

from ..db.repositories import ExerciseRepository, ProgressRepository, WorkoutRepository
from ..engine import generate_workout
from ..exceptions import WorkoutNotFoundError
from ..models.progress import ProgressEntry
from ..models.user_profile import UserProfile
from ..models.workout import Workout, WorkoutExercise

logger = logging.getLogger(__name__)


class WorkoutService:
    """Loads and stores workouts around the pure workout engine."""

    def __init__(
        self,
        workout_repo: WorkoutRepository | None = None,
        progress_repo: ProgressRepository | None = None,
        exercise_repo: ExerciseRepository | None = None,
    ):
        self.workout_repo = workout_repo or WorkoutRepository()
        self.progress_repo = progress_repo or ProgressRepository()
        self.exercise_repo = exercise_repo or ExerciseRepository()

    async def get_todays_workout(
        self, user_id: str, today: date | None = None
    ) -> Workout | None:
        """The user's workout for today, if one exists."""
        return await self.workout_repo.get_by_date(user_id, today or date.today())

    async def create_workout(self, workout: Workout) -> Workout:
        """Persist a new workout."""
        await self.workout_repo.create(workout)
        logger.info("Created workout %s for %s on %s", workout.id, workout.user_id, workout.date)
        return workout

    async def complete_exercise(
        self,
        workout_id: str,
        entry: WorkoutExercise,
        perceived_difficulty: int | None = None,
        today: date | None = None,
    ) -> Workout:
        """Record a completed exercise and log it to the progress history.

        Raises:
            WorkoutNotFoundError: If no workout has ``workout_id``
        """
        workout = await self.workout_repo.get(workout_id)
        if workout is None:
            raise WorkoutNotFoundError(workout_id)

        updated = workout.with_completed(entry)
        await self.workout_repo.update(updated)

        progress = ProgressEntry.from_completed(workout.user_id, entry, on=today)
        if perceived_difficulty is not None:
            progress.perceived_difficulty = perceived_difficulty
        await self.progress_repo.create(progress)

        logger.info(
            "Completed %s in workout %s (%d/%d)",
            entry.exercise_id,
            workout_id,
            len(updated.completed_exercises),
            len(updated.planned_exercises),
        )
        return updated

    async def get_recent_workouts(
        self, user_id: str, days: int = 30, today: date | None = None
    ) -> list[Workout]:
        """Workouts from the last ``days`` days, newest first."""
        since = (today or date.today()) - timedelta(days=days)
        return await self.workout_repo.list_since(user_id, since)

    async def get_progress(
        self,
        user_id: str,
        exercise_id: str | None = None,
        days: int = 30,
        today: date | None = None,
    ) -> list[ProgressEntry]:
        """Progress log for the last ``days`` days, oldest first."""
        since = (today or date.today()) - timedelta(days=days)
        return await self.progress_repo.list_since(user_id, since, exercise_id)

    async def generate_todays_workout(
        self,
        user: UserProfile,
        target_duration_minutes: int = 30,
        history_days: int = 30,
        rng: random.Random | None = None,
        today: date | None = None,
    ) -> Workout:
        """Return today's workout, generating and storing one if needed."""
        today = today or date.today()
        existing = await self.get_todays_workout(user.id, today)
        if existing is not None:
            return existing

        catalog = await self.exercise_repo.get_all()
        if not catalog:
            logger.warning("Exercise catalog is empty; generated workout will be empty")

        recent = await self.get_recent_workouts(user.id, history_days, today)
        workout = generate_workout(
            user,
            catalog,
            recent,
            target_duration_minutes=target_duration_minutes,
            equipment=user.equipment,
            rng=rng,
            today=today,
        )
        return await self.create_workout(workout)

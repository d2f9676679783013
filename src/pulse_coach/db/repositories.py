"""Data access layer for pulse-coach."""

import json
from datetime import date, datetime
from pathlib import Path

import aiosqlite

from ..models.adaptation import AdaptationRecord
from ..models.exercises import Exercise
from ..models.progress import ProgressEntry
from ..models.user_profile import UserProfile
from ..models.workout import Workout
from .engine import get_db_path


class UserProfileRepository:
    """Repository for user profiles."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, profile: UserProfile) -> str:
        """Create a new user profile."""
        data = profile.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO user_profiles
                (id, name, email, fitness_level, goals, equipment, created_at)
                VALUES (?, ?, ?, ?, ?, ?, COALESCE(?, CURRENT_TIMESTAMP))
                """,
                (
                    data["id"],
                    data["name"],
                    data["email"],
                    data["fitness_level"],
                    json.dumps(data["goals"]),
                    json.dumps(data["equipment"]),
                    data["created_at"],
                ),
            )
            await db.commit()
            return profile.id

    async def get(self, user_id: str) -> UserProfile | None:
        """Get a user profile by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM user_profiles WHERE id = ?", (user_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_profile(row)

    async def get_latest(self) -> UserProfile | None:
        """Get the most recently created profile."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM user_profiles ORDER BY created_at DESC, rowid DESC LIMIT 1"
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_profile(row)

    async def list_all(self) -> list[UserProfile]:
        """List all user profiles."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM user_profiles ORDER BY created_at DESC"
            )
            rows = await cursor.fetchall()
            return [self._row_to_profile(row) for row in rows]

    async def update(self, profile: UserProfile) -> None:
        """Update an existing profile."""
        if not profile.id:
            raise ValueError("Profile must have an ID to update")

        data = profile.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                UPDATE user_profiles SET
                    name = ?, email = ?, fitness_level = ?, goals = ?, equipment = ?
                WHERE id = ?
                """,
                (
                    data["name"],
                    data["email"],
                    data["fitness_level"],
                    json.dumps(data["goals"]),
                    json.dumps(data["equipment"]),
                    profile.id,
                ),
            )
            await db.commit()

    def _row_to_profile(self, row: aiosqlite.Row) -> UserProfile:
        """Convert a database row to a UserProfile."""
        return UserProfile.from_dict(
            {
                "id": row["id"],
                "name": row["name"],
                "email": row["email"],
                "fitness_level": row["fitness_level"],
                "goals": json.loads(row["goals"]),
                "equipment": json.loads(row["equipment"]),
                "created_at": row["created_at"],
            }
        )


class ExerciseRepository:
    """Repository for the exercise catalog."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get_all(self) -> list[Exercise]:
        """Get the whole catalog."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM exercises ORDER BY name")
            rows = await cursor.fetchall()
            return [self._row_to_exercise(row) for row in rows]

    async def get(self, exercise_id: str) -> Exercise | None:
        """Get an exercise by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM exercises WHERE id = ?", (exercise_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_exercise(row)

    def _row_to_exercise(self, row: aiosqlite.Row) -> Exercise:
        """Convert a database row to an Exercise."""
        return Exercise.from_dict(
            {
                "id": row["id"],
                "name": row["name"],
                "category": row["category"],
                "muscle_groups": json.loads(row["muscle_groups"]),
                "equipment_needed": json.loads(row["equipment_needed"]),
                "difficulty_base": row["difficulty_base"],
                "instructions": row["instructions"],
            }
        )


class WorkoutRepository:
    """Repository for workouts."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, workout: Workout) -> str:
        """Store a new workout."""
        data = workout.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO workouts
                (id, user_id, planned_exercises, completed_exercises,
                 difficulty_score, completion_rate, date, duration_minutes)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    data["id"],
                    data["user_id"],
                    json.dumps(data["planned_exercises"]),
                    json.dumps(data["completed_exercises"]),
                    data["difficulty_score"],
                    data["completion_rate"],
                    data["date"],
                    data["duration_minutes"],
                ),
            )
            await db.commit()
            return workout.id

    async def get(self, workout_id: str) -> Workout | None:
        """Get a workout by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM workouts WHERE id = ?", (workout_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_workout(row)

    async def get_by_date(self, user_id: str, on: date) -> Workout | None:
        """Get the first workout a user has on a given date."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM workouts
                WHERE user_id = ? AND date = ?
                ORDER BY created_at, rowid
                LIMIT 1
                """,
                (user_id, on.isoformat()),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_workout(row)

    async def list_since(self, user_id: str, since: date) -> list[Workout]:
        """Workouts dated on or after ``since``, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM workouts
                WHERE user_id = ? AND date >= ?
                ORDER BY date DESC, rowid DESC
                """,
                (user_id, since.isoformat()),
            )
            rows = await cursor.fetchall()
            return [self._row_to_workout(row) for row in rows]

    async def update(self, workout: Workout) -> None:
        """Overwrite a stored workout with the given value."""
        if not workout.id:
            raise ValueError("Workout must have an ID to update")

        data = workout.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                UPDATE workouts SET
                    planned_exercises = ?, completed_exercises = ?,
                    difficulty_score = ?, completion_rate = ?,
                    date = ?, duration_minutes = ?
                WHERE id = ?
                """,
                (
                    json.dumps(data["planned_exercises"]),
                    json.dumps(data["completed_exercises"]),
                    data["difficulty_score"],
                    data["completion_rate"],
                    data["date"],
                    data["duration_minutes"],
                    workout.id,
                ),
            )
            await db.commit()

    def _row_to_workout(self, row: aiosqlite.Row) -> Workout:
        """Convert a database row to a Workout."""
        return Workout.from_dict(
            {
                "id": row["id"],
                "user_id": row["user_id"],
                "planned_exercises": json.loads(row["planned_exercises"]),
                "completed_exercises": json.loads(row["completed_exercises"]),
                "difficulty_score": row["difficulty_score"],
                "completion_rate": row["completion_rate"],
                "date": row["date"],
                "duration_minutes": row["duration_minutes"],
            }
        )


class ProgressRepository:
    """Repository for the per-exercise progress log."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, entry: ProgressEntry) -> int:
        """Log one progress entry."""
        data = entry.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO user_progress
                (user_id, exercise_id, weight_used, reps_completed,
                 duration_seconds, perceived_difficulty, date)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    data["user_id"],
                    data["exercise_id"],
                    data["weight_used"],
                    data["reps_completed"],
                    data["duration_seconds"],
                    data["perceived_difficulty"],
                    data["date"],
                ),
            )
            await db.commit()
            return cursor.lastrowid

    async def list_since(
        self,
        user_id: str,
        since: date,
        exercise_id: str | None = None,
    ) -> list[ProgressEntry]:
        """Progress entries on or after ``since``, oldest first."""
        query = "SELECT * FROM user_progress WHERE user_id = ? AND date >= ?"
        params: list = [user_id, since.isoformat()]
        if exercise_id:
            query += " AND exercise_id = ?"
            params.append(exercise_id)
        query += " ORDER BY date, id"

        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(query, params)
            rows = await cursor.fetchall()
            return [
                ProgressEntry.from_dict(
                    {
                        "user_id": row["user_id"],
                        "exercise_id": row["exercise_id"],
                        "weight_used": row["weight_used"],
                        "reps_completed": row["reps_completed"],
                        "duration_seconds": row["duration_seconds"],
                        "perceived_difficulty": row["perceived_difficulty"],
                        "date": row["date"],
                    },
                    id=row["id"],
                )
                for row in rows
            ]


class AdaptationHistoryRepository:
    """Append-only repository for applied adaptations."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def append(self, record: AdaptationRecord) -> str:
        """Log an applied adaptation."""
        data = record.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO adaptation_history
                (id, user_id, change_type, reason, previous_value, new_value, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    data["id"],
                    data["user_id"],
                    data["change_type"],
                    data["reason"],
                    json.dumps(data["previous_value"]),
                    json.dumps(data["new_value"]),
                    data["created_at"] or datetime.now().isoformat(),
                ),
            )
            await db.commit()
            return record.id

    async def list_recent(self, user_id: str, limit: int = 20) -> list[AdaptationRecord]:
        """Most recent adaptations for a user, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM adaptation_history
                WHERE user_id = ?
                ORDER BY created_at DESC, rowid DESC
                LIMIT ?
                """,
                (user_id, limit),
            )
            rows = await cursor.fetchall()
            return [
                AdaptationRecord.from_dict(
                    {
                        "id": row["id"],
                        "user_id": row["user_id"],
                        "change_type": row["change_type"],
                        "reason": row["reason"],
                        "previous_value": json.loads(row["previous_value"]),
                        "new_value": json.loads(row["new_value"]),
                        "created_at": row["created_at"],
                    }
                )
                for row in rows
            ]

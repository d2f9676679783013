"""Database engine setup and initialization."""

import json
import logging
from pathlib import Path

import aiosqlite

from ..config import get_settings
from ..models.exercises import COMMON_EXERCISES, Exercise

logger = logging.getLogger(__name__)


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    settings = get_settings()
    if data_dir is None:
        data_dir = settings.data_dir
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / settings.db_filename


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # User profiles table
        await db.execute("""
            CREATE TABLE IF NOT EXISTS user_profiles (
                id TEXT PRIMARY KEY,
                name TEXT DEFAULT '',
                email TEXT,
                fitness_level TEXT NOT NULL,
                goals TEXT NOT NULL DEFAULT '[]',
                equipment TEXT NOT NULL DEFAULT '[]',
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        # Exercise catalog
        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercises (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                category TEXT NOT NULL,
                muscle_groups TEXT NOT NULL,
                equipment_needed TEXT NOT NULL DEFAULT '[]',
                difficulty_base INTEGER NOT NULL,
                instructions TEXT DEFAULT ''
            )
        """)

        # Workouts, one canonical row per user per date by convention
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workouts (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                planned_exercises TEXT NOT NULL DEFAULT '[]',
                completed_exercises TEXT NOT NULL DEFAULT '[]',
                difficulty_score INTEGER NOT NULL DEFAULT 5,
                completion_rate REAL NOT NULL DEFAULT 0,
                date TEXT NOT NULL,
                duration_minutes INTEGER NOT NULL DEFAULT 0,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                FOREIGN KEY (user_id) REFERENCES user_profiles(id)
            )
        """)

        # Per-exercise progress log
        await db.execute("""
            CREATE TABLE IF NOT EXISTS user_progress (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id TEXT NOT NULL,
                exercise_id TEXT NOT NULL,
                weight_used REAL,
                reps_completed INTEGER,
                duration_seconds INTEGER,
                perceived_difficulty INTEGER NOT NULL DEFAULT 7,
                date TEXT NOT NULL,
                FOREIGN KEY (user_id) REFERENCES user_profiles(id)
            )
        """)

        # Append-only adaptation audit log
        await db.execute("""
            CREATE TABLE IF NOT EXISTS adaptation_history (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                change_type TEXT NOT NULL,
                reason TEXT NOT NULL,
                previous_value TEXT NOT NULL DEFAULT '{}',
                new_value TEXT NOT NULL DEFAULT '{}',
                created_at TIMESTAMP NOT NULL,
                FOREIGN KEY (user_id) REFERENCES user_profiles(id)
            )
        """)

        # Create indexes for common queries
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workouts_user_date
            ON workouts(user_id, date)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_user_progress_user_date
            ON user_progress(user_id, date)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_adaptation_history_user
            ON adaptation_history(user_id, created_at)
        """)

        await db.commit()


async def seed_exercises(
    db_path: Path | None = None,
    exercises: list[Exercise] | None = None,
) -> int:
    """Seed the exercise catalog, leaving existing ids untouched.

    Returns:
        Number of exercises inserted
    """
    if db_path is None:
        db_path = get_db_path()
    if exercises is None:
        exercises = COMMON_EXERCISES

    inserted = 0
    async with aiosqlite.connect(db_path) as db:
        for exercise in exercises:
            data = exercise.to_dict()
            cursor = await db.execute(
                """
                INSERT OR IGNORE INTO exercises
                (id, name, category, muscle_groups, equipment_needed,
                 difficulty_base, instructions)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    data["id"],
                    data["name"],
                    data["category"],
                    json.dumps(data["muscle_groups"]),
                    json.dumps(data["equipment_needed"]),
                    data["difficulty_base"],
                    data["instructions"],
                ),
            )
            inserted += cursor.rowcount

        await db.commit()

    logger.info("Seeded %d of %d exercises", inserted, len(exercises))
    return inserted

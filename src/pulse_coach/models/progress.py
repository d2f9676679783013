"""Per-exercise progress log model."""

from dataclasses import dataclass, field
from datetime import date

from .workout import WorkoutExercise

DEFAULT_PERCEIVED_DIFFICULTY = 7


@dataclass
class ProgressEntry:
    """What a user did for one exercise on one day.

    Written each time an exercise is completed so per-exercise charts can be
    built without replaying whole workouts.
    """

    user_id: str
    exercise_id: str
    weight_used: float | None = None
    reps_completed: int | None = None
    duration_seconds: int | None = None
    perceived_difficulty: int = DEFAULT_PERCEIVED_DIFFICULTY  # 1-10
    date: date = field(default_factory=date.today)
    id: int | None = None

    @classmethod
    def from_completed(
        cls,
        user_id: str,
        entry: WorkoutExercise,
        on: "date | None" = None,
        perceived_difficulty: int = DEFAULT_PERCEIVED_DIFFICULTY,
    ) -> "ProgressEntry":
        """Build a progress entry from a completed workout exercise."""
        return cls(
            user_id=user_id,
            exercise_id=entry.exercise_id,
            weight_used=entry.weight,
            reps_completed=entry.reps,
            duration_seconds=entry.duration_seconds,
            perceived_difficulty=perceived_difficulty,
            date=on or date.today(),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "user_id": self.user_id,
            "exercise_id": self.exercise_id,
            "weight_used": self.weight_used,
            "reps_completed": self.reps_completed,
            "duration_seconds": self.duration_seconds,
            "perceived_difficulty": self.perceived_difficulty,
            "date": self.date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "ProgressEntry":
        """Create from dictionary."""
        return cls(
            id=id,
            user_id=data["user_id"],
            exercise_id=data["exercise_id"],
            weight_used=data.get("weight_used"),
            reps_completed=data.get("reps_completed"),
            duration_seconds=data.get("duration_seconds"),
            perceived_difficulty=data.get(
                "perceived_difficulty", DEFAULT_PERCEIVED_DIFFICULTY
            ),
            date=date.fromisoformat(data["date"]),
        )

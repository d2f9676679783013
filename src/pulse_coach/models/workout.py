"""Workout data models."""

from dataclasses import dataclass, field, replace
from datetime import date


@dataclass
class WorkoutExercise:
    """One unit of work inside a workout.

    Used for both planned and completed entries. Any subset of the optional
    fields may be present; a ``None`` field means "not tracked".
    """

    exercise_id: str
    sets: int | None = None
    reps: int | None = None
    weight: float | None = None
    duration_seconds: int | None = None
    rest_seconds: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary, dropping untracked fields."""
        data = {"exercise_id": self.exercise_id}
        for key in ("sets", "reps", "weight", "duration_seconds", "rest_seconds"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutExercise":
        """Create from dictionary."""
        return cls(
            exercise_id=data["exercise_id"],
            sets=data.get("sets"),
            reps=data.get("reps"),
            weight=data.get("weight"),
            duration_seconds=data.get("duration_seconds"),
            rest_seconds=data.get("rest_seconds"),
        )


@dataclass(frozen=True)
class StrengthPrescription:
    """Sets and reps (and optionally load) for a strength exercise."""

    sets: int
    reps: int
    weight: float | None = None

    def to_entry(self, exercise_id: str, rest_seconds: int) -> WorkoutExercise:
        return WorkoutExercise(
            exercise_id=exercise_id,
            sets=self.sets,
            reps=self.reps,
            weight=self.weight,
            rest_seconds=rest_seconds,
        )


@dataclass(frozen=True)
class TimedPrescription:
    """A work or hold duration for cardio and flexibility exercises."""

    duration_seconds: int

    def to_entry(self, exercise_id: str, rest_seconds: int) -> WorkoutExercise:
        return WorkoutExercise(
            exercise_id=exercise_id,
            duration_seconds=self.duration_seconds,
            rest_seconds=rest_seconds,
        )


Prescription = StrengthPrescription | TimedPrescription


def completion_ratio(planned_count: int, completed_count: int) -> float:
    """Completed over planned entries, with the denominator clamped to 1."""
    return completed_count / max(1, planned_count)


@dataclass
class Workout:
    """A single day's workout for one user."""

    id: str
    user_id: str
    planned_exercises: list[WorkoutExercise] = field(default_factory=list)
    completed_exercises: list[WorkoutExercise] = field(default_factory=list)
    difficulty_score: int = 5  # 1-10
    completion_rate: float = 0.0
    duration_minutes: int = 0
    date: date = field(default_factory=date.today)

    @property
    def completion_ratio(self) -> float:
        """Completion ratio recomputed from the entry lists."""
        return completion_ratio(
            len(self.planned_exercises), len(self.completed_exercises)
        )

    def with_completed(self, entry: WorkoutExercise) -> "Workout":
        """Return a copy with ``entry`` appended to the completed exercises."""
        completed = [*self.completed_exercises, entry]
        return replace(
            self,
            completed_exercises=completed,
            completion_rate=completion_ratio(len(self.planned_exercises), len(completed)),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "planned_exercises": [ex.to_dict() for ex in self.planned_exercises],
            "completed_exercises": [ex.to_dict() for ex in self.completed_exercises],
            "difficulty_score": self.difficulty_score,
            "completion_rate": self.completion_rate,
            "date": self.date.isoformat(),
            "duration_minutes": self.duration_minutes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Workout":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            user_id=data["user_id"],
            planned_exercises=[
                WorkoutExercise.from_dict(ex) for ex in data.get("planned_exercises", [])
            ],
            completed_exercises=[
                WorkoutExercise.from_dict(ex) for ex in data.get("completed_exercises", [])
            ],
            difficulty_score=data.get("difficulty_score", 5),
            completion_rate=data.get("completion_rate", 0.0),
            duration_minutes=data.get("duration_minutes", 0),
            date=date.fromisoformat(data["date"]),
        )

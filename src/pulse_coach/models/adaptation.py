"""Adaptation proposals, audit records and performance metrics."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import uuid4

from .workout import Workout


class AdaptationType(str, Enum):
    """Kinds of change the engine can make to a workout."""

    INCREASE_DIFFICULTY = "increase_difficulty"
    DECREASE_DIFFICULTY = "decrease_difficulty"
    CHANGE_EXERCISE = "change_exercise"
    ADD_REST = "add_rest"


@dataclass
class PerformanceMetrics:
    """Trend metrics over a window of recent workouts.

    Recomputed on demand and never persisted. ``recent_workouts`` is the
    analysed window ordered oldest to newest.
    """

    completion_rate: float = 0.0
    consistency_score: float = 0.0
    difficulty_trend: float = 0.0
    recent_workouts: list[Workout] = field(default_factory=list)
    user_feedback: float | None = None  # 1-10 perceived difficulty

    def to_dict(self) -> dict:
        """Convert to dictionary (workouts summarised by id)."""
        return {
            "completion_rate": self.completion_rate,
            "consistency_score": self.consistency_score,
            "difficulty_trend": self.difficulty_trend,
            "workout_ids": [w.id for w in self.recent_workouts],
            "user_feedback": self.user_feedback,
        }


@dataclass(frozen=True)
class AdaptationProposal:
    """A suggested change that has not been applied yet."""

    adaptation_type: AdaptationType
    reason: str
    previous_value: dict = field(default_factory=dict)
    new_value: dict = field(default_factory=dict)

    @property
    def target_exercise_id(self) -> str | None:
        """Exercise a ``change_exercise`` proposal wants replaced."""
        return self.new_value.get("replace_exercise")

    def to_dict(self) -> dict:
        return {
            "adaptation_type": self.adaptation_type.value,
            "reason": self.reason,
            "previous_value": self.previous_value,
            "new_value": self.new_value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AdaptationProposal":
        return cls(
            adaptation_type=AdaptationType(data["adaptation_type"]),
            reason=data["reason"],
            previous_value=data.get("previous_value", {}),
            new_value=data.get("new_value", {}),
        )

    def to_record(
        self,
        user_id: str,
        previous_value: dict | None = None,
        new_value: dict | None = None,
    ) -> "AdaptationRecord":
        """Turn the proposal into an audit-log entry for ``user_id``.

        ``previous_value`` and ``new_value`` are merged over the proposal's own
        payloads so callers can attach the concrete before/after state.
        """
        return AdaptationRecord(
            id=uuid4().hex,
            user_id=user_id,
            change_type=self.adaptation_type,
            reason=self.reason,
            previous_value={**self.previous_value, **(previous_value or {})},
            new_value={**self.new_value, **(new_value or {})},
            created_at=datetime.now(),
        )


@dataclass(frozen=True)
class AdaptationRecord:
    """An applied adaptation in the append-only history."""

    id: str
    user_id: str
    change_type: AdaptationType
    reason: str
    previous_value: dict = field(default_factory=dict)
    new_value: dict = field(default_factory=dict)
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "change_type": self.change_type.value,
            "reason": self.reason,
            "previous_value": self.previous_value,
            "new_value": self.new_value,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AdaptationRecord":
        """Create from dictionary."""
        created_at = None
        if data.get("created_at"):
            created_at = datetime.fromisoformat(data["created_at"])

        return cls(
            id=data["id"],
            user_id=data["user_id"],
            change_type=AdaptationType(data["change_type"]),
            reason=data["reason"],
            previous_value=data.get("previous_value", {}),
            new_value=data.get("new_value", {}),
            created_at=created_at,
        )

"""User profile data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .exercises import EquipmentType


class FitnessLevel(str, Enum):
    """Self-reported fitness level."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class FitnessGoal(str, Enum):
    """Training goals that steer the category mix of generated workouts."""

    STRENGTH = "strength"
    MUSCLE_GAIN = "muscle_gain"
    CARDIO = "cardio"
    WEIGHT_LOSS = "weight_loss"
    FLEXIBILITY = "flexibility"
    GENERAL_FITNESS = "general_fitness"


@dataclass
class UserProfile:
    """Read-only input to workout generation."""

    id: str
    fitness_level: FitnessLevel
    goals: list[FitnessGoal] = field(default_factory=list)
    equipment: list[EquipmentType] = field(default_factory=list)
    name: str = ""
    email: str | None = None
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "fitness_level": self.fitness_level.value,
            "goals": [g.value for g in self.goals],
            "equipment": [eq.value for eq in self.equipment],
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "UserProfile":
        """Create from dictionary."""
        created_at = None
        if data.get("created_at"):
            created_at = datetime.fromisoformat(data["created_at"])

        return cls(
            id=data["id"],
            fitness_level=FitnessLevel(data["fitness_level"]),
            goals=[FitnessGoal(g) for g in data.get("goals", [])],
            equipment=[EquipmentType(eq) for eq in data.get("equipment", [])],
            name=data.get("name", ""),
            email=data.get("email"),
            created_at=created_at,
        )

    def get_summary(self) -> str:
        """Generate a short multi-line summary for display."""
        summary = f"User: {self.name or self.id}\n"
        summary += f"Fitness level: {self.fitness_level.value}\n"
        summary += f"Goals: {', '.join(g.value for g in self.goals) or 'none'}\n"
        summary += f"Equipment: {', '.join(eq.value for eq in self.equipment) or 'none'}\n"
        return summary

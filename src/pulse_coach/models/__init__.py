"""Data models for pulse-coach."""

from .adaptation import (
    AdaptationProposal,
    AdaptationRecord,
    AdaptationType,
    PerformanceMetrics,
)
from .exercises import Exercise, ExerciseCategory, EquipmentType, MuscleGroup
from .progress import ProgressEntry
from .user_profile import FitnessGoal, FitnessLevel, UserProfile
from .workout import (
    Prescription,
    StrengthPrescription,
    TimedPrescription,
    Workout,
    WorkoutExercise,
)

__all__ = [
    "AdaptationProposal",
    "AdaptationRecord",
    "AdaptationType",
    "EquipmentType",
    "Exercise",
    "ExerciseCategory",
    "FitnessGoal",
    "FitnessLevel",
    "MuscleGroup",
    "PerformanceMetrics",
    "Prescription",
    "ProgressEntry",
    "StrengthPrescription",
    "TimedPrescription",
    "UserProfile",
    "Workout",
    "WorkoutExercise",
]

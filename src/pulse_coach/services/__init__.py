"""Services that connect the workout engine to storage."""

from .adaptation import AdaptationInsights, AdaptationService, generate_recommendations
from .workouts import WorkoutService

__all__ = [
    "AdaptationInsights",
    "AdaptationService",
    "generate_recommendations",
    "WorkoutService",
]

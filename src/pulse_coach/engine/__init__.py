"""Adaptive workout engine.

Pure functions over in-memory catalog, profile and workout values. Nothing in
this package performs I/O; callers load inputs and persist results.
"""

from .analysis import (
    analyze_workout_pattern,
    calculate_consistency_score,
    calculate_difficulty_trend,
)
from .applier import apply_adaptation, find_alternative_exercises
from .decisions import decide_adaptations, find_consistently_failed_exercises
from .generator import calculate_workout_difficulty, generate_workout
from .scoring import score_performance

__all__ = [
    "analyze_workout_pattern",
    "apply_adaptation",
    "calculate_consistency_score",
    "calculate_difficulty_trend",
    "calculate_workout_difficulty",
    "decide_adaptations",
    "find_alternative_exercises",
    "find_consistently_failed_exercises",
    "generate_workout",
    "score_performance",
]

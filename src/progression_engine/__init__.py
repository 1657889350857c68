"""Progressive-overload recommendation engine for logged strength workouts."""

from progression_engine.engine import ProgressionEngine, get_progression_suggestion
from progression_engine.math.strength import calculate_1rm, calculate_volume, get_best_set
from progression_engine.models import (
    ExerciseConfig,
    ProgressionSuggestion,
    ProgressionType,
    SetRecord,
    SuggestionAction,
    WeightUnit,
)

__all__ = [
    "ExerciseConfig",
    "ProgressionEngine",
    "ProgressionSuggestion",
    "ProgressionType",
    "SetRecord",
    "SuggestionAction",
    "WeightUnit",
    "calculate_1rm",
    "calculate_volume",
    "get_best_set",
    "get_progression_suggestion",
]

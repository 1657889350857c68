"""Data models for the progression engine."""

from progression_engine.models.enums import (
    PersonalRecordType,
    ProgressionReason,
    ProgressionType,
    SuggestionAction,
    WeightUnit,
)
from progression_engine.models.exercise_config import ExerciseConfig
from progression_engine.models.history import ExerciseHistory, ExerciseProgress
from progression_engine.models.personal_record import (
    PersonalRecord,
    PersonalRecordBook,
)
from progression_engine.models.session import ExerciseSession, SessionSummary
from progression_engine.models.set_record import SetRecord
from progression_engine.models.suggestion import ProgressionSuggestion

__all__ = [
    "ExerciseConfig",
    "ExerciseHistory",
    "ExerciseProgress",
    "ExerciseSession",
    "PersonalRecord",
    "PersonalRecordBook",
    "PersonalRecordType",
    "ProgressionReason",
    "ProgressionSuggestion",
    "ProgressionType",
    "SessionSummary",
    "SetRecord",
    "SuggestionAction",
    "WeightUnit",
]

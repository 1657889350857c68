"""Custom exception hierarchy for the progression engine.

Anomalous workout data (nothing logged, nothing completed, impossible
numbers) is never an exception: the strategies answer it with a MAINTAIN
suggestion. These errors are for broken contracts only.
"""

from __future__ import annotations


class ProgressionEngineError(Exception):
    """Base exception for all progression_engine errors."""


class InvalidExerciseConfigError(ProgressionEngineError):
    """An ExerciseConfig was built with out-of-range targets or increment."""


class InvalidSuggestionError(ProgressionEngineError):
    """A ProgressionSuggestion is missing a field its action requires."""


class UnknownProgressionTypeError(ProgressionEngineError):
    """No strategy is registered for the requested progression type."""

    def __init__(self, progression_type: object) -> None:
        super().__init__(f"No progression strategy registered for {progression_type!r}")
        self.progression_type = progression_type


class SessionLogError(ProgressionEngineError):
    """A session log record could not be parsed into engine models."""

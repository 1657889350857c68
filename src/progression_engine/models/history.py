"""Per-exercise history and progress summaries for analytics views."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from progression_engine.models.enums import PROGRESS_CHART_POINTS


@dataclass(frozen=True)
class ExerciseHistory:
    """One session of one exercise, reduced to its headline numbers."""

    exercise_id: str
    session_date: date
    best_weight: float
    best_reps: float
    total_volume: float
    working_sets: int


@dataclass(frozen=True)
class ExerciseProgress:
    """Progress summary for one exercise across all logged sessions.

    ``progress_data`` holds (date, estimated 1RM) per session, oldest first,
    in the display unit.
    """

    exercise_id: str
    sessions: int
    best_weight: int
    best_1rm: int
    progress_data: tuple[tuple[date, int], ...] = field(default_factory=tuple)

    def chart_points(self, limit: int = PROGRESS_CHART_POINTS) -> tuple[tuple[date, int], ...]:
        """The most recent ``limit`` points, for a trend chart."""
        if limit <= 0:
            return ()
        return self.progress_data[-limit:]

    @property
    def has_trend(self) -> bool:
        """A trend needs at least two sessions."""
        return len(self.progress_data) >= 2

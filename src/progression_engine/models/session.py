"""Session-level models: a logged exercise session and its working-set summary."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from progression_engine.models.set_record import SetRecord


@dataclass(frozen=True)
class ExerciseSession:
    """All sets logged for one exercise within one workout."""

    session_date: date
    sets: tuple[SetRecord, ...] = field(default_factory=tuple)
    workout_id: str | None = None

    @property
    def working_sets(self) -> tuple[SetRecord, ...]:
        return tuple(s for s in self.sets if s.is_working)


@dataclass(frozen=True)
class SessionSummary:
    """Numbers a strategy decides on, derived once from valid working sets."""

    weight: float  # Consensus weight
    set_count: int
    average_reps: int  # Rounded once, before any comparison
    all_hit_max_reps: bool

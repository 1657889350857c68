"""Set validator: splits a session's sets into working, attempted and invalid."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

from progression_engine.models.set_record import SetRecord


def is_valid_set(record: SetRecord) -> bool:
    """A set is valid when weight and reps are finite and non-negative.

    ``weight == 0 and reps == 0`` is valid: a failed or bodyweight attempt,
    which is different from having no data at all.
    """
    return (
        math.isfinite(record.weight)
        and math.isfinite(record.reps)
        and record.weight >= 0
        and record.reps >= 0
    )


@dataclass(frozen=True)
class SetScreening:
    """Filtered views over one session's sets. Input records are untouched."""

    attempted_sets: tuple[SetRecord, ...] = field(default_factory=tuple)
    working_sets: tuple[SetRecord, ...] = field(default_factory=tuple)
    invalid_sets: tuple[SetRecord, ...] = field(default_factory=tuple)

    @property
    def has_working_sets(self) -> bool:
        return len(self.working_sets) > 0

    @property
    def has_attempts(self) -> bool:
        """True if any non-warmup set was logged, completed or not."""
        return len(self.attempted_sets) > 0

    @property
    def is_valid(self) -> bool:
        """True when every working set holds usable numbers."""
        return len(self.invalid_sets) == 0


def screen_sets(sets: Iterable[SetRecord]) -> SetScreening:
    """Screen one exercise session's sets.

    Warmups are dropped first. Of the remaining (attempted) sets, completed
    ones are working sets, and working sets with non-finite or negative
    numbers are reported as invalid.
    """
    attempted = tuple(s for s in sets if not s.is_warmup)
    working = tuple(s for s in attempted if s.completed)
    invalid = tuple(s for s in working if not is_valid_set(s))
    return SetScreening(
        attempted_sets=attempted,
        working_sets=working,
        invalid_sets=invalid,
    )

"""A single logged set, exactly as the lifter entered it."""

from __future__ import annotations

from dataclasses import dataclass

from progression_engine.models.enums import WeightUnit


@dataclass(frozen=True)
class SetRecord:
    """Read-only snapshot of one logged set.

    ``weight`` and ``reps`` are kept as logged, including NaN, infinities and
    negative values; screening them is the validator's job.
    """

    weight: float
    reps: float
    is_warmup: bool = False
    completed: bool = True
    weight_unit: WeightUnit | None = None  # None = legacy record, entered in kg
    rpe: float | None = None

    @property
    def is_working(self) -> bool:
        """A working set is a completed, non-warmup set."""
        return not self.is_warmup and self.completed

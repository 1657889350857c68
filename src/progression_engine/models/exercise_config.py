"""Frozen exercise configuration: the progression targets for one exercise."""

from __future__ import annotations

import math
from dataclasses import dataclass

from progression_engine.exceptions import InvalidExerciseConfigError
from progression_engine.models.enums import (
    DEFAULT_TARGET_SETS_MAX,
    DEFAULT_TARGET_SETS_MIN,
    ProgressionType,
)


@dataclass(frozen=True)
class ExerciseConfig:
    """Immutable progression targets supplied by the caller on every call.

    Set-range defaults are applied here once, so strategies never have to
    resolve missing fields. Malformed targets are rejected at construction
    rather than producing nonsensical suggestions later.
    """

    progression_type: ProgressionType
    weight_increment: float  # 0 = bodyweight / no external load
    target_rep_min: int
    target_rep_max: int
    target_sets_min: int = DEFAULT_TARGET_SETS_MIN
    target_sets_max: int = DEFAULT_TARGET_SETS_MAX

    # Labelling only; the engine never reads these
    exercise_id: str | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.progression_type, ProgressionType):
            raise InvalidExerciseConfigError(
                f"progression_type must be a ProgressionType, got {self.progression_type!r}"
            )
        if (
            isinstance(self.weight_increment, bool)
            or not isinstance(self.weight_increment, (int, float))
            or not math.isfinite(self.weight_increment)
            or self.weight_increment < 0
        ):
            raise InvalidExerciseConfigError(
                f"weight_increment must be a non-negative number, got {self.weight_increment!r}"
            )
        for name in ("target_rep_min", "target_rep_max", "target_sets_min", "target_sets_max"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidExerciseConfigError(f"{name} must be an integer, got {value!r}")
        if self.target_rep_min < 1:
            raise InvalidExerciseConfigError(
                f"target_rep_min must be positive, got {self.target_rep_min}"
            )
        if self.target_rep_min >= self.target_rep_max:
            raise InvalidExerciseConfigError(
                f"target_rep_min ({self.target_rep_min}) must be below "
                f"target_rep_max ({self.target_rep_max})"
            )
        if self.target_sets_min < 1:
            raise InvalidExerciseConfigError(
                f"target_sets_min must be positive, got {self.target_sets_min}"
            )
        if self.target_sets_min > self.target_sets_max:
            raise InvalidExerciseConfigError(
                f"target_sets_min ({self.target_sets_min}) must not exceed "
                f"target_sets_max ({self.target_sets_max})"
            )

    @property
    def is_bodyweight(self) -> bool:
        """True when there is no load to add (weight_increment == 0)."""
        return self.weight_increment == 0

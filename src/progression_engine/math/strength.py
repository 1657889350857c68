"""Strength metrics: estimated one-rep max, session volume, best set.

References:
    - Epley (1985): 1RM = w × (1 + reps / 30)
    - LeSuer et al. (1997): rep-based 1RM equations lose accuracy well
      before 30 reps, hence the capped multiplier.
"""

from __future__ import annotations

import math
from typing import Iterable

from progression_engine.math.rounding import round_half_up
from progression_engine.models.enums import EPLEY_MAX_MULTIPLIER, EPLEY_REP_DIVISOR
from progression_engine.models.set_record import SetRecord


def calculate_1rm(weight: float, reps: float) -> float:
    """Estimate a one-rep max with a capped Epley formula.

    Args:
        weight: Load lifted.
        reps: Repetitions completed at that load.

    Returns:
        The estimated 1RM, rounded half-up to a whole number. A single rep
        returns ``weight`` unchanged. Invalid input (non-finite or negative)
        and zero reps return 0. The estimate never exceeds ``2 * weight``.
    """
    if not math.isfinite(weight) or not math.isfinite(reps):
        return 0
    if weight < 0 or reps < 0:
        return 0
    if reps == 0:
        return 0
    if reps == 1:
        return weight

    multiplier = min(reps / EPLEY_REP_DIVISOR, EPLEY_MAX_MULTIPLIER)
    return round_half_up(weight * (1 + multiplier))


def calculate_volume(sets: Iterable[SetRecord]) -> float:
    """Total load moved (weight × reps) over working sets.

    Warmups and incomplete sets are excluded. No rounding is applied.
    """
    return sum(s.weight * s.reps for s in sets if s.is_working)


def get_best_set(sets: Iterable[SetRecord]) -> SetRecord | None:
    """Return the working set with the highest estimated 1RM.

    On ties the earliest set wins. Returns None without working sets.
    """
    working = [s for s in sets if s.is_working]
    if not working:
        return None
    return max(working, key=lambda s: calculate_1rm(s.weight, s.reps))

"""Rounding helpers shared by the strategies and metrics.

Python's built-in ``round`` uses banker's rounding (``round(4.5) == 4``).
Rep averages and 1RM estimates are expected to round halves up, so every
rounding in the engine goes through ``round_half_up``.
"""

from __future__ import annotations

import math

from progression_engine.models.enums import WEIGHT_ROUNDING_PRECISION


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def round_weight(weight: float, precision: float = WEIGHT_ROUNDING_PRECISION) -> float:
    """Snap a weight to the nearest multiple of ``precision``.

    Removes float artefacts (50.1 + 5 -> 55.0, not 55.1) and keeps
    recommendations loadable with real plates and pins.

    Args:
        weight: Raw computed weight, in whatever unit the caller uses.
        precision: Step size to snap to (default 0.5).

    Returns:
        The snapped weight as a float.
    """
    return float(round_half_up(weight / precision) * precision)


def round_to_decimals(value: float, decimals: int) -> float:
    """Round half-up to a fixed number of decimal places. NaN/inf pass through."""
    if not math.isfinite(value):
        return value
    factor = 10**decimals
    return round_half_up(value * factor) / factor

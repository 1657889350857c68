"""Weight unit conversion and display formatting.

Weights are stored in the unit they were entered in; these helpers convert
for display when the lifter's preferred unit differs. The progression
strategies never convert: they only use ``unit_label`` for message text.
"""

from __future__ import annotations

from progression_engine.math.rounding import round_to_decimals
from progression_engine.models.enums import (
    CONVERTED_WEIGHT_DECIMALS,
    DEFAULT_WEIGHT_UNIT,
    KG_TO_LB,
    LB_TO_KG,
    UNIT_LABELS,
    WeightUnit,
)


def kg_to_lb(kg: float) -> float:
    """Convert kilograms to pounds, rounded to 0.1. e.g. 100 -> 220.5."""
    return round_to_decimals(kg * KG_TO_LB, CONVERTED_WEIGHT_DECIMALS)


def lb_to_kg(lb: float) -> float:
    """Convert pounds to kilograms, rounded to 0.1. e.g. 225 -> 102.1."""
    return round_to_decimals(lb * LB_TO_KG, CONVERTED_WEIGHT_DECIMALS)


def convert_weight(weight: float, from_unit: WeightUnit, to_unit: WeightUnit) -> float:
    if from_unit == to_unit:
        return weight
    if from_unit == WeightUnit.KG:
        return kg_to_lb(weight)
    return lb_to_kg(weight)


def get_conversion_factor(from_unit: WeightUnit, to_unit: WeightUnit) -> float:
    """Multiplier taking a weight from one unit to another (unrounded)."""
    if from_unit == to_unit:
        return 1.0
    if from_unit == WeightUnit.KG:
        return KG_TO_LB
    return LB_TO_KG


def get_display_weight(
    weight: float, stored_unit: WeightUnit | None, display_unit: WeightUnit
) -> float:
    """Convert a stored weight for display.

    Records without a stored unit predate unit tracking and were entered
    in kilograms.
    """
    from_unit = stored_unit if stored_unit is not None else DEFAULT_WEIGHT_UNIT
    return convert_weight(weight, from_unit, display_unit)


def unit_label(unit: WeightUnit | str) -> str:
    """Display label for a unit. Plain strings are passed through as labels."""
    if isinstance(unit, WeightUnit):
        return UNIT_LABELS[unit]
    return unit


def format_number(value: float) -> str:
    """Render a number without a trailing ``.0``. e.g. 100.0 -> '100', 102.5 -> '102.5'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_weight(weight: float, unit: WeightUnit | str) -> str:
    """Format a weight with its unit. e.g. 100, KG -> '100 kg'."""
    return f"{format_number(weight)} {unit_label(unit)}"

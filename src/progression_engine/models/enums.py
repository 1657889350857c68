"""Enumerations and progression constants for the progression engine."""

from enum import IntEnum, auto


class ProgressionType(IntEnum):
    """How an exercise progresses between sessions.

    DOUBLE: reps, then weight (fixed set count). Suits barbell lifts with
    small plate increments.
    TRIPLE: reps, then sets, then weight. Suits machines and dumbbells where
    each weight step is large.
    """

    DOUBLE = auto()
    TRIPLE = auto()


class SuggestionAction(IntEnum):
    """What the lifter should change next session."""

    INCREASE_WEIGHT = auto()
    INCREASE_REPS = auto()
    ADD_SET = auto()
    MAINTAIN = auto()
    REDUCE_WEIGHT = auto()


class ProgressionReason(IntEnum):
    """Which decision branch produced a suggestion."""

    NO_DATA = auto()
    NO_COMPLETED_SETS = auto()
    INVALID_DATA = auto()
    STRUGGLING = auto()
    NO_LIGHTER_LOAD = auto()
    EXCESS_VOLUME = auto()
    OVERSHOOT = auto()
    BODYWEIGHT_PLATEAU = auto()
    TARGET_REACHED = auto()
    SET_ADDED = auto()
    PROGRESSING = auto()


class WeightUnit(IntEnum):
    """Units a weight can be logged or displayed in."""

    KG = auto()
    LB = auto()


class PersonalRecordType(IntEnum):
    """Kinds of personal record tracked per exercise."""

    ONE_REP_MAX = auto()
    MAX_WEIGHT = auto()
    MAX_REPS = auto()
    MAX_VOLUME = auto()


UNIT_LABELS = {
    WeightUnit.KG: "kg",
    WeightUnit.LB: "lb",
}

# ---------------------------------------------------------------------------
# Exercise configuration defaults
# ---------------------------------------------------------------------------
DEFAULT_TARGET_SETS_MIN = 3
DEFAULT_TARGET_SETS_MAX = 4

# ---------------------------------------------------------------------------
# Decision thresholds
# ---------------------------------------------------------------------------
# Average reps below this fraction of target_rep_min means the load is too heavy
STRUGGLING_REP_FRACTION = 0.5

# Average reps above this multiple of target_rep_max earns a double increment
OVERSHOOT_REP_MULTIPLE = 1.5
OVERSHOOT_INCREMENT_MULTIPLIER = 2

# Recommended weights snap to the nearest plate/pin step
WEIGHT_ROUNDING_PRECISION = 0.5

# ---------------------------------------------------------------------------
# One-rep-max estimation (Epley)
# ---------------------------------------------------------------------------
# Linear Epley term is reps / 30; capped at 1.0 so an estimate never exceeds
# twice the logged weight.
EPLEY_REP_DIVISOR = 30
EPLEY_MAX_MULTIPLIER = 1.0

# ---------------------------------------------------------------------------
# Unit conversion
# ---------------------------------------------------------------------------
KG_TO_LB = 2.20462
LB_TO_KG = 0.453592
CONVERTED_WEIGHT_DECIMALS = 1

# Legacy sets logged without a unit were entered in kilograms
DEFAULT_WEIGHT_UNIT = WeightUnit.KG

# ---------------------------------------------------------------------------
# Analytics
# ---------------------------------------------------------------------------
PROGRESS_CHART_POINTS = 10
VOLUME_TREND_WINDOW = 3

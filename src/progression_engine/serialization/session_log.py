"""Session log parsing: JSON records from the mobile client into engine models.

Field names follow the client's camelCase records. Numbers are passed through
as logged (NaN included) so the engine can judge them; only structurally
broken records are rejected.
"""

from __future__ import annotations

from typing import Any

from progression_engine.exceptions import InvalidExerciseConfigError, SessionLogError
from progression_engine.models.enums import ProgressionType, WeightUnit
from progression_engine.models.exercise_config import ExerciseConfig
from progression_engine.models.set_record import SetRecord

PROGRESSION_TYPE_KEYS = {
    "double": ProgressionType.DOUBLE,
    "triple": ProgressionType.TRIPLE,
}

WEIGHT_UNIT_KEYS = {
    "kg": WeightUnit.KG,
    "lb": WeightUnit.LB,
}


def parse_weight_unit(value: str) -> WeightUnit:
    """'kg' / 'lb' (any case) -> WeightUnit."""
    try:
        return WEIGHT_UNIT_KEYS[value.strip().lower()]
    except (AttributeError, KeyError):
        raise SessionLogError(f"Unknown weight unit: {value!r}") from None


def parse_set_record(raw: dict[str, Any]) -> SetRecord:
    """Build a SetRecord from a logged set dict.

    Raises:
        SessionLogError: weight or reps missing or not numeric, or a flag /
            unit has the wrong type.
    """
    weight_unit = raw.get("weightUnit")
    rpe = raw.get("rpe")
    return SetRecord(
        weight=_number(raw, "weight"),
        reps=_number(raw, "reps"),
        is_warmup=_flag(raw, "isWarmup", default=False),
        completed=_flag(raw, "completed", default=True),
        weight_unit=parse_weight_unit(weight_unit) if weight_unit is not None else None,
        rpe=_number(raw, "rpe") if rpe is not None else None,
    )


def parse_exercise_config(raw: dict[str, Any]) -> ExerciseConfig:
    """Build an ExerciseConfig from an exercise dict.

    Missing ``targetSetsMin`` / ``targetSetsMax`` fall back to the
    ExerciseConfig defaults.

    Raises:
        SessionLogError: a field is missing, ill-typed or out of range.
    """
    progression_key = raw.get("progressionType", "double")
    if not isinstance(progression_key, str) or progression_key not in PROGRESSION_TYPE_KEYS:
        raise SessionLogError(f"Unknown progression type: {progression_key!r}")

    kwargs: dict[str, Any] = {
        "progression_type": PROGRESSION_TYPE_KEYS[progression_key],
        "weight_increment": _number(raw, "weightIncrement"),
        "target_rep_min": _integer(raw, "targetRepMin"),
        "target_rep_max": _integer(raw, "targetRepMax"),
        "exercise_id": raw.get("id"),
        "name": raw.get("name"),
    }
    if raw.get("targetSetsMin") is not None:
        kwargs["target_sets_min"] = _integer(raw, "targetSetsMin")
    if raw.get("targetSetsMax") is not None:
        kwargs["target_sets_max"] = _integer(raw, "targetSetsMax")

    try:
        return ExerciseConfig(**kwargs)
    except InvalidExerciseConfigError as exc:
        raise SessionLogError(f"Invalid exercise config: {exc}") from exc


def parse_session_log(raw: dict[str, Any]) -> list[tuple[ExerciseConfig, tuple[SetRecord, ...]]]:
    """Parse ``{"exercises": [{"config": {...}, "sets": [...]}, ...]}``."""
    if not isinstance(raw, dict):
        raise SessionLogError("Session log must be a JSON object")
    exercises = raw.get("exercises")
    if not isinstance(exercises, list):
        raise SessionLogError("Session log must contain an 'exercises' list")

    parsed = []
    for index, entry in enumerate(exercises):
        if not isinstance(entry, dict) or not isinstance(entry.get("config"), dict):
            raise SessionLogError(f"Exercise #{index} is missing its 'config' object")
        sets = entry.get("sets", [])
        if not isinstance(sets, list) or not all(isinstance(s, dict) for s in sets):
            raise SessionLogError(f"Exercise #{index} 'sets' must be a list of objects")
        parsed.append(
            (
                parse_exercise_config(entry["config"]),
                tuple(parse_set_record(s) for s in sets),
            )
        )
    return parsed


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _number(raw: dict[str, Any], key: str) -> float:
    value = raw.get(key)
    # bool is an int subclass; a flag in a number slot is a broken record
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SessionLogError(f"Field {key!r} must be a number, got {value!r}")
    return value


def _integer(raw: dict[str, Any], key: str) -> int:
    value = _number(raw, key)
    if isinstance(value, float):
        if not value.is_integer():
            raise SessionLogError(f"Field {key!r} must be a whole number, got {value!r}")
        return int(value)
    return value


def _flag(raw: dict[str, Any], key: str, default: bool) -> bool:
    value = raw.get(key, default)
    if not isinstance(value, bool):
        raise SessionLogError(f"Field {key!r} must be true or false, got {value!r}")
    return value

"""Serialization module: suggestions out, session logs in."""

from progression_engine.serialization.session_log import (
    parse_exercise_config,
    parse_session_log,
    parse_set_record,
    parse_weight_unit,
)
from progression_engine.serialization.suggestion import (
    to_suggestion_dict,
    to_suggestion_json_string,
)

__all__ = [
    "parse_exercise_config",
    "parse_session_log",
    "parse_set_record",
    "parse_weight_unit",
    "to_suggestion_dict",
    "to_suggestion_json_string",
]

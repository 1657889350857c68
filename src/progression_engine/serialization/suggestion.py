"""JSON serialization for ProgressionSuggestion objects.

Produces the camelCase shape the mobile client consumes. All functions are
pure (no I/O).
"""

from __future__ import annotations

import json

from progression_engine.models.enums import ProgressionReason, SuggestionAction
from progression_engine.models.suggestion import ProgressionSuggestion

# SuggestionAction → wire key mapping.
ACTION_KEYS = {
    SuggestionAction.INCREASE_WEIGHT: "increase_weight",
    SuggestionAction.INCREASE_REPS: "increase_reps",
    SuggestionAction.ADD_SET: "add_set",
    SuggestionAction.MAINTAIN: "maintain",
    SuggestionAction.REDUCE_WEIGHT: "reduce_weight",
}

# Optional numeric fields, in output order.
_OPTIONAL_FIELDS = (
    ("new_weight", "newWeight"),
    ("new_reps", "newReps"),
    ("new_sets", "newSets"),
    ("target_reps", "targetReps"),
)


def to_suggestion_dict(suggestion: ProgressionSuggestion) -> dict:
    """Convert a suggestion to a JSON-ready dict, omitting unset fields."""
    result: dict = {"action": ACTION_KEYS[suggestion.action]}
    for attr, key in _OPTIONAL_FIELDS:
        value = getattr(suggestion, attr)
        if value is not None:
            result[key] = value
    result["message"] = suggestion.message
    result["reason"] = _reason_key(suggestion.reason)
    return result


def to_suggestion_json_string(suggestion: ProgressionSuggestion, indent: int = 2) -> str:
    """Convert a suggestion to a JSON string."""
    return json.dumps(to_suggestion_dict(suggestion), indent=indent)


def _reason_key(reason: ProgressionReason) -> str:
    """NO_COMPLETED_SETS -> 'no_completed_sets'."""
    return reason.name.lower()

"""Progression suggestion: the engine's answer for one exercise."""

from __future__ import annotations

from dataclasses import dataclass

from progression_engine.exceptions import InvalidSuggestionError
from progression_engine.models.enums import ProgressionReason, SuggestionAction

# Companion fields each action must carry; the rest are optional
_REQUIRED_FIELDS: dict[SuggestionAction, tuple[str, ...]] = {
    SuggestionAction.INCREASE_WEIGHT: ("new_weight",),
    SuggestionAction.REDUCE_WEIGHT: ("new_weight",),
    SuggestionAction.ADD_SET: ("new_sets",),
    SuggestionAction.INCREASE_REPS: ("target_reps",),
    SuggestionAction.MAINTAIN: (),
}


@dataclass(frozen=True)
class ProgressionSuggestion:
    """What to do next session, plus a display message.

    Built fresh on every engine call. Consumers show ``message`` and may
    pre-fill inputs from ``new_weight``, ``target_reps`` and ``new_sets``.
    """

    action: SuggestionAction
    message: str
    reason: ProgressionReason

    new_weight: float | None = None
    new_reps: int | None = None  # Rep count to drop back to after a jump
    new_sets: int | None = None
    target_reps: int | None = None  # Rep count to aim for at the same load

    def __post_init__(self) -> None:
        missing = [
            name for name in _REQUIRED_FIELDS[self.action]
            if getattr(self, name) is None
        ]
        if missing:
            raise InvalidSuggestionError(
                f"{self.action.name} suggestion requires {', '.join(missing)}"
            )

    @property
    def is_progression(self) -> bool:
        """True if the suggestion asks for more work than last session."""
        return self.action in (
            SuggestionAction.INCREASE_WEIGHT,
            SuggestionAction.INCREASE_REPS,
            SuggestionAction.ADD_SET,
        )

"""ProgressionEngine: dispatches each exercise to its progression strategy."""

from __future__ import annotations

import functools
import logging
from typing import Sequence

from progression_engine.models.enums import WeightUnit
from progression_engine.models.exercise_config import ExerciseConfig
from progression_engine.models.set_record import SetRecord
from progression_engine.models.suggestion import ProgressionSuggestion
from progression_engine.registry import StrategyRegistry

logger = logging.getLogger(__name__)


class ProgressionEngine:
    """Selects a strategy by progression type and returns its suggestion.

    The engine holds no per-call state, so one instance can serve any number
    of concurrent callers.

    Usage:
        engine = ProgressionEngine()
        suggestion = engine.suggest(last_sets, config, WeightUnit.LB)
    """

    def __init__(self, registry: StrategyRegistry | None = None) -> None:
        self.registry = registry or StrategyRegistry()

        # Auto-discover strategies if using default registry
        if registry is None:
            self.registry.discover_strategies()

    def suggest(
        self,
        last_sets: Sequence[SetRecord],
        config: ExerciseConfig,
        unit: WeightUnit | str = WeightUnit.KG,
    ) -> ProgressionSuggestion:
        """Suggest the next session for one exercise.

        Args:
            last_sets: Sets from the exercise's most recent session.
            config: The exercise's progression targets.
            unit: Display unit for the message. Weights are never converted.

        Returns:
            A new ProgressionSuggestion.

        Raises:
            UnknownProgressionTypeError: no strategy for the config's type.
        """
        strategy = self.registry.get(config.progression_type)
        suggestion = strategy.suggest(tuple(last_sets), config, unit)
        logger.debug(
            "%s progression for %s: %s (%s)",
            config.progression_type.name,
            config.name or config.exercise_id or "exercise",
            suggestion.action.name,
            suggestion.reason.name,
        )
        return suggestion


@functools.lru_cache(maxsize=1)
def default_engine() -> ProgressionEngine:
    """Shared engine with auto-discovered strategies, built on first use."""
    return ProgressionEngine()


def get_progression_suggestion(
    last_sets: Sequence[SetRecord],
    config: ExerciseConfig,
    unit: WeightUnit | str = WeightUnit.KG,
) -> ProgressionSuggestion:
    """Suggest the next session using the shared default engine."""
    return default_engine().suggest(last_sets, config, unit)

"""Abstract base class for all progression strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from progression_engine.consensus.resolver import WeightResolver
from progression_engine.math.rounding import round_half_up, round_weight
from progression_engine.models.enums import (
    OVERSHOOT_INCREMENT_MULTIPLIER,
    OVERSHOOT_REP_MULTIPLE,
    STRUGGLING_REP_FRACTION,
    ProgressionType,
    WeightUnit,
)
from progression_engine.models.exercise_config import ExerciseConfig
from progression_engine.models.session import SessionSummary
from progression_engine.models.set_record import SetRecord
from progression_engine.models.suggestion import ProgressionSuggestion


class ProgressionStrategy(ABC):
    """Base class for progression policies.

    Each strategy turns the most recent session's sets for one exercise into
    a single ProgressionSuggestion. Strategies are discovered automatically
    by the StrategyRegistry and dispatched by the ProgressionEngine on
    ``ExerciseConfig.progression_type``.

    Subclasses must define:
        progression_type: the ProgressionType this strategy handles
        version: semantic version string
        suggest(): the strategy's decision logic

    The helpers below hold the thresholds both policies share, so each
    strategy's ``suggest()`` reads as its ordered list of decisions.
    """

    progression_type: ProgressionType
    version: str

    def __init__(self, resolver: WeightResolver | None = None) -> None:
        self.resolver = resolver or WeightResolver()

    @abstractmethod
    def suggest(
        self,
        last_sets: Sequence[SetRecord],
        config: ExerciseConfig,
        unit: WeightUnit | str = WeightUnit.KG,
    ) -> ProgressionSuggestion:
        """Produce a suggestion for the next session.

        Args:
            last_sets: Every set logged for this exercise in the most recent
                session, warmups and incomplete sets included.
            config: The exercise's progression targets.
            unit: Display unit; only used to label weights in the message.

        Returns:
            A new ProgressionSuggestion. Never raises for bad set data.
        """
        ...

    def summarize(self, working_sets: Sequence[SetRecord], config: ExerciseConfig) -> SessionSummary:
        """Reduce valid working sets to the numbers the decision rules use."""
        weight, _ = self.resolver.resolve(working_sets)
        total_reps = sum(s.reps for s in working_sets)
        return SessionSummary(
            weight=weight,
            set_count=len(working_sets),
            average_reps=round_half_up(total_reps / len(working_sets)),
            all_hit_max_reps=all(s.reps >= config.target_rep_max for s in working_sets),
        )

    @staticmethod
    def is_struggling(summary: SessionSummary, config: ExerciseConfig) -> bool:
        """Average reps fell below half the rep floor (strict)."""
        return summary.average_reps < config.target_rep_min * STRUGGLING_REP_FRACTION

    @staticmethod
    def has_excess_sets(summary: SessionSummary, config: ExerciseConfig) -> bool:
        return summary.set_count > config.target_sets_max

    @staticmethod
    def is_overshooting(summary: SessionSummary, config: ExerciseConfig) -> bool:
        """Reps far beyond the ceiling on a loadable exercise."""
        return (
            summary.average_reps > config.target_rep_max * OVERSHOOT_REP_MULTIPLE
            and config.weight_increment > 0
        )

    @staticmethod
    def reduced_weight(summary: SessionSummary, config: ExerciseConfig) -> float:
        """One increment lighter, floored at zero."""
        return round_weight(max(0.0, summary.weight - config.weight_increment))

    @staticmethod
    def increased_weight(
        summary: SessionSummary, config: ExerciseConfig, overshoot: bool = False
    ) -> float:
        """One increment heavier, or two after an overshoot."""
        increment = config.weight_increment
        if overshoot:
            increment *= OVERSHOOT_INCREMENT_MULTIPLIER
        return round_weight(summary.weight + increment)

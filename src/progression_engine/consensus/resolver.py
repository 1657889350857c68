"""Consensus weight resolver: picks the weight a recommendation is based on."""

from __future__ import annotations

from typing import Sequence

from progression_engine.consensus.strategies import (
    MostFrequentHeaviestWins,
    WeightResolutionStrategy,
)
from progression_engine.models.set_record import SetRecord


class WeightResolver:
    """Resolves a session's possibly inconsistent weights into one value.

    Uses a pluggable strategy pattern. Default is MostFrequentHeaviestWins.
    """

    def __init__(self, strategy: WeightResolutionStrategy | None = None) -> None:
        self.strategy = strategy or MostFrequentHeaviestWins()

    def resolve(self, working_sets: Sequence[SetRecord]) -> tuple[float, str]:
        """Return the consensus weight and resolution notes."""
        return self.strategy.resolve(working_sets)


def resolve_consensus_weight(working_sets: Sequence[SetRecord]) -> float:
    """Consensus weight using the default strategy."""
    weight, _ = WeightResolver().resolve(working_sets)
    return weight

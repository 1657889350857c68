"""Consensus weight resolution for sessions logged at mixed weights."""

from progression_engine.consensus.resolver import WeightResolver, resolve_consensus_weight
from progression_engine.consensus.strategies import (
    MostFrequentHeaviestWins,
    WeightResolutionStrategy,
)

__all__ = [
    "MostFrequentHeaviestWins",
    "WeightResolutionStrategy",
    "WeightResolver",
    "resolve_consensus_weight",
]

"""Weight resolution strategies for sessions logged at mixed weights."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import Counter
from typing import Sequence

from progression_engine.models.set_record import SetRecord


class WeightResolutionStrategy(ABC):
    """Base class for consensus weight strategies."""

    @abstractmethod
    def resolve(self, working_sets: Sequence[SetRecord]) -> tuple[float, str]:
        """Collapse the working sets' weights into one representative weight.

        Returns the chosen weight and a human-readable note explaining the
        choice. ``working_sets`` must not be empty.
        """
        ...


class MostFrequentHeaviestWins(WeightResolutionStrategy):
    """Resolution strategy: the most-used weight wins, ties go to the heavier.

    The weight a lifter used for most sets is the best picture of their
    actual working load. When two weights were used equally often, the
    heavier one is the more meaningful anchor for progression.
    """

    def resolve(self, working_sets: Sequence[SetRecord]) -> tuple[float, str]:
        if not working_sets:
            raise ValueError("Cannot resolve a consensus weight without working sets")

        counts = Counter(s.weight for s in working_sets)
        if len(counts) == 1:
            weight = working_sets[0].weight
            return weight, f"Single weight {weight} across {len(working_sets)} sets"

        weight, count = max(counts.items(), key=lambda item: (item[1], item[0]))
        return weight, (
            f"Mixed weights {sorted(counts)}; chose {weight} "
            f"({count} of {len(working_sets)} sets)"
        )

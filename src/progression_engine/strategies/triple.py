"""TRIPLE progression: add reps, then sets, then weight.

For exercises whose smallest load jump is large relative to the working
weight (cable stacks, dumbbells). Reps climb through the target range; when
every set reaches the top, one set is added and reps reset. Only once the
set ceiling is reached does the weight go up, resetting both sets and reps.

    50kg 2x8 -> 2x10 -> 2x12 -> 3x8 -> 3x10 -> 3x12 -> 60kg 2x8
"""

from __future__ import annotations

import logging
from typing import Sequence

from progression_engine.math.units import format_number, unit_label
from progression_engine.models.enums import (
    ProgressionReason,
    ProgressionType,
    SuggestionAction,
    WeightUnit,
)
from progression_engine.models.exercise_config import ExerciseConfig
from progression_engine.models.set_record import SetRecord
from progression_engine.models.suggestion import ProgressionSuggestion
from progression_engine.strategies.base import ProgressionStrategy
from progression_engine.validation import screen_sets

logger = logging.getLogger(__name__)


class TripleProgressionStrategy(ProgressionStrategy):
    """Rep-then-set-then-weight progression."""

    progression_type = ProgressionType.TRIPLE
    version = "1.0.0"

    def suggest(
        self,
        last_sets: Sequence[SetRecord],
        config: ExerciseConfig,
        unit: WeightUnit | str = WeightUnit.KG,
    ) -> ProgressionSuggestion:
        label = unit_label(unit)
        rep_min = config.target_rep_min
        rep_max = config.target_rep_max
        sets_min = config.target_sets_min
        sets_max = config.target_sets_max

        screening = screen_sets(last_sets)

        if not screening.has_working_sets:
            if screening.has_attempts:
                logger.debug("No completed sets among %d attempts", len(screening.attempted_sets))
                return ProgressionSuggestion(
                    action=SuggestionAction.MAINTAIN,
                    reason=ProgressionReason.NO_COMPLETED_SETS,
                    new_sets=sets_min,
                    new_reps=rep_min,
                    message=(
                        "No completed sets. Consider reducing the weight or "
                        "taking more rest between sets"
                    ),
                )
            return ProgressionSuggestion(
                action=SuggestionAction.MAINTAIN,
                reason=ProgressionReason.NO_DATA,
                new_sets=sets_min,
                new_reps=rep_min,
                message=f"Start with {sets_min} sets of {rep_min} reps at a challenging weight",
            )

        if not screening.is_valid:
            logger.debug("Rejected %d invalid working sets", len(screening.invalid_sets))
            return ProgressionSuggestion(
                action=SuggestionAction.MAINTAIN,
                reason=ProgressionReason.INVALID_DATA,
                new_sets=sets_min,
                message="Invalid set data detected. Please check your logged weights and reps",
            )

        summary = self.summarize(screening.working_sets, config)
        weight = format_number(summary.weight)
        avg_reps = summary.average_reps
        set_count = summary.set_count
        logger.debug(
            "Triple progression: weight=%s sets=%d avg_reps=%d",
            summary.weight,
            set_count,
            avg_reps,
        )

        if self.is_struggling(summary, config):
            reduced = self.reduced_weight(summary, config)
            if reduced == 0 and summary.weight == 0:
                return ProgressionSuggestion(
                    action=SuggestionAction.MAINTAIN,
                    reason=ProgressionReason.NO_LIGHTER_LOAD,
                    new_sets=sets_min,
                    target_reps=rep_min,
                    message="Try a lighter variation or focus on form",
                )
            return ProgressionSuggestion(
                action=SuggestionAction.REDUCE_WEIGHT,
                reason=ProgressionReason.STRUGGLING,
                new_weight=reduced,
                new_sets=sets_min,
                target_reps=rep_min,
                message=(
                    f"Weight too heavy. Reduce to {format_number(reduced)}{label}, "
                    f"{sets_min} sets of {rep_min} reps"
                ),
            )

        if self.has_excess_sets(summary, config):
            return ProgressionSuggestion(
                action=SuggestionAction.MAINTAIN,
                reason=ProgressionReason.EXCESS_VOLUME,
                new_weight=summary.weight,
                new_sets=sets_max,
                target_reps=avg_reps,
                message=(
                    f"Too many sets ({set_count}). Reduce to {sets_max} sets at "
                    f"{weight}{label} for better recovery"
                ),
            )

        if summary.all_hit_max_reps:
            # Sets escalate one at a time, never straight to the ceiling
            if set_count < sets_max:
                new_set_count = set_count + 1
                return ProgressionSuggestion(
                    action=SuggestionAction.ADD_SET,
                    reason=ProgressionReason.SET_ADDED,
                    new_weight=summary.weight,
                    new_sets=new_set_count,
                    new_reps=rep_min,
                    message=(
                        f"Great job hitting {rep_max} reps on all sets! Add a set "
                        f"({new_set_count} total) and drop back to {rep_min} reps"
                    ),
                )

            if self.is_overshooting(summary, config):
                new_weight = self.increased_weight(summary, config, overshoot=True)
                return ProgressionSuggestion(
                    action=SuggestionAction.INCREASE_WEIGHT,
                    reason=ProgressionReason.OVERSHOOT,
                    new_weight=new_weight,
                    new_sets=sets_min,
                    new_reps=rep_min,
                    message=(
                        f"Crushing it ({avg_reps} reps avg)! Jump to "
                        f"{format_number(new_weight)}{label}, {sets_min} sets of {rep_min} reps"
                    ),
                )

            if config.is_bodyweight:
                return ProgressionSuggestion(
                    action=SuggestionAction.MAINTAIN,
                    reason=ProgressionReason.BODYWEIGHT_PLATEAU,
                    new_weight=summary.weight,
                    new_sets=sets_max,
                    target_reps=rep_max,
                    message=(
                        f"Great form! Keep at {weight}{label} for {sets_max} sets of "
                        f"{rep_max} reps (bodyweight exercise)"
                    ),
                )

            new_weight = self.increased_weight(summary, config)
            return ProgressionSuggestion(
                action=SuggestionAction.INCREASE_WEIGHT,
                reason=ProgressionReason.TARGET_REACHED,
                new_weight=new_weight,
                new_sets=sets_min,
                new_reps=rep_min,
                message=(
                    f"Maxed out! Increase weight to {format_number(new_weight)}{label}, "
                    f"reset to {sets_min} sets of {rep_min} reps"
                ),
            )

        target_reps = min(avg_reps + 1, rep_max)
        return ProgressionSuggestion(
            action=SuggestionAction.INCREASE_REPS,
            reason=ProgressionReason.PROGRESSING,
            new_weight=summary.weight,
            new_sets=set_count,
            target_reps=target_reps,
            message=(
                f"Keep weight at {weight}{label} with {set_count} sets, "
                f"aim for {target_reps} reps"
            ),
        )

"""DOUBLE progression: add reps at a fixed load, then add weight.

For exercises that take small load jumps (barbell lifts). Set count stays
fixed; reps climb through the target range, and once every set reaches the
top of the range the weight goes up and reps reset to the bottom.

    100kg x 8,8,8 -> 100kg x 10,10,10 -> 100kg x 12,12,12 -> 105kg x 8,8,8

References:
    Helms, Morgan & Valdez (2019). The Muscle and Strength Pyramid:
    Training, 2nd ed. (double progression).
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


class DoubleProgressionStrategy(ProgressionStrategy):
    """Rep-then-weight progression at a fixed set count."""

    progression_type = ProgressionType.DOUBLE
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

        screening = screen_sets(last_sets)

        if not screening.has_working_sets:
            if screening.has_attempts:
                logger.debug("No completed sets among %d attempts", len(screening.attempted_sets))
                return ProgressionSuggestion(
                    action=SuggestionAction.MAINTAIN,
                    reason=ProgressionReason.NO_COMPLETED_SETS,
                    message=(
                        "No completed sets. Consider reducing the weight or "
                        "taking more rest between sets"
                    ),
                )
            return ProgressionSuggestion(
                action=SuggestionAction.MAINTAIN,
                reason=ProgressionReason.NO_DATA,
                message=f"Start with a weight you can do for {rep_min} reps",
            )

        if not screening.is_valid:
            logger.debug("Rejected %d invalid working sets", len(screening.invalid_sets))
            return ProgressionSuggestion(
                action=SuggestionAction.MAINTAIN,
                reason=ProgressionReason.INVALID_DATA,
                message="Invalid set data detected. Please check your logged weights and reps",
            )

        summary = self.summarize(screening.working_sets, config)
        weight = format_number(summary.weight)
        avg_reps = summary.average_reps
        logger.debug(
            "Double progression: weight=%s sets=%d avg_reps=%d",
            summary.weight,
            summary.set_count,
            avg_reps,
        )

        if self.is_struggling(summary, config):
            reduced = self.reduced_weight(summary, config)
            if reduced == 0 and summary.weight == 0:
                return ProgressionSuggestion(
                    action=SuggestionAction.MAINTAIN,
                    reason=ProgressionReason.NO_LIGHTER_LOAD,
                    new_weight=0,
                    target_reps=rep_min,
                    message="Try a lighter variation or focus on form with bodyweight",
                )
            return ProgressionSuggestion(
                action=SuggestionAction.REDUCE_WEIGHT,
                reason=ProgressionReason.STRUGGLING,
                new_weight=reduced,
                target_reps=rep_min,
                message=(
                    f"Weight too heavy (only {avg_reps} reps avg). Reduce to "
                    f"{format_number(reduced)}{label} and aim for {rep_min} reps"
                ),
            )

        if self.has_excess_sets(summary, config):
            return ProgressionSuggestion(
                action=SuggestionAction.MAINTAIN,
                reason=ProgressionReason.EXCESS_VOLUME,
                new_weight=summary.weight,
                target_reps=avg_reps,
                message=(
                    f"Too many sets ({summary.set_count}). Reduce to "
                    f"{config.target_sets_max} sets at {weight}{label} for better recovery"
                ),
            )

        if summary.all_hit_max_reps:
            if self.is_overshooting(summary, config):
                new_weight = self.increased_weight(summary, config, overshoot=True)
                return ProgressionSuggestion(
                    action=SuggestionAction.INCREASE_WEIGHT,
                    reason=ProgressionReason.OVERSHOOT,
                    new_weight=new_weight,
                    new_reps=rep_min,
                    message=(
                        f"Crushing it ({avg_reps} reps avg)! Jump to "
                        f"{format_number(new_weight)}{label} and aim for {rep_min} reps"
                    ),
                )

            if config.is_bodyweight:
                return ProgressionSuggestion(
                    action=SuggestionAction.MAINTAIN,
                    reason=ProgressionReason.BODYWEIGHT_PLATEAU,
                    new_weight=summary.weight,
                    target_reps=rep_max,
                    message=(
                        f"Great form! Keep at {weight}{label} for {rep_max} reps "
                        f"(bodyweight exercise)"
                    ),
                )

            new_weight = self.increased_weight(summary, config)
            return ProgressionSuggestion(
                action=SuggestionAction.INCREASE_WEIGHT,
                reason=ProgressionReason.TARGET_REACHED,
                new_weight=new_weight,
                new_reps=rep_min,
                message=(
                    f"All sets hit {rep_max} reps! Increase weight to "
                    f"{format_number(new_weight)}{label} and aim for {rep_min} reps"
                ),
            )

        target_reps = min(avg_reps + 1, rep_max)
        return ProgressionSuggestion(
            action=SuggestionAction.INCREASE_REPS,
            reason=ProgressionReason.PROGRESSING,
            new_weight=summary.weight,
            target_reps=target_reps,
            message=f"Keep weight at {weight}{label} and aim for {target_reps} reps per set",
        )

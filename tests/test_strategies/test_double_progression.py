"""Tests for DoubleProgressionStrategy: rep-then-weight progression."""

from __future__ import annotations

import math

import pytest

from progression_engine.models.enums import ProgressionReason, SuggestionAction, WeightUnit
from progression_engine.models.exercise_config import ExerciseConfig
from progression_engine.models.set_record import SetRecord
from progression_engine.strategies.double import DoubleProgressionStrategy


class TestMissingAndInvalidData:
    def setup_method(self) -> None:
        self.strategy = DoubleProgressionStrategy()

    def test_new_exercise_suggests_starting_weight(self, barbell_config: ExerciseConfig) -> None:
        rec = self.strategy.suggest([], barbell_config)
        assert rec.action == SuggestionAction.MAINTAIN
        assert rec.reason == ProgressionReason.NO_DATA
        assert "8 reps" in rec.message
        assert rec.new_weight is None

    def test_warmups_alone_count_as_no_data(self, barbell_config, make_sets) -> None:
        rec = self.strategy.suggest(make_sets((40, 10), (60, 5), is_warmup=True), barbell_config)
        assert rec.reason == ProgressionReason.NO_DATA

    def test_incomplete_sets_distinguished_from_no_attempt(
        self, barbell_config, make_sets
    ) -> None:
        rec = self.strategy.suggest(make_sets((100, 5), (100, 4), completed=False), barbell_config)
        assert rec.action == SuggestionAction.MAINTAIN
        assert rec.reason == ProgressionReason.NO_COMPLETED_SETS
        assert "No completed sets" in rec.message

    @pytest.mark.parametrize(
        "bad_set",
        [
            SetRecord(weight=-5, reps=10),
            SetRecord(weight=100, reps=-1),
            SetRecord(weight=math.nan, reps=10),
            SetRecord(weight=100, reps=math.nan),
            SetRecord(weight=math.inf, reps=10),
        ],
    )
    def test_invalid_numbers_yield_maintain(self, barbell_config, make_sets, bad_set) -> None:
        sets = make_sets((100, 10), (100, 10)) + (bad_set,)
        rec = self.strategy.suggest(sets, barbell_config)
        assert rec.action == SuggestionAction.MAINTAIN
        assert rec.reason == ProgressionReason.INVALID_DATA
        assert rec.new_weight is None

    def test_invalid_incomplete_set_is_ignored(self, barbell_config, make_sets) -> None:
        sets = make_sets((100, 10), (100, 10), (100, 10)) + (
            SetRecord(weight=math.nan, reps=5, completed=False),
        )
        rec = self.strategy.suggest(sets, barbell_config)
        assert rec.action == SuggestionAction.INCREASE_REPS
        assert rec.target_reps == 11


class TestStruggling:
    def setup_method(self) -> None:
        self.strategy = DoubleProgressionStrategy()

    def test_half_of_rep_min_is_not_struggling(self, barbell_config, make_sets) -> None:
        # rep_min 8 → threshold 4; the comparison is strict
        rec = self.strategy.suggest(make_sets((100, 4), (100, 4), (100, 4)), barbell_config)
        assert rec.action == SuggestionAction.INCREASE_REPS
        assert rec.target_reps == 5

    def test_below_half_reduces_weight(self, barbell_config, make_sets) -> None:
        rec = self.strategy.suggest(make_sets((100, 3), (100, 3), (100, 3)), barbell_config)
        assert rec.action == SuggestionAction.REDUCE_WEIGHT
        assert rec.reason == ProgressionReason.STRUGGLING
        assert rec.new_weight == 95
        assert rec.target_reps == 8
        assert "95kg" in rec.message

    def test_average_is_rounded_before_threshold(self, barbell_config, make_sets) -> None:
        # 11 / 3 = 3.67 rounds to 4: not struggling
        rec = self.strategy.suggest(make_sets((100, 4), (100, 4), (100, 3)), barbell_config)
        assert rec.action == SuggestionAction.INCREASE_REPS
        # 10 / 3 = 3.33 rounds to 3: struggling
        rec = self.strategy.suggest(make_sets((100, 4), (100, 3), (100, 3)), barbell_config)
        assert rec.action == SuggestionAction.REDUCE_WEIGHT

    def test_reduction_floors_at_zero(self, barbell_config, make_sets) -> None:
        rec = self.strategy.suggest(make_sets((2.5, 2), (2.5, 2), (2.5, 2)), barbell_config)
        assert rec.action == SuggestionAction.REDUCE_WEIGHT
        assert rec.new_weight == 0

    def test_no_lighter_load_at_zero_weight(self, pullup_config, make_sets) -> None:
        rec = self.strategy.suggest(make_sets((0, 2), (0, 2), (0, 1)), pullup_config)
        assert rec.action == SuggestionAction.MAINTAIN
        assert rec.reason == ProgressionReason.NO_LIGHTER_LOAD
        assert rec.new_weight == 0
        assert rec.target_reps == 8
        assert "lighter variation" in rec.message

    def test_struggling_checked_before_excess_sets(self, barbell_config, make_sets) -> None:
        rec = self.strategy.suggest(make_sets(*[(100, 2)] * 5), barbell_config)
        assert rec.action == SuggestionAction.REDUCE_WEIGHT


class TestExcessVolume:
    def setup_method(self) -> None:
        self.strategy = DoubleProgressionStrategy()

    def test_more_than_max_sets_maintains(self, barbell_config, make_sets) -> None:
        rec = self.strategy.suggest(make_sets(*[(100, 10)] * 5), barbell_config)
        assert rec.action == SuggestionAction.MAINTAIN
        assert rec.reason == ProgressionReason.EXCESS_VOLUME
        assert rec.new_weight == 100
        assert rec.target_reps == 10
        assert "Too many sets (5)" in rec.message
        assert "Reduce to 4 sets" in rec.message

    def test_exactly_max_sets_is_not_excess(self, barbell_config, make_sets) -> None:
        rec = self.strategy.suggest(make_sets(*[(100, 10)] * 4), barbell_config)
        assert rec.action == SuggestionAction.INCREASE_REPS

    def test_excess_checked_before_target_reached(self, barbell_config, make_sets) -> None:
        rec = self.strategy.suggest(make_sets(*[(100, 12)] * 5), barbell_config)
        assert rec.reason == ProgressionReason.EXCESS_VOLUME


class TestTargetReached:
    def setup_method(self) -> None:
        self.strategy = DoubleProgressionStrategy()

    def test_all_sets_at_max_increase_weight(self, barbell_config, make_sets) -> None:
        rec = self.strategy.suggest(make_sets((20, 12), (20, 12), (20, 12)), barbell_config)
        assert rec.action == SuggestionAction.INCREASE_WEIGHT
        assert rec.reason == ProgressionReason.TARGET_REACHED
        assert rec.new_weight == 25
        assert rec.new_reps == 8
        assert rec.new_sets is None

    def test_overshoot_uses_double_increment(self, barbell_config, make_sets) -> None:
        rec = self.strategy.suggest(make_sets((20, 20), (20, 20), (20, 20)), barbell_config)
        assert rec.action == SuggestionAction.INCREASE_WEIGHT
        assert rec.reason == ProgressionReason.OVERSHOOT
        assert rec.new_weight == 30
        assert rec.new_reps == 8
        assert "Crushing it (20 reps avg)" in rec.message

    def test_overshoot_boundary_is_strict(self, barbell_config, make_sets) -> None:
        # 12 * 1.5 = 18 exactly → normal increment
        rec = self.strategy.suggest(make_sets((20, 18), (20, 18), (20, 18)), barbell_config)
        assert rec.reason == ProgressionReason.TARGET_REACHED
        assert rec.new_weight == 25

    def test_one_set_short_keeps_adding_reps(self, barbell_config, make_sets) -> None:
        rec = self.strategy.suggest(make_sets((20, 12), (20, 12), (20, 11)), barbell_config)
        assert rec.action == SuggestionAction.INCREASE_REPS
        assert rec.target_reps == 12

    def test_bodyweight_plateau_maintains(self, pullup_config, make_sets) -> None:
        rec = self.strategy.suggest(make_sets((0, 12), (0, 12), (0, 12)), pullup_config)
        assert rec.action == SuggestionAction.MAINTAIN
        assert rec.reason == ProgressionReason.BODYWEIGHT_PLATEAU
        assert rec.new_weight == 0
        assert rec.target_reps == 12
        assert "bodyweight" in rec.message

    def test_bodyweight_overshoot_still_maintains(self, pullup_config, make_sets) -> None:
        rec = self.strategy.suggest(make_sets((0, 25), (0, 25), (0, 25)), pullup_config)
        assert rec.reason == ProgressionReason.BODYWEIGHT_PLATEAU

    def test_increase_removes_float_artifacts(self, barbell_config, make_sets) -> None:
        rec = self.strategy.suggest(make_sets((50.1, 12), (50.1, 12), (50.1, 12)), barbell_config)
        assert rec.new_weight == 55.0
        assert "55kg" in rec.message

    @pytest.mark.parametrize("weight", [47.3, 52.7, 61.25, 99.9, 102.5])
    def test_new_weight_is_multiple_of_half(self, barbell_config, make_sets, weight) -> None:
        rec = self.strategy.suggest(make_sets(*[(weight, 12)] * 3), barbell_config)
        assert rec.action == SuggestionAction.INCREASE_WEIGHT
        assert (rec.new_weight / 0.5).is_integer()


class TestProgressingAndConsensus:
    def setup_method(self) -> None:
        self.strategy = DoubleProgressionStrategy()

    def test_adds_one_rep(self, barbell_config, make_sets) -> None:
        rec = self.strategy.suggest(make_sets((100, 9), (100, 9), (100, 9)), barbell_config)
        assert rec.action == SuggestionAction.INCREASE_REPS
        assert rec.reason == ProgressionReason.PROGRESSING
        assert rec.new_weight == 100
        assert rec.target_reps == 10
        assert rec.message == "Keep weight at 100kg and aim for 10 reps per set"

    def test_average_rounds_half_up(self, barbell_config, make_sets) -> None:
        # 21 / 2 = 10.5 → 11, so the next target is 12
        rec = self.strategy.suggest(make_sets((100, 10), (100, 11)), barbell_config)
        assert rec.target_reps == 12

    def test_tied_weights_use_heavier(self, barbell_config, make_sets) -> None:
        rec = self.strategy.suggest(make_sets((100, 10), (105, 10)), barbell_config)
        assert rec.new_weight == 105

    def test_most_common_weight_wins(self, barbell_config, make_sets) -> None:
        rec = self.strategy.suggest(make_sets((100, 10), (100, 10), (105, 8)), barbell_config)
        assert rec.new_weight == 100
        assert rec.target_reps == 10

    def test_unit_only_changes_message(self, barbell_config, make_sets) -> None:
        sets = make_sets((225, 9), (225, 9), (225, 9))
        kg = self.strategy.suggest(sets, barbell_config, WeightUnit.KG)
        lb = self.strategy.suggest(sets, barbell_config, WeightUnit.LB)
        assert kg.new_weight == lb.new_weight == 225
        assert "225lb" in lb.message
        assert "225kg" in kg.message

    def test_same_input_same_output(self, barbell_config, make_sets) -> None:
        sets = make_sets((100, 10), (102.5, 9), (100, 8))
        assert self.strategy.suggest(sets, barbell_config) == self.strategy.suggest(
            sets, barbell_config
        )

    def test_input_sets_untouched(self, barbell_config, make_sets) -> None:
        sets = list(make_sets((40, 10), is_warmup=True) + make_sets((100, 10), (100, 10)))
        snapshot = list(sets)
        self.strategy.suggest(sets, barbell_config)
        assert sets == snapshot

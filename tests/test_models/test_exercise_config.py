"""Tests for ExerciseConfig defaults and validation."""

from __future__ import annotations

import dataclasses
import math

import pytest

from progression_engine.exceptions import InvalidExerciseConfigError, ProgressionEngineError
from progression_engine.models.enums import ProgressionType
from progression_engine.models.exercise_config import ExerciseConfig


def _config(**overrides) -> ExerciseConfig:
    fields = {
        "progression_type": ProgressionType.DOUBLE,
        "weight_increment": 2.5,
        "target_rep_min": 8,
        "target_rep_max": 12,
    }
    fields.update(overrides)
    return ExerciseConfig(**fields)


class TestExerciseConfig:
    def test_set_range_defaults(self) -> None:
        config = _config()
        assert config.target_sets_min == 3
        assert config.target_sets_max == 4

    def test_is_frozen(self) -> None:
        config = _config()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.weight_increment = 5.0  # type: ignore[misc]

    def test_bodyweight_flag(self) -> None:
        assert _config(weight_increment=0).is_bodyweight
        assert not _config().is_bodyweight

    def test_equal_set_range_allowed(self) -> None:
        config = _config(target_sets_min=3, target_sets_max=3)
        assert config.target_sets_max == 3

    @pytest.mark.parametrize(
        "overrides",
        [
            {"weight_increment": -2.5},
            {"weight_increment": math.nan},
            {"weight_increment": math.inf},
            {"target_rep_min": 0},
            {"target_rep_min": 12, "target_rep_max": 12},
            {"target_rep_min": 12, "target_rep_max": 8},
            {"target_sets_min": 0},
            {"target_sets_min": 5, "target_sets_max": 4},
            {"progression_type": "double"},
            {"weight_increment": "5"},
            {"weight_increment": None},
            {"weight_increment": True},
            {"target_rep_min": "8"},
            {"target_sets_max": 4.0},
        ],
    )
    def test_rejects_malformed_targets(self, overrides: dict) -> None:
        with pytest.raises(InvalidExerciseConfigError):
            _config(**overrides)

    def test_error_is_engine_error(self) -> None:
        with pytest.raises(ProgressionEngineError):
            _config(target_rep_min=0)

"""Shared test fixtures: exercise configs, logged sets, session histories."""

from __future__ import annotations

from datetime import date
from typing import Callable

import pytest

from progression_engine.models.enums import ProgressionType, WeightUnit
from progression_engine.models.exercise_config import ExerciseConfig
from progression_engine.models.session import ExerciseSession
from progression_engine.models.set_record import SetRecord


@pytest.fixture
def barbell_config() -> ExerciseConfig:
    """Bench press: double progression, 8-12 reps, 5 kg jumps, 3-4 sets."""
    return ExerciseConfig(
        progression_type=ProgressionType.DOUBLE,
        weight_increment=5.0,
        target_rep_min=8,
        target_rep_max=12,
        exercise_id="bench-press",
        name="Bench Press",
    )


@pytest.fixture
def cable_config() -> ExerciseConfig:
    """Cable row: triple progression, 8-12 reps, 10 kg pin jumps, 2-4 sets."""
    return ExerciseConfig(
        progression_type=ProgressionType.TRIPLE,
        weight_increment=10.0,
        target_rep_min=8,
        target_rep_max=12,
        target_sets_min=2,
        target_sets_max=4,
        exercise_id="cable-row",
        name="Cable Row",
    )


@pytest.fixture
def pullup_config() -> ExerciseConfig:
    """Pull-ups: bodyweight double progression, 8-12 reps."""
    return ExerciseConfig(
        progression_type=ProgressionType.DOUBLE,
        weight_increment=0.0,
        target_rep_min=8,
        target_rep_max=12,
        exercise_id="pull-up",
        name="Pull-up",
    )


@pytest.fixture
def make_sets() -> Callable[..., tuple[SetRecord, ...]]:
    """Factory fixture for completed working sets.

    Usage:
        sets = make_sets((100, 10), (100, 9), (100, 8))
        warmups = make_sets((40, 10), is_warmup=True)
    """

    def _make(*pairs: tuple[float, float], **flags) -> tuple[SetRecord, ...]:
        return tuple(SetRecord(weight=w, reps=r, **flags) for w, r in pairs)

    return _make


@pytest.fixture
def bench_sessions() -> tuple[ExerciseSession, ...]:
    """Three bench sessions over three weeks, steadily progressing."""
    return (
        ExerciseSession(
            session_date=date(2026, 3, 2),
            workout_id="w1",
            sets=(
                SetRecord(weight=40.0, reps=10, is_warmup=True),
                SetRecord(weight=80.0, reps=8),
                SetRecord(weight=80.0, reps=8),
                SetRecord(weight=80.0, reps=7),
            ),
        ),
        ExerciseSession(
            session_date=date(2026, 3, 9),
            workout_id="w2",
            sets=(
                SetRecord(weight=80.0, reps=10),
                SetRecord(weight=80.0, reps=10),
                SetRecord(weight=80.0, reps=9),
            ),
        ),
        ExerciseSession(
            session_date=date(2026, 3, 16),
            workout_id="w3",
            sets=(
                SetRecord(weight=85.0, reps=8),
                SetRecord(weight=85.0, reps=8),
                SetRecord(weight=85.0, reps=8, completed=False),
            ),
        ),
    )


@pytest.fixture
def pound_session() -> ExerciseSession:
    """A session logged in pounds."""
    return ExerciseSession(
        session_date=date(2026, 3, 23),
        workout_id="w4",
        sets=(
            SetRecord(weight=200.0, reps=8, weight_unit=WeightUnit.LB),
            SetRecord(weight=200.0, reps=8, weight_unit=WeightUnit.LB),
        ),
    )

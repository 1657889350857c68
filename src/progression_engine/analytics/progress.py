"""Progress analytics: session history, 1RM progress, volume trend.

Every function here works on frozen ExerciseSession snapshots supplied by the
caller and returns new values; nothing is cached or stored.
"""

from __future__ import annotations

import dataclasses
from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from progression_engine.math.rounding import round_half_up
from progression_engine.math.strength import calculate_1rm, calculate_volume, get_best_set
from progression_engine.math.units import get_display_weight
from progression_engine.models.enums import VOLUME_TREND_WINDOW, WeightUnit
from progression_engine.models.history import ExerciseHistory, ExerciseProgress
from progression_engine.models.session import ExerciseSession
from progression_engine.models.set_record import SetRecord
from progression_engine.validation import is_valid_set


def _in_display_unit(record: SetRecord, display_unit: WeightUnit) -> SetRecord:
    """Copy of a set with its weight converted to ``display_unit``."""
    return dataclasses.replace(
        record,
        weight=get_display_weight(record.weight, record.weight_unit, display_unit),
        weight_unit=display_unit,
    )


def _usable_sets(
    session: ExerciseSession, display_unit: WeightUnit | None = None
) -> tuple[SetRecord, ...]:
    """Sets with finite, non-negative numbers; analytics skip the rest.

    With a ``display_unit`` the sets are converted before they are returned.
    """
    usable = tuple(s for s in session.sets if is_valid_set(s))
    if display_unit is None:
        return usable
    return tuple(_in_display_unit(s, display_unit) for s in usable)


def _chronological(sessions: Iterable[ExerciseSession]) -> list[ExerciseSession]:
    return sorted(sessions, key=lambda s: s.session_date)


def build_exercise_history(
    exercise_id: str, sessions: Iterable[ExerciseSession]
) -> tuple[ExerciseHistory, ...]:
    """Reduce each session to its best set, volume and working-set count.

    Sessions without working sets are skipped. Weights stay in the unit they
    were logged in; sessions mixing units should go through
    ``summarize_progress`` or ``volume_trend`` instead.
    """
    history = []
    for session in _chronological(sessions):
        usable = _usable_sets(session)
        best = get_best_set(usable)
        if best is None:
            continue
        history.append(
            ExerciseHistory(
                exercise_id=exercise_id,
                session_date=session.session_date,
                best_weight=best.weight,
                best_reps=best.reps,
                total_volume=calculate_volume(usable),
                working_sets=sum(1 for s in usable if s.is_working),
            )
        )
    return tuple(history)


def summarize_progress(
    exercise_id: str,
    sessions: Iterable[ExerciseSession],
    display_unit: WeightUnit = WeightUnit.KG,
) -> ExerciseProgress | None:
    """Summarize best weight and estimated 1RM over time for one exercise.

    Each session contributes its best set (highest estimated 1RM), converted
    to ``display_unit`` before any comparison so sessions logged in
    different units line up.

    Args:
        exercise_id: Identifier carried into the summary.
        sessions: Logged sessions for this exercise, in any order.
        display_unit: Unit the summary is reported in.

    Returns:
        An ExerciseProgress, or None if no session has a working set.
    """
    points: list[tuple[ExerciseSession, SetRecord]] = []
    for session in _chronological(sessions):
        best = get_best_set(_usable_sets(session, display_unit))
        if best is not None:
            points.append((session, best))

    if not points:
        return None

    estimates = [calculate_1rm(best.weight, best.reps) for _, best in points]
    return ExerciseProgress(
        exercise_id=exercise_id,
        sessions=len(points),
        best_weight=round_half_up(max(best.weight for _, best in points)),
        best_1rm=round_half_up(max(estimates)),
        progress_data=tuple(
            (session.session_date, round_half_up(estimate))
            for (session, _), estimate in zip(points, estimates)
        ),
    )


def estimate_1rm_slope(progress: ExerciseProgress) -> float:
    """Least-squares change in estimated 1RM per session.

    Positive means the lifter is getting stronger. Returns 0.0 with fewer
    than two sessions.
    """
    if not progress.has_trend:
        return 0.0
    values = np.array([value for _, value in progress.progress_data], dtype=np.float64)
    index = np.arange(len(values), dtype=np.float64)
    slope, _ = np.polyfit(index, values, 1)
    return float(slope)


def volume_trend(
    sessions: Sequence[ExerciseSession],
    display_unit: WeightUnit = WeightUnit.KG,
    window: int = VOLUME_TREND_WINDOW,
) -> pd.DataFrame:
    """Per-day training volume with a rolling mean.

    Sessions on the same date are summed. Weights are converted to
    ``display_unit`` first.

    Returns:
        DataFrame indexed by ``session_date`` (ascending) with ``volume`` and
        ``rolling_volume`` columns. Empty when there are no sessions.
    """
    rows = [
        {
            "session_date": session.session_date,
            "volume": float(
                calculate_volume(_usable_sets(session, display_unit))
            ),
        }
        for session in sessions
    ]
    if not rows:
        empty = pd.DataFrame(columns=["volume", "rolling_volume"], dtype=np.float64)
        empty.index.name = "session_date"
        return empty

    frame = pd.DataFrame(rows).groupby("session_date").sum().sort_index()
    frame["rolling_volume"] = frame["volume"].rolling(window=window, min_periods=1).mean()
    return frame

"""Analytics over logged sessions: history, progress, volume trend, records."""

from progression_engine.analytics.progress import (
    build_exercise_history,
    estimate_1rm_slope,
    summarize_progress,
    volume_trend,
)
from progression_engine.analytics.records import (
    detect_personal_records,
    records_from_history,
    session_bests,
    update_record_book,
)

__all__ = [
    "build_exercise_history",
    "detect_personal_records",
    "estimate_1rm_slope",
    "records_from_history",
    "session_bests",
    "summarize_progress",
    "update_record_book",
    "volume_trend",
]

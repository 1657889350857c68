"""Personal record detection for a finished exercise session."""

from __future__ import annotations

import logging
from typing import Iterable

from progression_engine.math.strength import calculate_1rm, calculate_volume
from progression_engine.math.units import get_display_weight
from progression_engine.models.enums import PersonalRecordType, WeightUnit
from progression_engine.models.personal_record import PersonalRecord, PersonalRecordBook
from progression_engine.models.session import ExerciseSession
from progression_engine.validation import is_valid_set

logger = logging.getLogger(__name__)


def session_bests(
    session: ExerciseSession, display_unit: WeightUnit = WeightUnit.KG
) -> dict[PersonalRecordType, float]:
    """Best value of each record type within one session.

    Only valid working sets count. Weights are converted to ``display_unit``
    so records logged in different units compare fairly. Returns an empty
    dict when the session has no usable working set.
    """
    pairs = [
        (get_display_weight(s.weight, s.weight_unit, display_unit), s.reps)
        for s in session.working_sets
        if is_valid_set(s)
    ]
    if not pairs:
        return {}

    return {
        PersonalRecordType.ONE_REP_MAX: max(calculate_1rm(w, r) for w, r in pairs),
        PersonalRecordType.MAX_WEIGHT: max(w for w, _ in pairs),
        PersonalRecordType.MAX_REPS: max(r for _, r in pairs),
        PersonalRecordType.MAX_VOLUME: sum(w * r for w, r in pairs),
    }


def detect_personal_records(
    exercise_id: str,
    session: ExerciseSession,
    book: PersonalRecordBook,
    display_unit: WeightUnit = WeightUnit.KG,
) -> tuple[PersonalRecord, ...]:
    """Return the records this session sets, compared against ``book``.

    A value must be positive and strictly beat the existing record of the
    same type; the first value logged for a type is always a record.
    """
    new_records = []
    for record_type, value in session_bests(session, display_unit).items():
        if value <= 0:
            continue
        existing = book.get(exercise_id, record_type)
        if existing is not None and value <= existing.value:
            continue
        logger.debug(
            "New %s record for %s: %s (was %s)",
            record_type.name,
            exercise_id,
            value,
            existing.value if existing else None,
        )
        new_records.append(
            PersonalRecord(
                exercise_id=exercise_id,
                record_type=record_type,
                value=value,
                record_date=session.session_date,
                workout_id=session.workout_id,
            )
        )
    return tuple(new_records)


def update_record_book(
    book: PersonalRecordBook, records: Iterable[PersonalRecord]
) -> PersonalRecordBook:
    """Fold records into a book, keeping the higher value per type."""
    for record in records:
        book = book.add(record)
    return book


def records_from_history(
    exercise_id: str,
    sessions: Iterable[ExerciseSession],
    display_unit: WeightUnit = WeightUnit.KG,
) -> PersonalRecordBook:
    """Rebuild a record book from scratch by replaying sessions oldest first."""
    book = PersonalRecordBook()
    for session in sorted(sessions, key=lambda s: s.session_date):
        book = update_record_book(
            book, detect_personal_records(exercise_id, session, book, display_unit)
        )
    return book

"""Tests for personal record detection."""

from __future__ import annotations

from datetime import date

from progression_engine.analytics.records import (
    detect_personal_records,
    records_from_history,
    session_bests,
    update_record_book,
)
from progression_engine.models.enums import PersonalRecordType, WeightUnit
from progression_engine.models.personal_record import PersonalRecordBook
from progression_engine.models.session import ExerciseSession
from progression_engine.models.set_record import SetRecord


class TestSessionBests:
    def test_all_record_types(self, bench_sessions) -> None:
        bests = session_bests(bench_sessions[0])
        assert bests == {
            PersonalRecordType.ONE_REP_MAX: 101,
            PersonalRecordType.MAX_WEIGHT: 80.0,
            PersonalRecordType.MAX_REPS: 8,
            PersonalRecordType.MAX_VOLUME: 1840.0,
        }

    def test_empty_without_working_sets(self) -> None:
        session = ExerciseSession(
            session_date=date(2026, 3, 1),
            sets=(SetRecord(weight=100, reps=3, completed=False),),
        )
        assert session_bests(session) == {}

    def test_converts_to_display_unit(self, pound_session) -> None:
        assert session_bests(pound_session, WeightUnit.LB)[PersonalRecordType.MAX_WEIGHT] == 200
        assert session_bests(pound_session, WeightUnit.KG)[PersonalRecordType.MAX_WEIGHT] == 90.7


class TestDetectPersonalRecords:
    def test_first_session_sets_every_record(self, bench_sessions) -> None:
        records = detect_personal_records("bench-press", bench_sessions[0], PersonalRecordBook())
        assert len(records) == 4
        assert all(r.workout_id == "w1" for r in records)
        assert all(r.record_date == date(2026, 3, 2) for r in records)

    def test_only_strict_improvements(self, bench_sessions) -> None:
        book = update_record_book(
            PersonalRecordBook(),
            detect_personal_records("bench-press", bench_sessions[0], PersonalRecordBook()),
        )
        records = detect_personal_records("bench-press", bench_sessions[1], book)
        # Same 80 kg top weight is not a new record
        assert {r.record_type for r in records} == {
            PersonalRecordType.ONE_REP_MAX,
            PersonalRecordType.MAX_REPS,
            PersonalRecordType.MAX_VOLUME,
        }

    def test_zero_values_never_records(self) -> None:
        session = ExerciseSession(
            session_date=date(2026, 3, 1),
            sets=(SetRecord(weight=0, reps=10), SetRecord(weight=0, reps=12)),
        )
        records = detect_personal_records("pull-up", session, PersonalRecordBook())
        assert [(r.record_type, r.value) for r in records] == [
            (PersonalRecordType.MAX_REPS, 12)
        ]


class TestRecordsFromHistory:
    def test_replays_all_sessions(self, bench_sessions) -> None:
        book = records_from_history("bench-press", reversed(bench_sessions))
        assert book.get("bench-press", PersonalRecordType.ONE_REP_MAX).value == 108
        assert book.get("bench-press", PersonalRecordType.MAX_WEIGHT).value == 85.0
        assert book.get("bench-press", PersonalRecordType.MAX_REPS).value == 10
        volume = book.get("bench-press", PersonalRecordType.MAX_VOLUME)
        assert volume.value == 2320.0
        assert volume.workout_id == "w2"

    def test_empty_history(self) -> None:
        assert records_from_history("bench-press", []).records == ()

"""Personal records: best-ever values per exercise and record type."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from progression_engine.models.enums import PersonalRecordType


@dataclass(frozen=True)
class PersonalRecord:
    """A single best-ever value for one exercise."""

    exercise_id: str
    record_type: PersonalRecordType
    value: float
    record_date: date
    workout_id: str | None = None


@dataclass(frozen=True)
class PersonalRecordBook:
    """Frozen collection of personal records, one per (exercise, type).

    ``add()`` returns a new book; a record only replaces an existing one when
    its value is strictly higher.
    """

    records: tuple[PersonalRecord, ...] = field(default_factory=tuple)

    def get(
        self, exercise_id: str, record_type: PersonalRecordType
    ) -> PersonalRecord | None:
        """Return the current record for an exercise and type, or None."""
        for record in self.records:
            if record.exercise_id == exercise_id and record.record_type == record_type:
                return record
        return None

    def add(self, record: PersonalRecord) -> PersonalRecordBook:
        existing = self.get(record.exercise_id, record.record_type)
        if existing is None:
            return PersonalRecordBook(records=self.records + (record,))
        if record.value <= existing.value:
            return self
        return PersonalRecordBook(
            records=tuple(record if r is existing else r for r in self.records)
        )

    def for_exercise(self, exercise_id: str) -> tuple[PersonalRecord, ...]:
        """All records held for one exercise."""
        return tuple(r for r in self.records if r.exercise_id == exercise_id)

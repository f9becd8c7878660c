from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    """Flat record list owned by the app container.

    Each write replaces the list wholesale (copy-on-write), so readers holding
    a previous snapshot never see a partial update.
    """

    def __init__(self, records: Sequence[AttendanceRecord] = ()):
        self._records: tuple[AttendanceRecord, ...] = tuple(records)

    def _index_of(self, student_id: str, day: date) -> int:
        for i, r in enumerate(self._records):
            if r.student_id == student_id and r.date == day:
                return i
        return -1

    def get_for_student_and_date(self, student_id: str, day: date) -> Optional[AttendanceRecord]:
        i = self._index_of(student_id, day)
        return self._records[i] if i > -1 else None

    def upsert(self, *, student_id: str, day: date, status: AttendanceStatus) -> AttendanceRecord:
        records = list(self._records)
        i = self._index_of(student_id, day)
        if i > -1:
            record = replace(records[i], status=status)
            records[i] = record
        else:
            record = AttendanceRecord(student_id=student_id, date=day, status=status)
            records.append(record)
        self._records = tuple(records)
        return record

    def list_for_date(self, day: date) -> Sequence[AttendanceRecord]:
        return [r for r in self._records if r.date == day]

    def list_range(self, *, start: date, end: date) -> Sequence[AttendanceRecord]:
        return [r for r in self._records if start <= r.date <= end]

    def list_all(self) -> Sequence[AttendanceRecord]:
        return list(self._records)

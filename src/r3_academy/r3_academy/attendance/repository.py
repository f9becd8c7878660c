from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_student_and_date(self, student_id: str, day: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert(self, *, student_id: str, day: date, status: AttendanceStatus) -> AttendanceRecord:
        """Overwrite the status for (student_id, day) or append a new record."""

        raise NotImplementedError

    def list_for_date(self, day: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_range(self, *, start: date, end: date) -> Sequence[AttendanceRecord]:
        """Records with start <= date <= end, in insertion order."""

        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

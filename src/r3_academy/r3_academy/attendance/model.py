from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's mark for one day.

    At most one record exists per (student_id, date).
    """

    student_id: str
    date: date
    status: AttendanceStatus

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_iso_date, today_local
from ..common.validators import require_enum, require_non_empty
from ..core.enums import AttendanceStatus
from ..schedules.service import ScheduleService
from ..students.model import Student
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RollCallRow:
    student: Student
    status: Optional[AttendanceStatus]

    def to_dict(self) -> dict:
        return {
            "student_id": self.student.student_id,
            "full_name": self.student.full_name,
            "school_name": self.student.school_name,
            "grade": self.student.grade,
            "status": self.status.value if self.status else None,
        }


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, schedules: ScheduleService):
        self._attendance = attendance
        self._schedules = schedules

    def mark(self, student_id: str, status, *, today: Optional[date] = None) -> AttendanceRecord:
        """Record today's status for a student, replacing any earlier mark.

        The student id is not checked against the roster; exports render
        unknown ids with placeholder values.
        """
        today = today or today_local()
        student_id = require_non_empty(student_id, "Student ID")
        status = require_enum(status, AttendanceStatus, "Status")

        record = self._attendance.upsert(student_id=student_id, day=today, status=status)
        logger.info("attendance marked student=%s date=%s status=%s", student_id, format_iso_date(today), status.value)
        return record

    def status_for(self, student_id: str, *, today: Optional[date] = None) -> Optional[AttendanceStatus]:
        today = today or today_local()
        record = self._attendance.get_for_student_and_date(student_id, today)
        return record.status if record else None

    def todays_roll_call(self, *, today: Optional[date] = None) -> list[RollCallRow]:
        """Students scheduled for today with their current mark."""
        today = today or today_local()
        return [
            RollCallRow(student=s, status=self.status_for(s.student_id, today=today))
            for s in self._schedules.for_date(today)
        ]

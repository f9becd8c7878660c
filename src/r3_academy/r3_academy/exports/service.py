from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..birthdays.calculator import calculate_age
from ..common.datetime_utils import as_date, format_iso_date, today_local
from ..core.constants import (
    ATTENDANCE_HISTORY_FILENAME,
    ATTENDANCE_TODAY_FILENAME,
    BIODATA_FILENAME,
    MISSING_VALUE,
    UNKNOWN_STUDENT_NAME,
)
from ..core.exceptions import MissingDateRangeError, NothingToExportError
from ..students.repository import StudentRepository
from .csv_writer import to_csv_bytes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportFile:
    filename: str
    rows: list[dict]

    def to_bytes(self, *, include_header: bool = False) -> bytes:
        return to_csv_bytes(self.rows, include_header=include_header)


class ExportService:
    """Builds CSV exports for biodata and attendance.

    Raises NothingToExportError instead of producing an empty file.
    """

    def __init__(self, students: StudentRepository, attendance: AttendanceRepository):
        self._students = students
        self._attendance = attendance

    def biodata(self, *, today: Optional[date] = None) -> ExportFile:
        today = today or today_local()
        students = self._students.list_all()
        if not students:
            raise NothingToExportError("No students to export.")

        rows = [
            {
                "ID": s.student_id,
                "Name": s.full_name,
                "DOB": format_iso_date(s.dob),
                "Age": calculate_age(s.dob, today),
                "Father": s.father_name,
                "Mother": s.mother_name,
                "Phone": s.phone,
                "Address": s.address,
                "School": s.school_name,
                "Grade": s.grade,
                "Status": s.status.value,
            }
            for s in students
        ]
        return self._done(ExportFile(filename=BIODATA_FILENAME, rows=rows))

    def attendance_today(self, *, today: Optional[date] = None) -> ExportFile:
        today = today or today_local()
        records = self._attendance.list_for_date(today)
        if not records:
            raise NothingToExportError("No attendance records found for today.")

        filename = ATTENDANCE_TODAY_FILENAME.format(day=format_iso_date(today))
        return self._done(ExportFile(filename=filename, rows=self._attendance_rows(records)))

    def attendance_range(self, start: date | str | None, end: date | str | None) -> ExportFile:
        if not start or not end:
            raise MissingDateRangeError("Please select both start and end dates.")

        start_d = as_date(start)
        end_d = as_date(end)
        records = self._attendance.list_range(start=start_d, end=end_d)
        if not records:
            raise NothingToExportError("No attendance records found for the selected range.")

        filename = ATTENDANCE_HISTORY_FILENAME.format(start=format_iso_date(start_d), end=format_iso_date(end_d))
        return self._done(ExportFile(filename=filename, rows=self._attendance_rows(records)))

    def _attendance_rows(self, records) -> list[dict]:
        return [self._attendance_row(r) for r in records]

    def _attendance_row(self, r: AttendanceRecord) -> dict:
        student = self._students.get_by_id(r.student_id)
        return {
            "Date": format_iso_date(r.date),
            "StudentID": student.student_id if student else MISSING_VALUE,
            "FullName": student.full_name if student else UNKNOWN_STUDENT_NAME,
            "School": student.school_name if student else MISSING_VALUE,
            "Grade": student.grade if student else MISSING_VALUE,
            "Status": r.status.value,
        }

    @staticmethod
    def _done(export: ExportFile) -> ExportFile:
        logger.info("export built file=%s rows=%d", export.filename, len(export.rows))
        return export

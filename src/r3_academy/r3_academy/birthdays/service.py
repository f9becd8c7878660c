from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_iso_date, today_local
from ..students.model import Student
from ..students.repository import StudentRepository
from .calculator import calculate_age, get_upcoming_birthdays, is_birthday_today, next_birthday


@dataclass(frozen=True)
class BirthdayEntry:
    student: Student
    occurs_on: date
    turning: int
    is_today: bool

    def to_dict(self) -> dict:
        """Serialize for the dashboard.

        Note: ``turning`` is the student's current age (what the board shows
        as "Turning N"), not the age reached on ``occurs_on``.
        """
        return {
            "student_id": self.student.student_id,
            "full_name": self.student.full_name,
            "school_name": self.student.school_name,
            "dob": format_iso_date(self.student.dob),
            "occurs_on": format_iso_date(self.occurs_on),
            "turning": self.turning,
            "is_today": self.is_today,
        }


class BirthdayService:
    def __init__(self, students: StudentRepository):
        self._students = students

    def todays_birthdays(self, *, today: Optional[date] = None) -> list[Student]:
        today = today or today_local()
        return [s for s in self._students.list_all() if is_birthday_today(s.dob, today)]

    def upcoming(self, days: int, *, today: Optional[date] = None) -> list[BirthdayEntry]:
        today = today or today_local()
        students = get_upcoming_birthdays(self._students.list_all(), days, today)
        return [self._to_entry(s, today) for s in students]

    def _to_entry(self, s: Student, today: date) -> BirthdayEntry:
        # The dashboard labels this "Turning N" using the current age.
        return BirthdayEntry(
            student=s,
            occurs_on=next_birthday(s.dob, today),
            turning=calculate_age(s.dob, today),
            is_today=is_birthday_today(s.dob, today),
        )

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..birthdays.calculator import get_upcoming_birthdays, is_birthday_today
from ..common.datetime_utils import today_local
from ..core.constants import DEFAULT_UPCOMING_WINDOW_DAYS
from ..core.exceptions import NotFoundError
from .model import Student
from .repository import StudentRepository


@dataclass(frozen=True)
class StudentStats:
    total_students: int
    active_students: int
    birthdays_today: int
    upcoming_birthdays: int


class StudentService:
    """Use case: browse the student roster."""

    def __init__(self, students: StudentRepository, *, upcoming_window_days: int = DEFAULT_UPCOMING_WINDOW_DAYS):
        self._students = students
        self._upcoming_window_days = int(upcoming_window_days)

    def list_all(self) -> list[Student]:
        return list(self._students.list_all())

    def get(self, student_id: str) -> Student:
        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError(f"Student {student_id} not found")
        return student

    def search(self, query: Optional[str]) -> list[Student]:
        """Case-insensitive substring match on full name."""
        needle = (query or "").lower()
        return [s for s in self._students.list_all() if needle in s.full_name.lower()]

    def stats(self, *, today: Optional[date] = None) -> StudentStats:
        today = today or today_local()
        students = self._students.list_all()
        return StudentStats(
            total_students=len(students),
            active_students=sum(1 for s in students if s.is_active),
            birthdays_today=sum(1 for s in students if is_birthday_today(s.dob, today)),
            upcoming_birthdays=len(get_upcoming_birthdays(students, self._upcoming_window_days, today)),
        )

    def group_by_school(self) -> dict[str, list[Student]]:
        """Schools in first-seen order; students ordered by birth month."""
        groups: dict[str, list[Student]] = {}
        for s in self._students.list_all():
            groups.setdefault(s.school_name, []).append(s)
        for members in groups.values():
            members.sort(key=lambda s: s.dob.month)
        return groups

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Optional

from ..birthdays.service import BirthdayService
from ..common.datetime_utils import format_iso_date, today_local
from ..core.constants import BIRTHDAY_BOARD_WINDOW_DAYS, DASHBOARD_BIRTHDAY_WINDOW_DAYS
from ..schedules.service import ScheduleService, weekday_for
from ..students.model import Student
from ..students.service import StudentService


def student_card(s: Student) -> dict:
    return {
        "student_id": s.student_id,
        "full_name": s.full_name,
        "school_name": s.school_name,
        "grade": s.grade,
        "dob": format_iso_date(s.dob),
        "assigned_days": [d.value for d in s.assigned_days],
        "status": s.status.value,
    }


@dataclass(frozen=True)
class DashboardSummary:
    today: str
    weekday: Optional[str]
    stats: dict
    todays_schedule: list[dict]
    upcoming_birthdays: list[dict]


class DashboardService:
    """Read-model assembling the landing page and the birthday board."""

    def __init__(self, students: StudentService, schedules: ScheduleService, birthdays: BirthdayService):
        self._students = students
        self._schedules = schedules
        self._birthdays = birthdays

    def summary(self, *, today: Optional[date] = None) -> DashboardSummary:
        today = today or today_local()
        weekday = weekday_for(today)
        return DashboardSummary(
            today=format_iso_date(today),
            weekday=weekday.value if weekday else None,
            stats=asdict(self._students.stats(today=today)),
            todays_schedule=[student_card(s) for s in self._schedules.for_date(today)],
            upcoming_birthdays=[
                e.to_dict() for e in self._birthdays.upcoming(DASHBOARD_BIRTHDAY_WINDOW_DAYS, today=today)
            ],
        )

    def birthday_board(self, *, days: int = BIRTHDAY_BOARD_WINDOW_DAYS, today: Optional[date] = None) -> dict:
        today = today or today_local()
        by_school = self._students.group_by_school()
        return {
            "today": [student_card(s) for s in self._birthdays.todays_birthdays(today=today)],
            "upcoming": [e.to_dict() for e in self._birthdays.upcoming(days, today=today)],
            "by_school": [
                {"school_name": school, "count": len(members), "students": [student_card(s) for s in members]}
                for school, members in by_school.items()
            ],
        }

from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import today_local
from ..core.enums import Weekday
from ..students.model import Student
from ..students.repository import StudentRepository

# date.weekday(): Monday == 0 .. Sunday == 6
_WEEKDAYS_BY_INDEX = dict(enumerate(Weekday))


def weekday_for(day: date) -> Optional[Weekday]:
    """Class weekday for ``day``; None on Sunday."""
    return _WEEKDAYS_BY_INDEX.get(day.weekday())


class ScheduleService:
    """Weekly planner derived from each student's assigned days."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def weekly_planner(self) -> dict[Weekday, list[Student]]:
        students = self._students.list_all()
        return {day: [s for s in students if s.attends_on(day)] for day in Weekday}

    def for_weekday(self, day: Weekday) -> list[Student]:
        return [s for s in self._students.list_all() if s.attends_on(day)]

    def for_date(self, day: Optional[date] = None) -> list[Student]:
        weekday = weekday_for(day or today_local())
        if weekday is None:
            return []
        return self.for_weekday(weekday)

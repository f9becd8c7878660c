"""Birthday and age arithmetic.

Pure functions over calendar dates. ``today`` defaults to the local date so
callers can pin it in tests.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Optional, Sequence

from ..common.datetime_utils import today_local
from ..common.validators import require_non_negative
from ..students.model import Student


def calculate_age(dob: date, today: Optional[date] = None) -> int:
    """Whole years between ``dob`` and ``today``."""
    today = today or today_local()
    age = today.year - dob.year
    if (today.month, today.day) < (dob.month, dob.day):
        age -= 1
    return age


def is_birthday_today(dob: date, today: Optional[date] = None) -> bool:
    today = today or today_local()
    return (dob.month, dob.day) == (today.month, today.day)


def project_birthday(dob: date, year: int) -> date:
    """Occurrence of ``dob`` in ``year``.

    Feb 29 overflows to Mar 1 when ``year`` is not a leap year.
    """
    if dob.month == 2 and dob.day == 29 and not calendar.isleap(year):
        return date(year, 3, 1)
    return dob.replace(year=year)


def next_birthday(dob: date, today: Optional[date] = None) -> date:
    """First occurrence on or after ``today``."""
    today = today or today_local()
    occurrence = project_birthday(dob, today.year)
    if occurrence < today:
        occurrence = project_birthday(dob, today.year + 1)
    return occurrence


def is_upcoming(dob: date, days: int, today: Optional[date] = None) -> bool:
    today = today or today_local()
    days = require_non_negative(days, "days")
    return today <= next_birthday(dob, today) <= today + timedelta(days=days)


def get_upcoming_birthdays(students: Sequence[Student], days: int, today: Optional[date] = None) -> list[Student]:
    """Students whose next birthday falls within ``days`` of ``today``.

    Ordered by the occurrence in the current calendar year (so a January
    birthday seen from late December sorts ahead of a December one). The
    sort is stable; ties keep input order.
    """
    today = today or today_local()
    days = require_non_negative(days, "days")

    upcoming = [s for s in students if is_upcoming(s.dob, days, today)]
    upcoming.sort(key=lambda s: project_birthday(s.dob, today.year))
    return upcoming

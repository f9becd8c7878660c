from __future__ import annotations

from enum import Enum


class Weekday(str, Enum):
    """Class days. The academy does not run on Sunday."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"


class StudentStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class AttendanceStatus(str, Enum):
    """Daily attendance mark for one student."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import StudentStatus, Weekday


@dataclass(frozen=True)
class Student:
    """Domain entity: one enrolled student.

    Note: Plain data object; repositories own the collection.
    """

    student_id: str
    full_name: str
    dob: date
    father_name: str
    mother_name: str
    phone: str
    address: str
    school_name: str
    grade: str
    assigned_days: tuple[Weekday, ...] = ()
    status: StudentStatus = StudentStatus.ACTIVE
    alt_phone: Optional[str] = None
    notes: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.status == StudentStatus.ACTIVE

    def attends_on(self, day: Weekday) -> bool:
        return day in self.assigned_days

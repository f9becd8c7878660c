from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .birthdays.service import BirthdayService
from .core.constants import DEFAULT_UPCOMING_WINDOW_DAYS
from .dashboard.service import DashboardService
from .exports.service import ExportService
from .schedules.service import ScheduleService
from .students.memory_student_repository import InMemoryStudentRepository
from .students.model import Student
from .students.seed import load_seed_students
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    """Session-scoped store plus the services built on it.

    One container lives as long as the app; a restart discards all state.
    """

    students_repo: InMemoryStudentRepository
    attendance_repo: InMemoryAttendanceRepository

    student_service: StudentService
    schedule_service: ScheduleService
    birthday_service: BirthdayService
    attendance_service: AttendanceService
    export_service: ExportService
    dashboard_service: DashboardService


def build_container(
    *,
    students: Optional[Iterable[Student]] = None,
    upcoming_window_days: int = DEFAULT_UPCOMING_WINDOW_DAYS,
) -> Container:
    if students is None:
        students = load_seed_students()

    students_repo = InMemoryStudentRepository(students)
    attendance_repo = InMemoryAttendanceRepository()

    student_service = StudentService(students_repo, upcoming_window_days=upcoming_window_days)
    schedule_service = ScheduleService(students_repo)
    birthday_service = BirthdayService(students_repo)
    attendance_service = AttendanceService(attendance_repo, schedule_service)
    export_service = ExportService(students_repo, attendance_repo)
    dashboard_service = DashboardService(student_service, schedule_service, birthday_service)

    return Container(
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        student_service=student_service,
        schedule_service=schedule_service,
        birthday_service=birthday_service,
        attendance_service=attendance_service,
        export_service=export_service,
        dashboard_service=dashboard_service,
    )

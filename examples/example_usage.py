"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the business rules live in the services.
"""

from datetime import date

from r3_academy.container import build_container
from r3_academy.core.enums import AttendanceStatus


def main():
    container = build_container()
    today = date.today()

    for entry in container.birthday_service.upcoming(30, today=today):
        print(entry.to_dict())

    for row in container.attendance_service.todays_roll_call(today=today):
        container.attendance_service.mark(row.student.student_id, AttendanceStatus.PRESENT, today=today)

    print(container.export_service.biodata(today=today).filename)


if __name__ == "__main__":
    main()

from __future__ import annotations

from datetime import date

from r3_academy.birthdays.service import BirthdayService
from r3_academy.students.memory_student_repository import InMemoryStudentRepository


def test_birthday_today_entry_flags_today_and_current_age(make_student, fixed_today):
    svc = BirthdayService(
        InMemoryStudentRepository(
            [
                make_student("later", dob=date(2014, 1, 9)),
                make_student("today", dob=date(2012, 12, 28)),
                make_student("dec30", dob=date(2010, 12, 30)),
            ]
        )
    )

    entries = svc.upcoming(15, today=fixed_today)

    assert [(e.student.student_id, e.occurs_on, e.turning, e.is_today) for e in entries] == [
        ("later", date(2025, 1, 9), 10, False),
        ("today", date(2024, 12, 28), 12, True),
        ("dec30", date(2024, 12, 30), 13, False),
    ]


def test_entry_to_dict(make_student, fixed_today):
    svc = BirthdayService(InMemoryStudentRepository([make_student("today", dob=date(2012, 12, 28))]))

    entry = svc.upcoming(0, today=fixed_today)[0]

    assert entry.to_dict() == {
        "student_id": "today",
        "full_name": "Student today",
        "school_name": "Greenwood High",
        "dob": "2012-12-28",
        "occurs_on": "2024-12-28",
        "turning": 12,
        "is_today": True,
    }


def test_todays_birthdays(make_student, fixed_today):
    svc = BirthdayService(
        InMemoryStudentRepository([make_student("a", dob=date(2012, 12, 28)), make_student("b", dob=date(2012, 12, 29))])
    )

    assert [s.student_id for s in svc.todays_birthdays(today=fixed_today)] == ["a"]

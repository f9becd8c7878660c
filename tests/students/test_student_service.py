from __future__ import annotations

from datetime import date

import pytest

from r3_academy.core.enums import StudentStatus
from r3_academy.core.exceptions import NotFoundError
from r3_academy.students.memory_student_repository import InMemoryStudentRepository
from r3_academy.students.seed import load_seed_students
from r3_academy.students.service import StudentService


def test_search_is_case_insensitive_substring(make_student):
    svc = StudentService(
        InMemoryStudentRepository(
            [make_student("1", full_name="Asha Rao"), make_student("2", full_name="Rashid Khan")]
        )
    )

    assert [s.student_id for s in svc.search("ASH")] == ["1", "2"]
    assert [s.student_id for s in svc.search("rao")] == ["1"]
    assert len(svc.search("")) == 2
    assert len(svc.search(None)) == 2


def test_get_unknown_student_raises(make_student):
    svc = StudentService(InMemoryStudentRepository([make_student("1")]))

    assert svc.get("1").student_id == "1"
    with pytest.raises(NotFoundError):
        svc.get("404")


def test_stats_counts(make_student, fixed_today):
    svc = StudentService(
        InMemoryStudentRepository(
            [
                make_student("today", dob=date(2012, 12, 28)),
                make_student("soon", dob=date(2012, 1, 3)),
                make_student("later", dob=date(2012, 1, 20), status=StudentStatus.INACTIVE),
            ]
        ),
        upcoming_window_days=7,
    )

    stats = svc.stats(today=fixed_today)

    assert stats.total_students == 3
    assert stats.active_students == 2
    assert stats.birthdays_today == 1
    assert stats.upcoming_birthdays == 2


def test_group_by_school_orders_by_birth_month(make_student):
    svc = StudentService(
        InMemoryStudentRepository(
            [
                make_student("a", dob=date(2012, 9, 1), school_name="Greenwood High"),
                make_student("b", dob=date(2012, 5, 1), school_name="Delhi Public School"),
                make_student("c", dob=date(2011, 2, 1), school_name="Greenwood High"),
            ]
        )
    )

    groups = svc.group_by_school()

    assert list(groups) == ["Greenwood High", "Delhi Public School"]
    assert [s.student_id for s in groups["Greenwood High"]] == ["c", "a"]


def test_seed_students_load():
    students = load_seed_students()

    assert students
    assert len({s.student_id for s in students}) == len(students)
    assert all(isinstance(s.dob, date) for s in students)

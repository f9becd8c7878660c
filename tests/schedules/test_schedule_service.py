from __future__ import annotations

from datetime import date

from r3_academy.core.enums import Weekday
from r3_academy.schedules.service import ScheduleService, weekday_for
from r3_academy.students.memory_student_repository import InMemoryStudentRepository


def test_weekday_mapping_skips_sunday():
    assert weekday_for(date(2024, 12, 23)) == Weekday.MONDAY
    assert weekday_for(date(2024, 12, 28)) == Weekday.SATURDAY
    assert weekday_for(date(2024, 12, 29)) is None


def test_weekly_planner_has_every_class_day(make_student):
    svc = ScheduleService(
        InMemoryStudentRepository(
            [
                make_student("a", assigned_days=(Weekday.MONDAY, Weekday.WEDNESDAY)),
                make_student("b", assigned_days=(Weekday.WEDNESDAY,)),
            ]
        )
    )

    planner = svc.weekly_planner()

    assert list(planner) == list(Weekday)
    assert [s.student_id for s in planner[Weekday.WEDNESDAY]] == ["a", "b"]
    assert planner[Weekday.FRIDAY] == []


def test_for_date_on_sunday_is_empty(make_student):
    svc = ScheduleService(InMemoryStudentRepository([make_student("a", assigned_days=tuple(Weekday))]))

    assert svc.for_date(date(2024, 12, 29)) == []
    assert [s.student_id for s in svc.for_date(date(2024, 12, 28))] == ["a"]

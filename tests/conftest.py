from __future__ import annotations

from datetime import date, datetime

import pytest

from r3_academy.common import datetime_utils
from r3_academy.core.enums import StudentStatus, Weekday
from r3_academy.main import create_app
from r3_academy.students.model import Student

# A Saturday, three days before the new year.
FIXED_NOW = datetime(2024, 12, 28, 10, 30, 0)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def fixed_today() -> date:
    return FIXED_NOW.date()


@pytest.fixture
def frozen_clock(monkeypatch):
    monkeypatch.setattr(datetime_utils, "now_local", lambda: FIXED_NOW)
    return FIXED_NOW


@pytest.fixture
def make_student():
    def _make(student_id: str = "S1", *, dob: date = date(2012, 5, 1), **overrides) -> Student:
        fields = dict(
            student_id=student_id,
            full_name=f"Student {student_id}",
            dob=dob,
            father_name="Father",
            mother_name="Mother",
            phone="9000000000",
            address="1 Main Road",
            school_name="Greenwood High",
            grade="Grade 7",
            assigned_days=(Weekday.SATURDAY,),
            status=StudentStatus.ACTIVE,
        )
        fields.update(overrides)
        return Student(**fields)

    return _make


@pytest.fixture
def app(frozen_clock):
    return create_app("config.testing")


@pytest.fixture
def client(app):
    return app.test_client()

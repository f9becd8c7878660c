"""Initial student list loaded once when the container is built."""

from __future__ import annotations

from ..common.datetime_utils import parse_iso_date
from ..core.enums import StudentStatus, Weekday
from .model import Student

M, T, W, TH, F, SA = (
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
    Weekday.SATURDAY,
)

SEED_STUDENTS: list[dict] = [
    {
        "student_id": "R3-001",
        "full_name": "Aarav Sharma",
        "dob": "2012-03-14",
        "father_name": "Rajesh Sharma",
        "mother_name": "Priya Sharma",
        "phone": "9876543210",
        "address": "12 Lake View Road, Sector 4",
        "school_name": "Greenwood High",
        "grade": "Grade 7",
        "assigned_days": (M, W, F),
    },
    {
        "student_id": "R3-002",
        "full_name": "Diya Patel",
        "dob": "2013-11-02",
        "father_name": "Kiran Patel",
        "mother_name": "Meena Patel",
        "phone": "9812345678",
        "alt_phone": "9812300000",
        "address": "44 Park Street",
        "school_name": "St. Mary's Convent",
        "grade": "Grade 6",
        "assigned_days": (T, TH, SA),
    },
    {
        "student_id": "R3-003",
        "full_name": "Kabir Singh",
        "dob": "2011-07-21",
        "father_name": "Harpreet Singh",
        "mother_name": "Simran Kaur",
        "phone": "9898989898",
        "address": "Flat 3B, Sunrise Apartments, MG Road",
        "school_name": "Greenwood High",
        "grade": "Grade 8",
        "assigned_days": (M, T, W, TH, F),
    },
    {
        "student_id": "R3-004",
        "full_name": "Ananya Iyer",
        "dob": "2014-01-09",
        "father_name": "Suresh Iyer",
        "mother_name": "Lakshmi Iyer",
        "phone": "9845012345",
        "address": "7 Temple Lane",
        "school_name": "Delhi Public School",
        "grade": "Grade 5",
        "assigned_days": (SA,),
        "notes": "Needs extra help with fractions",
    },
    {
        "student_id": "R3-005",
        "full_name": "Rohan Mehta",
        "dob": "2010-12-30",
        "father_name": "Anil Mehta",
        "mother_name": "Kavita Mehta",
        "phone": "9822011223",
        "address": "221 Hill Crest, Phase 2",
        "school_name": "Delhi Public School",
        "grade": "Grade 9",
        "assigned_days": (W, F),
        "status": StudentStatus.INACTIVE,
    },
    {
        "student_id": "R3-006",
        "full_name": "Ishita Verma",
        "dob": "2012-08-05",
        "father_name": "Manoj Verma",
        "mother_name": "Neha Verma",
        "phone": "9833344455",
        "address": "18 Rose Garden Colony",
        "school_name": "St. Mary's Convent",
        "grade": "Grade 7",
        "assigned_days": (T, TH),
    },
]


def build_student(data: dict) -> Student:
    fields = dict(data)
    fields["dob"] = parse_iso_date(fields["dob"])
    fields["assigned_days"] = tuple(Weekday(d) for d in fields.get("assigned_days", ()))
    fields["status"] = StudentStatus(fields.get("status", StudentStatus.ACTIVE))
    return Student(**fields)


def load_seed_students() -> list[Student]:
    return [build_student(d) for d in SEED_STUDENTS]

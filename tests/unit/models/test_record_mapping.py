"""Unit tests for model record mapping."""

from datetime import datetime, timezone

from app.models import Pdf, Semester, Subject
from app.models.base import datetime_to_millis, millis_to_datetime


def test_millis_round_trip_is_exact():
    """Millisecond timestamps survive conversion without float drift."""
    millis = 1700000000123
    assert datetime_to_millis(millis_to_datetime(millis)) == millis


def test_naive_datetime_treated_as_utc():
    """SQLite returns naive datetimes; they are read as UTC."""
    aware = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
    naive = aware.replace(tzinfo=None)
    assert datetime_to_millis(naive) == datetime_to_millis(aware)


def test_semester_from_record():
    """Semester is built from its wire record."""
    semester = Semester.from_record({"id": "s1", "name": "Semester 1", "order": 1})

    assert semester.id == "s1"
    assert semester.name == "Semester 1"
    assert semester.order == 1


def test_subject_record_uses_camel_case_reference():
    """Subject exposes semester_id as semesterId on the wire."""
    subject = Subject.from_record({"id": "x", "name": "Physics", "semesterId": "s1"})

    assert subject.semester_id == "s1"
    assert subject.to_record() == {"id": "x", "name": "Physics", "semesterId": "s1"}


def test_pdf_created_at_exchanged_as_millis():
    """PDF createdAt is a datetime in the model and millis on the wire."""
    record = {
        "id": "p1",
        "title": "Notes",
        "fileName": "notes.pdf",
        "fileUrl": "https://files.example/notes.pdf",
        "semesterId": "s1",
        "subjectId": "sub1",
        "createdAt": 1700000000123,
    }

    pdf = Pdf.from_record(record)

    assert isinstance(pdf.created_at, datetime)
    assert pdf.to_record() == record


def test_from_record_ignores_unknown_keys():
    """Extra wire keys are dropped."""
    semester = Semester.from_record({"id": "s1", "name": "S", "order": 2, "x": 1})
    assert semester.to_record() == {"id": "s1", "name": "S", "order": 2}

# tests/test_student.py

import pytest

from models.grade import Grade
from models.grade_list import GradeList
from models.student import Student


def test_student_to_dict(sample_student):
    sample_student.record_grade(Grade("Midterm", "A"))
    data = sample_student.to_dict()

    assert data["id"] == "s001"
    assert data["first_name"] == "Sean"
    assert data["last_name"] == "Cameron"
    assert data["email"] == "scameron@mmm.edu"
    assert data["active"]
    assert data["grades"] == [{"test_name": "Midterm", "value": "A"}]


def test_student_from_dict():
    student = Student.from_dict(
        {
            "id": "s001",
            "first_name": "Sean",
            "last_name": "Cameron",
            "email": "scameron@mmm.edu",
            "active": True,
            "grades": [
                {"test_name": "Midterm", "value": "A"},
                {"test_name": "Final", "value": "B"},
                {"test_name": "MIDTERM", "value": "A-"},
            ],
        }
    )

    assert student.id == "s001"
    assert student.full_name == "Sean Cameron"
    assert student.email == "scameron@mmm.edu"
    assert student.is_active
    assert student.status == "'ACTIVE'"
    assert str(student.grades) == "Final: B\nMIDTERM: A-"


def test_student_from_dict_without_grades():
    student = Student.from_dict(
        {
            "id": "s001",
            "first_name": "Sean",
            "last_name": "Cameron",
            "email": "scameron@mmm.edu",
            "active": False,
        }
    )

    assert student.grades == GradeList()
    assert student.status == "'INACTIVE'"


def test_student_to_str(sample_student):
    assert (
        str(sample_student)
        == "STUDENT: name: Sean Cameron, email: scameron@mmm.edu, id: s001"
    )


def test_new_student_has_no_grades(sample_student):
    assert len(sample_student.grades) == 0
    assert not sample_student.has_grade("Midterm")
    assert sample_student.grade_for("Midterm") is None


def test_record_grade(sample_student, sample_grade):
    sample_student.record_grade(sample_grade)

    assert sample_student.has_grade("MIDTERM")
    assert sample_student.grade_for("midterm") is sample_grade


def test_record_none_grade(sample_student):
    with pytest.raises(TypeError):
        sample_student.record_grade(None)

    assert len(sample_student.grades) == 0


def test_email_setter_normalizes(sample_student):
    sample_student.email = "  PAtreides@MMM.edu "

    assert sample_student.email == "patreides@mmm.edu"


@pytest.mark.parametrize("email", ["no-at-sign.edu", "two@@mmm.edu", "x@nodomain", ""])
def test_email_setter_rejects_invalid(sample_student, email):
    with pytest.raises(ValueError):
        sample_student.email = email

    assert sample_student.email == "scameron@mmm.edu"


def test_toggle_archived_status(sample_student):
    sample_student.toggle_archived_status()

    assert not sample_student.is_active
    assert sample_student.status == "'INACTIVE'"

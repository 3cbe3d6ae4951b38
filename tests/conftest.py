# tests/conftest.py

import pytest

from models.address_book import AddressBook
from models.grade import Grade
from models.grade_list import GradeList
from models.student import Student


@pytest.fixture
def sample_address_book():
    return AddressBook()


@pytest.fixture
def sample_student():
    return Student("s001", "Sean", "Cameron", "scameron@mmm.edu")


@pytest.fixture
def sample_other_student():
    return Student("s002", "Paul", "Atreides", "patreides@mmm.edu")


@pytest.fixture
def sample_grade():
    return Grade("Midterm", "A")


@pytest.fixture
def sample_grade_list():
    grade_list = GradeList()
    grade_list.add_grade(Grade("Midterm", "A"))
    grade_list.add_grade(Grade("Final", "B"))
    return grade_list


@pytest.fixture
def enrolled_student(sample_address_book, sample_student):
    sample_address_book.add_student(sample_student)
    return sample_student

# models/student.py

"""
Represents a student record in the address book.

Stores core identifying information such as name, email, and a unique ID.
Supports toggling between active and inactive status to reflect enrollment changes.

Includes functionality for:
- Validating and normalizing email input
- Recording and looking up test grades
- Serializing to and from JSON-compatible dictionaries
- Mutating individual fields via property access

Grades are held in a `GradeList` owned by the student. The list is created empty
with the student and only changes through `record_grade()`.
"""

from __future__ import annotations

import re

from models.grade import Grade
from models.grade_list import GradeList


class Student:

    def __init__(
        self,
        id: str,
        first_name: str,
        last_name: str,
        email: str,
        active: bool = True,
    ):
        self._id: str = id
        self._first_name: str = first_name
        self._last_name: str = last_name
        self._email: str = email
        self._is_active: bool = active
        self._grades: GradeList = GradeList()

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @property
    def first_name(self) -> str:
        return self._first_name

    @first_name.setter
    def first_name(self, first_name: str) -> None:
        self._first_name = first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @last_name.setter
    def last_name(self, last_name: str) -> None:
        self._last_name = last_name

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    @property
    def email(self) -> str:
        return self._email

    @email.setter
    def email(self, email: str) -> None:
        self._email = Student.validate_email_input(email)

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def status(self) -> str:
        return "'ACTIVE'" if self._is_active else "'INACTIVE'"

    def toggle_archived_status(self) -> None:
        self._is_active = not self._is_active

    @property
    def grades(self) -> GradeList:
        return self._grades

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "first_name": self._first_name,
            "last_name": self._last_name,
            "email": self._email,
            "active": self._is_active,
            "grades": [grade.to_dict() for grade in self._grades],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Student:
        student = cls(
            id=data["id"],
            first_name=data["first_name"],
            last_name=data["last_name"],
            email=data["email"],
            active=data["active"],
        )

        # replayed through add_grade so duplicate test names collapse
        for grade_data in data.get("grades", []):
            student.record_grade(Grade.from_dict(grade_data))

        return student

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Student({self._id}, {self._first_name}, {self._last_name}, {self._email}, {self._is_active})"

    def __str__(self) -> str:
        return f"STUDENT: name: {self.full_name}, email: {self._email}, id: {self._id}"

    # === data accessors ===

    def grade_for(self, test_name: str) -> Grade | None:
        return self._grades.get_grade(test_name)

    def has_grade(self, test_name: str) -> bool:
        return self._grades.has_grade(test_name)

    # === data manipulators ===

    def record_grade(self, grade: Grade) -> None:
        self._grades.add_grade(grade)

    # === data validators ===

    @staticmethod
    def validate_email_input(email: str) -> str:
        """
        Validates and normalizes a Student email address.

        Normalizes the input by stripping whitespace and converting to lowercase.
        Ensures the email:
            - Contains exactly one '@' symbol
            - Has non-whitespace characters on both sides of the '@'
            - Contains at least one '.' after the '@' to separate the domain and TLD

        Args:
            email: The input email string to validate.

        Returns:
            A normalized, lowercase version of the email if valid.

        Raises:
            TypeError: If the email is not a string.
            ValueError: If the email does not conform to the expected format.
        """
        if not isinstance(email, str):
            raise TypeError("Invalid input. Email must be a string.")

        email = email.strip().lower()
        if not re.fullmatch(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", email):
            raise ValueError(
                "Invalid input. Email must be a valid address with one @ and a domain."
            )
        return email

# models/grade_list.py

"""
Represents the list of grades recorded for a single student.

Holds at most one `Grade` per test name, where test names are compared
case-insensitively. Recording a grade for a test that already has one replaces
the old grade and moves the test to the end of the list, so iteration order is
the order in which each test was last graded.

Includes functionality for:
- Adding or updating a grade
- Looking up a grade by test name
- Rendering the list one grade per line
- Comparing and hashing lists by their ordered contents

Grades are stored in a dictionary keyed by the case-folded test name. Updates
pop the key before reinserting it, which moves the entry to the end of the
dictionary's insertion order.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from core.utils import normalize_key
from models.grade import Grade

logger = logging.getLogger(__name__)


class GradeList:

    def __init__(self):
        self._grades: dict[str, Grade] = {}

    # === properties ===

    @property
    def grades(self) -> list[Grade]:
        return list(self._grades.values())

    # === data accessors ===

    def get_grade(self, test_name: Any) -> Grade | None:
        """
        Retrieves the grade recorded for a test, ignoring case.

        Args:
            test_name (Any): The name of the test.

        Returns:
            The matching `Grade`, or None if no grade is recorded for the test.

        Notes:
            - Never raises. Non-string test names simply have no grade.
        """
        if not isinstance(test_name, str):
            return None

        return self._grades.get(normalize_key(test_name))

    def has_grade(self, test_name: Any) -> bool:
        return self.get_grade(test_name) is not None

    # === data manipulators ===

    def add_grade(self, grade: Grade) -> None:
        """
        Adds or updates the grade for a test.

        Any existing grade whose test name matches case-insensitively is removed,
        and `grade` is appended to the end of the list.

        Args:
            grade (Grade): The grade to record.

        Raises:
            TypeError: If `grade` is None or not a `Grade`. The list is left unchanged.
        """
        if grade is None:
            raise TypeError("Invalid input. Grade cannot be None.")

        if not isinstance(grade, Grade):
            raise TypeError(
                f"Invalid input. Expected a Grade, got {type(grade).__name__}."
            )

        previous = self._remove_grade(grade.test_name)
        self._grades[grade.key] = grade

        if previous is None:
            logger.debug("Added grade %r", grade)
        else:
            logger.debug("Replaced grade %r with %r", previous, grade)

    def _remove_grade(self, test_name: str) -> Grade | None:
        return self._grades.pop(normalize_key(test_name), None)

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._grades)

    def __iter__(self) -> Iterator[Grade]:
        return iter(self.grades)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True

        if not isinstance(other, GradeList):
            return NotImplemented

        return self.grades == other.grades

    def __hash__(self) -> int:
        return hash(tuple(self._grades.values()))

    def __repr__(self) -> str:
        return f"GradeList({self.grades!r})"

    def __str__(self) -> str:
        return "\n".join(str(grade) for grade in self._grades.values()).strip()

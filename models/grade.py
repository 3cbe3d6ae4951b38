# models/grade.py

"""
Represents a single recorded grade for a named test, e.g. "Midterm: A-".

A `Grade` pairs a test name with a grade value. Both are validated and stripped
on construction, and neither can be changed afterwards, so a `Grade` can be
compared and hashed by value.

Test names identify an assessment case-insensitively: "Midterm" and "midterm"
refer to the same test. That identity is exposed through `key` and `matches()`;
equality itself compares the stored spelling and value exactly.
"""

from __future__ import annotations

from typing import Any

from core.utils import normalize_key


class Grade:

    def __init__(self, test_name: str, value: str):
        self._test_name: str = Grade.validate_text_input(test_name, "Test name")
        self._value: str = Grade.validate_text_input(value, "Grade value")

    # === properties ===

    @property
    def test_name(self) -> str:
        return self._test_name

    @property
    def value(self) -> str:
        return self._value

    @property
    def key(self) -> str:
        return normalize_key(self._test_name)

    def matches(self, test_name: Any) -> bool:
        if not isinstance(test_name, str):
            return False
        return self.key == normalize_key(test_name)

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "test_name": self._test_name,
            "value": self._value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Grade:
        return cls(
            test_name=data["test_name"],
            value=data["value"],
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True

        if not isinstance(other, Grade):
            return NotImplemented

        return (self._test_name, self._value) == (other._test_name, other._value)

    def __hash__(self) -> int:
        return hash((self._test_name, self._value))

    def __repr__(self) -> str:
        return f"Grade({self._test_name}, {self._value})"

    def __str__(self) -> str:
        return f"{self._test_name}: {self._value}"

    # === data validators ===

    @staticmethod
    def validate_text_input(text: Any, field_name: str) -> str:
        """
        Validates and normalizes a text field of a `Grade`.

        Accepts any input, and then:
            - Ensures it is a string.
            - Strips leading and trailing whitespace.
            - Ensures the result is not empty.

        Args:
            text (Any): The input value to validate.
            field_name (str): Human-readable field name used in error messages.

        Returns:
            The stripped string.

        Raises:
            TypeError: If the input is missing or not a string.
            ValueError: If the input is empty or only whitespace.
        """
        if not isinstance(text, str):
            raise TypeError(f"Invalid input. {field_name} must be a string.")

        text = text.strip()

        if not text:
            raise ValueError(f"Invalid input. {field_name} cannot be blank.")

        return text

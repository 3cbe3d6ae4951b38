# models/address_book.py

"""
The AddressBook model is the in-memory registry of all Student records.

Students are stored in a dictionary keyed by their unique ID. Each Student owns
its own GradeList, and the AddressBook exposes grade recording and lookup so
callers get a structured `Response` instead of handling model exceptions.

Provides functions for adding, removing, and finding Students, recording and
finding grades, and verifying unique values before adding.
"""

from __future__ import annotations

import logging

from core.response import ErrorCode, Response
from core.utils import generate_uuid, normalize_query
from models.grade import Grade
from models.student import Student

logger = logging.getLogger(__name__)


class AddressBook:

    def __init__(self):
        self._students: dict[str, Student] = {}

    # === properties ===

    @property
    def students(self) -> dict[str, Student]:
        return self._students

    # === data accessors ===

    # --- find student ---

    def find_student_by_uuid(self, uuid: str) -> Response:
        """
        Finds a `Student` object by UUID within `address_book.students`.

        Args:
            uuid (str): The unique ID of the `Student` object.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the `Student` object was found.
                    - False if no match is found.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no match is found.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no match is found
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (Student): The matched `Student` object.
                    - On failure:
                        - None

        Notes:
            - This method is read-only and does not raise.
        """
        student = self._students.get(uuid)

        if student is None:
            return Response.fail(
                detail=f"No matching student found for {uuid}.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        return Response.succeed(
            data={
                "record": student,
            },
        )

    def find_student_by_query(self, query: str) -> Response:
        """
        Generates a list of `Student` objects whose name or email contains the search query.

        Args:
            query (str): A search key to compare against student names and emails.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if at least one matching `Student` was found.
                    - False if no matches were found.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no matching record is found.
                    - `ErrorCode.MISSING_REQUIRED_FIELD` if the query is not a string.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no match is found
                    - 400 if the query is not a string
                - data (dict): Payload with the following keys:
                    - On success:
                        - "records" (list[Student]): Students whose full name or email contains the search query.
                    - On failure:
                        - None.

        Notes:
            - This method is read-only and does not raise.
            - The search query is normalized (leading and trailing whitespace stripped and case-folded) before searching.
        """
        if not isinstance(query, str):
            return Response.fail(
                detail=f"Missing required field: search query must be a string, got {type(query).__name__}.",
                error=ErrorCode.MISSING_REQUIRED_FIELD,
            )

        query = normalize_query(query)

        matching_students = [
            student
            for student in self._students.values()
            if query in normalize_query(student.full_name)
            or query in normalize_query(student.email)
        ]

        if not matching_students:
            return Response.fail(
                detail=f"No students found with names or emails matching '{query}'.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        return Response.succeed(
            data={
                "records": matching_students,
            },
        )

    # --- grade lookup ---

    def find_grade(self, student: Student, test_name: str) -> Response:
        """
        Finds the grade a `Student` received for a test, ignoring case in the test name.

        Args:
            student (Student): The student whose grades are searched.
            test_name (str): The name of the test.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student has a grade for the test.
                    - False otherwise.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no grade is recorded for the test.
                    - `ErrorCode.INTERNAL_ERROR` if `student` is not a usable record.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no grade is found
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (Grade): The matched `Grade` object.
                    - On failure:
                        - None

        Notes:
            - This method is read-only and does not raise.
            - The student does not need to be tracked by the address book.
        """
        try:
            grade = student.grade_for(test_name)

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        if grade is None:
            return Response.fail(
                detail=f"No grade recorded for '{test_name}' for {student.full_name}.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        return Response.succeed(
            data={
                "record": grade,
            },
        )

    # === data manipulators ===

    # --- student manipulation ---

    def add_student(self, student: Student) -> Response:
        """
        Adds a `Student` object to the `address_book.students` dictionary.

        Args:
            student (Student): The `Student` object to be added to the address book.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the `Student` object was successfully added.
                    - False if another student with the same email already exists or if unexpected errors occur.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.VALIDATION_FAILED` if the email is not unique.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The added `Student` object.
                    - On failure:
                        - None

        Notes:
            - This method mutates `AddressBook` state.
        """
        try:
            self.require_unique_student_email(student.email)

            self._students[student.id] = student

        except ValueError as e:
            return Response.fail(
                detail=f"Unique record validation failed: {e}",
                error=ErrorCode.VALIDATION_FAILED,
            )

        except Exception as e:
            logger.warning("Failed to add student %r: %s", student, e)
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            logger.debug("Added student %s", student.id)

            return Response.succeed(
                detail="Student successfully added to the address book.",
                data={
                    "record": student,
                },
            )

    def create_student(self, first_name: str, last_name: str, email: str) -> Response:
        """
        Creates a `Student` with a freshly generated ID and adds it to the address book.

        Returns:
            Response: Same contract as `add_student()`, plus:
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_FIELD_VALUE` if the email is malformed.
                    - `ErrorCode.MISSING_REQUIRED_FIELD` if the email is not a string.
        """
        try:
            email = Student.validate_email_input(email)

        except ValueError as e:
            return Response.fail(
                detail=f"Invalid field value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        except TypeError as e:
            return Response.fail(
                detail=f"Missing required field: {e}",
                error=ErrorCode.MISSING_REQUIRED_FIELD,
            )

        return self.add_student(Student(generate_uuid(), first_name, last_name, email))

    def remove_student(self, student: Student) -> Response:
        """
        Removes a `Student` object, and with it the student's grades, from the address book.

        Args:
            student (Student): The `Student` object to be removed.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was removed.
                    - False if the student is not in the address book.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if the student cannot be found.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the student cannot be found
                    - 400 for other failures (e.g., unexpected errors)
                - data (dict | None):
                    - Always None, this method does not return any payload.

        Notes:
            - This method mutates `AddressBook` state.
        """
        try:
            del self._students[student.id]

        except KeyError:
            return Response.fail(
                detail=f"No matching record could be found for deletion: {student}.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        except Exception as e:
            logger.warning("Failed to remove student %r: %s", student, e)
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            logger.debug("Removed student %s", student.id)

            return Response.succeed(
                detail="Student successfully removed from the address book.",
            )

    # --- grade manipulation ---

    def record_grade(self, student: Student, grade: Grade | None) -> Response:
        """
        Records a grade for a tracked `Student`, replacing any grade for the same test.

        Args:
            student (Student): The student being graded.
            grade (Grade | None): The grade to record.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the grade was recorded.
                    - False if the student is not tracked or the grade is missing.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if the student is not in the address book.
                    - `ErrorCode.MISSING_REQUIRED_FIELD` if `grade` is None or not a `Grade`.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the student cannot be found
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Grade): The recorded grade.
                        - "replaced" (Grade | None): The grade it replaced, if any.
                    - On failure:
                        - None

        Notes:
            - This method mutates the student's `GradeList`.
            - On failure the student's grades are left unchanged.
            - The student must be the same object the address book tracks, not a copy sharing its ID.
        """
        try:
            if self._students.get(student.id) is not student:
                return Response.fail(
                    detail=f"Student is not in the address book: {student}.",
                    error=ErrorCode.NOT_FOUND,
                    status_code=404,
                )

            previous = (
                student.grade_for(grade.test_name) if isinstance(grade, Grade) else None
            )
            student.record_grade(grade)

        except TypeError as e:
            return Response.fail(
                detail=f"Missing required field: {e}",
                error=ErrorCode.MISSING_REQUIRED_FIELD,
            )

        except Exception as e:
            logger.warning("Failed to record grade %r for %r: %s", grade, student, e)
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            return Response.succeed(
                detail="Grade successfully recorded.",
                data={
                    "record": grade,
                    "replaced": previous,
                },
            )

    # === data validators ===

    def require_unique_student_email(self, email: str) -> None:
        """
        Validates that no existing student shares the given email address.

        Args:
            email (str): The email address to validate for uniqueness.

        Raises:
            ValueError: If a student with the same normalized email already exists.
        """
        normalized = normalize_query(email)
        if any(normalize_query(s.email) == normalized for s in self._students.values()):
            raise ValueError(f"A student with the email '{email}' already exists.")

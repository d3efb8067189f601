# models/roster.py

"""
The Roster model is the central data object of the program and the "source of truth" for all student records.

Students are stored in a dictionary keyed by student ID, which keeps IDs unique, and in a list that is always
kept in roster order: total points descending, then last name, first name and ID ascending.

Provides functions for adding students, updating points for one round, listing the roster, writing it to a
plain text file and loading it back. Loading is all-or-nothing: the new roster is built off to the side and
only replaces the current content once every line of the file has been read successfully.
"""

from __future__ import annotations

import bisect
import logging
from typing import Iterable, Iterator

from core.parser import parse_line
from core.response import ErrorCode, InputError, Response
from core.validators import validate_record_input
from models.student import Student

logger = logging.getLogger(__name__)

# undecodable bytes in names survive a save/load round trip
FILE_ENCODING_ERRORS = "surrogateescape"


class Roster:

    def __init__(self):
        self._students: dict[str, Student] = {}
        self._order: list[Student] = []

    # === properties ===

    @property
    def is_empty(self) -> bool:
        return not self._order

    # === persistence and import ===

    def save(self, filename: str) -> Response:
        """
        Writes every student to a text file, one record line per student, in roster order.

        Args:
            filename (str): The target file path. Existing content is overwritten.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the roster was written to disk.
                    - False if the roster is empty or the file could not be written.
                - detail (str | None):
                    - On success, a confirmation message.
                    - On failure, a description of the error.
                - error (ErrorCode | None):
                    - `ErrorCode.EMPTY_ROSTER_WRITE` if there are no students; no file is created.
                    - `ErrorCode.FILE_OPEN_ERROR` if OSError raised.
                    - `ErrorCode.UNKNOWN` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "count" (int): The number of records written.

        Notes:
            - This method is read-only with respect to roster state.
            - The file is only opened once every record has been encoded, so a failed save leaves
              an existing file untouched.
            - Names that arrived as undecodable bytes are written back as the same bytes.
            - A stored total above 999 is written as is, but `load()` rejects such a line as
              `ErrorCode.FILE_CORRUPT`, because every points field, the total included, must fit a
              single round.
        """
        if self.is_empty:
            return Response.fail(
                detail="Refusing to write an empty roster.",
                error=ErrorCode.EMPTY_ROSTER_WRITE,
            )

        try:
            # encode everything before opening, so a failure never truncates the file
            content = "".join(f"{s.to_record()}\n" for s in self._order).encode(
                "utf-8", errors=FILE_ENCODING_ERRORS
            )

            with open(filename, "wb") as f:
                f.write(content)

        except UnicodeEncodeError as e:
            return Response.fail(
                detail=f"Roster contains text that cannot be written: {e}",
                error=ErrorCode.UNKNOWN,
            )

        except OSError as e:
            logger.info("Failed to write roster to %s: %s", filename, e)
            return Response.fail(
                detail=f"Failed to write data to disk: {e}",
                error=ErrorCode.FILE_OPEN_ERROR,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.UNKNOWN,
            )

        else:
            logger.info("Wrote %d students to %s", len(self._order), filename)

            return Response.succeed(
                detail="Roster successfully saved to disk.",
                data={
                    "count": len(self._order),
                },
            )

    def load(self, filename: str) -> Response:
        """
        Replaces the roster with the students stored in a text file.

        Args:
            filename (str): The path of a file previously written by `save()`.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if every line was read and the roster was replaced.
                    - False if the file could not be read or any line is invalid.
                - detail (str | None):
                    - On success, a confirmation message.
                    - On failure, a description of the error, including the offending line number.
                - error (ErrorCode | None):
                    - `ErrorCode.FILE_OPEN_ERROR` if the file cannot be opened or read.
                    - `ErrorCode.FILE_CORRUPT` for a malformed line or a duplicate ID.
                    - `ErrorCode.UNKNOWN` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "count" (int): The number of students loaded.

        Notes:
            - This method mutates roster state only on success.
            - On failure the current roster is left exactly as it was.
            - An empty file is valid and yields an empty roster.
            - Bytes that are not valid UTF-8 are kept in names as-is; in an ID they fail the
              alphanumeric check and make the file corrupt.
        """
        scratch = Roster()

        try:
            with open(
                filename, "r", encoding="utf-8", errors=FILE_ENCODING_ERRORS
            ) as f:
                for line_number, line in enumerate(f, 1):
                    scratch._import_record_line(line, line_number)

        except InputError as e:
            logger.info("Rejected roster file %s: %s", filename, e)
            return Response.from_input_error(e)

        except OSError as e:
            logger.info("Failed to read roster from %s: %s", filename, e)
            return Response.fail(
                detail=f"Failed to read data from disk: {e}",
                error=ErrorCode.FILE_OPEN_ERROR,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.UNKNOWN,
            )

        else:
            self.replace_all(scratch.list_students())
            logger.info("Loaded %d students from %s", len(self), filename)

            return Response.succeed(
                detail="Roster successfully loaded from disk.",
                data={
                    "count": len(self),
                },
            )

    def _import_record_line(self, line: str, line_number: int) -> None:
        """
        Parses, validates and inserts one record line, failing fast on error.

        Raises:
            InputError: Always with `ErrorCode.FILE_CORRUPT`, including for duplicate IDs.
        """
        try:
            parsed = parse_line(line, interactive=False)
            validate_record_input(parsed)

        except InputError as e:
            raise InputError(ErrorCode.FILE_CORRUPT, f"Line {line_number}: {e}") from None

        student = Student.from_record(parsed.arguments)

        if student.id in self._students:
            raise InputError(
                ErrorCode.FILE_CORRUPT,
                f"Line {line_number}: duplicate student ID '{student.id}'.",
            )

        self._insert(student)

    # === data accessors ===

    def list_students(self) -> list[Student]:
        return list(self._order)

    def find_student_by_id(self, student_id: str) -> Response:
        """
        Finds a `Student` by ID.

        Args:
            student_id (str): The unique ID of the student.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the `Student` was found.
                    - False if no match is found.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                    - On success, None.
                - error (ErrorCode | None):
                    - `ErrorCode.STUDENT_NOT_FOUND` if no match is found.
                - status_code (int | None):
                    - 200 on success
                    - 404 if not found
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (Student): The matched `Student`.

        Notes:
            - This method is read-only and does not raise.
        """
        student = self._students.get(student_id)

        if student is None:
            return Response.fail(
                detail=f"No student with ID {student_id}.",
                error=ErrorCode.STUDENT_NOT_FOUND,
                status_code=404,
            )

        return Response.succeed(
            data={
                "record": student,
            },
        )

    # === data manipulators ===

    def _insert(self, student: Student) -> None:
        """
        Places a student into the ID index and at its sorted position in the roster order.

        Notes:
            - The caller guarantees the ID is not already present.
        """
        self._students[student.id] = student
        bisect.insort(self._order, student, key=lambda s: s.sort_key)

    def _remove(self, student: Student) -> None:
        del self._students[student.id]
        # sort keys are unique per student, so bisect lands on this exact entry
        index = bisect.bisect_left(
            self._order, student.sort_key, key=lambda s: s.sort_key
        )
        del self._order[index]

    def replace_all(self, students: Iterable[Student]) -> None:
        """
        Replaces the entire content of the roster.

        Args:
            students (Iterable[Student]): The new students, in any order.

        Raises:
            ValueError: If two students share an ID; the roster is left unchanged.
        """
        new_students: dict[str, Student] = {}
        for student in students:
            if student.id in new_students:
                raise ValueError(f"Duplicate student ID '{student.id}'.")
            new_students[student.id] = student

        self._students = new_students
        self._order = sorted(new_students.values(), key=lambda s: s.sort_key)

    def add_student(self, student_id: str, last_name: str, first_name: str) -> Response:
        """
        Adds a new student with zero points in every round.

        Args:
            student_id (str): The unique ID of the student, already validated.
            last_name (str): The student's last name.
            first_name (str): The student's first name.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was added.
                    - False if the ID is already in use.
                - detail (str | None):
                    - On success, a simple confirmation message.
                    - On failure, a description of the error.
                - error (ErrorCode | None):
                    - `ErrorCode.DUPLICATE_ID` if a student with the same ID exists.
                    - `ErrorCode.UNKNOWN` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The added `Student`.

        Notes:
            - This method mutates roster state.
        """
        if student_id in self._students:
            return Response.fail(
                detail=f"A student with the ID '{student_id}' already exists.",
                error=ErrorCode.DUPLICATE_ID,
            )

        try:
            student = Student(student_id, last_name, first_name)
            self._insert(student)

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.UNKNOWN,
            )

        else:
            logger.info("Added student %s", student_id)

            return Response.succeed(
                detail="Student successfully added to the roster.",
                data={
                    "record": student,
                },
            )

    def update_student_points(
        self, student_id: str, round_number: int, points: int
    ) -> Response:
        """
        Sets a student's points for one round and moves the student to its new position.

        Args:
            student_id (str): The ID of the student to update.
            round_number (int): The round to update, already validated to 1..6.
            points (int): The new points value, already validated to 0..999.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the points were updated.
                    - False if the roster is empty or the student cannot be found.
                - detail (str | None):
                    - On success, a simple confirmation message.
                    - On failure, a description of the error.
                - error (ErrorCode | None):
                    - `ErrorCode.UPDATE_ON_EMPTY_ROSTER` if the roster has no students.
                    - `ErrorCode.STUDENT_NOT_FOUND` if no student has the given ID.
                    - `ErrorCode.UNKNOWN` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the student cannot be found
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The updated `Student`.

        Notes:
            - This method mutates roster state.
            - The previous `Student` object is replaced, not modified.
        """
        if self.is_empty:
            return Response.fail(
                detail="Cannot update points, the roster is empty.",
                error=ErrorCode.UPDATE_ON_EMPTY_ROSTER,
            )

        find_response = self.find_student_by_id(student_id)

        if not find_response.success:
            return find_response

        current: Student = find_response.data["record"]

        try:
            updated = current.with_round_points(round_number, points)
            self._remove(current)
            self._insert(updated)

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.UNKNOWN,
            )

        else:
            logger.info(
                "Set round %d of student %s to %d points", round_number, student_id, points
            )

            return Response.succeed(
                detail="Student points successfully updated.",
                data={
                    "record": updated,
                },
            )

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[Student]:
        return iter(list(self._order))

    def __contains__(self, student_id: object) -> bool:
        return student_id in self._students

    def __repr__(self) -> str:
        return f"Roster({len(self)} students)"

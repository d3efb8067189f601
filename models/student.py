# models/student.py

"""
Represents a student on the roster together with the points earned in each exercise round.

Stores the student's unique ID, last and first name, and one points value per round.
The total is always derived from the rounds and is never stored on the object.

Includes functionality for:
- Producing an updated copy with new points for one round
- Providing the sort key that orders the roster
- Serializing to and from the space-separated record line used by roster files

A `Student` is not modified once created. `with_round_points()` returns a new instance, and the
`Roster` swaps the old one out, so a previously listed student never changes underneath its caller.
"""

from __future__ import annotations

import logging

import core.formatters as formatters
from core.validators import ROUNDS

logger = logging.getLogger(__name__)


class Student:

    def __init__(
        self,
        id: str,
        last_name: str,
        first_name: str,
        points: list[int] | tuple[int, ...] | None = None,
    ):
        if points is None:
            points = [0] * ROUNDS
        if len(points) != ROUNDS:
            raise ValueError(f"Expected {ROUNDS} round values, got {len(points)}.")

        self._id: str = id
        self._last_name: str = last_name
        self._first_name: str = first_name
        self._points: tuple[int, ...] = tuple(points)

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    @property
    def points(self) -> tuple[int, ...]:
        return self._points

    @property
    def total_points(self) -> int:
        return sum(self._points)

    @property
    def sort_key(self) -> tuple[int, str, str, str]:
        """
        Orders students by total points (highest first), then last name, first name and ID.

        Names and IDs compare by code point, which matches byte-wise comparison of their UTF-8 encoding.
        """
        return (-self.total_points, self._last_name, self._first_name, self._id)

    def points_for_round(self, round_number: int) -> int:
        return self._points[round_number - 1]

    def with_round_points(self, round_number: int, points: int) -> Student:
        updated = list(self._points)
        updated[round_number - 1] = points
        return Student(self._id, self._last_name, self._first_name, updated)

    # === persistence and import ===

    def to_record(self) -> str:
        return formatters.format_record_line(
            self._id, self._last_name, self._first_name, self._points
        )

    @classmethod
    def from_record(cls, fields: list[str]) -> Student:
        """
        Builds a `Student` from the ten fields of a record line.

        Args:
            fields (list[str]): `<id> <last_name> <first_name> <r1> ... <r6> <total>`, already validated.

        Returns:
            The deserialized `Student`.

        Raises:
            ValueError: If the field count is wrong or a points field is not an integer.

        Notes:
            - The stored total is not trusted. It is recomputed from the rounds, and a mismatch is
              only logged.
        """
        if len(fields) != ROUNDS + 4:
            raise ValueError(f"Expected {ROUNDS + 4} fields, got {len(fields)}.")

        student = cls(
            id=fields[0],
            last_name=fields[1],
            first_name=fields[2],
            points=[int(p) for p in fields[3 : 3 + ROUNDS]],
        )

        stored_total = int(fields[3 + ROUNDS])
        if stored_total != student.total_points:
            logger.warning(
                "Stored total %d for student %s does not match computed total %d",
                stored_total,
                student.id,
                student.total_points,
            )

        return student

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return (
            self._id == other._id
            and self._last_name == other._last_name
            and self._first_name == other._first_name
            and self._points == other._points
        )

    def __hash__(self) -> int:
        return hash((self._id, self._last_name, self._first_name, self._points))

    def __repr__(self) -> str:
        return f"Student({self._id}, {self._last_name}, {self._first_name}, {list(self._points)})"

    def __str__(self) -> str:
        return f"STUDENT: {self.full_name} - (ID: {self._id}, total: {self.total_points})"

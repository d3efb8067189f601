# core/response.py

from __future__ import annotations

from enum import Enum

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class ErrorCode(Enum):
    """
    Every failure the roster manager can report.

    Each member carries the numeric code printed in the outcome line and a human-readable message.
    Members compare by name, so two members may never share a code.
    """

    # === Internal Faults ===
    UNKNOWN = (-1, "Ran into an unknown error.")
    CRITICAL = (-2, "Critical error, exiting...")
    MEMORY_ALLOCATION_FAILED = (-3, "Allocation of dynamic memory failed.")

    # === Malformed Input ===
    NON_VIABLE_INPUT = (-4, "Input could not be parsed for any arguments.")
    NO_COMMAND_CHARACTER = (-6, "Could not find a valid command character.")
    EMPTY_INPUT = (-20, "Input is empty.")
    TOO_MANY_ARGUMENTS = (-21, "Too many arguments for the given command type.")
    TOO_FEW_ARGUMENTS = (-22, "Too few arguments for the given command type.")
    INPUT_TOO_LONG = (-23, "Input line exceeds the maximum length.")

    # === Semantic Conflicts ===
    UPDATE_ON_EMPTY_ROSTER = (-7, "Attempting to update points on an empty list.")
    STUDENT_NOT_FOUND = (-8, "Student could not be found.")
    DUPLICATE_ID = (-9, "Student ID is already found in the list.")

    # === Field Validation Failures ===
    ROUND_NOT_INTEGER = (-30, "Round number is not an integer.")
    ROUND_OUT_OF_BOUNDS = (-31, "Round number is out of bounds.")
    POINTS_NOT_INTEGER = (-40, "Points is not an integer.")
    POINTS_OUT_OF_BOUNDS = (-41, "Points is out of bounds.")
    ID_TOO_LONG = (-60, "Given student ID is too long.")
    ID_EMPTY = (-61, "Given student ID is empty.")
    ID_NOT_ALPHANUMERIC = (
        -62,
        "Given student ID contains symbols other than letters and numbers.",
    )
    NOT_AN_INTEGER = (INT_MIN, "Conversion of str to int not possible.")
    INTEGER_OUT_OF_RANGE = (INT_MIN + 1, "Given number out of bounds for int type.")
    NEGATIVE_NOT_ALLOWED = (
        INT_MIN + 2,
        "Given integer is negative when only positive integers are allowed.",
    )

    # === File Persistence ===
    EMPTY_ROSTER_WRITE = (-51, "Attempting to write an empty list to file.")
    FILE_OPEN_ERROR = (-52, "File could not be opened.")
    FILE_CORRUPT = (-53, "File corruption.")
    FILENAME_INVALID = (-54, "File name is invalid.")
    FILENAME_TOO_LONG = (-55, "File name is too long.")

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message


class InputError(ValueError):
    """
    Raised by parsers and validators when a piece of input is rejected.

    Attributes:
        error (ErrorCode): The machine-readable reason for the rejection.
    """

    def __init__(self, error: ErrorCode, detail: str | None = None):
        super().__init__(detail or error.message)
        self.error = error


class Response:
    """
    Standard Response object for Roster manipulator and lookup methods.

    Attributes:
        success (bool): Indicates whether the operation succeeded.
        detail (str | None): Optional human-readable explanation.
        error (ErrorCode | None): Optional machine-readable error identifier.
        status_code (int | None): Optional HTTP-style response code.
        data (dict): Optional payload, varies by operation.
    """

    def __init__(
        self,
        success: bool,
        detail: str | None = None,
        error: ErrorCode | None = None,
        status_code: int | None = None,
        data: dict | None = None,
    ):
        self._success = success
        self._detail = detail
        self._error = error
        self._status_code = status_code
        self._data = data or {}

    # === properties ===

    @property
    def success(self) -> bool:
        return self._success

    @property
    def detail(self) -> str | None:
        return self._detail

    @property
    def error(self) -> ErrorCode | None:
        return self._error

    @property
    def status_code(self) -> int | None:
        return self._status_code

    @property
    def data(self) -> dict:
        return self._data or {}

    # === public classmethods ===

    @classmethod
    def succeed(
        cls,
        detail: str | None = None,
        status_code: int | None = 200,
        data: dict | None = None,
    ) -> Response:
        return cls(
            success=True,
            detail=detail,
            error=None,
            status_code=status_code,
            data=data,
        )

    @classmethod
    def fail(
        cls,
        detail: str | None = None,
        error: ErrorCode | None = None,
        status_code: int | None = 400,
        data: dict | None = None,
    ) -> Response:
        return cls(
            success=False,
            detail=detail,
            error=error,
            status_code=status_code,
            data=data,
        )

    @classmethod
    def from_input_error(cls, e: InputError, status_code: int | None = 400) -> Response:
        return cls.fail(detail=str(e), error=e.error, status_code=status_code)

    # === dunder methods ===

    def __str__(self) -> str:
        if self.success:
            return f"Success: {self.detail or ''}"
        else:
            error_str = self.error.name if self.error else ""
            return f"Error: {error_str}"

# core/validators.py

"""
Pure validation functions for everything a user or a roster file can hand to the program.

Each validator either returns the converted value or raises `InputError` carrying the `ErrorCode`
that describes the rejection. Nothing in this module touches roster state, so every check can run
before any mutation takes place.

Includes functionality for:
- Converting and bounding integers, round numbers and point values
- Checking student ID shape and filename legality
- Checking a parsed command or file record as a whole
"""

from __future__ import annotations

import re

from core.parser import Command, ParsedCommand
from core.response import INT_MAX, INT_MIN, ErrorCode, InputError

ID_MAX_LENGTH = 6
ROUNDS = 6
MAX_POINTS = 999
FILENAME_MAX_LENGTH = 255
INVALID_FILENAME_CHARS = '<>:"/\\|?*'
RECORD_FIELDS = 10

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


# === field validators ===


def validate_integer(text: str, allow_negative: bool = False) -> int:
    """
    Converts a string into a base-10 integer that fits a 32-bit signed int.

    Args:
        text (str): The string to convert. The whole string must be numeric.
        allow_negative (bool, optional): Whether negative values are accepted. Defaults to False.

    Returns:
        The converted integer.

    Raises:
        InputError:
            - `ErrorCode.NOT_AN_INTEGER` if the string is empty or contains non-numeric characters.
            - `ErrorCode.INTEGER_OUT_OF_RANGE` if the value does not fit a 32-bit signed int.
            - `ErrorCode.NEGATIVE_NOT_ALLOWED` if the value is negative and `allow_negative` is False.
    """
    if not _INTEGER_PATTERN.fullmatch(text):
        raise InputError(ErrorCode.NOT_AN_INTEGER, f"'{text}' is not an integer.")

    value = int(text)

    if value < INT_MIN or value > INT_MAX:
        raise InputError(
            ErrorCode.INTEGER_OUT_OF_RANGE, f"'{text}' does not fit a 32-bit integer."
        )

    if not allow_negative and value < 0:
        raise InputError(ErrorCode.NEGATIVE_NOT_ALLOWED, f"'{text}' is negative.")

    return value


def validate_round(text: str) -> int:
    """
    Converts a round number and checks that it names one of the exercise rounds.

    Args:
        text (str): The round number as typed by the user.

    Returns:
        The round number, between 1 and `ROUNDS` (inclusive).

    Raises:
        InputError:
            - `ErrorCode.ROUND_NOT_INTEGER` if the text is not an integer.
            - `ErrorCode.ROUND_OUT_OF_BOUNDS` if the round is outside 1..`ROUNDS`.
            - Range and sign errors from `validate_integer()` are passed through unchanged.
    """
    try:
        value = validate_integer(text)

    except InputError as e:
        if e.error is ErrorCode.NOT_AN_INTEGER:
            raise InputError(ErrorCode.ROUND_NOT_INTEGER, str(e)) from None
        raise

    if value < 1 or value > ROUNDS:
        raise InputError(
            ErrorCode.ROUND_OUT_OF_BOUNDS,
            f"Round {value} is not between 1 and {ROUNDS}.",
        )

    return value


def validate_points(text: str) -> int:
    """
    Converts a points value and checks that it fits a single round.

    Args:
        text (str): The points value as typed by the user or read from a file.

    Returns:
        The points value, between 0 and `MAX_POINTS` (inclusive).

    Raises:
        InputError:
            - `ErrorCode.POINTS_NOT_INTEGER` if the text is not an integer.
            - `ErrorCode.POINTS_OUT_OF_BOUNDS` if the value exceeds `MAX_POINTS`.
            - Range and sign errors from `validate_integer()` are passed through unchanged.
    """
    try:
        value = validate_integer(text)

    except InputError as e:
        if e.error is ErrorCode.NOT_AN_INTEGER:
            raise InputError(ErrorCode.POINTS_NOT_INTEGER, str(e)) from None
        raise

    if value < 0 or value > MAX_POINTS:
        raise InputError(
            ErrorCode.POINTS_OUT_OF_BOUNDS,
            f"{value} points is not between 0 and {MAX_POINTS}.",
        )

    return value


def validate_id(text: str) -> str:
    """
    Checks that a student ID is 1 to `ID_MAX_LENGTH` ASCII letters or digits.

    Raises:
        InputError: `ErrorCode.ID_EMPTY`, `ErrorCode.ID_TOO_LONG` or `ErrorCode.ID_NOT_ALPHANUMERIC`.
    """
    if len(text) == 0:
        raise InputError(ErrorCode.ID_EMPTY)

    if len(text) > ID_MAX_LENGTH:
        raise InputError(
            ErrorCode.ID_TOO_LONG,
            f"Student ID '{text}' is longer than {ID_MAX_LENGTH} characters.",
        )

    if not (text.isascii() and text.isalnum()):
        raise InputError(
            ErrorCode.ID_NOT_ALPHANUMERIC,
            f"Student ID '{text}' may only contain letters and numbers.",
        )

    return text


def validate_filename(text: str) -> str:
    """
    Checks that a filename is portable: no reserved characters, not too long, no trailing period.

    Args:
        text (str): The filename given to a WRITE or LOAD command.

    Returns:
        The unchanged filename.

    Raises:
        InputError:
            - `ErrorCode.FILENAME_INVALID` if the name contains any of `<>:"/\\|?*`, is empty, or ends in a period.
            - `ErrorCode.FILENAME_TOO_LONG` if the name is longer than `FILENAME_MAX_LENGTH`.

    Notes:
        - Checks run in the order listed, so a long name with a reserved character is reported as invalid.
    """
    bad_chars = [c for c in text if c in INVALID_FILENAME_CHARS]
    if bad_chars:
        raise InputError(
            ErrorCode.FILENAME_INVALID,
            f"File name '{text}' contains reserved character '{bad_chars[0]}'.",
        )

    if len(text) > FILENAME_MAX_LENGTH:
        raise InputError(
            ErrorCode.FILENAME_TOO_LONG,
            f"File name is longer than {FILENAME_MAX_LENGTH} characters.",
        )

    if not text or text.endswith("."):
        raise InputError(
            ErrorCode.FILENAME_INVALID, f"File name '{text}' may not end in a period."
        )

    return text


# === input validators ===


def validate_command_input(parsed: ParsedCommand) -> None:
    """
    Checks a parsed user command for the right argument count and valid fields.

    Argument counts are checked before any field, so `A 1` reports too few arguments
    rather than a bad ID.

    Args:
        parsed (ParsedCommand): A command parsed in interactive mode.

    Raises:
        InputError:
            - `ErrorCode.TOO_MANY_ARGUMENTS` / `ErrorCode.TOO_FEW_ARGUMENTS` on a count mismatch.
            - Any field error raised by `validate_id()`, `validate_round()`, `validate_points()`
              or `validate_filename()`.
            - `ErrorCode.UNKNOWN` if the command carries no command character.
    """
    command = parsed.command
    if command is None:
        raise InputError(ErrorCode.UNKNOWN, "Record lines are not user commands.")

    if parsed.arg_count > command.arg_count:
        raise InputError(
            ErrorCode.TOO_MANY_ARGUMENTS,
            f"{command.name} takes {command.arg_count} arguments, got {parsed.arg_count}.",
        )

    if parsed.arg_count < command.arg_count:
        raise InputError(
            ErrorCode.TOO_FEW_ARGUMENTS,
            f"{command.name} takes {command.arg_count} arguments, got {parsed.arg_count}.",
        )

    args = parsed.arguments

    match command:
        case Command.ADD:
            validate_id(args[1])
        case Command.UPDATE:
            validate_id(args[1])
            validate_round(args[2])
            validate_points(args[3])
        case Command.WRITE | Command.LOAD:
            validate_filename(args[1])
        case _:
            pass


def validate_record_input(parsed: ParsedCommand) -> None:
    """
    Checks a line read from a roster file.

    Args:
        parsed (ParsedCommand): A line parsed in file mode.

    Raises:
        InputError: Always `ErrorCode.FILE_CORRUPT`, with the underlying problem in the message.

    Notes:
        - The stored total in the last field only has to be a valid points value; it is not
          compared against the rounds here.
    """
    if parsed.arg_count != RECORD_FIELDS:
        raise InputError(
            ErrorCode.FILE_CORRUPT,
            f"Expected {RECORD_FIELDS} fields, found {parsed.arg_count}.",
        )

    try:
        validate_id(parsed.arguments[0])
        for field in parsed.arguments[3:RECORD_FIELDS]:
            validate_points(field)

    except InputError as e:
        raise InputError(ErrorCode.FILE_CORRUPT, f"Invalid record field: {e}") from None

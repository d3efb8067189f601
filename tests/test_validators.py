# tests/test_validators.py

import pytest

from core.parser import parse_line
from core.response import ErrorCode, InputError
from core.validators import (
    validate_command_input,
    validate_filename,
    validate_id,
    validate_integer,
    validate_points,
    validate_record_input,
    validate_round,
)


def error_of(fn, *args) -> ErrorCode:
    with pytest.raises(InputError) as excinfo:
        fn(*args)
    return excinfo.value.error


# === field validators ===


def test_validate_integer():
    assert validate_integer("42") == 42
    assert validate_integer("+7") == 7
    assert validate_integer("-5", True) == -5
    assert validate_integer("2147483647") == 2147483647
    assert validate_integer("-2147483648", True) == -2147483648


def test_validate_integer_rejects_non_numbers():
    assert error_of(validate_integer, "") is ErrorCode.NOT_AN_INTEGER
    assert error_of(validate_integer, "12a") is ErrorCode.NOT_AN_INTEGER
    assert error_of(validate_integer, "1.5") is ErrorCode.NOT_AN_INTEGER
    assert error_of(validate_integer, "1_000") is ErrorCode.NOT_AN_INTEGER
    assert error_of(validate_integer, "-") is ErrorCode.NOT_AN_INTEGER


def test_validate_integer_range_and_sign():
    assert error_of(validate_integer, "2147483648") is ErrorCode.INTEGER_OUT_OF_RANGE
    assert (
        error_of(validate_integer, "-2147483649", True)
        is ErrorCode.INTEGER_OUT_OF_RANGE
    )
    assert error_of(validate_integer, "-1", False) is ErrorCode.NEGATIVE_NOT_ALLOWED


def test_validate_round():
    assert validate_round("1") == 1
    assert validate_round("6") == 6
    assert error_of(validate_round, "0") is ErrorCode.ROUND_OUT_OF_BOUNDS
    assert error_of(validate_round, "7") is ErrorCode.ROUND_OUT_OF_BOUNDS
    assert error_of(validate_round, "two") is ErrorCode.ROUND_NOT_INTEGER


def test_validate_round_passes_integer_errors_through():
    assert error_of(validate_round, "-1") is ErrorCode.NEGATIVE_NOT_ALLOWED
    assert error_of(validate_round, "99999999999") is ErrorCode.INTEGER_OUT_OF_RANGE


def test_validate_points():
    assert validate_points("0") == 0
    assert validate_points("999") == 999
    assert error_of(validate_points, "1000") is ErrorCode.POINTS_OUT_OF_BOUNDS
    assert error_of(validate_points, "ten") is ErrorCode.POINTS_NOT_INTEGER
    assert error_of(validate_points, "-3") is ErrorCode.NEGATIVE_NOT_ALLOWED


def test_validate_id():
    assert validate_id("A1") == "A1"
    assert validate_id("abc123") == "abc123"
    assert error_of(validate_id, "") is ErrorCode.ID_EMPTY
    assert error_of(validate_id, "abc1234") is ErrorCode.ID_TOO_LONG
    assert error_of(validate_id, "a-1") is ErrorCode.ID_NOT_ALPHANUMERIC
    assert error_of(validate_id, "äb") is ErrorCode.ID_NOT_ALPHANUMERIC


def test_validate_filename():
    assert validate_filename("roster.txt") == "roster.txt"
    assert error_of(validate_filename, "a/b.txt") is ErrorCode.FILENAME_INVALID
    assert error_of(validate_filename, "report.") is ErrorCode.FILENAME_INVALID
    assert error_of(validate_filename, "what?") is ErrorCode.FILENAME_INVALID
    assert error_of(validate_filename, "") is ErrorCode.FILENAME_INVALID
    assert error_of(validate_filename, "x" * 256) is ErrorCode.FILENAME_TOO_LONG
    assert validate_filename("x" * 255) == "x" * 255


def test_reserved_character_checked_before_length():
    assert error_of(validate_filename, "x" * 300 + "|") is ErrorCode.FILENAME_INVALID


# === input validators ===


def test_validate_command_input_argument_counts():
    assert (
        error_of(validate_command_input, parse_line("L extra\n"))
        is ErrorCode.TOO_MANY_ARGUMENTS
    )
    assert (
        error_of(validate_command_input, parse_line("A 1 Doe\n"))
        is ErrorCode.TOO_FEW_ARGUMENTS
    )
    assert (
        error_of(validate_command_input, parse_line("W\n"))
        is ErrorCode.TOO_FEW_ARGUMENTS
    )
    assert (
        error_of(validate_command_input, parse_line("Q now\n"))
        is ErrorCode.TOO_MANY_ARGUMENTS
    )


def test_argument_count_checked_before_fields():
    assert (
        error_of(validate_command_input, parse_line("A bad-id Doe\n"))
        is ErrorCode.TOO_FEW_ARGUMENTS
    )


def test_validate_command_input_fields():
    assert (
        error_of(validate_command_input, parse_line("A bad-id Doe Jane\n"))
        is ErrorCode.ID_NOT_ALPHANUMERIC
    )
    assert (
        error_of(validate_command_input, parse_line("U A1 7 10\n"))
        is ErrorCode.ROUND_OUT_OF_BOUNDS
    )
    assert (
        error_of(validate_command_input, parse_line("U A1 1 1000\n"))
        is ErrorCode.POINTS_OUT_OF_BOUNDS
    )
    assert (
        error_of(validate_command_input, parse_line("O report.\n"))
        is ErrorCode.FILENAME_INVALID
    )

    validate_command_input(parse_line("A A1 Doe Jane\n"))
    validate_command_input(parse_line("U A1 6 999\n"))
    validate_command_input(parse_line("W roster.txt\n"))
    validate_command_input(parse_line("L\n"))


def test_update_validates_id_before_round():
    assert (
        error_of(validate_command_input, parse_line("U toolong1 9 9999\n"))
        is ErrorCode.ID_TOO_LONG
    )


def test_validate_record_input():
    validate_record_input(
        parse_line("A1 Doe Jane 1 2 3 4 5 6 21\n", interactive=False)
    )


@pytest.mark.parametrize(
    "line",
    [
        "A1 Doe Jane 1 2 3 4 5 6\n",
        "A1 Doe Jane 1 2 3 4 5 6 21 extra\n",
        "A-1 Doe Jane 1 2 3 4 5 6 21\n",
        "A1 Doe Jane 1 2 3 4 5 x 21\n",
        "A1 Doe Jane 1 2 3 4 5 6 1000\n",
    ],
)
def test_invalid_records_are_corrupt(line):
    parsed = parse_line(line, interactive=False)
    assert error_of(validate_record_input, parsed) is ErrorCode.FILE_CORRUPT

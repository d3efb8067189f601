# core/formatters.py

# all pure text helpers for the outcome channel and the record format
# must never import from models!

from typing import Iterable

from core.response import ErrorCode

SUCCESS_LINE = "SUCCESS"


def format_record_line(
    student_id: str, last_name: str, first_name: str, points: Iterable[int]
) -> str:
    points = list(points)
    fields = [student_id, last_name, first_name, *map(str, points), str(sum(points))]
    return " ".join(fields)


def format_error_line(error: ErrorCode) -> str:
    return f"ERROR ({error.code}) {error.name}: {error.message}"


def format_invalid_command(char: str) -> str:
    return f"Invalid command {char}"

# cli/helpers.py

"""
Helper functions for printing command outcomes in the roster CLI.

This module provides utilities for:
- Displaying lists of results
- Displaying the outcome of a `Response` as a `SUCCESS` or `ERROR` line
- Displaying the soft outcome for an unknown command character

Everything here writes to standard output, which is the program's outcome channel.
"""

from enum import Enum
from typing import Any, Callable, Iterable

import core.formatters as formatters
from core.response import ErrorCode, Response


class LoopSignal(Enum):
    CONTINUE = "CONTINUE"
    QUIT = "QUIT"


# === display methods ===


def display_results(
    results: Iterable[Any],
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints a sequence of results to the console, one per line.

    Args:
        results (Iterable[Any]): A sequence of results to display.
        formatter (Callable[[Any], str], optional): A function to convert each result to a display string. Defaults to str().
    """
    for result in results:
        print(formatter(result))


def display_success() -> None:
    print(formatters.SUCCESS_LINE)


def display_error(error: ErrorCode) -> None:
    print(formatters.format_error_line(error))


def display_response(response: Response) -> None:
    """
    Prints `SUCCESS` for a successful `Response`, otherwise its formatted error line.

    Notes:
        - A failed response without an error code is reported as `ErrorCode.UNKNOWN`.
    """
    if response.success:
        display_success()
    else:
        display_error(response.error or ErrorCode.UNKNOWN)


def display_invalid_command(char: str) -> None:
    print(formatters.format_invalid_command(char))

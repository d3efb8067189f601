# cli/dispatcher.py

"""
Maps parsed user commands onto `Roster` operations and reports the outcome.

Every input line is handled in a single step: parse, validate, run, print. All validation happens
before the roster is touched, so a command either succeeds completely or leaves the roster as it was.
"""

import logging
from typing import Callable

import cli.helpers as helpers
from cli.helpers import LoopSignal
from core.parser import Command, ParsedCommand, UnknownCommand, parse_line
from core.response import InputError, Response
from core.validators import validate_command_input, validate_points, validate_round
from models.roster import Roster
from models.student import Student

logger = logging.getLogger(__name__)


def execute_line(line: str, roster: Roster) -> LoopSignal:
    """
    Parses and runs one line of user input, printing its outcome.

    Args:
        line (str): The raw line, as read from the input stream.
        roster (Roster): The live roster the command operates on.

    Returns:
        LoopSignal.QUIT if the line was a successful QUIT command.
        LoopSignal.CONTINUE otherwise, including after any error.

    Notes:
        - Prints exactly one outcome line: `SUCCESS`, `ERROR (...) ...`, or `Invalid command X`.
          LIST prints the student lines before its `SUCCESS`.
    """
    try:
        parsed = parse_line(line, interactive=True)

    except InputError as e:
        logger.info("Rejected input %r: %s", line, e)
        helpers.display_error(e.error)
        return LoopSignal.CONTINUE

    if isinstance(parsed, UnknownCommand):
        logger.info("Unknown command character %r", parsed.char)
        helpers.display_invalid_command(parsed.char)
        return LoopSignal.CONTINUE

    response = run_command(parsed, roster)
    helpers.display_response(response)

    if not response.success:
        logger.info("%s failed: %s", parsed.command, response.detail)
        return LoopSignal.CONTINUE

    return LoopSignal.QUIT if response.data.get("quit") else LoopSignal.CONTINUE


def run_command(parsed: ParsedCommand, roster: Roster) -> Response:
    """
    Validates a parsed command and runs it against the roster.

    Args:
        parsed (ParsedCommand): A command parsed in interactive mode.
        roster (Roster): The live roster.

    Returns:
        Response: The validation failure, or the `Response` of the command handler.
    """
    try:
        validate_command_input(parsed)

    except InputError as e:
        return Response.from_input_error(e)

    handler = COMMAND_HANDLERS[parsed.command]
    return handler(parsed.arguments, roster)


# === command handlers ===


def add_student(args: list[str], roster: Roster) -> Response:
    return roster.add_student(student_id=args[1], last_name=args[2], first_name=args[3])


def update_points(args: list[str], roster: Roster) -> Response:
    round_number = validate_round(args[2])
    points = validate_points(args[3])

    return roster.update_student_points(args[1], round_number, points)


def list_students(args: list[str], roster: Roster) -> Response:
    students = roster.list_students()
    helpers.display_results(students, formatter=Student.to_record)

    return Response.succeed(data={"count": len(students)})


def write_roster(args: list[str], roster: Roster) -> Response:
    return roster.save(args[1])


def load_roster(args: list[str], roster: Roster) -> Response:
    return roster.load(args[1])


def quit_program(args: list[str], roster: Roster) -> Response:
    return Response.succeed(detail="Quitting.", data={"quit": True})


COMMAND_HANDLERS: dict[Command, Callable[[list[str], Roster], Response]] = {
    Command.ADD: add_student,
    Command.UPDATE: update_points,
    Command.LIST: list_students,
    Command.WRITE: write_roster,
    Command.LOAD: load_roster,
    Command.QUIT: quit_program,
}

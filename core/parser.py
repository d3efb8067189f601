# core/parser.py

"""
Turns one raw line of text into a structured command.

A line comes either from the user (interactive mode), where it must start with a command
character, or from a roster file (file mode), where every token is a data field.

Parsing only checks the shape of the line. Argument counts and field values are checked
afterwards by `core.validators`.
"""

from __future__ import annotations

from enum import Enum

from core.response import ErrorCode, InputError

MAX_ARGS = 10
MAX_LINE_LENGTH = 1023


class Command(Enum):
    ADD = ("A", 4)
    UPDATE = ("U", 4)
    LIST = ("L", 1)
    WRITE = ("W", 2)
    LOAD = ("O", 2)
    QUIT = ("Q", 1)

    def __init__(self, char: str, arg_count: int):
        self.char = char
        # expected token count, command character included
        self.arg_count = arg_count

    @classmethod
    def from_char(cls, char: str) -> Command | None:
        return _COMMANDS_BY_CHAR.get(char)


_COMMANDS_BY_CHAR: dict[str, Command] = {c.char: c for c in Command}


class ParsedCommand:
    """
    One parsed line of input.

    Attributes:
        command (Command | None): The command to run, or None for a line read from a file.
        arguments (list[str]): Up to `MAX_ARGS` tokens; the command character is argument 0 when present.
        arg_count (int): The number of tokens on the line, which may exceed `MAX_ARGS`.
    """

    def __init__(self, command: Command | None, arguments: list[str], arg_count: int):
        self.command = command
        self.arguments = arguments
        self.arg_count = arg_count

    @property
    def is_record(self) -> bool:
        return self.command is None

    def argument(self, index: int) -> str | None:
        return self.arguments[index] if index < len(self.arguments) else None

    def __repr__(self) -> str:
        return f"ParsedCommand({self.command}, {self.arguments}, {self.arg_count})"


class UnknownCommand:
    """
    A line that starts like a command but names no known command, e.g. `X 1 2`.

    This is reported back to the user as `Invalid command X` and is not an error.
    """

    def __init__(self, char: str):
        self.char = char

    def __repr__(self) -> str:
        return f"UnknownCommand({self.char!r})"


def strip_line_terminator(raw: str) -> str:
    if raw.endswith("\r\n"):
        return raw[:-2]
    if raw.endswith("\n"):
        return raw[:-1]
    return raw


def parse_line(raw: str, interactive: bool = True) -> ParsedCommand | UnknownCommand:
    """
    Parses a single line of user or file input.

    Args:
        raw (str): The line as read, with or without its line terminator.
        interactive (bool, optional): True for user input, False for a line read from a roster file. Defaults to True.

    Returns:
        ParsedCommand: The command character (interactive mode only) and the tokens of the line.
        UnknownCommand: If an interactive line starts with an uppercase letter that is not a command.

    Raises:
        InputError:
            - `ErrorCode.EMPTY_INPUT` for an empty user line, `ErrorCode.FILE_CORRUPT` for an empty file line.
            - `ErrorCode.INPUT_TOO_LONG` for a user line over `MAX_LINE_LENGTH` characters,
              `ErrorCode.FILE_CORRUPT` for such a file line.
            - `ErrorCode.NO_COMMAND_CHARACTER` if a user line does not start with an uppercase letter
              followed by whitespace.
            - `ErrorCode.NON_VIABLE_INPUT` if the line holds no tokens at all.

    Notes:
        - Lines are never truncated; over-long lines are rejected outright.
        - Only the first `MAX_ARGS` tokens are kept, but `arg_count` counts all of them so that
          callers can report too many arguments.
    """
    line = strip_line_terminator(raw)

    if not line:
        if interactive:
            raise InputError(ErrorCode.EMPTY_INPUT)
        raise InputError(ErrorCode.FILE_CORRUPT, "Empty line in roster file.")

    if len(line) > MAX_LINE_LENGTH:
        if interactive:
            raise InputError(
                ErrorCode.INPUT_TOO_LONG,
                f"Input is {len(line)} characters, the limit is {MAX_LINE_LENGTH}.",
            )
        raise InputError(ErrorCode.FILE_CORRUPT, "Over-long line in roster file.")

    command = None

    if interactive:
        first = line[0]
        if not (first.isascii() and first.isupper()) or (
            len(line) > 1 and not line[1].isspace()
        ):
            raise InputError(ErrorCode.NO_COMMAND_CHARACTER)

        command = Command.from_char(first)
        if command is None:
            return UnknownCommand(first)

    tokens = line.split()
    if not tokens:
        raise InputError(ErrorCode.NON_VIABLE_INPUT)

    return ParsedCommand(command, tokens[:MAX_ARGS], len(tokens))

# cli/main.py

"""
Entry point for the roster CLI.

Reads commands one line at a time and hands each line to the dispatcher until QUIT is given
or the input runs out.
"""

import io
import logging
import sys
from typing import TextIO

import cli.helpers as helpers
from cli.dispatcher import execute_line
from cli.helpers import LoopSignal
from core.response import ErrorCode
from core.utils import setup_logging
from models.roster import Roster

logger = logging.getLogger(__name__)

INIT_ATTEMPTS = 10
CRITICAL_EXIT_STATUS = 2

# bytes that are not valid UTF-8 pass through as lone surrogates instead of raising
STREAM_ENCODING_ERRORS = "surrogateescape"


def create_roster() -> Roster | None:
    """
    Creates the empty roster, retrying up to `INIT_ATTEMPTS` times if memory runs out.

    Returns:
        Roster: The new, empty roster.
        None: If every attempt failed.
    """
    for attempt in range(1, INIT_ATTEMPTS + 1):
        try:
            return Roster()
        except MemoryError:
            logger.warning("Roster creation failed (attempt %d)", attempt)

    return None


def run_cli(stream: TextIO | None = None) -> int:
    """
    Top-level read-dispatch loop.

    Args:
        stream (TextIO | None, optional): The input to read commands from. Defaults to standard input.

    Returns:
        The process exit status: 0 normally, `CRITICAL_EXIT_STATUS` if the roster could not be created.

    Notes:
        - Reaching the end of the input ends the loop like QUIT does, but without printing `SUCCESS`.
        - A text stream is switched to `STREAM_ENCODING_ERRORS`, so a line that is not valid UTF-8
          is still dispatched instead of ending the program.
    """
    stream = stream if stream is not None else sys.stdin
    if isinstance(stream, io.TextIOWrapper):
        stream.reconfigure(errors=STREAM_ENCODING_ERRORS)

    roster = create_roster()
    if roster is None:
        logger.critical("Could not create the roster after %d attempts", INIT_ATTEMPTS)
        helpers.display_error(ErrorCode.CRITICAL)
        return CRITICAL_EXIT_STATUS

    for line in stream:
        if execute_line(line, roster) is LoopSignal.QUIT:
            logger.info("Quit command received")
            break
    else:
        logger.info("End of input reached")

    return 0


def main() -> None:
    setup_logging()
    if isinstance(sys.stdout, io.TextIOWrapper):
        # names read as escaped bytes are listed as the same bytes
        sys.stdout.reconfigure(errors=STREAM_ENCODING_ERRORS)
    raise SystemExit(run_cli())


if __name__ == "__main__":
    main()

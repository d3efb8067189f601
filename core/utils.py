# core/utils.py

"""
Repository for program-wide utilities.
"""

import logging
import os
from pathlib import Path

LOG_LEVELS = {
    0: logging.CRITICAL + 1,
    1: logging.INFO,
    2: logging.DEBUG,
}


def setup_logging() -> None:
    """
    Configures the root logger from the `LOG_LEVEL` and `LOG_FILE` environment variables.

    Notes:
        - `LOG_LEVEL` is 0 (silent, the default), 1 (INFO) or 2 (DEBUG). Any other value, numeric
          or not, falls back to ERROR.
        - Logs go to `LOG_FILE` when set, otherwise to stderr. Standard output is never used,
          since it carries the command outcomes.
    """
    raw_level = os.environ.get("LOG_LEVEL", "0")
    try:
        log_level = int(raw_level)
    except ValueError:
        log_level = None

    level = LOG_LEVELS.get(log_level, logging.ERROR)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    log_file = os.environ.get("LOG_FILE")
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    handler.setLevel(level)
    root_logger.addHandler(handler)

"""Root logger setup shared by the API, the launcher and the CLI tools."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

COLOR_RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",    # cyan
    logging.INFO: "\033[32m",     # green
    logging.WARNING: "\033[33m",  # yellow
    logging.ERROR: "\033[31m",    # red
    logging.CRITICAL: "\033[41m",  # red background
}

# Driver loggers that are chatty at INFO (heartbeats, topology changes).
_QUIET_LOGGERS = ("pymongo", "uvicorn.access")


def _use_color() -> bool:
    """
    Determine whether to enable colored logging.

    - Disabled if NO_COLOR is set in the environment.
    - Disabled if stderr is not a TTY.
    """
    if os.getenv("NO_COLOR") is not None:
        return False
    is_tty = getattr(sys.stderr, "isatty", lambda: False)()
    return is_tty


class ColorFormatter(logging.Formatter):
    """Wrap the whole log line in a color picked by level."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if not color:
            return base
        return f"{color}{base}{COLOR_RESET}"


def _get_level_from_env() -> int:
    load_dotenv()
    level_str = os.getenv("FURNIRO_LOG_LEVEL", "INFO").upper()
    return {
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARNING": logging.WARNING,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
        "NOTSET": logging.NOTSET,
    }.get(level_str, logging.INFO)


def setup_logging(level: Optional[int] = None) -> None:
    """
    Configure the root logger once.

    When handlers already exist nothing happens, so test runners and
    embedding servers keep their own configuration.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    if level is None:
        level = _get_level_from_env()

    root.setLevel(level)

    if _use_color():
        formatter: logging.Formatter = ColorFormatter(LOG_FORMAT)
    else:
        formatter = logging.Formatter(LOG_FORMAT)

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger, making sure logging is configured."""
    setup_logging()
    return logging.getLogger(name)

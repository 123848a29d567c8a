"""Centralized logging setup for the password strength service.

The API server logs to stdout. The CLI logs to stderr so that report
output on stdout (text or JSON) stays machine-readable.
"""

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str) -> int:
    """Translate a level name into its numeric value.

    Unknown names fall back to INFO.
    """
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Attach a formatted handler to the root logger once per process.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        stream: Destination stream; defaults to stdout.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(resolve_level(level))


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, usually ``__name__``."""
    return logging.getLogger(name)

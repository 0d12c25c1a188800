"""Logger setup for the godecls command line tool.

Per-file failures are reported through these loggers on stderr, leaving
stdout to the signature lines themselves.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "godecls"
_CONSOLE_FORMAT = "[godecls] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``godecls.<name>``, e.g. ``get_logger("walker")``."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send godecls diagnostics to stderr, and to ``log_file`` when given.

    ``verbose`` lowers the level to DEBUG so per-file declaration counts and
    skipped files show up.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # main() may run more than once per process (tests, embedding callers).
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setLevel(level)
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(sink)

    return logger


__all__ = ["configure_logging", "get_logger"]

"""structlog configuration shared by the API entrypoint and the tests."""

from __future__ import annotations

import logging
import sys
from typing import IO

import structlog

from trymate.config import settings


def _open_log_file(path: str) -> IO[str] | None:
    """Open the log file for appending, or None if it cannot be opened."""
    try:
        return open(path, "a")  # noqa: SIM115
    except OSError as exc:
        # structlog is not configured yet at this point
        print(
            f"WARNING: Could not open log file {path!r}: {exc}. Logging to stdout only.",
            file=sys.stderr,
        )
        return None


class _StdoutAndFile:
    """Duplicate every log line to stdout and to LOG_FILE.

    A failed file write drops the file for the rest of the process; stdout
    keeps receiving lines.
    """

    def __init__(self, path: str) -> None:
        self._file = _open_log_file(path)

    def write(self, data: str) -> None:
        sys.stdout.write(data)
        if self._file is None:
            return
        try:
            self._file.write(data)
            self._file.flush()
        except (OSError, ValueError):
            self._file = None
            print("WARNING: Log file write failed. Logging to stdout only.", file=sys.stderr)

    def flush(self) -> None:
        sys.stdout.flush()


def configure_logging() -> None:
    """Configure structlog with console renderer in dev, JSON in prod.

    When LOG_FILE is set, log lines are also appended to that file. stdout
    always receives them.
    """
    renderer = (
        structlog.dev.ConsoleRenderer()
        if settings.environment == "development"
        else structlog.processors.JSONRenderer()
    )

    level = logging.getLevelNamesMapping().get(settings.log_level.upper(), logging.INFO)

    if settings.log_file:
        logger_factory = structlog.PrintLoggerFactory(file=_StdoutAndFile(settings.log_file))  # type: ignore[arg-type]
    else:
        logger_factory = structlog.PrintLoggerFactory()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=logger_factory,
        cache_logger_on_first_use=True,
    )

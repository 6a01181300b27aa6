"""
Diagnostic logging for lucid.

Structured events via structlog, written to stderr. These are separate
from the ``[prefix]: ...`` status messages, which go through
StatusReporter. The default level (WARNING) keeps them out of sight.

Like status output, a diagnostic that can't be written is dropped.
"""

import logging
import sys

import structlog

__all__ = ["configure_logging"]


class _DroppingPrintLogger(structlog.PrintLogger):
    """PrintLogger that ignores closed or broken streams."""

    def msg(self, message: str) -> None:
        try:
            super().msg(message)
        except (OSError, ValueError):
            pass

    log = debug = info = warn = warning = msg
    fatal = failure = err = error = critical = exception = msg


def _stderr_logger_factory(*args) -> _DroppingPrintLogger:
    # Resolved per logger so daemon redirection and test capture apply
    return _DroppingPrintLogger(sys.stderr)


def configure_logging(level: str = "WARNING") -> None:
    """Configure structlog for the current process.

    Args:
        level: Standard level name (DEBUG, INFO, WARNING, ...)
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )

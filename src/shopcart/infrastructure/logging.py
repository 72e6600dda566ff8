"""Logging configuration for the CLI.

Domain and application modules only ever call
``structlog.get_logger(__name__)``; this is the single place that decides
where those events go and which levels are kept.  Log events are written
to stderr so they never interleave with the checkout transcript.
"""

from __future__ import annotations

import logging
import sys

import structlog

_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def configure_logging(verbosity: int = 0) -> None:
    """Configure structlog; each -v on the command line lowers the threshold."""
    level = _LEVELS.get(verbosity, logging.DEBUG)
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def _stderr_logger(*args: object) -> structlog.PrintLogger:
    # Resolved per logger so a swapped sys.stderr is always honoured.
    return structlog.PrintLogger(sys.stderr)

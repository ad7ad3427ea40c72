"""structlog configuration shared by the library and the command line."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog
from structlog.types import Processor

LOG_LEVELS: dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

LOG_FORMATS = ("console", "json")


def resolve_level(level: str) -> int:
    """Translate a level name into its numeric ``logging`` value."""
    normalized = level.lower()
    if normalized not in LOG_LEVELS:
        valid = ", ".join(sorted(LOG_LEVELS))
        raise ValueError(f"Unsupported log level {level!r}. Choose one of: {valid}.")
    return LOG_LEVELS[normalized]


def configure_logging(
    level: str = "warning",
    *,
    json_output: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route structlog events through stdlib logging on ``stream`` (stderr by default).

    Statistics are written to stdout by the command line, so log output stays
    on a separate stream.
    """
    level_value = resolve_level(level)
    logging.basicConfig(level=level_value, format="%(message)s", stream=stream or sys.stderr)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


__all__ = ["configure_logging", "resolve_level", "LOG_FORMATS", "LOG_LEVELS"]

"""
logging.py — structlog setup shared by the API, the web front page and the
seed CLI.

Each process calls configure_logging() once at startup; settings.log_format
picks JSON lines (deployed) or the coloured console renderer (local).

Usage:
    from swc_shared.logging import configure_logging, get_logger

    configure_logging()
    log = get_logger(__name__, pipeline="seed")
    log.info("created_techniques", count=4)
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from swc_shared.config import settings

# The request middleware already logs one event per request
_QUIET_LOGGERS = ("uvicorn.access",)


def configure_logging(
    log_level: str | None = None,
    log_format: str | None = None,
) -> None:
    """
    Configure structlog (and the stdlib root logger) for this process.

    Args:
        log_level:  Override settings.log_level.
        log_format: Override settings.log_format ("json" | "console").
    """
    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)
    fmt = log_format or settings.log_format

    # uvicorn and SQLAlchemy log through the stdlib
    logging.basicConfig(format="%(levelname)s %(name)s %(message)s", stream=sys.stdout, level=level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    if settings.db_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if fmt == "json":
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        # Not cached: each call resolves sys.stdout afresh (test runners swap it)
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str, **initial_values: Any) -> structlog.typing.FilteringBoundLogger:
    """Return a logger, pre-bound with `initial_values` when given."""
    log = structlog.get_logger(name)
    return log.bind(**initial_values) if initial_values else log

"""
Structured logging configuration using structlog.

The library only logs rare events (encoded-word fallbacks, missing boundaries,
undecodable parts, nesting limits). Log lines go to stderr so that they never
interleave with reports the CLI writes to stdout.
"""

import logging
import sys
from typing import Optional

import structlog

from .config import settings


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure structlog for structured logging on stderr.

    Args:
        level: Log level name overriding settings.log_level (e.g. 'DEBUG' for
            the CLI's --verbose flag)
    """
    level_name = (level or settings.log_level).upper()
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level_name)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

"""Logging setup for the Games API.

structlog sits on top of the standard library so uvicorn's own loggers and
ours end up on the same handler.
"""

import logging
import sys
from typing import Any

import structlog


def _processors(environment: str) -> list[Any]:
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt='iso', utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if environment == 'development':
        return processors + [structlog.dev.ConsoleRenderer(colors=False)]
    return processors + [structlog.processors.JSONRenderer()]


def setup_logging(log_level: str = 'INFO', environment: str = 'development'):
    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter('%(message)s'))
    root_logger.addHandler(handler)

    structlog.configure(
        processors=_processors(environment),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

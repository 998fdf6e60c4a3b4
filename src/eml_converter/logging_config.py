"""
Structured logging configuration using structlog.

Log records go to stderr so that the CLI can keep stdout for its JSON results.
"""

import logging
import sys
from typing import Optional

import structlog

from .config import settings


def setup_logging(level: Optional[str] = None, json_logs: Optional[bool] = None) -> None:
    """
    Configure structlog for the converter.

    Args:
        level: Log level name, defaults to ``settings.log_level``
        json_logs: Render JSON lines instead of console output,
            defaults to ``settings.log_json``
    """
    level = level or settings.log_level
    if json_logs is None:
        json_logs = settings.log_json

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_logs:
        processors.append(structlog.processors.format_exc_info)
    processors.append(renderer)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def bind_conversion_context(**values) -> None:
    """
    Bind values (source file, upload name, ...) to every log record of the
    current conversion.
    """
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**values)

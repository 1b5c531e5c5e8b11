"""
Structured logging for the proxy and its CLI.

Logs are written to stderr: stdout belongs to command output, which
main.py prints as JSON for piping into other tools.
"""
import logging
import sys
from typing import Any, TextIO

import structlog

from ..config import settings

HANDLER_NAME = "companies_house"


def _renderer() -> Any:
    if settings.log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(stream: TextIO | None = None) -> logging.Handler:
    """
    Route structlog events and stdlib records (httpx included) to `stream`.

    Defaults to sys.stderr. Calling again replaces the previous handler, so
    tests can point logging at a buffer and back.

    Returns:
        The installed root handler
    """
    stream = stream if stream is not None else sys.stderr

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _renderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler(stream)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.setLevel(settings.log_level)
    return handler


def get_logger(name: str) -> Any:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


setup_logging()

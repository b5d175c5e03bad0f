"""Structured logging configuration for the job-configuration helpers.

Logging is standardized with ``structlog``. It produces either JSON (for
machines) or a pretty console format (for humans) and binds the service name
so logs from launcher processes stay attributable when aggregated.

Launchers often print machine-readable results on stdout, so log lines go to
stderr unless another stream is given.

Typical usage
- Call ``configure_logging(service_name, log_level, log_format)`` at startup
- Acquire loggers via ``structlog.get_logger(name)`` or ``get_logger``
"""

import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.stdlib import LoggerFactory, add_logger_name

from .config import JobConfSettings, get_settings

# Name of the root handler installed by ``configure_logging``
HANDLER_NAME = "jobconf"


def _install_handler(stream: TextIO, level: int) -> None:
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.setLevel(level)


def configure_logging(
    service_name: str,
    log_level: str = "INFO",
    log_format: str = "json",
    stream: Optional[TextIO] = None,
    **kwargs: Any
) -> None:
    """Configure structured logging for a process.

    Calling it again replaces the previous handler rather than adding another.

    Parameters
    - service_name: Logical identifier bound to each log line
    - log_level: ``DEBUG``, ``INFO``, ``WARNING``, ``ERROR`` (case-insensitive)
    - log_format: ``json`` for production; ``console`` for local dev
    - stream: Where log lines are written (default: ``sys.stderr``)
    - kwargs: Extra context bound alongside the service name
    """
    _install_handler(stream or sys.stderr, getattr(logging, log_level.upper()))

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_logger_name,
    ]

    if log_format == "json":
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ])
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(service=service_name, **kwargs)


def configure_logging_from_settings(
    settings: Optional[JobConfSettings] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure logging using ``JobConfSettings`` values."""
    settings = settings or get_settings()
    configure_logging(
        settings.jobconf_service_name,
        settings.jobconf_log_level,
        settings.jobconf_log_format,
        stream=stream,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)

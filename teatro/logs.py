"""Logging configuration for Teatro."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.processors import TimeStamper, add_log_level
from structlog.stdlib import (
    ProcessorFormatter,
    add_logger_name,
    filter_by_level,
)

DEFAULT_LOG_LEVEL = "WARNING"

_structlog_configured = False


def _configure_structlog() -> None:
    """Send structlog events through stdlib logging, once per process."""
    global _structlog_configured
    if _structlog_configured:
        return

    processors: list[Any] = [
        filter_by_level,
        TimeStamper(fmt="iso"),
        add_log_level,
        add_logger_name,
        ProcessorFormatter.wrap_for_formatter,
    ]
    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    _structlog_configured = True


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Install a stderr console handler at *level*.

    Args:
        level: Standard logging level name, case-insensitive.

    Raises:
        ValueError: If *level* is not a logging level name.
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Invalid log level '{level}'.")

    formatter = ProcessorFormatter(
        processor=structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        foreign_pre_chain=[
            TimeStamper(fmt="iso"),
            add_log_level,
            add_logger_name,
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler.setLevel(log_level)
    logging.basicConfig(level=log_level, handlers=[handler], force=True)

    _configure_structlog()


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to *name*.

    Events go to stdlib logging, so nothing below WARNING is shown until
    configure_logging() installs a handler.
    """
    _configure_structlog()
    return structlog.get_logger(name)

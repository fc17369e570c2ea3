# envsugar/structlog_config.py
"""
Structlog access for the library.

envsugar only asks structlog for a logger; it never configures structlog on
its own. Applications that have no structlog setup of their own can opt in
with configure_structlog().
"""
import sys
from typing import Optional

import structlog

from .logging_config import load_logging_config

_logger_name = "envsugar"


def configure_structlog(log_level: Optional[int] = None) -> None:
    """
    Configure structlog for console output on stderr.

    Args:
        log_level: Numeric logging level (e.g., logging.INFO). Read from
            ENVSUGAR_LOG_LEVEL when omitted.

    Raises:
        ConfigurationError: If log_level is omitted and ENVSUGAR_LOG_LEVEL
            holds an unknown level
    """
    if log_level is None:
        log_level = load_logging_config().level_int

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,  # type: ignore[list-item]
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.RichTracebackFormatter(
                    show_locals=False,
                    width=None,
                ),
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = _logger_name) -> structlog.BoundLogger:
    """Get a logger under whatever structlog configuration the process has."""
    return structlog.get_logger(name)


def is_configured() -> bool:
    """Check if structlog has been configured in this process."""
    return structlog.is_configured()


__all__ = [
    "configure_structlog",
    "get_logger",
    "is_configured",
]

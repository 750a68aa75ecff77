"""
dupfinder - structlog configuration.

Central structlog setup. Logs go to stderr: stdout carries
the report and the interactive prompt.

Usage:
    from dupfinder.config.logging import configure_logging

    # At application start-up
    configure_logging()

    # In modules
    import structlog
    logger = structlog.get_logger(__name__)
    logger.info("message", key=value)
"""

import logging
import sys

import structlog
from structlog.types import EventDict, WrappedLogger


def add_app_context(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ``app="dupfinder"`` to every event."""
    event_dict["app"] = "dupfinder"
    return event_dict


def configure_logging(
    level: str = "WARNING",
    json_format: bool = False,
    enable_colors: bool = False,
) -> None:
    """
    Configure structlog for dupfinder.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: JSON lines if True, human-readable console output otherwise
        enable_colors: Colorize console output (DUPFINDER_LOG_COLORS)

    Example:
        >>> configure_logging(level="DEBUG", json_format=False, enable_colors=True)
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper()),
    )
    logging.getLogger().setLevel(getattr(logging, level.upper()))

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=enable_colors))

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

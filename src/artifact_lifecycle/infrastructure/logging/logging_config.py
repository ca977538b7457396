"""
Structured logging configuration for artifact lifecycle.

Configures structlog for JSON or console logging and provides the
structlog-backed event sink used by artifacts by default.
"""

import structlog
import logging
import sys
from typing import Any, Optional

from artifact_lifecycle.domain.ports import IEventSink
from artifact_lifecycle.domain.value_objects import LifecycleEvent


def configure_logging(log_level: str = "INFO", log_format: str = "json") -> None:
    """
    Configure structlog for structured logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: "json" for structured logs, "text" for human-readable
    """
    # Configure standard logging to use structlog
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
    )

    if log_format == "text":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance.

    Args:
        name: Logger name, usually the calling module

    Returns:
        Configured logger instance
    """
    if name:
        return structlog.get_logger(name)
    return structlog.get_logger()


class StructlogEventSink(IEventSink):
    """
    Event sink writing lifecycle events through structlog.

    Each record carries the event kind as ``event_kind`` next to the
    fields passed by the caller.
    """

    def __init__(self, logger: Optional[Any] = None):
        """
        Initialize the sink.

        Args:
            logger: structlog logger to write to (default: module logger)
        """
        self._logger = logger if logger is not None else get_logger(__name__)

    def record(
        self,
        event: LifecycleEvent,
        message: str,
        level: str = "debug",
        **fields: Any,
    ) -> None:
        log = getattr(self._logger, level.lower(), self._logger.info)
        log(message, event_kind=event.value, **fields)

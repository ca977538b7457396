"""
Logging Infrastructure

Structured logging setup.
"""

from .logging_config import configure_logging, get_logger, StructlogEventSink

__all__ = ["configure_logging", "get_logger", "StructlogEventSink"]

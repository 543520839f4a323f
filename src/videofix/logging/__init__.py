"""Structured logging module for videofix.

Provides configurable logging with JSON format support and file rotation,
plus per-file context for records emitted while a file is processed.
"""

from videofix.logging.config import configure_logging
from videofix.logging.context import (
    FileContextFilter,
    file_context,
    get_file_context,
)
from videofix.logging.handlers import JSONFormatter

__all__ = [
    "FileContextFilter",
    "JSONFormatter",
    "configure_logging",
    "file_context",
    "get_file_context",
]

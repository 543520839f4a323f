"""File context for structured logging.

Tracks the file currently being processed using contextvars, so every log
record emitted while handling a file can name it.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

_file_path: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "file_path", default=None
)


def get_file_context() -> str | None:
    """Return the path of the file being processed, if any."""
    return _file_path.get()


@contextmanager
def file_context(file_path: Path | str) -> Generator[None, None, None]:
    """Context manager for per-file processing.

    Example:
        with file_context("/videos/movie.mkv"):
            logger.info("Checking")  # record carries file_path
    """
    token = _file_path.set(str(file_path))
    try:
        yield
    finally:
        _file_path.reset(token)


class FileContextFilter(logging.Filter):
    """Logging filter that injects the current file into log records.

    Adds a file_path attribute for JSON output and a compact file_tag like
    ``[movie.mkv] `` for text output.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Inject file context into log record.

        Returns:
            Always True (does not filter, only enriches).
        """
        file_path = get_file_context()
        record.file_path = file_path
        record.file_tag = f"[{Path(file_path).name}] " if file_path else ""
        return True

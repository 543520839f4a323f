"""Executor result types and tool availability utilities.

This module defines the result of a transcode and the helpers used to locate
the external ffmpeg/ffprobe executables.
"""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


class ToolNotAvailableError(RuntimeError):
    """Raised when a required external tool cannot be found."""

    def __init__(self, tool_name: str, hint: str = "") -> None:
        self.tool_name = tool_name
        message = f"Required tool not available: {tool_name}."
        if hint:
            message = f"{message} {hint}"
        super().__init__(message)


class TranscodeError(Exception):
    """Raised when the transcoder fails to start or exits non-zero."""

    def __init__(
        self,
        source: Path,
        message: str,
        returncode: int | None = None,
    ) -> None:
        self.source = source
        self.returncode = returncode
        super().__init__(f"ffmpeg failed for {source}: {message}")


@dataclass(frozen=True)
class TranscodeResult:
    """Result of a transcode operation."""

    success: bool
    """True if the transcoder exited cleanly."""

    output_path: Path | None = None
    """Path of the file written by the transcoder."""

    command: tuple[str, ...] = ()
    """Command line that was (or, for a dry run, would have been) run."""

    message: str = ""
    """Human-readable message describing the result."""


def get_tool_path(tool_name: str, configured: Path | None = None) -> Path | None:
    """Get path to a tool, or None if not available.

    A configured path wins when it points at an existing file; otherwise the
    tool is looked up in PATH.

    Args:
        tool_name: Name of the executable (e.g. "ffmpeg").
        configured: Path from configuration or environment, if any.

    Returns:
        Path to the tool or None if not available.
    """
    if configured is not None:
        configured = Path(configured).expanduser()
        if configured.is_file():
            return configured
        logger.warning(
            "Configured %s path %s does not exist, falling back to PATH",
            tool_name,
            configured,
        )

    found = shutil.which(tool_name)
    return Path(found) if found else None


def require_tool(tool_name: str, configured: Path | None = None) -> Path:
    """Get path to a required tool, raising an error if not available.

    Raises:
        ToolNotAvailableError: If the tool cannot be found.
    """
    path = get_tool_path(tool_name, configured)
    if path is None:
        raise ToolNotAvailableError(
            tool_name,
            f"Install ffmpeg, or set tools.{tool_name} in the config file "
            f"or the VIDEOFIX_{tool_name.upper()}_PATH environment variable.",
        )
    return path

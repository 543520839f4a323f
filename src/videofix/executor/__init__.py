"""Executor module for videofix.

Runs remediation directives through ffmpeg and locates external tools.
"""

from videofix.executor.interface import (
    ToolNotAvailableError,
    TranscodeError,
    TranscodeResult,
    get_tool_path,
    require_tool,
)
from videofix.executor.transcode import FFmpegTranscodeExecutor, build_ffmpeg_command

__all__ = [
    "FFmpegTranscodeExecutor",
    "ToolNotAvailableError",
    "TranscodeError",
    "TranscodeResult",
    "build_ffmpeg_command",
    "get_tool_path",
    "require_tool",
]

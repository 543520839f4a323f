"""FFmpeg executor for remediation transcodes.

Turns a RemediationDirective into an ffmpeg command line and runs it
synchronously. ffmpeg inherits the terminal so its -stats progress line is
shown to the user; there is no timeout.
"""

import logging
import subprocess  # nosec B404 - subprocess is required for ffmpeg execution
from pathlib import Path

from videofix.executor.interface import TranscodeError, TranscodeResult, require_tool
from videofix.policy.remediation import RemediationDirective, ensure_output_free

logger = logging.getLogger(__name__)


def build_ffmpeg_command(
    directive: RemediationDirective,
    ffmpeg_path: Path | str = "ffmpeg",
) -> list[str]:
    """Build the ffmpeg command for a remediation directive.

    The pixel format flag is only added when the directive asks for a
    conversion.

    Example:
        ['ffmpeg', '-loglevel', 'warning', '-stats',
         '-i', 'movie.mp4', '-vcodec', 'h264', '-acodec', 'copy',
         'movie.fixed.mkv']
    """
    command = [
        str(ffmpeg_path),
        "-loglevel",
        "warning",
        "-stats",
        "-i",
        str(directive.source),
        "-vcodec",
        directive.video,
        "-acodec",
        directive.audio,
    ]
    if directive.pix_fmt is not None:
        command.extend(["-pix_fmt", directive.pix_fmt])
    command.append(str(directive.output))
    return command


class FFmpegTranscodeExecutor:
    """Executor that writes a remediated copy of a file using ffmpeg."""

    def __init__(self, ffmpeg_path: Path | None = None) -> None:
        """Initialize the executor.

        Args:
            ffmpeg_path: Configured path to ffmpeg. None looks it up in PATH
                the first time it is needed.
        """
        self._configured_path = ffmpeg_path
        self._tool_path: Path | None = None

    @property
    def tool_path(self) -> Path:
        """Get path to ffmpeg, verifying availability.

        Raises:
            ToolNotAvailableError: If ffmpeg is not available.
        """
        if self._tool_path is None:
            self._tool_path = require_tool("ffmpeg", self._configured_path)
        return self._tool_path

    def build_command(self, directive: RemediationDirective) -> list[str]:
        """Build the ffmpeg command for a directive."""
        return build_ffmpeg_command(directive, self.tool_path)

    def execute(self, directive: RemediationDirective) -> TranscodeResult:
        """Run ffmpeg for a directive and wait for it to finish.

        The output path is checked again right before ffmpeg starts, since
        another run may have created it after planning.

        Raises:
            RemediationPreconditionError: If the output path now exists.
            TranscodeError: If ffmpeg cannot be started or exits non-zero.
        """
        command = self.build_command(directive)
        ensure_output_free(directive.output)

        logger.info("Transcoding %s -> %s", directive.source, directive.output)
        logger.debug("Executing command: %s", " ".join(command))
        try:
            result = subprocess.run(command, check=False)  # nosec B603
        except OSError as e:
            raise TranscodeError(directive.source, f"could not start: {e}") from e

        if result.returncode != 0:
            raise TranscodeError(
                directive.source,
                f"exited with status {result.returncode}",
                returncode=result.returncode,
            )

        return TranscodeResult(
            success=True,
            output_path=directive.output,
            command=tuple(command),
            message=f"wrote {directive.output}",
        )

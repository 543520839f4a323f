"""Integration test fixtures for the videofix CLI.

This module provides pytest fixtures for:
- Isolating CLI runs from the real logging configuration
- Tool availability detection (ffmpeg, ffprobe)
- Test media generation using ffmpeg
"""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# =============================================================================
# CLI isolation
# =============================================================================


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep CLI invocations from replacing the root logger's handlers."""
    with patch("videofix.cli.config_loader.configure_logging") as mock_configure:
        yield mock_configure


@pytest.fixture
def mock_ffprobe(make_metadata):
    """Patch the check command's introspector with canned metadata.

    Yields a dict mapping file names to FileMetadata (or an exception);
    tests fill it before invoking the CLI.
    """
    by_name: dict = {}

    def _get(path: Path):
        value = by_name[path.name]
        if isinstance(value, Exception):
            raise value
        return value

    with patch("videofix.cli.check.FFprobeIntrospector") as mock_class:
        mock_class.return_value.get_file_metadata.side_effect = _get
        yield by_name


@pytest.fixture
def mock_ffmpeg():
    """Patch the check command's transcoder."""
    with patch("videofix.cli.check.FFmpegTranscodeExecutor") as mock_class:
        instance = MagicMock()
        instance.tool_path = Path("/usr/bin/ffmpeg")
        mock_class.return_value = instance
        yield instance


# =============================================================================
# Tool Availability Fixtures
# =============================================================================


def _tool_available(name: str) -> bool:
    """Check if an external tool is available in PATH."""
    return shutil.which(name) is not None


@pytest.fixture(scope="session")
def ffmpeg_available() -> bool:
    """Check if ffmpeg and ffprobe are available."""
    return _tool_available("ffmpeg") and _tool_available("ffprobe")


# =============================================================================
# Test media generation
# =============================================================================


@pytest.fixture
def generate_video(ffmpeg_available: bool) -> Callable[..., Path]:
    """Factory that writes a short synthetic clip with ffmpeg.

    Skips the test when ffmpeg is not installed.
    """
    if not ffmpeg_available:
        pytest.skip("ffmpeg/ffprobe not available")

    def _generate(
        output: Path,
        video_codec: str = "mpeg4",
        audio_codec: str = "mp2",
        duration: float = 1.0,
    ) -> Path:
        command = [
            "ffmpeg",
            "-loglevel",
            "error",
            "-f",
            "lavfi",
            "-i",
            f"testsrc=duration={duration}:size=160x120:rate=10",
            "-f",
            "lavfi",
            "-i",
            f"sine=frequency=440:duration={duration}",
            "-c:v",
            video_codec,
            "-pix_fmt",
            "yuv420p",
            "-c:a",
            audio_codec,
            str(output),
        ]
        subprocess.run(command, check=True, capture_output=True)  # nosec B603
        return output

    return _generate

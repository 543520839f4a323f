"""Shared test fixtures for videofix."""

import json
import shutil
import tempfile
from pathlib import Path

import pytest

from videofix.domain import AudioMetadata, FileMetadata, VideoMetadata
from videofix.policy import PolicyConfig

SAMPLE_CONFIG = """\
default_target: streaming
targets:
  - name: streaming
    format_spec:
      container: {allow: [mov, matroska]}
      video: {allow: [h264, hevc]}
      audio: {reject: [dts, truehd]}
      pix_fmt: {allow: [yuv420p]}
    default: {video: h264, audio: aac, pix_fmt: yuv420p}
  - name: archive
    format_spec:
      Allow:
        container: [matroska]
        video: [hevc]
        audio: [flac]
        pix_fmt: [yuv420p10le]
    default: {video: hevc, audio: flac, pix_fmt: yuv420p10le}
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test isolation."""
    dir_path = tempfile.mkdtemp()
    yield Path(dir_path)
    shutil.rmtree(dir_path, ignore_errors=True)


@pytest.fixture
def temp_video_dir(temp_dir: Path) -> Path:
    """Create a temporary directory with a mix of video and other files."""
    video_dir = temp_dir / "videos"
    video_dir.mkdir()

    (video_dir / "movie.mkv").touch()
    (video_dir / "show.MP4").touch()
    (video_dir / "notes.txt").touch()

    # Nested files are never selected
    nested = video_dir / "nested"
    nested.mkdir()
    (nested / "episode.mkv").touch()

    return video_dir


@pytest.fixture
def config_file(temp_dir: Path) -> Path:
    """Write the sample two-target configuration and return its path."""
    path = temp_dir / "config.yaml"
    path.write_text(SAMPLE_CONFIG)
    return path


@pytest.fixture
def policy_config() -> PolicyConfig:
    """Return a PolicyConfig equivalent to the sample configuration."""
    return PolicyConfig.model_validate(
        {
            "default_target": "streaming",
            "targets": [
                {
                    "name": "streaming",
                    "format_spec": {
                        "container": {"allow": ["mov", "matroska"]},
                        "video": {"allow": ["h264", "hevc"]},
                        "audio": {"reject": ["dts", "truehd"]},
                        "pix_fmt": {"allow": ["yuv420p"]},
                    },
                },
                {
                    "name": "archive",
                    "format_spec": {
                        "container": {"allow": ["matroska"]},
                        "video": {"allow": ["hevc"]},
                        "audio": {"allow": ["flac"]},
                        "pix_fmt": {"allow": ["yuv420p10le"]},
                    },
                    "default": {
                        "video": "hevc",
                        "audio": "flac",
                        "pix_fmt": "yuv420p10le",
                    },
                },
            ],
        }
    )


@pytest.fixture
def streaming_target(policy_config: PolicyConfig):
    """Return the 'streaming' target of the sample configuration."""
    return policy_config.targets[0]


@pytest.fixture
def make_metadata():
    """Factory for FileMetadata with the given observed formats."""

    def _make(
        container: str = "mov",
        video: str = "h264",
        audio: str = "aac",
        pix_fmt: str = "yuv420p",
    ) -> FileMetadata:
        return FileMetadata(
            container=container,
            video=VideoMetadata(index=0, codec=video, pix_fmt=pix_fmt),
            audio=AudioMetadata(index=1, codec=audio, channels=2),
        )

    return _make


def load_ffprobe_fixture(name: str) -> dict:
    """Load an ffprobe JSON fixture by name.

    Args:
        name: Name of the fixture file (without .json extension).

    Returns:
        Parsed JSON data from the fixture.
    """
    fixture_path = Path(__file__).parent / "fixtures" / "ffprobe" / f"{name}.json"
    return json.loads(fixture_path.read_text())


@pytest.fixture
def compliant_mp4_fixture() -> dict:
    """Load the compliant mp4 ffprobe fixture."""
    return load_ffprobe_fixture("compliant_mp4")


@pytest.fixture
def noncompliant_avi_fixture() -> dict:
    """Load the non-compliant avi ffprobe fixture."""
    return load_ffprobe_fixture("noncompliant_avi")


@pytest.fixture
def multi_audio_fixture() -> dict:
    """Load the multi-audio ffprobe fixture."""
    return load_ffprobe_fixture("multi_audio")

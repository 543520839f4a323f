"""Domain models for videofix.

These records are produced once per inspected file and discarded after the
file has been reported and, optionally, remediated.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class VideoMetadata:
    """Essential attributes of a file's single video stream."""

    index: int
    codec: str
    pix_fmt: str


@dataclass(frozen=True)
class AudioMetadata:
    """Essential attributes of a file's single audio stream."""

    index: int
    codec: str
    channels: int = 0  # 0 when ffprobe reports no channel count


@dataclass(frozen=True)
class FileMetadata:
    """Observed format of one media file.

    Instances are only built by the introspector's smart constructor, which
    refuses files without exactly one video and one audio stream.
    """

    container: str  # short name, e.g. "matroska" from "matroska,webm"
    video: VideoMetadata
    audio: AudioMetadata
    duration: float | None = None  # minutes, informational only


@dataclass(frozen=True)
class FormatValidation:
    """Result of evaluating a file against a format specification."""

    container_okay: bool
    video_okay: bool
    audio_okay: bool
    pix_fmt_okay: bool

    @property
    def is_valid(self) -> bool:
        """True when every checked dimension is compliant."""
        return (
            self.container_okay
            and self.video_okay
            and self.audio_okay
            and self.pix_fmt_okay
        )

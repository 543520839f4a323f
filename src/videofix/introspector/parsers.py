"""Pure parsing functions for ffprobe JSON output.

These functions transform ffprobe JSON data into videofix domain objects.
All functions are pure (no I/O, no side effects) for easy testing.
"""

import logging
from pathlib import Path

from videofix.domain import AudioMetadata, FileMetadata, VideoMetadata
from videofix.introspector.interface import (
    MediaIntrospectionError,
    StreamCountError,
    StreamFieldError,
)

logger = logging.getLogger(__name__)


def parse_container(format_name: str) -> str:
    """Return the short container name from ffprobe's format_name.

    ffprobe reports every demuxer name that matches, comma separated
    (e.g. "mov,mp4,m4a,3gp,3g2,mj2"); only the first one is kept.

    Args:
        format_name: Value of format.format_name.

    Returns:
        Text before the first comma.
    """
    return format_name.split(",", 1)[0]


def parse_duration_minutes(value: str | None) -> float | None:
    """Parse ffprobe's duration string (seconds) into minutes.

    Args:
        value: Duration string from ffprobe (e.g., "3600.000") or None.

    Returns:
        Duration in minutes, or None if missing or unparseable.
    """
    if value is None:
        return None
    try:
        return float(value) / 60.0
    except (ValueError, TypeError):
        logger.debug("Ignoring unparseable duration %r", value)
        return None


def find_stream(streams: list[dict], stream_type: str, file_path: Path | str) -> dict:
    """Return the single stream of the given codec_type.

    Args:
        streams: Stream dictionaries from ffprobe.
        stream_type: "video" or "audio".
        file_path: File being parsed, for error messages.

    Returns:
        The matching stream dictionary.

    Raises:
        StreamCountError: If there is not exactly one matching stream.
    """
    matching = [s for s in streams if s.get("codec_type") == stream_type]
    if len(matching) != 1:
        raise StreamCountError(stream_type, len(matching), file_path)
    return matching[0]


def _require_field(
    stream: dict, key: str, file_path: Path | str, field: str | None = None
) -> str:
    value = stream.get(key)
    if not value:
        raise StreamFieldError(field or key, stream.get("index", 0), file_path)
    return str(value)


def parse_video_stream(stream: dict, file_path: Path | str) -> VideoMetadata:
    """Build VideoMetadata from an ffprobe video stream.

    Raises:
        StreamFieldError: If the codec or pix_fmt is missing.
    """
    return VideoMetadata(
        index=stream.get("index", 0),
        codec=_require_field(stream, "codec_name", file_path, "codec"),
        pix_fmt=_require_field(stream, "pix_fmt", file_path),
    )


def parse_audio_stream(stream: dict, file_path: Path | str) -> AudioMetadata:
    """Build AudioMetadata from an ffprobe audio stream.

    Raises:
        StreamFieldError: If the codec is missing.
    """
    channels = stream.get("channels")
    if not isinstance(channels, int) or channels < 0:
        channels = 0
    return AudioMetadata(
        index=stream.get("index", 0),
        codec=_require_field(stream, "codec_name", file_path, "codec"),
        channels=channels,
    )


def parse_ffprobe_output(path: Path, data: dict) -> FileMetadata:
    """Parse ffprobe JSON output into FileMetadata.

    This is the only way a FileMetadata is built from probe data, so the
    "exactly one video and one audio stream" rule is enforced here.

    Args:
        path: Path to the media file.
        data: Parsed ffprobe JSON output.

    Returns:
        FileMetadata for the file.

    Raises:
        MediaIntrospectionError: If the output does not describe a file with
            one video and one audio stream carrying the required fields.
    """
    format_info = data.get("format", {})
    format_name = format_info.get("format_name")
    if not format_name:
        raise MediaIntrospectionError(f"no container format reported for {path}")

    streams = data.get("streams", [])
    video_stream = find_stream(streams, "video", path)
    audio_stream = find_stream(streams, "audio", path)
    logger.debug("video stream %r", video_stream)
    logger.debug("audio stream %r", audio_stream)

    return FileMetadata(
        container=parse_container(format_name),
        duration=parse_duration_minutes(format_info.get("duration")),
        video=parse_video_stream(video_stream, path),
        audio=parse_audio_stream(audio_stream, path),
    )

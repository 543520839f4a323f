"""Domain models for videofix.

This package contains the records passed between the prober, the compliance
engine and the remediation planner:

- FileMetadata, VideoMetadata, AudioMetadata: observed facts about one file
- FormatValidation: per-dimension compliance flags

Usage:
    from videofix.domain import FileMetadata, FormatValidation
"""

from .models import (
    AudioMetadata,
    FileMetadata,
    FormatValidation,
    VideoMetadata,
)

__all__ = [
    "AudioMetadata",
    "FileMetadata",
    "FormatValidation",
    "VideoMetadata",
]

"""Compliance evaluation of file metadata against a format specification.

Every dimension is checked independently; there is no cross-dimension logic.
The functions here are pure: no I/O and no mutation of their inputs.
"""

from videofix.domain import FileMetadata, FormatValidation
from videofix.policy.models import FormatSpec, Formats


def is_compliant(rule: Formats, value: str) -> bool:
    """Return True if value satisfies a single dimension's rule."""
    return rule.permits(value)


def evaluate(metadata: FileMetadata, spec: FormatSpec) -> FormatValidation:
    """Evaluate a file's observed format against a format specification.

    Args:
        metadata: Observed format of the file.
        spec: Acceptable formats.

    Returns:
        FormatValidation with one flag per dimension.
    """
    return FormatValidation(
        container_okay=is_compliant(spec.container, metadata.container),
        video_okay=is_compliant(spec.video, metadata.video.codec),
        audio_okay=is_compliant(spec.audio, metadata.audio.codec),
        pix_fmt_okay=is_compliant(spec.pix_fmt, metadata.video.pix_fmt),
    )

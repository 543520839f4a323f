"""Remediation planning for non-compliant files.

The planner derives the smallest fix for a validation result: streams that
already comply are stream-copied, the rest are converted to the target's
defaults. Output is always written to a fixed container next to the source.
The planner never reads file contents; it only checks that the output path
is free.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from videofix.domain import FormatValidation
from videofix.policy.exceptions import RemediationPreconditionError
from videofix.policy.models import DefaultFormat

logger = logging.getLogger(__name__)

COPY = "copy"
OUTPUT_CONTAINER = "mkv"
REMEDIATED_MARKER = "fixed"
REMEDIATED_EXTENSION = f"{REMEDIATED_MARKER}.{OUTPUT_CONTAINER}"


@dataclass(frozen=True)
class RemediationDirective:
    """Parameters handed to the transcoder to fix one file."""

    source: Path
    output: Path
    video: str
    """Video codec to encode to, or "copy"."""
    audio: str
    """Audio codec to encode to, or "copy"."""
    pix_fmt: str | None = None
    """Pixel format to convert to; None keeps the source's."""
    container: str = OUTPUT_CONTAINER

    @property
    def copies_video(self) -> bool:
        return self.video == COPY

    @property
    def copies_audio(self) -> bool:
        return self.audio == COPY


def derive_output_path(source: Path) -> Path:
    """Replace the source's extension with the remediated extension.

    ``movie.mp4`` becomes ``movie.fixed.mkv``; a name without an extension
    gains one.
    """
    return source.with_name(f"{source.stem}.{REMEDIATED_EXTENSION}")


def ensure_output_free(output: Path) -> None:
    """Raise RemediationPreconditionError if output already exists."""
    if output.exists():
        raise RemediationPreconditionError(output)


def plan_remediation(
    validation: FormatValidation,
    default: DefaultFormat,
    source: Path,
) -> RemediationDirective:
    """Derive the transcode directive that fixes a non-compliant file.

    The container dimension is not planned separately; writing the output
    in OUTPUT_CONTAINER fixes it.

    Args:
        validation: Compliance flags for the file.
        default: Codecs and pixel format to convert non-compliant streams to.
        source: Path of the file to fix.

    Returns:
        RemediationDirective for the transcoder.

    Raises:
        RemediationPreconditionError: If the derived output path exists.
    """
    output = derive_output_path(source)
    ensure_output_free(output)

    directive = RemediationDirective(
        source=source,
        output=output,
        video=COPY if validation.video_okay else default.video,
        audio=COPY if validation.audio_okay else default.audio,
        pix_fmt=None if validation.pix_fmt_okay else default.pix_fmt,
    )
    logger.debug("Planned remediation for %s: %s", source, directive)
    return directive

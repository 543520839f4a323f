"""Human-readable and JSON rendering of check results."""

from __future__ import annotations

import json
import shlex
from dataclasses import asdict
from typing import Any

import click

from videofix.domain import FileMetadata, FormatValidation
from videofix.policy import Formats, RejectFormats
from videofix.workflow import BatchSummary, FileResult, FileStatus

OKAY_MARK = "✅"
FAIL_MARK = "❌"


def status_mark(is_okay: bool) -> str:
    """Return the check mark for a compliant dimension, a cross otherwise."""
    return OKAY_MARK if is_okay else FAIL_MARK


def format_report(result: FileResult) -> str:
    """Render the two-line compliance report for an evaluated file.

    Example::

        movie.avi
         - mp3 ❌; mpeg4 ❌; avi ❌; yuv420p ✅
    """
    metadata = result.metadata
    validation = result.validation
    if metadata is None or validation is None:
        return result.path.name

    return (
        f"{result.path.name}\n"
        f" - {metadata.audio.codec} {status_mark(validation.audio_okay)}; "
        f"{metadata.video.codec} {status_mark(validation.video_okay)}; "
        f"{metadata.container} {status_mark(validation.container_okay)}; "
        f"{metadata.video.pix_fmt} {status_mark(validation.pix_fmt_okay)}"
    )


def format_metadata(metadata: FileMetadata) -> str:
    """Render extracted metadata for the inspect command."""
    lines = [f"Container: {metadata.container}"]
    if metadata.duration is not None:
        lines.append(f"Duration:  {metadata.duration:.2f} min")
    lines.append(
        f"Video:     #{metadata.video.index} {metadata.video.codec} "
        f"({metadata.video.pix_fmt})"
    )
    lines.append(
        f"Audio:     #{metadata.audio.index} {metadata.audio.codec} "
        f"({metadata.audio.channels} channels)"
    )
    return "\n".join(lines)


def format_rule(rule: Formats) -> str:
    """Render a single allow/reject rule."""
    if isinstance(rule, RejectFormats):
        if not rule.reject:
            return "any"
        return "reject " + ", ".join(sorted(rule.reject))
    if not rule.allow:
        return "allow nothing"
    return "allow " + ", ".join(sorted(rule.allow))


def validation_to_dict(validation: FormatValidation) -> dict[str, bool]:
    data = asdict(validation)
    data["is_valid"] = validation.is_valid
    return data


def result_to_dict(result: FileResult) -> dict[str, Any]:
    """Convert a FileResult to a JSON-serializable dict."""
    directive = None
    if result.directive is not None:
        directive = {
            "output": str(result.directive.output),
            "video": result.directive.video,
            "audio": result.directive.audio,
            "pix_fmt": result.directive.pix_fmt,
            "container": result.directive.container,
        }
    return {
        "path": str(result.path),
        "status": result.status.value,
        "metadata": asdict(result.metadata) if result.metadata else None,
        "validation": (
            validation_to_dict(result.validation) if result.validation else None
        ),
        "directive": directive,
        "command": list(result.command),
        "error": result.error,
    }


def format_summary_json(target_name: str, summary: BatchSummary) -> str:
    """Render a whole run as a JSON document."""
    counts = summary.counts
    output = {
        "target": target_name,
        "files": [result_to_dict(result) for result in summary.results],
        "summary": {status.value: counts[status] for status in FileStatus},
    }
    return json.dumps(output, indent=2, ensure_ascii=False)


def format_summary_human(summary: BatchSummary) -> str:
    counts = summary.counts
    parts = [
        f"{counts[FileStatus.COMPLIANT]} compliant",
        f"{counts[FileStatus.NON_COMPLIANT]} non-compliant",
    ]
    if counts[FileStatus.PLANNED]:
        parts.append(f"{counts[FileStatus.PLANNED]} planned")
    if counts[FileStatus.FIXED]:
        parts.append(f"{counts[FileStatus.FIXED]} fixed")
    parts.append(f"{counts[FileStatus.ERROR]} failed")
    return "Summary: " + ", ".join(parts)


class HumanReporter:
    """Prints each file's report as soon as it is evaluated."""

    def file_evaluated(self, result: FileResult) -> None:
        click.echo("")
        click.echo(format_report(result))

    def file_finished(self, result: FileResult) -> None:
        if result.status == FileStatus.ERROR:
            if result.validation is None:
                click.echo("")
                click.echo(result.path.name)
            click.echo(f" ! {result.error}", err=True)
        elif result.status == FileStatus.PLANNED:
            click.echo(f" would run: {shlex.join(result.command)}")
        elif result.status == FileStatus.FIXED and result.directive is not None:
            click.echo(f" fixed -> {result.directive.output.name}")


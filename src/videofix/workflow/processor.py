"""Per-file check-and-fix workflow.

Files are handled one at a time: extract metadata, evaluate it against the
target, report, and, when fixing is requested and the file is not compliant,
plan and run a remediation transcode. A failure on one file is recorded on
that file's result and the batch moves on.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Protocol

from videofix.domain import FileMetadata, FormatValidation
from videofix.executor import FFmpegTranscodeExecutor, TranscodeError
from videofix.executor.transcode import build_ffmpeg_command
from videofix.introspector import MediaIntrospectionError, MediaIntrospector
from videofix.logging import file_context
from videofix.policy import (
    PolicyError,
    RemediationDirective,
    Target,
    evaluate,
    plan_remediation,
)

logger = logging.getLogger(__name__)


class FileStatus(Enum):
    """Outcome of processing one file."""

    COMPLIANT = "compliant"
    NON_COMPLIANT = "non_compliant"
    PLANNED = "planned"  # dry run: directive built, transcoder not run
    FIXED = "fixed"
    ERROR = "error"


@dataclass
class FileResult:
    """Everything learned about one file during a run."""

    path: Path
    status: FileStatus
    metadata: FileMetadata | None = None
    validation: FormatValidation | None = None
    directive: RemediationDirective | None = None
    command: tuple[str, ...] = ()
    error: str | None = None


@dataclass
class BatchSummary:
    """Results of a run, in processing order."""

    results: list[FileResult] = field(default_factory=list)

    @property
    def counts(self) -> Counter[FileStatus]:
        return Counter(result.status for result in self.results)

    @property
    def has_errors(self) -> bool:
        return any(result.status == FileStatus.ERROR for result in self.results)


class Reporter(Protocol):
    """Receives results as files are processed."""

    def file_evaluated(self, result: FileResult) -> None:
        """Called once metadata and validation are known, before fixing."""
        ...

    def file_finished(self, result: FileResult) -> None:
        """Called when a file is done, successfully or not."""
        ...


class FileProcessor:
    """Runs the check (and optional fix) for each selected file."""

    def __init__(
        self,
        introspector: MediaIntrospector,
        target: Target,
        *,
        fix: bool = False,
        dry_run: bool = False,
        transcoder: FFmpegTranscodeExecutor | None = None,
        reporter: Reporter | None = None,
        before_transcode: Callable[[RemediationDirective], None] | None = None,
    ) -> None:
        """Initialize the processor.

        Args:
            introspector: Source of FileMetadata.
            target: Target whose format spec and defaults apply.
            fix: Remediate non-compliant files.
            dry_run: Plan remediations without running the transcoder.
            transcoder: Executor used when fixing for real. Created on first
                use when not given.
            reporter: Optional receiver of per-file results.
            before_transcode: Hook called right before each transcode.
        """
        self._introspector = introspector
        self._target = target
        self._fix = fix
        self._dry_run = dry_run
        self._transcoder = transcoder
        self._reporter = reporter
        self._before_transcode = before_transcode

    @property
    def transcoder(self) -> FFmpegTranscodeExecutor:
        if self._transcoder is None:
            self._transcoder = FFmpegTranscodeExecutor()
        return self._transcoder

    def process(self, path: Path) -> FileResult:
        """Check one file and fix it if requested.

        Extraction, precondition and transcoder failures are returned as an
        ERROR result rather than raised.
        """
        with file_context(path):
            result = FileResult(path=path, status=FileStatus.ERROR)
            try:
                validation = self._check(result)
                if self._reporter is not None:
                    self._reporter.file_evaluated(result)
                if result.status == FileStatus.NON_COMPLIANT and self._fix:
                    self._remediate(result, validation)
            except (MediaIntrospectionError, PolicyError, TranscodeError) as e:
                logger.error("%s", e)
                result.status = FileStatus.ERROR
                result.error = str(e)

            if self._reporter is not None:
                self._reporter.file_finished(result)
            return result

    def process_all(self, paths: Iterable[Path]) -> BatchSummary:
        """Process files sequentially, in the order given."""
        summary = BatchSummary()
        for path in paths:
            summary.results.append(self.process(path))
        return summary

    def _check(self, result: FileResult) -> FormatValidation:
        metadata = self._introspector.get_file_metadata(result.path)
        validation = evaluate(metadata, self._target.format_spec)
        logger.debug("validation %s", validation)

        result.metadata = metadata
        result.validation = validation
        result.status = (
            FileStatus.COMPLIANT if validation.is_valid else FileStatus.NON_COMPLIANT
        )
        return validation

    def _remediate(self, result: FileResult, validation: FormatValidation) -> None:
        directive = plan_remediation(validation, self._target.default, result.path)
        result.directive = directive

        if self._dry_run:
            result.command = tuple(build_ffmpeg_command(directive))
            result.status = FileStatus.PLANNED
            return

        if self._before_transcode is not None:
            self._before_transcode(directive)
        transcode = self.transcoder.execute(directive)
        result.command = transcode.command
        result.status = FileStatus.FIXED
        logger.info("Fixed %s -> %s", result.path, directive.output)

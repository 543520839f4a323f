"""Workflow module for videofix: the per-file check-and-fix pipeline."""

from videofix.workflow.processor import (
    BatchSummary,
    FileProcessor,
    FileResult,
    FileStatus,
    Reporter,
)

__all__ = [
    "BatchSummary",
    "FileProcessor",
    "FileResult",
    "FileStatus",
    "Reporter",
]

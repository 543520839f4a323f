"""Merging of command-line logging options over the configured ones."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from videofix.config.models import LoggingConfig


def build_logging_config(
    base: LoggingConfig,
    *,
    level: str | None = None,
    file: Path | None = None,
    format: str | None = None,
    include_stderr: bool | None = None,
) -> LoggingConfig:
    """Return base with every non-None override applied.

    Rotation settings always come from base.

    Raises:
        ValueError: If an override is not a valid level or format.
    """
    overrides = {
        name: value
        for name, value in (
            ("level", level),
            ("file", file),
            ("format", format),
            ("include_stderr", include_stderr),
        )
        if value is not None
    }
    return replace(base, **overrides)

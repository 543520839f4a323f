"""Configuration data models.

Application settings are plain dataclasses validated in __post_init__; the
policy part of the configuration is a pydantic model (videofix.policy).
"""

from dataclasses import dataclass, field
from pathlib import Path

from videofix.policy.models import PolicyConfig

VALID_LOG_LEVELS = frozenset({"debug", "info", "warning", "error"})
VALID_LOG_FORMATS = frozenset({"text", "json"})


def _check_choice(name: str, value: str, choices: frozenset[str]) -> None:
    if value.lower() not in choices:
        raise ValueError(f"{name} must be one of {sorted(choices)}, got {value}")


@dataclass
class LoggingConfig:
    """Where and how videofix writes its own log."""

    level: str = "warning"
    file: Path | None = None
    """Rotating log file; None logs to stderr only."""
    format: str = "text"
    """Either text or json (one object per line)."""
    include_stderr: bool = False
    """Also log to stderr when a file is set."""
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5

    def __post_init__(self) -> None:
        _check_choice("level", self.level, VALID_LOG_LEVELS)
        _check_choice("format", self.format, VALID_LOG_FORMATS)
        if self.max_bytes <= 0 or self.backup_count < 0:
            raise ValueError("max_bytes must be positive and backup_count >= 0")


@dataclass
class ToolPathsConfig:
    """Configured locations of the external tools; None searches PATH."""

    ffmpeg: Path | None = None
    ffprobe: Path | None = None


@dataclass
class VideofixConfig:
    """Everything loaded from the configuration file."""

    policy: PolicyConfig
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    tools: ToolPathsConfig = field(default_factory=ToolPathsConfig)
    source: Path | None = None
    """File the configuration was read from, if any."""

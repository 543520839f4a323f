"""Configuration file loading.

The configuration file is YAML. Its location is, highest precedence first:

1. An explicit path (``--config``)
2. The VIDEOFIX_CONFIG_PATH environment variable
3. ``~/.videofix/config.yaml``

Tool paths from the file can be overridden by VIDEOFIX_FFMPEG_PATH and
VIDEOFIX_FFPROBE_PATH.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from videofix.config.env import EnvReader
from videofix.config.models import LoggingConfig, ToolPathsConfig, VideofixConfig
from videofix.policy.models import PolicyConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".videofix"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.yaml"

# Top-level sections that are not part of the policy document
_APP_SECTIONS = ("logging", "tools")


class ConfigError(Exception):
    """Raised when the configuration cannot be read or is invalid."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.message = message
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


def get_default_config_path(env_reader: EnvReader | None = None) -> Path:
    """Get the config file path, honouring VIDEOFIX_CONFIG_PATH."""
    reader = env_reader or EnvReader()
    env_path = reader.get_path("VIDEOFIX_CONFIG_PATH", must_exist=False)
    return env_path if env_path is not None else DEFAULT_CONFIG_FILE


def _format_validation_error(error: ValidationError) -> str:
    """Format a pydantic validation error into a user-friendly message."""
    lines = []
    for item in error.errors():
        loc = ".".join(str(x) for x in item.get("loc", []))
        msg = item.get("msg", "invalid value")
        lines.append(f"{loc}: {msg}" if loc else msg)
    return "invalid configuration: " + "; ".join(lines)


def _parse_logging(section: Any) -> LoggingConfig:
    if section is None:
        return LoggingConfig()
    if not isinstance(section, dict):
        raise ConfigError("logging must be a mapping")
    unknown = set(section) - {"level", "file", "format", "include_stderr"}
    if unknown:
        raise ConfigError(f"logging: unknown keys {sorted(unknown)}")
    try:
        return LoggingConfig(
            level=str(section.get("level", "warning")),
            file=Path(section["file"]).expanduser() if section.get("file") else None,
            format=str(section.get("format", "text")),
            include_stderr=bool(section.get("include_stderr", False)),
        )
    except ValueError as e:
        raise ConfigError(f"logging: {e}") from e


def _parse_tools(section: Any, env_reader: EnvReader) -> ToolPathsConfig:
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise ConfigError("tools must be a mapping")
    unknown = set(section) - {"ffmpeg", "ffprobe"}
    if unknown:
        raise ConfigError(f"tools: unknown keys {sorted(unknown)}")

    def _pick(name: str) -> Path | None:
        env_value = env_reader.get_path(
            f"VIDEOFIX_{name.upper()}_PATH", must_exist=False
        )
        if env_value is not None:
            return env_value
        file_value = section.get(name)
        return Path(file_value).expanduser() if file_value else None

    return ToolPathsConfig(ffmpeg=_pick("ffmpeg"), ffprobe=_pick("ffprobe"))


def load_config_from_dict(
    data: dict[str, Any],
    env_reader: EnvReader | None = None,
) -> VideofixConfig:
    """Build a VideofixConfig from an already-parsed document.

    Raises:
        ConfigError: If the document is invalid.
    """
    reader = env_reader or EnvReader()
    policy_data = {k: v for k, v in data.items() if k not in _APP_SECTIONS}

    try:
        policy = PolicyConfig.model_validate(policy_data)
    except ValidationError as e:
        raise ConfigError(_format_validation_error(e)) from e

    return VideofixConfig(
        policy=policy,
        logging=_parse_logging(data.get("logging")),
        tools=_parse_tools(data.get("tools"), reader),
    )


def load_config(
    path: Path | None = None,
    env_reader: EnvReader | None = None,
) -> VideofixConfig:
    """Load and validate the configuration file.

    Args:
        path: Config file to read. None uses get_default_config_path().
        env_reader: Optional EnvReader for testing.

    Returns:
        Validated VideofixConfig.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    reader = env_reader or EnvReader()
    config_path = path if path is not None else get_default_config_path(reader)

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigError("config file not found", config_path) from e
    except OSError as e:
        raise ConfigError(f"could not load config: {e}", config_path) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML syntax: {e}", config_path) from e

    if data is None:
        raise ConfigError("config file is empty", config_path)
    if not isinstance(data, dict):
        raise ConfigError("config file must be a YAML mapping", config_path)

    try:
        config = load_config_from_dict(data, reader)
    except ConfigError as e:
        raise ConfigError(e.message, config_path) from e

    config.source = config_path
    logger.debug(
        "Loaded %d target(s) from %s", len(config.policy.targets), config_path
    )
    return config

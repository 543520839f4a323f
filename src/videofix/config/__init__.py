"""Configuration management for videofix.

- load_config: Read and validate the YAML configuration file
- VideofixConfig: Policy targets plus logging and tool settings
- EnvReader: Testable environment variable reading
"""

from videofix.config.env import EnvReader
from videofix.config.loader import (
    DEFAULT_CONFIG_FILE,
    ConfigError,
    get_default_config_path,
    load_config,
    load_config_from_dict,
)
from videofix.config.logging_factory import build_logging_config
from videofix.config.models import LoggingConfig, ToolPathsConfig, VideofixConfig

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "ConfigError",
    "EnvReader",
    "LoggingConfig",
    "ToolPathsConfig",
    "VideofixConfig",
    "build_logging_config",
    "get_default_config_path",
    "load_config",
    "load_config_from_dict",
]

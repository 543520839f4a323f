"""Configuration loading for CLI commands.

The group callback records the global options; each command that needs the
configuration calls load_cli_config(), which loads the file once per
invocation and reconfigures logging with the file's settings underneath the
command-line overrides.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from videofix.cli.exit_codes import ExitCode
from videofix.config import (
    ConfigError,
    LoggingConfig,
    VideofixConfig,
    build_logging_config,
    load_config,
)
from videofix.logging import configure_logging

logger = logging.getLogger(__name__)


def apply_logging(ctx: click.Context, base: LoggingConfig) -> None:
    """Configure logging from base settings plus the global CLI options."""
    options = ctx.find_root().obj or {}
    try:
        logging_config = build_logging_config(
            base,
            level=options.get("log_level"),
            file=options.get("log_file"),
            format="json" if options.get("log_json") else None,
        )
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCode.CONFIG_ERROR)
    configure_logging(logging_config)


def load_cli_config(ctx: click.Context) -> VideofixConfig:
    """Load the configuration named by --config (or the default location).

    Exits with CONFIG_ERROR when the file is missing or invalid.
    """
    options = ctx.find_root().obj
    cached = options.get("config")
    if cached is not None:
        return cached

    config_path: Path | None = options.get("config_path")
    try:
        config = load_config(config_path)
    except ConfigError as e:
        logger.debug("Configuration load failed", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCode.CONFIG_ERROR)

    apply_logging(ctx, config.logging)
    logger.info(
        "videofix configured: config=%s, default_target=%s, targets=%d",
        config.source,
        config.policy.default_target,
        len(config.policy.targets),
    )
    options["config"] = config
    return config

"""CLI module for videofix."""

from pathlib import Path

import click

from videofix.cli.config_loader import apply_logging
from videofix.config import LoggingConfig


@click.group()
@click.version_option(package_name="videofix")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help=(
        "Configuration file "
        "(default: $VIDEOFIX_CONFIG_PATH or ~/.videofix/config.yaml)."
    ),
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: warning).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Shorthand for --log-level debug.",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
    debug: bool,
) -> None:
    """videofix - Check video files against a target format and fix them."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["log_level"] = "debug" if debug else log_level
    ctx.obj["log_file"] = log_file
    ctx.obj["log_json"] = log_json

    # Until a command loads the config file, log with defaults plus overrides
    apply_logging(ctx, LoggingConfig())


# Defer import to avoid circular dependency
def _register_commands():
    from videofix.cli.check import check_command
    from videofix.cli.inspect import inspect_command
    from videofix.cli.targets import targets_command

    main.add_command(check_command)
    main.add_command(inspect_command)
    main.add_command(targets_command)


_register_commands()

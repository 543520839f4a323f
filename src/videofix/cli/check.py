"""CLI check command: evaluate video files against a target and fix them."""

import logging
import shutil
import sys
from pathlib import Path

import click

from videofix.cli.config_loader import load_cli_config
from videofix.cli.exit_codes import ExitCode
from videofix.cli.formatting import (
    HumanReporter,
    format_summary_human,
    format_summary_json,
)
from videofix.executor import FFmpegTranscodeExecutor, ToolNotAvailableError
from videofix.introspector import FFprobeIntrospector
from videofix.policy import RemediationDirective, TargetNotFoundError, select_target
from videofix.scanner import select_files
from videofix.workflow import FileProcessor

logger = logging.getLogger(__name__)

# ffmpeg's -stats line wraps badly in narrower terminals
MIN_TERMINAL_WIDTH = 100


def _is_interactive() -> bool:
    """Check if running in interactive mode (TTY).

    Extracted as a function to allow easier mocking in tests.
    """
    return sys.stdin.isatty() and sys.stdout.isatty()


def _guard_terminal_size(directive: RemediationDirective) -> None:
    """Pause before a transcode when the terminal is too narrow."""
    if not _is_interactive():
        return
    columns = shutil.get_terminal_size().columns
    if columns < MIN_TERMINAL_WIDTH:
        logger.debug("terminal is %d columns wide", columns)
        click.pause(
            info=(
                "Terminal width is below minimum size for nice ffmpeg output. "
                "Press any key to continue..."
            )
        )


@click.command("check")
@click.argument("path", required=False, type=click.Path(path_type=Path))
@click.option(
    "--target",
    "-t",
    "target_name",
    default=None,
    help="Target to check against (default: the configured default_target).",
)
@click.option(
    "--fix",
    is_flag=True,
    default=False,
    help="Transcode non-compliant files to <name>.fixed.mkv.",
)
@click.option(
    "--dry-run",
    "-n",
    is_flag=True,
    default=False,
    help="Show the ffmpeg commands --fix would run without running them.",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["human", "json"]),
    default="human",
    help="Output format (default: human)",
)
@click.pass_context
def check_command(
    ctx: click.Context,
    path: Path | None,
    target_name: str | None,
    fix: bool,
    dry_run: bool,
    output_format: str,
) -> None:
    """Check video files for compliance with a target.

    PATH is a video file or a directory whose video files (not recursive)
    are checked. Defaults to the current directory.
    """
    config = load_cli_config(ctx)

    try:
        target = select_target(config.policy, target_name)
    except TargetNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCode.TARGET_NOT_FOUND)

    root = path if path is not None else Path.cwd()
    try:
        files = select_files(root)
    except FileNotFoundError:
        click.echo(f"Error: Path not found: {root}", err=True)
        sys.exit(ExitCode.PATH_NOT_FOUND)

    fix = fix or dry_run
    transcoder = None
    try:
        introspector = FFprobeIntrospector(config.tools.ffprobe)
        if fix and not dry_run:
            transcoder = FFmpegTranscodeExecutor(config.tools.ffmpeg)
            logger.debug("Using ffmpeg at %s", transcoder.tool_path)
    except ToolNotAvailableError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCode.TOOL_NOT_AVAILABLE)

    human = output_format == "human"
    if human:
        click.echo(f'Checking {len(files)} files against target "{target.name}"')

    processor = FileProcessor(
        introspector,
        target,
        fix=fix,
        dry_run=dry_run,
        transcoder=transcoder,
        reporter=HumanReporter() if human else None,
        before_transcode=_guard_terminal_size,
    )
    summary = processor.process_all(files)

    if human:
        click.echo("")
        click.echo(format_summary_human(summary))
    else:
        click.echo(format_summary_json(target.name, summary))

    if summary.has_errors:
        sys.exit(ExitCode.OPERATION_FAILED)

"""CLI inspect command: show the metadata videofix extracts from a file."""

import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

import click

from videofix.cli.config_loader import load_cli_config
from videofix.cli.exit_codes import ExitCode
from videofix.cli.formatting import format_metadata
from videofix.executor import ToolNotAvailableError
from videofix.introspector import FFprobeIntrospector, MediaIntrospectionError

logger = logging.getLogger(__name__)


@click.command("inspect")
@click.argument("file", type=click.Path(path_type=Path))
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["human", "json"]),
    default="human",
    help="Output format (default: human)",
)
@click.pass_context
def inspect_command(ctx: click.Context, file: Path, output_format: str) -> None:
    """Inspect a media file and display its container and streams.

    FILE is the path to the media file to inspect.
    """
    config = load_cli_config(ctx)

    if not file.exists():
        click.echo(f"Error: File not found: {file}", err=True)
        sys.exit(ExitCode.PATH_NOT_FOUND)

    try:
        introspector = FFprobeIntrospector(config.tools.ffprobe)
    except ToolNotAvailableError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCode.TOOL_NOT_AVAILABLE)

    try:
        metadata = introspector.get_file_metadata(file)
    except MediaIntrospectionError as e:
        click.echo(f"Error: Could not inspect file: {file}", err=True)
        click.echo(f"Reason: {e}", err=True)
        sys.exit(ExitCode.OPERATION_FAILED)

    if output_format == "json":
        click.echo(json.dumps({"path": str(file), **asdict(metadata)}, indent=2))
    else:
        click.echo(file.name)
        click.echo(format_metadata(metadata))

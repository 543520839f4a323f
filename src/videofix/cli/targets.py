"""CLI targets command: list configured targets."""

import json

import click

from videofix.cli.config_loader import load_cli_config
from videofix.cli.formatting import format_rule
from videofix.policy import find_config_problems


@click.command("targets")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["human", "json"]),
    default="human",
    help="Output format (default: human)",
)
@click.pass_context
def targets_command(ctx: click.Context, output_format: str) -> None:
    """List the targets in the configuration file.

    The default target is marked with an asterisk. Problems such as a
    default_target that names no target, or duplicate target names, are
    reported as warnings.
    """
    config = load_cli_config(ctx)
    policy = config.policy
    problems = find_config_problems(policy)

    if output_format == "json":
        output = {
            "default_target": policy.default_target,
            "targets": [target.model_dump(mode="json") for target in policy.targets],
            "problems": problems,
        }
        click.echo(json.dumps(output, indent=2, sort_keys=False))
        return

    for target in policy.targets:
        marker = "*" if target.name == policy.default_target else " "
        spec = target.format_spec
        default = target.default
        click.echo(f"{marker} {target.name}")
        click.echo(f"    container: {format_rule(spec.container)}")
        click.echo(f"    video:     {format_rule(spec.video)}")
        click.echo(f"    audio:     {format_rule(spec.audio)}")
        click.echo(f"    pix_fmt:   {format_rule(spec.pix_fmt)}")
        click.echo(
            f"    fix with:  {default.video} / {default.audio} / {default.pix_fmt}"
        )

    for problem in problems:
        click.echo(f"Warning: {problem}", err=True)

"""Hashtag CLI package."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import click

from . import bench, config_cmd, scan, tags
from ._common import CONTEXT_SETTINGS, HashtagCliError

__all__ = ["cli", "main", "HashtagCliError"]


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-c",
    "--config",
    "config_path_opt",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to configuration TOML file.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, config_path_opt: Path | None, verbose: bool) -> None:
    """Extract hashtags from text."""

    ctx.ensure_object(dict)
    invoked = ctx.invoked_subcommand

    if invoked is None:
        click.echo(ctx.command.get_help(ctx))
        ctx.exit(0)

    ctx.obj["config_path"] = config_path_opt
    ctx.obj["verbose"] = verbose


for register_command in (
    scan.register,
    tags.register,
    bench.register,
    config_cmd.register,
):
    register_command(cli)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else None
    try:
        result = cli.main(args=args, prog_name="hashtag", standalone_mode=False)
    except click.ClickException as exc:
        click.echo(f"Error: {exc.format_message()}", err=True)
        return 1
    except SystemExit as exc:
        return int(exc.code or 0)
    return result if isinstance(result, int) else 0

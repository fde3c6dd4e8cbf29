"""Config command for the hashtag CLI."""

from __future__ import annotations

from pathlib import Path

import click

from ..config import DEFAULT_CONFIG_PATH, HashtagConfig, bootstrap_config_file
from ._common import get_config


@click.command(name="config")
@click.option(
    "--init",
    "init_file",
    is_flag=True,
    help="Create a default configuration file if none exists.",
)
@click.pass_context
def config(ctx: click.Context, init_file: bool) -> None:
    """Show the effective configuration."""

    if init_file:
        selected_path: Path | None = ctx.obj.get("config_path")
        effective_path = selected_path or DEFAULT_CONFIG_PATH
        if bootstrap_config_file(effective_path):
            click.echo(f"Created configuration at {effective_path}")
        else:
            click.echo(f"Configuration already exists at {effective_path}")

    current = get_config(ctx)
    source = current.source_path or "(built-in defaults)"
    click.echo(f"# source: {source}")
    click.echo(_format_config(current))


def _format_config(config: HashtagConfig) -> str:
    def quote(value: str) -> str:
        return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'

    lines = [
        "[hashtag]",
        f"format = {quote(config.format)}",
        f"offsets = {quote(config.offsets)}",
        f"encoding = {quote(config.encoding)}",
        f"log_level = {quote(config.log_level)}",
    ]
    return "\n".join(lines)


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(config)

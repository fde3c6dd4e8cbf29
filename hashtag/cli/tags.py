"""Tags command for the hashtag CLI."""

from __future__ import annotations

from pathlib import Path

import click

from ..utils.tags import extract_tags
from ._common import display_text, get_config, read_sources


@click.command(name="tags")
@click.argument(
    "paths",
    nargs=-1,
    type=click.Path(path_type=Path, dir_okay=False, allow_dash=True),
)
@click.option(
    "-e",
    "--text",
    "texts",
    multiple=True,
    help="Read tags from TEXT directly (repeatable).",
)
@click.option(
    "-u",
    "--unique",
    is_flag=True,
    help="Print each distinct tag once per source.",
)
@click.pass_context
def tags(
    ctx: click.Context,
    paths: tuple[Path, ...],
    texts: tuple[str, ...],
    unique: bool,
) -> None:
    """Print the hashtags found in the input, one per line."""

    config = get_config(ctx)
    sources = read_sources(paths, texts, as_bytes=False, encoding=config.encoding)

    for _label, content in sources:
        for tag in extract_tags(content, unique=unique):
            click.echo(display_text(tag))


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(tags)

"""Scan command for the hashtag CLI."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from ..config import OFFSET_MODES, OUTPUT_FORMATS
from ..scanner import scan as scan_text
from ._common import display_text, get_config, read_sources

logger = logging.getLogger(__name__)


@click.command(name="scan")
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
    help="Scan TEXT directly (repeatable).",
)
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (defaults to the configured one).",
)
@click.option(
    "--offsets",
    type=click.Choice(OFFSET_MODES),
    default=None,
    help="Report character or UTF-8 byte offsets.",
)
@click.pass_context
def scan(
    ctx: click.Context,
    paths: tuple[Path, ...],
    texts: tuple[str, ...],
    output_format: str | None,
    offsets: str | None,
) -> None:
    """Print every hashtag with its start and end offsets."""

    config = get_config(ctx)
    output_format = output_format or config.format
    offsets = offsets or config.offsets

    sources = read_sources(
        paths,
        texts,
        as_bytes=offsets == "bytes",
        encoding=config.encoding,
        decode_hint="; retry with --offsets bytes",
    )
    show_label = len(sources) > 1

    for label, content in sources:
        count = 0
        for match in scan_text(content):
            count += 1
            if output_format == "json":
                record = match.to_dict()
                record["source"] = label
                click.echo(json.dumps(record, ensure_ascii=False))
            else:
                prefix = f"{label}:" if show_label else ""
                text = display_text(match.text)
                click.echo(f"{prefix}{match.start}\t{match.end}\t#{text}")
        logger.info("%s: %d hashtag(s)", label, count)


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(scan)

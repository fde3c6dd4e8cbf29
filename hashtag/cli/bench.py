"""Bench command for the hashtag CLI."""

from __future__ import annotations

import logging
import time
from pathlib import Path

import click

from ..scanner import parse_hashtags
from ._common import HashtagCliError, get_config

logger = logging.getLogger(__name__)


@click.command(name="bench")
@click.argument("path", type=click.Path(path_type=Path, dir_okay=False))
@click.pass_context
def bench(ctx: click.Context, path: Path) -> None:
    """Time scanning PATH line by line."""

    config = get_config(ctx)

    started = time.perf_counter()
    try:
        contents = path.read_text(encoding=config.encoding)
    except OSError as exc:
        raise HashtagCliError(f"Cannot read {path}: {exc.strerror}") from exc
    except UnicodeDecodeError as exc:
        raise HashtagCliError(f"{path} is not valid {config.encoding} text") from exc
    read_elapsed = time.perf_counter() - started

    lines = contents.splitlines()
    count = 0
    started = time.perf_counter()
    for line in lines:
        count += len(parse_hashtags(line))
    parse_elapsed = time.perf_counter() - started

    logger.debug("Scanned %d line(s) from %s", len(lines), path)
    click.echo(f"Found {count} total hashtags")
    click.echo(f"Reading the file took {read_elapsed * 1000:.3f} ms")
    click.echo(f"Parsing took {parse_elapsed * 1000:.3f} ms")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(bench)

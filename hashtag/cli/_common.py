"""Shared helpers for hashtag CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Sequence

import click

from ..config import ConfigError, HashtagConfig, load_config
from ..scanner import Text

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}
LOG_FORMAT = "%(levelname)s: %(message)s"

STDIN_LABEL = "<stdin>"
INLINE_LABEL = "<text>"

logger = logging.getLogger("hashtag")


class HashtagCliError(click.ClickException):
    """Shared Click exception wrapper for CLI failures."""


def get_config(ctx: click.Context) -> HashtagConfig:
    """Return the configuration for the current CLI invocation, loading it once."""

    config: HashtagConfig | None = ctx.obj.get("config")
    if config is not None:
        return config

    config_path_opt: Path | None = ctx.obj.get("config_path")
    try:
        config = load_config(config_path_opt)
    except ConfigError as exc:
        raise HashtagCliError(str(exc)) from exc

    level = "DEBUG" if ctx.obj.get("verbose") else config.log_level
    configure_logging(level)
    logger.debug("Loaded configuration from %s", config.source_path or "defaults")

    ctx.obj["config"] = config
    return config


def configure_logging(level: str) -> None:
    logging.basicConfig(format=LOG_FORMAT)
    logger.setLevel(level)


def read_sources(
    paths: Sequence[Path],
    texts: Sequence[str],
    *,
    as_bytes: bool,
    encoding: str,
    decode_hint: str = "",
) -> list[tuple[str, Text]]:
    """Collect ``(label, content)`` pairs for inline texts, files and stdin.

    Stdin is read when it is named as ``-`` or when nothing else was given.
    Content is ``bytes`` when ``as_bytes`` is set, decoded ``str`` otherwise.
    ``decode_hint`` is appended to the error raised for undecodable input.
    """

    sources: list[tuple[str, Text]] = []
    for text in texts:
        sources.append((INLINE_LABEL, text.encode("utf-8") if as_bytes else text))

    if not paths and not texts:
        paths = [Path("-")]

    for path in paths:
        if str(path) == "-":
            label = STDIN_LABEL
            raw = click.get_binary_stream("stdin").read()
        else:
            label = str(path)
            try:
                raw = path.read_bytes()
            except OSError as exc:
                raise HashtagCliError(f"Cannot read {path}: {exc.strerror}") from exc

        if as_bytes:
            sources.append((label, raw))
            continue
        try:
            sources.append((label, raw.decode(encoding)))
        except UnicodeDecodeError as exc:
            raise HashtagCliError(
                f"{label} is not valid {encoding} text{decode_hint}"
            ) from exc

    return sources


def display_text(value: Text) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", "replace")
    return value

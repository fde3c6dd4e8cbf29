"""Configuration management for the hashtag command line."""

from __future__ import annotations

import codecs
import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONFIG_DIR = Path("~/.config/hashtag").expanduser()
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.toml"

OUTPUT_FORMATS = ("text", "json")
OFFSET_MODES = ("chars", "bytes")


class ConfigError(RuntimeError):
    """Base error for configuration related issues."""


class MissingConfigError(ConfigError):
    """Raised when an explicitly requested configuration file cannot be found."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Configuration file not found at {path}")
        self.path = path


class InvalidConfigError(ConfigError):
    """Raised when the configuration file holds malformed values."""


@dataclass(slots=True)
class HashtagConfig:
    """In-memory representation of the configuration file."""

    format: str = "text"
    offsets: str = "chars"
    encoding: str = "utf-8"
    log_level: str = "WARNING"
    source_path: Path | None = None


def load_config(path: Path | None = None) -> HashtagConfig:
    """Load configuration from ``path`` or the default location.

    Parameters
    ----------
    path:
        Optional location of the configuration file. When ``None`` the default
        path (``~/.config/hashtag/config.toml``) is used, and built-in defaults
        apply if that file does not exist.

    Raises
    ------
    MissingConfigError
        If ``path`` was given and does not exist.
    InvalidConfigError
        If the file is not valid TOML or holds malformed settings.
    """

    config_path = (path or DEFAULT_CONFIG_PATH).expanduser()
    if not config_path.exists():
        if path is not None:
            raise MissingConfigError(config_path)
        return HashtagConfig()

    try:
        with config_path.open("rb") as fh:
            raw = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise InvalidConfigError(f"Invalid TOML in {config_path}: {exc}") from exc

    section = raw.get("hashtag", {})
    if not isinstance(section, dict):
        raise InvalidConfigError("'hashtag' section must be a table")

    output_format = _read_choice(section, "format", OUTPUT_FORMATS, "text")
    offsets = _read_choice(section, "offsets", OFFSET_MODES, "chars")

    encoding = _read_string(section, "encoding", "utf-8")
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise InvalidConfigError(f"Unknown encoding '{encoding}'") from exc

    log_level = _read_string(section, "log_level", "WARNING").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise InvalidConfigError(f"Unknown log level '{log_level}'")

    return HashtagConfig(
        format=output_format,
        offsets=offsets,
        encoding=encoding,
        log_level=log_level,
        source_path=config_path,
    )


def _read_string(section: dict, key: str, default: str) -> str:
    value = section.get(key)
    if value is None:
        return default
    if not isinstance(value, str) or not value.strip():
        raise InvalidConfigError(f"'{key}' must be a non-empty string when provided")
    return value.strip()


def _read_choice(
    section: dict, key: str, choices: tuple[str, ...], default: str
) -> str:
    value = _read_string(section, key, default).lower()
    if value not in choices:
        allowed = ", ".join(choices)
        raise InvalidConfigError(f"'{key}' must be one of: {allowed}")
    return value


def bootstrap_config_file(path: Path) -> bool:
    """Create a default config file if missing.

    Returns True when the file was created, False if it already existed.
    """

    if path.exists():
        return False

    config_dir = path.parent
    config_dir.mkdir(parents=True, exist_ok=True)
    default_content = (
        "[hashtag]\n"
        'format = "text"\n'
        'offsets = "chars"\n'
        'encoding = "utf-8"\n'
        'log_level = "WARNING"\n'
    )
    path.write_text(default_content, encoding="utf-8")
    return True

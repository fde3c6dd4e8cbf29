"""Hashtag extraction with platform-style boundary rules."""

from __future__ import annotations

from .scanner import HashtagScanner, Match, parse_hashtags, scan
from .utils.tags import extract_tags

__all__ = [
    "HashtagScanner",
    "Match",
    "extract_tags",
    "parse_hashtags",
    "scan",
]

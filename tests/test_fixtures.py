"""Scan every sample from the JSON fixture file."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from hashtag import Match, parse_hashtags

FIXTURE_PATH = Path(__file__).parent / "hashtag_tests.json"


def _load_cases() -> list[tuple[str, list[Match]]]:
    raw = json.loads(FIXTURE_PATH.read_text(encoding="utf-8"))
    return [
        (case["text"], [Match.from_dict(tag) for tag in case["hashtags"]])
        for case in raw
    ]


@pytest.mark.parametrize("text,expected", _load_cases())
def test_fixture_case(text: str, expected: list[Match]) -> None:
    assert parse_hashtags(text) == expected, f"Text: {text!r}"

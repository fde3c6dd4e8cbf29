from __future__ import annotations

import json
import logging

import pytest
from hashtag import HashtagScanner, Match, parse_hashtags, scan

SCAN_CASES = [
    ("", []),
    ("no hashtags here", []),
    ("#rust is #awesome", [("rust", 0, 5), ("awesome", 9, 17)]),
    ("#123", []),
    ("#123abc", [("123abc", 0, 7)]),
    ("##tag", []),
    ("foo#bar", []),
    ("(#tag)", [("tag", 1, 5)]),
    ("#1#2tag", []),
    ("#tag!", [("tag", 0, 4)]),
    ("1#tag", []),
    ("_#tag", []),
    ("C# is a language", []),
    ("#a#b", [("a", 0, 2)]),
    ("#_", [("_", 0, 2)]),
    ("#123_", [("123_", 0, 5)]),
    ("x #123 #456a", [("456a", 7, 12)]),
    ("tag.#dot", [("dot", 4, 8)]),
    ("#tag\n#next", [("tag", 0, 4), ("next", 5, 10)]),
    ("#test-123", [("test", 0, 5)]),
    ("#test_123", [("test_123", 0, 9)]),
    ("#bob's thing is #cool yes", [("bob", 0, 4), ("cool", 16, 21)]),
    ("#café au lait", [("café", 0, 5)]),
    ("#日本語 と #東京", [("日本語", 0, 4), ("東京", 7, 10)]),
    ("#١٢٣", []),
    ("#hello😀world", [("hello", 0, 6)]),
    ("#½", []),
    ("here # comes", []),
    ("here comes#", []),
    ("here ## comes", []),
    ("here comes##", []),
    ("##here comes", []),
]

PROPERTY_CORPUS = [text for text, _ in SCAN_CASES] + [
    "Here comes some text #foo #bar",
    "#foo here comes #foo",
    "###a ##b #c# #d#e (#f) [#g] #h_i_j #k1 #2",
    "mixed #Ünïcödé and #ελληνικά plus #русский",
    "#" * 10,
    "#x" * 10,
    " #x" * 10,
]


def _triples(text: str) -> list[tuple[str, int, int]]:
    return [(m.text, m.start, m.end) for m in scan(text)]


@pytest.mark.parametrize("text,expected", SCAN_CASES)
def test_scan_cases(text: str, expected: list[tuple[str, int, int]]) -> None:
    assert _triples(text) == expected, f"Input: {text!r}"


def test_parses_hashtags_in_sentence() -> None:
    text = "Here comes some text #foo #bar"
    assert parse_hashtags(text) == [Match("foo", 21, 25), Match("bar", 26, 30)]


def test_parses_tags_at_start() -> None:
    assert parse_hashtags("#foo here comes #foo") == [
        Match("foo", 0, 4),
        Match("foo", 16, 20),
    ]


@pytest.mark.parametrize("text", PROPERTY_CORPUS)
def test_match_invariants(text: str) -> None:
    previous_end = 0
    for match in scan(text):
        assert 0 <= match.start < match.end <= len(text)
        assert len(match.text) == match.end - match.start - 1
        assert text[match.start] == "#"
        assert text[match.start + 1 : match.end] == match.text
        assert match.start >= previous_end
        previous_end = match.end


@pytest.mark.parametrize("text", PROPERTY_CORPUS)
def test_rescanning_a_match_yields_itself(text: str) -> None:
    for match in scan(text):
        tag = "#" + match.text
        assert parse_hashtags(tag) == [Match(match.text, 0, len(tag))]


def test_scan_is_lazy_and_independent() -> None:
    text = "#one #two #three"
    scanner = scan(text)
    assert isinstance(scanner, HashtagScanner)
    assert iter(scanner) is scanner
    assert next(scanner).text == "one"

    # A fresh scan starts over regardless of the first one's position.
    assert [m.text for m in scan(text)] == ["one", "two", "three"]
    assert [m.text for m in scanner] == ["two", "three"]


def test_exhausted_scanner_stays_exhausted() -> None:
    scanner = scan("#only")
    assert list(scanner) == [Match("only", 0, 5)]
    assert list(scanner) == []
    with pytest.raises(StopIteration):
        next(scanner)


def test_none_is_treated_as_empty() -> None:
    assert parse_hashtags(None) == []


def test_rejects_non_text_input() -> None:
    with pytest.raises(TypeError):
        scan(42)  # type: ignore[arg-type]


def test_bytes_offsets_are_utf8_offsets() -> None:
    data = "#café #x".encode("utf-8")
    matches = parse_hashtags(data)
    assert matches == [Match("café".encode("utf-8"), 0, 6), Match(b"x", 7, 9)]
    for match in matches:
        assert data[match.start + 1 : match.end] == match.text


def test_bytes_multibyte_tag() -> None:
    data = "#日 x".encode("utf-8")
    assert parse_hashtags(data) == [Match("日".encode("utf-8"), 0, 4)]


def test_invalid_utf8_bytes_are_not_word_characters() -> None:
    assert parse_hashtags(b"\xff#tag") == [Match(b"tag", 1, 5)]
    assert parse_hashtags(b"#ab\xffcd #ef") == [Match(b"ab", 0, 3), Match(b"ef", 7, 10)]
    assert parse_hashtags(b"#\xff\xfe") == []


def test_bytearray_input() -> None:
    assert parse_hashtags(bytearray(b"(#tag)")) == [Match(b"tag", 1, 5)]


def test_match_span_and_dict() -> None:
    match = Match("tag", 1, 5)
    assert match.span == (1, 5)
    assert match.to_dict() == {"text": "tag", "start": 1, "end": 5}
    assert Match.from_dict(match.to_dict()) == match
    assert Match(b"caf\xc3\xa9", 0, 6).to_dict()["text"] == "café"


def test_bytes_match_dict_round_trip() -> None:
    match = parse_hashtags("#café".encode("utf-8"))[0]
    record = match.to_dict()
    assert record == {"text": "café", "start": 0, "end": 6, "bytes": True}

    restored = Match.from_dict(json.loads(json.dumps(record)))
    assert restored == match
    assert restored.text == "café".encode("utf-8")


@pytest.mark.parametrize(
    "text,start,end",
    [("", 0, 1), ("tag", 0, 3), ("tag", 0, 5), ("ab", -1, 2)],
)
def test_match_rejects_inconsistent_fields(text: str, start: int, end: int) -> None:
    with pytest.raises(ValueError):
        Match(text, start, end)


def test_match_is_immutable() -> None:
    match = Match("tag", 0, 4)
    with pytest.raises(AttributeError):
        match.text = "other"  # type: ignore[misc]


def test_rejections_are_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="hashtag.scanner")
    assert parse_hashtags("#123 foo#bar # x") == []
    messages = [record.getMessage() for record in caplog.records]
    assert any("numeric-only" in message for message in messages)
    assert any("glued" in message for message in messages)
    assert any("without a tag body" in message for message in messages)

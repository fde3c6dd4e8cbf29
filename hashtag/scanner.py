"""Hashtag scanning.

The scanner walks the input once, left to right. A ``#`` opens a candidate
only when it sits at the start of the input or after a character that is
neither a word character nor another ``#``. The candidate body is the
maximal run of tag characters following the ``#``; it is emitted when it is
non-empty and not made only of digits. A rejected ``#`` consumes nothing but
itself, so scanning resumes on the character right after it.

Offsets always slice the scanned object: code-point indices for ``str`` and
UTF-8 byte offsets for ``bytes``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator, Mapping

from .utils.chars import HASH, is_all_digits, is_tag_char, is_word_char

logger = logging.getLogger(__name__)

Text = str | bytes


@dataclass(frozen=True, slots=True)
class Match:
    """A hashtag found in the input.

    ``start`` is the offset of the ``#`` and ``end`` is one past the last
    character of the body, so ``source[start:end]`` is the full hashtag and
    ``source[start + 1:end]`` equals ``text``.
    """

    text: Text
    start: int
    end: int

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Match text must not be empty")
        if self.start < 0:
            raise ValueError(f"Match start must be non-negative, got {self.start}")
        if self.end - self.start - 1 != len(self.text):
            raise ValueError(
                f"Match span {self.start}..{self.end} does not fit text {self.text!r}"
            )

    @property
    def span(self) -> tuple[int, int]:
        return self.start, self.end

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping.

        Matches found in ``bytes`` carry byte offsets, so they are flagged with
        ``"bytes": True`` and their text is stored decoded. Tag bodies only
        hold letters, digits and underscores, which always decode cleanly.
        """

        if isinstance(self.text, bytes):
            return {
                "text": self.text.decode("utf-8"),
                "start": self.start,
                "end": self.end,
                "bytes": True,
            }
        return {"text": self.text, "start": self.start, "end": self.end}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Match":
        text = data["text"]
        if data.get("bytes") and isinstance(text, str):
            text = text.encode("utf-8")
        return cls(text=text, start=int(data["start"]), end=int(data["end"]))


def _byte_offsets(chars: str) -> list[int]:
    """Return the UTF-8 byte offset of every character, plus the total length."""

    offsets = [0]
    total = 0
    for ch in chars:
        total += len(ch.encode("utf-8", "surrogateescape"))
        offsets.append(total)
    return offsets


class HashtagScanner:
    """Iterator over the hashtags of a single input.

    The scanner holds a cursor into the input and advances it on every call
    to ``next()``. It never raises for ``str`` or ``bytes`` input; bytes that
    are not valid UTF-8 are treated as single-byte non-word characters.
    """

    __slots__ = ("_source", "_chars", "_offsets", "_pos")

    def __init__(self, source: Text | None) -> None:
        if source is None:
            source = ""
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = bytes(source)
            chars = source.decode("utf-8", "surrogateescape")
            offsets: list[int] | None = _byte_offsets(chars)
        elif isinstance(source, str):
            chars = source
            offsets = None
        else:
            raise TypeError(
                f"scan() expects str or bytes, got {type(source).__name__}"
            )

        self._source: Text = source
        self._chars = chars
        self._offsets = offsets
        self._pos = 0

    def __iter__(self) -> Iterator[Match]:
        return self

    def __next__(self) -> Match:
        chars = self._chars
        length = len(chars)
        pos = self._pos

        while pos < length:
            hash_pos = chars.find(HASH, pos)
            if hash_pos < 0:
                break
            # Whatever happens to this candidate, the '#' itself is consumed.
            pos = hash_pos + 1

            if hash_pos > 0:
                prev = chars[hash_pos - 1]
                if prev == HASH or is_word_char(prev):
                    logger.debug("Skipping '#' at %d glued to %r", hash_pos, prev)
                    continue

            end = pos
            while end < length and is_tag_char(chars[end]):
                end += 1

            run = chars[pos:end]
            if not run:
                logger.debug("Skipping '#' at %d without a tag body", hash_pos)
                continue
            if is_all_digits(run):
                logger.debug("Skipping numeric-only tag %r at %d", run, hash_pos)
                continue

            self._pos = end
            return self._build(hash_pos, end)

        self._pos = length
        raise StopIteration

    def _offset(self, index: int) -> int:
        if self._offsets is None:
            return index
        return self._offsets[index]

    def _build(self, hash_pos: int, end: int) -> Match:
        start = self._offset(hash_pos)
        stop = self._offset(end)
        return Match(text=self._source[start + 1 : stop], start=start, end=stop)


def scan(source: Text | None) -> HashtagScanner:
    """Return a lazy iterator over the hashtags in ``source``.

    Matches come out in increasing ``start`` order and never overlap. Each
    call starts a fresh scan; stopping early has no side effect.
    """

    return HashtagScanner(source)


def parse_hashtags(source: Text | None) -> list[Match]:
    """Return every hashtag in ``source`` as a list."""

    return list(scan(source))

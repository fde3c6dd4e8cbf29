"""Hashtag text helpers built on the scanner."""

from __future__ import annotations

from ..scanner import Text, scan


def extract_tags(text: Text | None, *, unique: bool = False) -> tuple[Text, ...]:
    """Return the body of every hashtag in ``text`` in first-seen order.

    Rules:
    - Tags are reported exactly as written; no case folding is applied.
    - With ``unique`` set, later repeats of an identical tag are dropped.
    """

    seen: set[Text] = set()
    ordered: list[Text] = []
    for match in scan(text):
        tag = match.text
        if unique:
            if tag in seen:
                continue
            seen.add(tag)
        ordered.append(tag)
    return tuple(ordered)

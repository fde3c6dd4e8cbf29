"""Character classes used to delimit hashtags.

A single classification is applied everywhere: a character belongs to a tag
(and counts as a "word" character when it precedes a ``#``) when its Unicode
general category is a letter (``L*``) or a decimal digit (``Nd``), or when it
is the underscore.
"""

from __future__ import annotations

import unicodedata

HASH = "#"
UNDERSCORE = "_"


def is_tag_char(ch: str) -> bool:
    """Return True when ``ch`` may appear inside a hashtag body."""

    if ch == UNDERSCORE:
        return True
    category = unicodedata.category(ch)
    return category[0] == "L" or category == "Nd"


# Word characters and tag characters share one definition.
is_word_char = is_tag_char


def is_digit(ch: str) -> bool:
    return unicodedata.category(ch) == "Nd"


def is_all_digits(run: str) -> bool:
    """Return True for a non-empty run made only of decimal digits."""

    return bool(run) and all(is_digit(ch) for ch in run)

"""Small text helpers used when reading XPM data."""

from __future__ import annotations

import re

_BLANKS = re.compile(r"[ \t]+")


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("the searched text must not be empty")


def find(text: str, needle: str, limit: int) -> int:
    """Return the first position of ``needle`` in ``text``, or -1.

    ``limit`` is the room left in the buffer: a needle longer than it is
    never found.
    """
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    return text.find(needle)


def find_unquoted(text: str, needle: str, limit: int) -> int:
    """Like :func:`find`, but skip matches that lie inside double quotes."""
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs only."""
    return [word for word in _BLANKS.split(text) if word]
"""Escape-aware cursor scanning over selector text.

A character is *escaped* when the character right before it is a backslash.
Escaped characters are never treated as markers, boundaries, or separators.
"""

from __future__ import annotations

from collections.abc import Collection

__all__ = [
    "ESCAPE",
    "MARKERS",
    "NAME_MARKERS",
    "NAME_BOUNDARIES",
    "QUOTES",
    "is_escaped",
    "find_unescaped",
    "find_value_end",
    "split_unescaped",
]

ESCAPE = "\\"

# Stop points while rewriting: id, class, and attribute-value assignment.
MARKERS = frozenset("#.=")

# Markers that introduce an id or class name.
NAME_MARKERS = frozenset("#.")

# Characters that end an id or class name.
NAME_BOUNDARIES = frozenset(":#>~[+*. ")

QUOTES = frozenset("\"'")


def is_escaped(text: str, index: int) -> bool:
    """Return True if the character at *index* is preceded by a backslash."""
    return index > 0 and text[index - 1] == ESCAPE


def find_unescaped(text: str, chars: Collection[str], start: int = 0) -> int:
    """Return the index of the first unescaped character of *chars* at or after *start*.

    Returns -1 when there is none.
    """
    for index in range(start, len(text)):
        if text[index] in chars and not is_escaped(text, index):
            return index
    return -1


def find_value_end(text: str, start: int) -> tuple[int, int]:
    """Locate the closing bracket of an attribute value starting at *start*.

    The value ends at the first unescaped ``]``, or at an unescaped quote
    immediately followed by ``]``. Returns ``(end, resume)`` where *end* is
    the index just past the value text and *resume* the index just past the
    bracket, or ``(-1, -1)`` when the bracket is missing.
    """
    for index in range(start, len(text)):
        if is_escaped(text, index):
            continue
        char = text[index]
        if char in QUOTES and text[index + 1:index + 2] == "]":
            return index, index + 2
        if char == "]":
            return index, index + 1
    return -1, -1


def split_unescaped(text: str, separator: str) -> list[str]:
    """Split *text* on every unescaped occurrence of the single character *separator*."""
    parts: list[str] = []
    start = 0
    while (index := find_unescaped(text, separator, start)) != -1:
        parts.append(text[start:index])
        start = index + 1
    parts.append(text[start:])
    return parts

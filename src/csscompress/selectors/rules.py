"""Selector rewriting rules: case folding, strict ids, repeats, and pseudo spacing.

Example:
    parse('DIV.Nav > A[HREF="#top"]', token="@T@")  ->  'div.Nav > a[href=@T@#top@T@]'
    strictid("div#outer span#inner")               ->  '#inner'
    repeats("a,b,a")                                ->  'a,b'
    pseudo_space("p:first-line")                    ->  'p:first-line '
"""

from __future__ import annotations

import re
import string

from csscompress.selectors.scanner import (
    MARKERS,
    NAME_BOUNDARIES,
    NAME_MARKERS,
    QUOTES,
    find_unescaped,
    find_value_end,
    split_unescaped,
)

__all__ = ["parse", "strictid", "repeats", "pseudo_space"]

# Applied in order; the second rule collapses the double space the first can produce.
_PSEUDO_SPACING: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r":first-(letter|line),", re.IGNORECASE), r":first-\1 ,"),
    (re.compile(r"  "), " "),
    (re.compile(r":first-(letter|line)$", re.IGNORECASE), r":first-\1 "),
)


_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _keep(text: str) -> str:
    return text


def _ascii_lower(text: str) -> str:
    """Lowercase ASCII letters only; CSS names fold ASCII case-insensitively."""
    return text.translate(_ASCII_LOWER)


def parse(selector: str, token: str, lowercase: bool = True) -> str:
    """Case-fold plain selector text and wrap attribute values in *token*.

    Id and class names are copied through untouched. Attribute values lose
    their surrounding quotes and come out as ``token + value + token + "]"``.
    An unterminated name or attribute value copies the remainder verbatim.
    """
    fold = _ascii_lower if lowercase else _keep
    out: list[str] = []
    pos = 0

    while (mark := find_unescaped(selector, MARKERS, pos)) != -1:
        out.append(fold(selector[pos:mark + 1]))
        pos = mark + 1

        if selector[mark] in NAME_MARKERS:
            end = find_unescaped(selector, NAME_BOUNDARIES, pos)
            if end == -1:
                out.append(selector[pos:])
                pos = len(selector)
                break
            out.append(selector[pos:end])
            pos = end
            continue

        end, resume = find_value_end(selector, pos)
        if end == -1:
            out.append(selector[pos:])
            pos = len(selector)
            break
        if selector[pos] in QUOTES:
            pos += 1
        out.append(f"{token}{selector[pos:max(pos, end)]}{token}]")
        pos = resume

    out.append(fold(selector[pos:]))
    return "".join(out)


def strictid(selector: str) -> str:
    """Reduce every comma-separated part holding an id to ``#`` plus its last id segment."""
    parts = []
    for part in split_unescaped(selector, ","):
        if find_unescaped(part, "#") != -1:
            part = "#" + split_unescaped(part, "#")[-1]
        parts.append(part)
    return ",".join(parts)


def repeats(selector: str) -> str:
    """Drop repeated comma-separated parts, keeping the first occurrence of each.

    Parts are compared with surrounding whitespace ignored, but otherwise as
    exact strings (``.a.b`` and ``.b.a`` are different parts).
    """
    seen: set[str] = set()
    kept: list[str] = []
    for part in split_unescaped(selector, ","):
        key = part.strip()
        if key in seen:
            continue
        seen.add(key)
        kept.append(part)
    return ",".join(kept)


def pseudo_space(selector: str) -> str:
    """Add a space after ``:first-letter``/``:first-line`` before a comma or at the end."""
    for pattern, replacement in _PSEUDO_SPACING:
        selector = pattern.sub(replacement, selector)
    return selector

"""Escape-aware search for closing delimiters.

A delimiter preceded by a run of ``k`` backslashes is live when ``k`` is
even: ``\\\\$`` is an escaped backslash followed by a real ``$``, while
``\\$`` is a literal dollar sign.

Complexity:
Each call is linear in the distance scanned. Backslash runs are walked once
per candidate, and a run can only precede one candidate, so the total work
is O(n) in the scanned length.

"""

from __future__ import annotations

from rawlatex.charsets import BACKSLASH

NOT_FOUND = -1


def escape_run(src: str, pos: int) -> int:
    """Count consecutive backslashes immediately before ``src[pos]``.

    Args:
        src: Source buffer
        pos: Offset of the candidate delimiter

    Returns:
        Length of the backslash run (0 if none)

    """
    i = pos - 1
    while i >= 0 and src[i] == BACKSLASH:
        i -= 1
    return pos - 1 - i


def is_escaped(src: str, pos: int) -> bool:
    """True if the character at pos is escaped by an odd backslash run."""
    return escape_run(src, pos) % 2 == 1


def find_unescaped(src: str, delimiter: str, start: int, end: int | None = None) -> int:
    """Find the next live occurrence of delimiter at or after start.

    Escaped candidates are skipped by advancing past the whole delimiter,
    so ``\\$$`` never yields a ``$$`` match at its second dollar sign when
    searching for pairs.

    Args:
        src: Source buffer
        delimiter: ``"$"`` or ``"$$"``
        start: First offset to consider
        end: Exclusive upper bound for the match (defaults to ``len(src)``)

    Returns:
        Offset of the delimiter, or NOT_FOUND (-1)

    """
    if end is None:
        end = len(src)
    match = start
    while True:
        match = src.find(delimiter, match, end)
        if match == NOT_FOUND:
            return NOT_FOUND
        if not is_escaped(src, match):
            return match
        match += len(delimiter)


__all__ = [
    "NOT_FOUND",
    "escape_run",
    "find_unescaped",
    "is_escaped",
]

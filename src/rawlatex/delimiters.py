"""Open/close validation for ``$`` and ``$$`` delimiters.

The inline rules are deliberately asymmetric: an opener must not follow a
word character and a closer must not precede one. ``$x$`` is math while
``a$b$c`` stays literal.

Thread Safety:
Pure functions over an immutable string. DelimiterVerdict is frozen.

"""

from __future__ import annotations

from dataclasses import dataclass

from rawlatex.charsets import (
    BACKSLASH,
    DOLLAR,
    char_at,
    is_whitespace,
    is_word_or_digit,
)


@dataclass(frozen=True, slots=True)
class DelimiterVerdict:
    """Whether a delimiter at some position may open and/or close a span."""

    can_open: bool
    can_close: bool


INVALID = DelimiterVerdict(can_open=False, can_close=False)
VALID = DelimiterVerdict(can_open=True, can_close=True)


def _is_boundary(char: str | None) -> bool:
    return char is None or is_whitespace(char) or not is_word_or_digit(char)


def inline_delimiter(src: str, pos: int) -> DelimiterVerdict:
    """Classify a single ``$`` at ``src[pos]``.

    Args:
        src: Source buffer
        pos: Offset of the candidate delimiter

    Returns:
        DelimiterVerdict; both flags are False if ``src[pos]`` is not ``$``

    Example:
        >>> inline_delimiter("a $x$", 2)
        DelimiterVerdict(can_open=True, can_close=False)

    """
    if char_at(src, pos) != DOLLAR:
        return INVALID

    prev_char = char_at(src, pos - 1)
    next_char = char_at(src, pos + 1)

    can_open = prev_char not in (DOLLAR, BACKSLASH) and _is_boundary(prev_char)
    can_close = next_char != DOLLAR and _is_boundary(next_char)
    return DelimiterVerdict(can_open=can_open, can_close=can_close)


def block_delimiter(src: str, pos: int) -> DelimiterVerdict:
    """Classify a ``$$`` pair starting at ``src[pos]``.

    Valid only for exactly two dollar signs that are not themselves escaped:
    ``$$$`` and ``\\$$`` are rejected. Validity is symmetric.

    """
    if src[pos : pos + 2] != DOLLAR * 2:
        return INVALID
    if char_at(src, pos - 1) in (DOLLAR, BACKSLASH):
        return INVALID
    if char_at(src, pos + 2) == DOLLAR:
        return INVALID
    return VALID


__all__ = [
    "DelimiterVerdict",
    "block_delimiter",
    "inline_delimiter",
]

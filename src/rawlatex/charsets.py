"""Character classification for delimiter flanking checks.

Both predicates operate on a single code point. Callers index past the
ends of the buffer freely, so an absent character (``None`` or ``""``)
never matches.

Usage:
    from rawlatex.charsets import is_whitespace, is_word_or_digit

    if prev is None or is_whitespace(prev) or not is_word_or_digit(prev):
        ...
"""

import re

# Unicode-aware \w: letters, digits, underscore and connector punctuation
_WORD_CHAR = re.compile(r"\w")

DOLLAR = "$"
BACKSLASH = "\\"
BACKTICK = "`"


def is_whitespace(char: str | None) -> bool:
    """Check if char is exactly one Unicode whitespace code point."""
    if not char or len(char) != 1:
        return False
    return char.isspace()


def is_word_or_digit(char: str | None) -> bool:
    """Check if char is exactly one Unicode word character (``\\w``).

    Digits are word characters, so ``5`` in ``$5`` counts.

    """
    if not char or len(char) != 1:
        return False
    return _WORD_CHAR.fullmatch(char) is not None


def char_at(src: str, pos: int) -> str | None:
    """Return ``src[pos]`` or None when pos falls outside the buffer.

    Negative offsets are treated as absent rather than wrapping around.
    """
    if 0 <= pos < len(src):
        return src[pos]
    return None

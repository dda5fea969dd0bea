"""Inline math rules: ``$...$`` and mid-paragraph ``$$...$$``.

Each rule is split in two:

- ``scan_*`` is a pure function of the source buffer and cursor. It reports
  where the cursor ends up, what literal text falls back to the pending
  buffer, and the math content when a span was found.
- The rule function applies a scan to ``StateInline``. In silent mode only
  the cursor moves, so lookahead checks by other rules leave ``pending`` and
  ``tokens`` untouched.

A rule that sees an unusable delimiter still claims it and appends the
delimiter characters to pending as literal text.

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rawlatex.charsets import DOLLAR, char_at
from rawlatex.delimiters import block_delimiter, inline_delimiter
from rawlatex.scanner import NOT_FOUND, find_unescaped
from rawlatex.tokens import (
    BLOCK_MARKUP,
    INLINE_MARKUP,
    MATH_INLINE,
    MATH_INLINE_BLOCK,
    MATH_TAG,
)

if TYPE_CHECKING:
    from markdown_it.rules_inline import StateInline

# An opening tag such as <span title="..."> with no self-closing slash
_OPEN_HTML_TAG = re.compile(r"^<\w+.+[^/]>$")


@dataclass(frozen=True, slots=True)
class InlineScan:
    """Outcome of scanning one delimiter position.

    Attributes:
        next_pos: Cursor position after the claim
        literal: Delimiter text to append to pending (fallback only)
        content: Math content between the delimiters, None on fallback

    """

    next_pos: int
    literal: str = ""
    content: str | None = None

    @property
    def matched(self) -> bool:
        return self.content is not None


def scan_inline_math(src: str, pos: int, end: int | None = None) -> InlineScan | None:
    """Scan a ``$`` span starting at pos.

    Args:
        src: Inline source buffer
        pos: Cursor offset
        end: Exclusive bound for the closing delimiter (defaults to ``len(src)``)

    Returns:
        None when ``src[pos]`` is not ``$`` (decline), otherwise an InlineScan

    """
    if char_at(src, pos) != DOLLAR:
        return None

    if not inline_delimiter(src, pos).can_open:
        return InlineScan(next_pos=pos + 1, literal=INLINE_MARKUP)

    start = pos + 1
    match = find_unescaped(src, INLINE_MARKUP, start, end)
    if match == NOT_FOUND:
        return InlineScan(next_pos=start, literal=INLINE_MARKUP)

    # $$ read as inline: never an empty span
    if match == start:
        return InlineScan(next_pos=start + 1, literal=INLINE_MARKUP * 2)

    if not inline_delimiter(src, match).can_close:
        return InlineScan(next_pos=start, literal=INLINE_MARKUP)

    return InlineScan(next_pos=match + 1, content=src[start:match])


def scan_inline_block_math(
    src: str, pos: int, end: int | None = None
) -> InlineScan | None:
    """Scan a ``$$`` span starting at pos; same contract as scan_inline_math."""
    if src[pos : pos + 2] != BLOCK_MARKUP:
        return None

    if not block_delimiter(src, pos).can_open:
        return InlineScan(next_pos=pos + 2, literal=BLOCK_MARKUP)

    start = pos + 2
    match = find_unescaped(src, BLOCK_MARKUP, start, end)
    if match == NOT_FOUND:
        return InlineScan(next_pos=start, literal=BLOCK_MARKUP)

    # $$$$
    if match == start:
        return InlineScan(next_pos=start + 2, literal=BLOCK_MARKUP * 2)

    if not src[start:match].strip():
        return InlineScan(next_pos=start, literal=BLOCK_MARKUP)

    if not block_delimiter(src, match).can_close:
        return InlineScan(next_pos=start, literal=BLOCK_MARKUP)

    return InlineScan(next_pos=match + 2, content=src[start:match])


def follows_open_html_tag(state: StateInline) -> bool:
    """True if the last pushed token is an unclosed inline HTML opening tag."""
    if not state.tokens:
        return False
    last = state.tokens[-1]
    return last.type == "html_inline" and _OPEN_HTML_TAG.match(last.content) is not None


def _commit(
    state: StateInline,
    scan: InlineScan,
    silent: bool,
    token_type: str,
    markup: str,
) -> bool:
    if not silent:
        if scan.matched:
            token = state.push(token_type, MATH_TAG, 0)
            token.markup = markup
            token.content = scan.content
            token.block = token_type == MATH_INLINE_BLOCK
        else:
            state.pending += scan.literal
    state.pos = scan.next_pos
    return True


def math_inline(state: StateInline, silent: bool, html_guard: bool = True) -> bool:
    """Inline rule for ``$...$``."""
    if state.src[state.pos] != DOLLAR:
        return False
    if html_guard and follows_open_html_tag(state):
        return False

    scan = scan_inline_math(state.src, state.pos, state.posMax)
    if scan is None:
        return False
    return _commit(state, scan, silent, MATH_INLINE, INLINE_MARKUP)


def math_inline_block(state: StateInline, silent: bool) -> bool:
    """Inline rule for ``$$...$$`` appearing inside paragraph text."""
    scan = scan_inline_block_math(state.src, state.pos, state.posMax)
    if scan is None:
        return False
    return _commit(state, scan, silent, MATH_INLINE_BLOCK, BLOCK_MARKUP)


__all__ = [
    "InlineScan",
    "follows_open_html_tag",
    "math_inline",
    "math_inline_block",
    "scan_inline_block_math",
    "scan_inline_math",
]

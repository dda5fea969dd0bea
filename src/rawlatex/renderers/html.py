"""HTML output for math tokens.

Math is emitted with its delimiters intact and HTML-escaped, ready for a
client-side typesetter (MathJax, KaTeX) to pick up. No TeX is interpreted.

Thread Safety:
The render functions are pure. The markdown-it render rules read only the
token they are given.

"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from rawlatex.tokens import BLOCK_MARKUP, INLINE_MARKUP, MATH_BLOCK
from rawlatex.utils.text import escape_html, strip_backtick_quotes

if TYPE_CHECKING:
    from markdown_it.token import Token
    from markdown_it.utils import EnvType, OptionsDict

RenderRule = Callable[..., str]


def render_math_inline(content: str, strip_backticks: bool = True) -> str:
    """Render inline math as ``$escaped$``.

    Args:
        content: Raw math content
        strip_backticks: Remove one layer of back-tick quoting first,
            so ``$`a<b`$`` renders as ``$a&lt;b$``

    Example:
        >>> render_math_inline("a < b")
        '$a &lt; b$'

    """
    if strip_backticks:
        content = strip_backtick_quotes(content)
    return f"{INLINE_MARKUP}{escape_html(content)}{INLINE_MARKUP}"


def render_math_block(content: str) -> str:
    """Render display math as ``<p>$$escaped$$</p>``."""
    return f"<p>{BLOCK_MARKUP}{escape_html(content)}{BLOCK_MARKUP}</p>"


def make_inline_rule(strip_backticks: bool = True) -> RenderRule:
    """Build the markdown-it render rule for ``math_inline`` tokens."""

    def render_inline(
        self: Any,
        tokens: Sequence[Token],
        idx: int,
        options: OptionsDict,
        env: EnvType,
    ) -> str:
        return render_math_inline(tokens[idx].content, strip_backticks)

    return render_inline


def render_block(
    self: Any,
    tokens: Sequence[Token],
    idx: int,
    options: OptionsDict,
    env: EnvType,
) -> str:
    """Render rule shared by ``math_inline_block`` and ``math_block`` tokens.

    Block-level tokens end with a newline like the host's own block output.
    """
    token = tokens[idx]
    html = render_math_block(token.content)
    if token.type == MATH_BLOCK:
        return html + "\n"
    return html


__all__ = [
    "make_inline_rule",
    "render_block",
    "render_math_block",
    "render_math_inline",
]

"""Renderers for math tokens."""

from rawlatex.renderers.html import (
    make_inline_rule,
    render_block,
    render_math_block,
    render_math_inline,
)

__all__ = [
    "make_inline_rule",
    "render_block",
    "render_math_block",
    "render_math_inline",
]

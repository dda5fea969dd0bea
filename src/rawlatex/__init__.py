"""
rawlatex: ``$`` and ``$$`` math for markdown-it-py

Recognizes inline ``$...$``, mid-paragraph ``$$...$$`` and block ``$$``
math, and renders it back out HTML-escaped with its delimiters, ready for
MathJax or KaTeX in the browser. The TeX itself is never interpreted.

Quick Start:
    >>> from rawlatex import render
    >>> render("Euler: $e^{i\\\\pi} + 1 = 0$")
    '<p>Euler: $e^{i\\\\pi} + 1 = 0$</p>\\n'

    >>> # Or extend your own parser
    >>> from markdown_it import MarkdownIt
    >>> from rawlatex import math_plugin
    >>> md = MarkdownIt("commonmark").use(math_plugin)

Escaping:
    ``\\$`` is a literal dollar sign; ``\\\\$`` is a backslash followed by a
    live delimiter. Unmatched or invalid delimiters render as typed.

Installation:
    pip install rawlatex
"""

from collections.abc import Mapping
from typing import Any

from markdown_it import MarkdownIt

from rawlatex.charsets import is_whitespace, is_word_or_digit
from rawlatex.config import (
    MathConfig,
    get_math_config,
    math_config_context,
    reset_math_config,
    set_math_config,
)
from rawlatex.delimiters import DelimiterVerdict, block_delimiter, inline_delimiter
from rawlatex.errors import PluginError, RawLatexError
from rawlatex.plugin import MathPlugin, math_plugin
from rawlatex.renderers.html import render_math_block, render_math_inline
from rawlatex.rules import (
    BlockScan,
    InlineScan,
    math_block,
    math_inline,
    math_inline_block,
    scan_block_math,
    scan_inline_block_math,
    scan_inline_math,
)
from rawlatex.scanner import escape_run, find_unescaped
from rawlatex.tokens import MATH_BLOCK, MATH_INLINE, MATH_INLINE_BLOCK

__version__ = "0.1.0"


def create_markdown(
    preset: str = "commonmark",
    config: MathConfig | None = None,
    options: Mapping[str, Any] | None = None,
) -> MarkdownIt:
    """Create a MarkdownIt parser with math enabled.

    Args:
        preset: markdown-it preset name ("commonmark", "default", "zero")
        config: Math config (uses the context's config if None)
        options: Extra markdown-it options, e.g. ``{"html": False}``

    Returns:
        Configured MarkdownIt instance

    Example:
        >>> md = create_markdown(config=MathConfig(strip_backticks=False))
        >>> md.render("$`x`$")
        '<p>$`x`$</p>\\n'

    """
    md = MarkdownIt(preset, options_update=dict(options) if options else None)
    return md.use(math_plugin, config=config)


def render(source: str, config: MathConfig | None = None) -> str:
    """Render Markdown with math to HTML using a fresh commonmark parser.

    For repeated rendering, build one parser with create_markdown() and reuse it.
    """
    return create_markdown(config=config).render(source)


__all__ = [
    # Entry points
    "create_markdown",
    "math_plugin",
    "MathPlugin",
    "render",
    # Config
    "MathConfig",
    "get_math_config",
    "math_config_context",
    "reset_math_config",
    "set_math_config",
    # Errors
    "PluginError",
    "RawLatexError",
    # Scanning
    "BlockScan",
    "DelimiterVerdict",
    "InlineScan",
    "block_delimiter",
    "escape_run",
    "find_unescaped",
    "inline_delimiter",
    "is_whitespace",
    "is_word_or_digit",
    "scan_block_math",
    "scan_inline_block_math",
    "scan_inline_math",
    # Rules
    "math_block",
    "math_inline",
    "math_inline_block",
    # Rendering
    "render_math_block",
    "render_math_inline",
    # Token types
    "MATH_BLOCK",
    "MATH_INLINE",
    "MATH_INLINE_BLOCK",
    "__version__",
]

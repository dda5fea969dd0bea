"""markdown-it-py plugin wiring for ``$`` / ``$$`` math.

Usage:
    >>> from markdown_it import MarkdownIt
    >>> from rawlatex import math_plugin
    >>> md = MarkdownIt().use(math_plugin)
    >>> md.render("A $x$ and $y$.")
    '<p>A $x$ and $y$.</p>\\n'

Rule placement:
1. Inline rules go right after the host's ``escape`` rule, so ``\\$`` at the
   cursor is consumed as an escape before math is considered.
   ``math_inline_block`` is inserted last and therefore runs first, letting
   ``$$`` win over two single ``$`` delimiters.
2. The block rule goes after ``blockquote`` and may interrupt paragraphs,
   reference definitions, block quotes and lists.

Thread Safety:
MathPlugin holds only its frozen config. Registered rules are pure apart
from the host state passed to them.

"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from rawlatex.config import MathConfig, get_math_config
from rawlatex.errors import PluginError
from rawlatex.renderers.html import make_inline_rule, render_block
from rawlatex.rules.block import math_block
from rawlatex.rules.inline import math_inline, math_inline_block
from rawlatex.tokens import ALL_TOKEN_TYPES, MATH_BLOCK, MATH_INLINE, MATH_INLINE_BLOCK
from rawlatex.utils.logger import get_logger

if TYPE_CHECKING:
    from markdown_it import MarkdownIt

logger = get_logger(__name__)

PLUGIN_NAME = "math"

# Host rules the math rules are anchored to
INLINE_ANCHOR = "escape"
BLOCK_ANCHOR = "blockquote"

# Block constructs a math block may interrupt
BLOCK_ALT = ["paragraph", "reference", "blockquote", "list"]


class MathPlugin:
    """Registers math rules and render rules on a MarkdownIt instance.

    Extension points mirror the host's two passes plus rendering:
    - extend_inline: ``math_inline`` and ``math_inline_block``
    - extend_block: ``math_block``
    - extend_renderer: render rules for all three token kinds

    """

    __slots__ = ("config",)

    def __init__(self, config: MathConfig | None = None) -> None:
        self.config = config if config is not None else get_math_config()

    @property
    def name(self) -> str:
        return PLUGIN_NAME

    def extend_inline(self, md: MarkdownIt) -> None:
        ruler = md.inline.ruler
        try:
            if self.config.inline_enabled:
                rule = partial(math_inline, html_guard=self.config.html_guard)
                ruler.after(INLINE_ANCHOR, MATH_INLINE, rule)
            if self.config.inline_block_enabled:
                ruler.after(INLINE_ANCHOR, MATH_INLINE_BLOCK, math_inline_block)
        except KeyError as err:
            raise PluginError(
                PLUGIN_NAME, f"inline rule {INLINE_ANCHOR!r} not found in parser"
            ) from err

    def extend_block(self, md: MarkdownIt) -> None:
        if not self.config.block_enabled:
            return
        try:
            md.block.ruler.after(
                BLOCK_ANCHOR, MATH_BLOCK, math_block, {"alt": list(BLOCK_ALT)}
            )
        except KeyError as err:
            raise PluginError(
                PLUGIN_NAME, f"block rule {BLOCK_ANCHOR!r} not found in parser"
            ) from err

    def extend_renderer(self, md: MarkdownIt) -> None:
        if self.config.inline_enabled:
            md.add_render_rule(MATH_INLINE, make_inline_rule(self.config.strip_backticks))
        if self.config.inline_block_enabled:
            md.add_render_rule(MATH_INLINE_BLOCK, render_block)
        if self.config.block_enabled:
            md.add_render_rule(MATH_BLOCK, render_block)

    def apply(self, md: MarkdownIt) -> None:
        """Apply all extension points.

        Raises:
            PluginError: If already applied to md, or an anchor rule is missing

        """
        registered = set(md.inline.ruler.get_all_rules()) | set(
            md.block.ruler.get_all_rules()
        )
        if registered.intersection(ALL_TOKEN_TYPES):
            raise PluginError(PLUGIN_NAME, "math rules are already registered")

        self.extend_inline(md)
        self.extend_block(md)
        self.extend_renderer(md)
        logger.debug("Registered math rules with %r", self.config)


def math_plugin(md: MarkdownIt, config: MathConfig | None = None) -> None:
    """Plugin entry point for ``MarkdownIt.use``.

    Args:
        md: Parser to extend
        config: Explicit config; defaults to the context's MathConfig

    """
    MathPlugin(config).apply(md)


__all__ = [
    "MathPlugin",
    "PLUGIN_NAME",
    "math_plugin",
]

"""Tests for the $...$ and mid-paragraph $$...$$ rules."""

from collections.abc import Callable

import pytest
from markdown_it import MarkdownIt
from markdown_it.token import Token

from rawlatex import MathConfig, create_markdown
from rawlatex.rules.inline import InlineScan, scan_inline_block_math, scan_inline_math
from rawlatex.tokens import MATH_INLINE, MATH_INLINE_BLOCK

MathTokens = Callable[[str], list[Token]]


class TestScanInlineMath:
    """Pure scanning results, independent of any parser state."""

    def test_declines_non_dollar(self) -> None:
        """A position without a dollar sign is not this rule's business."""
        assert scan_inline_math("abc", 0) is None

    def test_match(self) -> None:
        """A valid pair should yield its content and the position past the closer."""
        assert scan_inline_math("$x$", 0) == InlineScan(next_pos=3, content="x")

    def test_cannot_open(self) -> None:
        """A dollar preceded by a word character should be a literal."""
        assert scan_inline_math("a$b", 1) == InlineScan(next_pos=2, literal="$")

    def test_no_closer(self) -> None:
        """An opener with no closer should be a literal dollar."""
        assert scan_inline_math("$x", 0) == InlineScan(next_pos=1, literal="$")

    def test_adjacent_pair_is_literal(self) -> None:
        """An empty $$ pair should be consumed as two literal dollars."""
        assert scan_inline_math(" $$ ", 1) == InlineScan(next_pos=3, literal="$$")

    def test_invalid_closer_restarts_after_opener(self) -> None:
        """An invalid closer should only consume the opening dollar."""
        assert scan_inline_math("$x$y", 0) == InlineScan(next_pos=1, literal="$")

    def test_closer_bounded_by_end(self) -> None:
        """A closer at or past the end bound should not be found."""
        assert scan_inline_math("$x$", 0, end=2) == InlineScan(next_pos=1, literal="$")

    def test_matched_property(self) -> None:
        """matched should be true only for scans that carry content."""
        assert InlineScan(next_pos=3, content="x").matched
        assert not InlineScan(next_pos=1, literal="$").matched


class TestScanInlineBlockMath:
    """Pure scanning results for $$ spans."""

    def test_declines_single_dollar(self) -> None:
        """A single dollar is left to the $ rule."""
        assert scan_inline_block_math("$x$", 0) is None

    def test_match(self) -> None:
        """A valid $$ pair should yield its content."""
        assert scan_inline_block_math("$$x$$", 0) == InlineScan(next_pos=5, content="x")

    def test_triple_is_literal_pair(self) -> None:
        """$$$ should consume one literal pair."""
        assert scan_inline_block_math("$$$", 0) == InlineScan(next_pos=2, literal="$$")

    def test_no_closer(self) -> None:
        """An opener with no closing pair should be a literal pair."""
        assert scan_inline_block_math("$$x", 0) == InlineScan(next_pos=2, literal="$$")

    def test_invalid_closer(self) -> None:
        """A closing pair followed by a third dollar should leave the opener literal."""
        assert scan_inline_block_math("$$x$$$", 0) == InlineScan(next_pos=2, literal="$$")

    @pytest.mark.parametrize("source", ["$$ $$", "$$\n$$", "$$  \t $$"])
    def test_blank_content_is_literal(self, source: str) -> None:
        """Whitespace between the pairs should not form a span."""
        assert scan_inline_block_math(source, 0) == InlineScan(next_pos=2, literal="$$")


class TestInlineMath:
    """The $ rule inside a parser."""

    def test_two_spans(self, math_tokens: MathTokens) -> None:
        """Each $...$ pair should become one math_inline token."""
        tokens = math_tokens("A $x$ and $y$.")
        assert [t.content for t in tokens] == ["x", "y"]
        assert all(t.type == MATH_INLINE for t in tokens)
        assert all(t.markup == "$" for t in tokens)
        assert all(t.tag == "math" for t in tokens)
        assert not any(t.block for t in tokens)

    def test_render(self, md: MarkdownIt) -> None:
        """Inline math should render with its delimiters."""
        assert md.render("A $x$ and $y$.") == "<p>A $x$ and $y$.</p>\n"

    def test_content_is_exact(self, math_tokens: MathTokens) -> None:
        """Inline content should not be trimmed."""
        tokens = math_tokens("see $ a + b $ here")
        assert tokens[0].content == " a + b "

    def test_mid_word_is_literal(self, md: MarkdownIt, math_tokens: MathTokens) -> None:
        """Dollars between word characters should stay literal."""
        assert math_tokens("a$b$c") == []
        assert md.render("a$b$c") == "<p>a$b$c</p>\n"

    def test_no_closer_is_literal(self, md: MarkdownIt, math_tokens: MathTokens) -> None:
        assert math_tokens("cost $5") == []
        assert md.render("cost $5") == "<p>cost $5</p>\n"

    def test_prices_are_literal(self, md: MarkdownIt, math_tokens: MathTokens) -> None:
        """Two prices in one sentence should not pair up."""
        assert math_tokens("$5 and $3") == []
        assert md.render("$5 and $3") == "<p>$5 and $3</p>\n"

    def test_invalid_closer_is_literal(self, md: MarkdownIt) -> None:
        assert md.render("$x$y") == "<p>$x$y</p>\n"

    def test_escaped_opener(self, md: MarkdownIt, math_tokens: MathTokens) -> None:
        """A backslash-escaped opener should render as a plain dollar."""
        assert math_tokens("\\$x$") == []
        assert md.render("\\$x$") == "<p>$x$</p>\n"

    def test_escaped_dollar_inside(self, math_tokens: MathTokens) -> None:
        """An escaped dollar inside the span should not close it."""
        tokens = math_tokens("$a\\$b$")
        assert [t.content for t in tokens] == ["a\\$b"]

    def test_escaped_backslash_before_closer(self, math_tokens: MathTokens) -> None:
        """An even backslash run should leave the closer unescaped."""
        tokens = math_tokens("$a\\\\$")
        assert [t.content for t in tokens] == ["a\\\\"]

    def test_html_in_content_is_escaped(self, md: MarkdownIt) -> None:
        assert md.render("$a<b$") == "<p>$a&lt;b$</p>\n"

    def test_backtick_quoting(self, md: MarkdownIt, math_tokens: MathTokens) -> None:
        """Back-ticks are kept in the token and stripped when rendering."""
        assert [t.content for t in math_tokens("$`a=b`$")] == ["`a=b`"]
        assert md.render("$`a=b`$") == "<p>$a=b$</p>\n"

    def test_takes_precedence_over_emphasis(self, math_tokens: MathTokens) -> None:
        """Asterisks inside math should not become emphasis."""
        tokens = math_tokens("$a*b*c$")
        assert [t.content for t in tokens] == ["a*b*c"]

    def test_inside_emphasis(self, md: MarkdownIt) -> None:
        assert md.render("*see $x$*") == "<p><em>see $x$</em></p>\n"

    def test_inside_link_text(self, math_tokens: MathTokens) -> None:
        tokens = math_tokens("[$x$](http://example.com)")
        assert [t.content for t in tokens] == ["x"]

    def test_dollar_in_code_span_is_code(self, md: MarkdownIt, math_tokens: MathTokens) -> None:
        """Code spans should win over math."""
        assert math_tokens("`$x$`") == []
        assert md.render("`$x$`") == "<p><code>$x$</code></p>\n"


class TestHtmlGuard:
    """Math directly after an open inline HTML tag is left alone."""

    def test_after_open_tag_is_literal(self, math_tokens: MathTokens) -> None:
        assert math_tokens("<span>$x$</span>") == []

    def test_after_self_closing_tag(self, math_tokens: MathTokens) -> None:
        """A self-closing tag should not trigger the guard."""
        tokens = math_tokens('<img src="a.png"/> $x$')
        assert [t.content for t in tokens] == ["x"]

    def test_guard_disabled(self) -> None:
        """html_guard=False should parse math after an open tag."""
        md = create_markdown(config=MathConfig(html_guard=False))
        tokens = [
            t for t in md.parseInline("<span>$x$</span>")[0].children if t.type == MATH_INLINE
        ]
        assert [t.content for t in tokens] == ["x"]


class TestInlineBlockMath:
    """$$...$$ in the middle of a paragraph."""

    def test_span(self, math_tokens: MathTokens) -> None:
        """A mid-paragraph pair should become a block-flagged inline token."""
        tokens = math_tokens("Text $$x^2$$ more")
        assert len(tokens) == 1
        token = tokens[0]
        assert token.type == MATH_INLINE_BLOCK
        assert token.content == "x^2"
        assert token.markup == "$$"
        assert token.block

    def test_render(self, md: MarkdownIt) -> None:
        """Inline-block math renders as a nested paragraph with no newline."""
        assert md.render("Text $$x^2$$ more") == "<p>Text <p>$$x^2$$</p> more</p>\n"

    def test_beats_two_single_dollars(self, math_tokens: MathTokens) -> None:
        """$$b$$ should be one inline-block span, not two empty $ spans."""
        tokens = math_tokens("a $$b$$ c")
        assert [t.type for t in tokens] == [MATH_INLINE_BLOCK]

    def test_triple_is_literal(self, md: MarkdownIt, math_tokens: MathTokens) -> None:
        assert math_tokens("a $$$ b") == []
        assert md.render("a $$$ b") == "<p>a $$$ b</p>\n"

    def test_unclosed_pair_is_literal(self, md: MarkdownIt) -> None:
        assert md.render("a $$ b") == "<p>a $$ b</p>\n"

    def test_invalid_closer_is_literal(self, md: MarkdownIt, math_tokens: MathTokens) -> None:
        """A closer followed by a third dollar should leave the whole run literal."""
        assert math_tokens("a $$x$$$ b") == []
        assert md.render("a $$x$$$ b") == "<p>a $$x$$$ b</p>\n"

    def test_blank_content_is_literal(self, md: MarkdownIt, math_tokens: MathTokens) -> None:
        """Whitespace between two pairs should render as written."""
        assert math_tokens("a $$ $$ b") == []
        assert md.render("a $$ $$ b") == "<p>a $$ $$ b</p>\n"

    def test_escaped_pair_inside(self, math_tokens: MathTokens) -> None:
        """An escaped pair inside the span should not close it."""
        tokens = math_tokens("x $$a\\$$b$$ y")
        assert [t.content for t in tokens] == ["a\\$$b"]

    def test_disabled_falls_back_to_single_dollar(self) -> None:
        """With $$ rules off, the $ rule treats an empty pair as literal."""
        md = create_markdown(config=MathConfig(inline_block_enabled=False, block_enabled=False))
        children = md.parseInline("a $$ b")[0].children
        assert [t.type for t in children] == ["text"]
        assert children[0].content == "a $$ b"


@pytest.mark.parametrize(
    "source",
    ["$$", "$$$$", "a $$ b", "a $$$$ b", " $$ ", "$$ $$", "$$\n$$", "$$\n\n", "a $$ $$ b"],
)
def test_empty_spans_never_produced(source: str, math_tokens: MathTokens) -> None:
    """Empty or blank delimiter pairs should never produce a math token."""
    assert math_tokens(source) == []

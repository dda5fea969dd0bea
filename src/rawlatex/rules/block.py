"""Block math rule: ``$$`` at the start of a line.

Works on the host's line table rather than raw offsets. Three shapes are
recognized::

    $$x + 1$$          single line

    $$                 multi-line, closer on its own line
    x + 1
    $$

    $$ x +             multi-line, closer trailing content
    1 $$

An opener with no closer is not an error. The block runs to the end of the
available lines (or to the first non-blank line indented below the block),
and the resulting token is flagged ``meta["unterminated"]``.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rawlatex.tokens import BLOCK_MARKUP, MATH_BLOCK, MATH_TAG, UNTERMINATED
from rawlatex.utils.logger import get_logger

if TYPE_CHECKING:
    from markdown_it.rules_block import StateBlock

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class BlockScan:
    """Outcome of scanning a block math construct.

    Attributes:
        content: Math content without delimiters
        next_line: First line after the construct
        terminated: False when no closing ``$$`` was found

    """

    content: str
    next_line: int
    terminated: bool = True


def _closing_fragment(line: str) -> str | None:
    """Return the text before the closing ``$$`` on line, or None if absent.

    A line ending in ``$$`` closes at its last pair; a pair anywhere else
    closes at the first one.
    """
    trimmed = line.strip()
    if trimmed.endswith(BLOCK_MARKUP):
        return line[: line.rindex(BLOCK_MARKUP)]
    if BLOCK_MARKUP in trimmed:
        return line[: line.index(BLOCK_MARKUP)]
    return None


def scan_block_math(state: StateBlock, start_line: int, end_line: int) -> BlockScan | None:
    """Scan for a math block opening at start_line.

    Reads the state but never mutates it.

    Args:
        state: Host block state
        start_line: Line holding the candidate opener
        end_line: Exclusive line bound

    Returns:
        None when the line does not open a block, otherwise a BlockScan

    """
    pos = state.bMarks[start_line] + state.tShift[start_line]
    maximum = state.eMarks[start_line]

    if pos + 2 > maximum:
        return None
    if state.src[pos : pos + 2] != BLOCK_MARKUP:
        return None

    first_line = state.src[pos + 2 : maximum]

    stripped = first_line.strip()
    if stripped.endswith(BLOCK_MARKUP):
        content = stripped[:-2].strip()
        if not content:
            # $$$$ is left to the inline rules, which render it literally
            return None
        return BlockScan(content=content, next_line=start_line + 1)

    last_line = ""
    terminated = False
    next_line = start_line + 1
    while next_line < end_line:
        pos = state.bMarks[next_line] + state.tShift[next_line]
        maximum = state.eMarks[next_line]

        if pos < maximum and state.sCount[next_line] < state.blkIndent:
            # non-empty line with negative indent ends the block
            break

        fragment = _closing_fragment(state.src[pos:maximum])
        if fragment is not None:
            last_line = fragment
            terminated = True
            break
        next_line += 1

    body = state.getLines(start_line + 1, next_line, state.sCount[start_line], True)
    content = (
        (first_line + "\n" if first_line.strip() else "")
        + body
        + (last_line if last_line.strip() else "")
    )
    if not content.strip():
        # blank content is left to the inline rules, which render it literally
        return None

    if terminated:
        return BlockScan(content=content, next_line=next_line + 1)
    return BlockScan(content=content, next_line=next_line, terminated=False)


def math_block(state: StateBlock, start_line: int, end_line: int, silent: bool) -> bool:
    """Block rule for ``$$`` math."""
    scan = scan_block_math(state, start_line, end_line)
    if scan is None:
        return False
    if silent:
        return True

    if not scan.terminated:
        logger.debug(
            "Unterminated math block at lines %d-%d; consuming to end of range",
            start_line,
            scan.next_line,
        )

    state.line = scan.next_line

    token = state.push(MATH_BLOCK, MATH_TAG, 0)
    token.block = True
    token.content = scan.content
    token.map = [start_line, scan.next_line]
    token.markup = BLOCK_MARKUP
    if not scan.terminated:
        token.meta[UNTERMINATED] = True
    return True


__all__ = [
    "BlockScan",
    "math_block",
    "scan_block_math",
]

"""Parsing rules registered with markdown-it-py.

- inline: ``math_inline`` ($...$) and ``math_inline_block`` ($$...$$ in text)
- block: ``math_block`` ($$ at line start, single or multi-line)
"""

from rawlatex.rules.block import BlockScan, math_block, scan_block_math
from rawlatex.rules.inline import (
    InlineScan,
    math_inline,
    math_inline_block,
    scan_inline_block_math,
    scan_inline_math,
)

__all__ = [
    "BlockScan",
    "InlineScan",
    "math_block",
    "math_inline",
    "math_inline_block",
    "scan_block_math",
    "scan_inline_block_math",
    "scan_inline_math",
]

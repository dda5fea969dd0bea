"""Token type names produced by the math rules.

Three token kinds map onto two render rules: the inline-block and block
kinds share the display renderer.

"""

from typing import Final

MATH_INLINE: Final = "math_inline"  # $x$
MATH_INLINE_BLOCK: Final = "math_inline_block"  # $$x$$ inside a paragraph
MATH_BLOCK: Final = "math_block"  # $$ at line start, may span lines

MATH_TAG: Final = "math"

INLINE_MARKUP: Final = "$"
BLOCK_MARKUP: Final = "$$"

# Meta key set on math_block tokens produced by the unterminated fallback
UNTERMINATED: Final = "unterminated"

ALL_TOKEN_TYPES: Final = (MATH_INLINE, MATH_INLINE_BLOCK, MATH_BLOCK)

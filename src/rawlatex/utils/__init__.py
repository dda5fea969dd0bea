"""Utility modules for rawlatex.

Provides:
- text: escape_html, strip_backtick_quotes for render output
- logger: get_logger for logging
"""

from rawlatex.utils.logger import get_logger
from rawlatex.utils.text import escape_html, strip_backtick_quotes

__all__ = [
    "escape_html",
    "get_logger",
    "strip_backtick_quotes",
]

"""Text processing utilities for rawlatex.

Example:
    >>> from rawlatex.utils.text import escape_html
    >>> escape_html("a < b")
    'a &lt; b'
"""

from __future__ import annotations

import html as html_module

from rawlatex.charsets import BACKTICK


def escape_html(text: str) -> str:
    """Escape HTML special characters.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#x27;

    Args:
        text: Text to escape

    Returns:
        HTML-escaped text, safe in element content and attribute values

    Examples:
        >>> escape_html("<script>alert('xss')</script>")
        "&lt;script&gt;alert(&#x27;xss&#x27;)&lt;/script&gt;"
    """
    if not text:
        return ""

    escaped = html_module.escape(text, quote=True)
    return escaped.replace("'", "&#x27;")


def strip_backtick_quotes(text: str) -> str:
    """Remove one layer of back-tick quoting, so `` `a=b` `` becomes ``a=b``.

    Only applies when text is longer than two characters and both ends are
    back-ticks; anything else is returned unchanged.
    """
    if len(text) > 2 and text[0] == BACKTICK and text[-1] == BACKTICK:
        return text[1:-1]
    return text

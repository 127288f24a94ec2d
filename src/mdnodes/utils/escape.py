#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdnodes/utils/escape.py
"""Text escaping utilities.

Escaping is applied to raw markdown text before any inline markup is
injected, so user content can never change the structure of the output.

"""

from __future__ import annotations

import html


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` for safe inclusion in markup.

    Parameters
    ----------
    text : str
        Raw text

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_html('<script>alert("x")</script>')
        '&lt;script&gt;alert(&quot;x&quot;)&lt;/script&gt;'

    """
    if not text:
        return text
    return html.escape(text, quote=True)


def escape_attribute(value: str) -> str:
    """Escape a value for use inside a double-quoted attribute.

    Existing entities are preserved so already-sanitized text is not escaped
    twice.
    """
    return html.escape(html.unescape(value), quote=True)

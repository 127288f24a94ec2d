#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdnodes/api.py
"""Public entry points for turning markdown into content nodes."""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from mdnodes.ast.nodes import Node, SourceLocation
from mdnodes.exceptions import MdNodesError, ParsingError
from mdnodes.options.markdown import ParseOptions
from mdnodes.parsers.base import BaseParser
from mdnodes.parsers.markdown import MarkdownParser
from mdnodes.utils.escape import escape_html

logger = logging.getLogger(__name__)


def _resolve_options(options: Optional[ParseOptions], kwargs: dict[str, Any]) -> Optional[ParseOptions]:
    if kwargs and options:
        return options.create_updated(**kwargs)
    if kwargs:
        return ParseOptions(**kwargs)
    return options


def parse(
    markdown: Union[str, bytes],
    options: Optional[ParseOptions] = None,
    **kwargs: Any,
) -> list[Node]:
    """Parse markdown into an ordered list of block nodes.

    Parameters
    ----------
    markdown : str or bytes
        Markdown source. Bytes are decoded with encoding detection.
    options : ParseOptions, optional
        Parser configuration
    kwargs : Any
        Individual options that override settings in ``options``
        (``link_target="_self"``, ``sanitize_html=False``, ...)

    Returns
    -------
    list[Node]
        Block nodes in source order

    Raises
    ------
    ValueError
        If an option value is invalid
    ParsingError
        If an unexpected internal failure occurs

    Examples
    --------
        >>> from mdnodes import parse
        >>> nodes = parse("# Title {#top}")
        >>> nodes[0].kind, nodes[0].level, nodes[0].id
        ('heading', 1, 'top')

        >>> parse("<b>x</b>", sanitize_html=False)[0].text
        '<b>x</b>'

    """
    parser = MarkdownParser(_resolve_options(options, kwargs))
    try:
        return parser.parse(markdown)
    except MdNodesError:
        raise
    except Exception as e:
        raise ParsingError(f"Markdown parsing failed: {e!r}", original_error=e) from e


def parse_with_fallback(
    markdown: Union[str, bytes],
    options: Optional[ParseOptions] = None,
    **kwargs: Any,
) -> list[Node]:
    """Parse markdown, degrading to a single paragraph on failure.

    Parsing failures are logged and replaced by one ``paragraph`` node whose
    text is the raw input (escaped when sanitization is enabled). The error
    message is kept in ``metadata["parse_error"]``. Invalid options still
    raise, since they are a caller error rather than a content problem.

    Parameters
    ----------
    markdown : str or bytes
        Markdown source
    options : ParseOptions, optional
        Parser configuration
    kwargs : Any
        Individual options that override settings in ``options``

    Returns
    -------
    list[Node]
        Parsed nodes, or a one-element fallback list

    """
    resolved = _resolve_options(options, kwargs) or ParseOptions()
    try:
        return parse(markdown, resolved)
    except ParsingError as e:
        logger.error("Markdown parsing failed, falling back to raw text: %s", e, exc_info=True)
        raw = BaseParser._load_text_content(markdown)
        text = escape_html(raw) if resolved.sanitize_html else raw
        return [
            Node(
                "paragraph",
                children=[text] if text else [],
                metadata={"parse_error": str(e)},
                source_location=SourceLocation(line=e.line_number or 1),
            )
        ]

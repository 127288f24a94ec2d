r"""mdnodes - convert markdown text into abstract content nodes.

mdnodes scans markdown line by line and produces a flat, ordered list of
``Node`` objects (headings, paragraphs, lists, task items, tables, code
blocks, blockquotes, images, definition lists) that any presentation layer
can render. Span-level markup inside block text is resolved to inline markup
fragments, with raw text escaped first unless sanitization is disabled.

Requirements
------------
- Python 3.10+

Examples
--------
Basic usage:

    >>> from mdnodes import parse
    >>> nodes = parse("# Title\n\n- [x] done")
    >>> [node.kind for node in nodes]
    ['heading', 'task-item']
    >>> nodes[1].checked
    True

Custom classes and styles per element type:

    >>> from mdnodes import ParseOptions
    >>> options = ParseOptions(
    ...     custom_classes={"headings": "title"},
    ...     custom_styles={"tables": {"border-collapse": "collapse"}},
    ... )
    >>> parse("## Section", options)[0].attributes
    {'class': 'title'}

Serializing the result:

    >>> from mdnodes.ast import nodes_to_json
    >>> payload = nodes_to_json(parse("Hello"))

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from mdnodes.api import parse, parse_with_fallback
from mdnodes.ast import Node, SourceLocation
from mdnodes.exceptions import (
    InvalidOptionsError,
    MdNodesError,
    ParsingError,
    ValidationError,
)
from mdnodes.options import ElementClasses, ElementStyles, ParseOptions
from mdnodes.parsers import MarkdownParser

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "parse",
    "parse_with_fallback",
    "MarkdownParser",
    "Node",
    "SourceLocation",
    "ParseOptions",
    "ElementClasses",
    "ElementStyles",
    "MdNodesError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
]

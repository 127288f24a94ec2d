#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdnodes/ast/nodes.py
"""Node classes for the parsed document representation.

A parsed document is a flat, ordered list of block-level ``Node`` objects.
Every node carries a ``kind`` tag instead of being a distinct subclass, which
keeps the structure trivially serializable and lets any presentation layer
dispatch on a single field.

Node Kinds
----------
Block kinds appear at the top level of the parse result:
    - heading, paragraph, unordered-list, ordered-list, task-item
    - table, code-block, blockquote, image, definition-list, error

Part kinds only appear as children of a block node:
    - term, definition (definition-list)
    - list-item (unordered-list, ordered-list)
    - checkbox, text (task-item)
    - citation (blockquote)
    - code (code-block)
    - table-head, table-body, table-row, table-header-cell, table-cell (table)

String children are inline markup fragments produced by the inline
formatter, e.g. ``"<strong>bold</strong> text"``.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from mdnodes.constants import NodeKind


@dataclass
class SourceLocation:
    """Source location information for nodes.

    Parameters
    ----------
    line : int
        1-based line number in the (trimmed) source text
    end_line : int or None, default = None
        Last source line consumed by a multi-line construct

    """

    line: int
    end_line: Optional[int] = None


@dataclass
class Node:
    """A single parsed content node.

    Parameters
    ----------
    kind : NodeKind
        Node kind tag (see module docstring)
    children : list of Node or str, default = empty list
        Ordered child nodes and inline markup fragments
    attributes : dict, default = empty dict
        Presentation attributes: ``class``, ``style`` (a mapping of CSS
        property to value), ``href``, ``src``, ``alt``, ``title``,
        ``target``, ``rel``, ``checked``, ``type``, ``start``. Empty values
        are never stored.
    level : int or None, default = None
        Heading level in [1, 6]; headings only
    id : str or None, default = None
        Anchor identifier from a ``{#id}`` marker; headings only
    metadata : dict, default = empty dict
        Parser details that are not presentation attributes (code fence info
        string, table alignments, nesting depth)
    source_location : SourceLocation or None, default = None
        Where this node started in the source

    """

    kind: NodeKind
    children: list[Union[Node, str]] = field(default_factory=list)
    attributes: dict[str, Any] = field(default_factory=dict)
    level: Optional[int] = None
    id: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        if self.level is not None and not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be between 1 and 6, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        The visitor's ``visit_<kind>`` method is called, with dashes in the
        kind replaced by underscores (``visit_code_block``). Visitors without
        a matching method fall back to ``generic_visit`` when they define one.

        """
        method = getattr(visitor, f"visit_{self.kind.replace('-', '_')}", None)
        if method is None:
            method = getattr(visitor, "generic_visit", None)
        if method is None:
            raise AttributeError(f"{type(visitor).__name__} has no visit method for node kind '{self.kind}'")
        return method(self)

    @property
    def text(self) -> str:
        """Concatenated string content of this node and its descendants."""
        parts: list[str] = []
        for child in self.children:
            if isinstance(child, Node):
                parts.append(child.text)
            else:
                parts.append(child)
        return "".join(parts)

    @property
    def checked(self) -> Optional[bool]:
        """Checkbox state of a task item, None for other kinds."""
        if self.kind == "checkbox":
            return bool(self.attributes.get("checked", False))
        if self.kind != "task-item":
            return None
        for child in self.children:
            if isinstance(child, Node) and child.kind == "checkbox":
                return child.checked
        return None

    def find_children(self, kind: NodeKind) -> list[Node]:
        """Return direct children of the given kind."""
        return [child for child in self.children if isinstance(child, Node) and child.kind == kind]

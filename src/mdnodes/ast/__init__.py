#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdnodes/ast/__init__.py
"""Node model for parsed markdown documents.

- nodes: the ``Node`` dataclass and ``SourceLocation``
- serialization: JSON serialization and deserialization of node lists

Examples
--------
    >>> from mdnodes.ast import Node
    >>> heading = Node(kind="heading", level=1, children=["Title"])
    >>> heading.text
    'Title'

"""

from __future__ import annotations

from mdnodes.ast.nodes import Node, SourceLocation
from mdnodes.ast.serialization import ast_to_dict, dict_to_ast, json_to_nodes, nodes_to_json

__all__ = [
    "Node",
    "SourceLocation",
    "ast_to_dict",
    "dict_to_ast",
    "json_to_nodes",
    "nodes_to_json",
]

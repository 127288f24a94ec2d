#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdnodes/ast/serialization.py
"""JSON serialization and deserialization for parsed nodes.

The JSON format preserves node kinds, attributes, metadata, source locations
and nesting, so a node list survives a round trip unchanged.

Examples
--------
Serialize a parse result:

    >>> from mdnodes import parse
    >>> from mdnodes.ast.serialization import nodes_to_json
    >>> json_str = nodes_to_json(parse("# Title"), indent=2)

Load it back:

    >>> from mdnodes.ast.serialization import json_to_nodes
    >>> nodes = json_to_nodes(json_str)
    >>> nodes[0].level
    1

"""

from __future__ import annotations

import json
from typing import Any, Union

from mdnodes.ast.nodes import Node, SourceLocation
from mdnodes.constants import BLOCK_KINDS, PART_KINDS

SCHEMA_VERSION = 1

_KNOWN_KINDS = frozenset(BLOCK_KINDS + PART_KINDS)


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node and its descendants to a JSON-compatible dictionary.

    Parameters
    ----------
    node : Node
        Node to serialize

    Returns
    -------
    dict
        Dictionary with ``kind`` and ``children`` always present; ``level``,
        ``id``, ``attributes``, ``metadata`` and ``source_location`` only when
        set

    """
    result: dict[str, Any] = {
        "kind": node.kind,
        "children": [ast_to_dict(child) if isinstance(child, Node) else child for child in node.children],
    }
    if node.level is not None:
        result["level"] = node.level
    if node.id is not None:
        result["id"] = node.id
    if node.attributes:
        result["attributes"] = dict(node.attributes)
    if node.metadata:
        result["metadata"] = dict(node.metadata)
    if node.source_location is not None:
        location: dict[str, Any] = {"line": node.source_location.line}
        if node.source_location.end_line is not None:
            location["end_line"] = node.source_location.end_line
        result["source_location"] = location
    return result


def dict_to_ast(data: dict[str, Any]) -> Node:
    """Rebuild a node from the dictionary produced by ``ast_to_dict``.

    Raises
    ------
    ValueError
        If the dictionary has no ``kind`` or an unknown one.

    """
    if not isinstance(data, dict):
        raise ValueError(f"Expected a node dictionary, got {type(data).__name__}")

    kind = data.get("kind")
    if kind not in _KNOWN_KINDS:
        raise ValueError(f"Unknown node kind: {kind!r}")

    children: list[Union[Node, str]] = []
    for child in data.get("children", []):
        if isinstance(child, str):
            children.append(child)
        else:
            children.append(dict_to_ast(child))

    location = None
    loc_data = data.get("source_location")
    if loc_data:
        location = SourceLocation(line=loc_data["line"], end_line=loc_data.get("end_line"))

    return Node(
        kind=kind,
        children=children,
        attributes=dict(data.get("attributes", {})),
        level=data.get("level"),
        id=data.get("id"),
        metadata=dict(data.get("metadata", {})),
        source_location=location,
    )


def nodes_to_json(nodes: list[Node], indent: int | None = None) -> str:
    """Serialize a parse result to a JSON document.

    Parameters
    ----------
    nodes : list of Node
        Top-level nodes as returned by ``parse``
    indent : int or None, default = None
        Indentation passed through to ``json.dumps``

    Returns
    -------
    str
        JSON text of the form ``{"schema_version": 1, "nodes": [...]}``

    """
    payload = {"schema_version": SCHEMA_VERSION, "nodes": [ast_to_dict(node) for node in nodes]}
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def json_to_nodes(json_str: str) -> list[Node]:
    """Load a node list from JSON produced by ``nodes_to_json``.

    Raises
    ------
    ValueError
        If the JSON is malformed, uses a newer schema, or contains unknown
        node kinds.

    """
    try:
        payload = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}") from e

    if not isinstance(payload, dict) or "nodes" not in payload:
        raise ValueError("JSON document must be an object with a 'nodes' list")

    version = payload.get("schema_version", SCHEMA_VERSION)
    if version > SCHEMA_VERSION:
        raise ValueError(f"Unsupported schema version {version}; this library reads up to {SCHEMA_VERSION}")

    return [dict_to_ast(item) for item in payload["nodes"]]

"""Rendering of parse results for the terminal."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/mdnodes/cli/output.py
from __future__ import annotations

from typing import TYPE_CHECKING, Union

from mdnodes.ast.nodes import Node
from mdnodes.ast.serialization import nodes_to_json
from mdnodes.parsers._attributes import style_to_css

if TYPE_CHECKING:
    from rich.tree import Tree


def _node_label(node: Node) -> str:
    label = f"[bold]{node.kind}[/bold]"
    if node.level is not None:
        label += f" h{node.level}"
    if node.id:
        label += f" #{node.id}"
    for key, value in node.attributes.items():
        if isinstance(value, dict):
            value = style_to_css(value)
        label += f" [dim]{key}[/dim]={value!r}"
    if node.source_location is not None:
        label += f" [dim](line {node.source_location.line})[/dim]"
    return label


class TreeBuilder:
    """Node visitor that adds one ``rich`` tree branch per node.

    Inline fragments are shown as quoted strings so leading and trailing
    whitespace stays visible. Code blocks show their raw code as a single
    dimmed leaf instead of a nested ``code`` node.

    Parameters
    ----------
    branch : Tree
        Tree or branch that receives the visited nodes

    """

    def __init__(self, branch: Tree):
        self.branch = branch

    def _add_children(self, branch: Tree, children: list[Union[Node, str]]) -> None:
        from rich.text import Text

        for child in children:
            if isinstance(child, Node):
                child.accept(TreeBuilder(branch))
            else:
                branch.add(Text(repr(child), style="green"))

    def visit_code_block(self, node: Node) -> Tree:
        from rich.text import Text

        branch = self.branch.add(_node_label(node))
        for key, value in node.metadata.items():
            branch.add(Text(f"{key}: {value}", style="cyan"))
        branch.add(Text(node.text, style="dim"))
        return branch

    def generic_visit(self, node: Node) -> Tree:
        branch = self.branch.add(_node_label(node))
        self._add_children(branch, node.children)
        return branch


def build_tree(nodes: list[Node], title: str = "document") -> Tree:
    """Build a ``rich`` tree with one branch per block node."""
    from rich.tree import Tree

    tree = Tree(f"[bold blue]{title}[/bold blue] ({len(nodes)} nodes)")
    builder = TreeBuilder(tree)
    for node in nodes:
        node.accept(builder)
    return tree


def render_nodes(nodes: list[Node], output_format: str, indent: int | None = 2) -> None:
    """Write ``nodes`` to stdout as JSON or as a tree."""
    from rich.console import Console

    if output_format == "tree":
        Console().print(build_tree(nodes))
        return
    # Plain print keeps JSON free of console markup and wrapping
    print(nodes_to_json(nodes, indent=indent))

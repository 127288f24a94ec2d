"""Unit tests for terminal rendering of parse results."""

import json

import pytest
from rich.text import Text

from mdnodes import parse
from mdnodes.cli.output import TreeBuilder, build_tree, render_nodes


def _labels(branch):
    return [child.label.plain if isinstance(child.label, Text) else str(child.label) for child in branch.children]


@pytest.mark.unit
@pytest.mark.cli
class TestBuildTree:
    """Test the rich tree built through node visitors."""

    def test_one_branch_per_block(self):
        """Test that each block node becomes a top-level branch."""
        tree = build_tree(parse("# Title {#t}\n\nBody text"))

        labels = _labels(tree)
        assert len(labels) == 2
        assert labels[0].startswith("[bold]heading[/bold] h1 #t")
        assert labels[1].startswith("[bold]paragraph[/bold]")

    def test_inline_fragments_quoted(self):
        """Test that string children are shown as repr strings."""
        tree = build_tree(parse("Body text"))

        assert _labels(tree.children[0]) == ["'Body text'"]

    def test_code_block_uses_dedicated_visit(self):
        """Test that code blocks show metadata and raw code instead of a code node."""
        tree = build_tree(parse("```python\nprint(1)\n```"))

        labels = _labels(tree.children[0])
        assert labels == ["language: python", "print(1)"]

    def test_nested_parts(self):
        """Test that part nodes such as table rows are visited recursively."""
        tree = build_tree(parse("| a | b |"))

        head = tree.children[0].children[0]
        assert _labels(tree.children[0])[0].startswith("[bold]table-head[/bold]")
        assert len(head.children[0].children) == 2

    def test_visitor_returns_branch(self):
        """Test that visiting a node returns the branch it added."""
        tree = build_tree([])
        node = parse("Hi")[0]

        branch = node.accept(TreeBuilder(tree))

        assert tree.children == [branch]


@pytest.mark.unit
@pytest.mark.cli
class TestRenderNodes:
    """Test output selection."""

    def test_json(self, capsys):
        """Test JSON output."""
        render_nodes(parse("Hi"), "json", indent=None)

        assert json.loads(capsys.readouterr().out)["nodes"][0]["kind"] == "paragraph"

    def test_tree(self, capsys):
        """Test tree output."""
        render_nodes(parse("- item"), "tree")

        out = capsys.readouterr().out
        assert "unordered-list" in out
        assert "list-item" in out

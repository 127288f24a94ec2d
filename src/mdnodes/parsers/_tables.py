#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdnodes/parsers/_tables.py
"""Pipe table recognition and node construction.

A table starts at a pipe row, optionally followed by an alignment row such as
``|:---|:---:|---:|``. Every following contiguous pipe row is a body row.
Body rows are kept as written: short rows are not padded and long rows are
not truncated to the header width.

"""

from __future__ import annotations

import logging
import re
from typing import Callable

from mdnodes.ast.nodes import Node, SourceLocation
from mdnodes.constants import DEFAULT_TABLE_ALIGNMENT, Alignment
from mdnodes.parsers._attributes import AttributeResolver

logger = logging.getLogger(__name__)

TABLE_ROW_PATTERN = re.compile(r"^\|(.+\|)+")
ALIGNMENT_ROW_PATTERN = re.compile(r"^\|(\s*:?-+:?\s*\|)+")


def is_table_row(line: str) -> bool:
    """Return True when ``line`` is a pipe row (alignment rows included)."""
    return TABLE_ROW_PATTERN.match(line) is not None


def is_alignment_row(line: str) -> bool:
    """Return True when ``line`` is an alignment row."""
    return ALIGNMENT_ROW_PATTERN.match(line) is not None


def split_cells(row: str) -> list[str]:
    """Split a pipe row into trimmed cell texts.

    The text before the first pipe and after the last pipe is discarded.

    Examples
    --------
        >>> split_cells("| a | b |")
        ['a', 'b']

    """
    return [cell.strip() for cell in row.split("|")[1:-1]]


def parse_alignment(cell: str) -> Alignment:
    """Map one alignment cell (``:--``, ``:-:``, ``--:``) to an alignment."""
    cell = cell.strip()
    if cell.startswith(":") and cell.endswith(":"):
        return "center"
    if cell.endswith(":"):
        return "right"
    return "left"


class TableBuilder:
    """Build ``table`` nodes from a window of source lines.

    Parameters
    ----------
    resolver : AttributeResolver
        Supplies the configured ``tables`` class and style
    format_inline : callable
        Inline formatter applied to every cell text

    """

    def __init__(self, resolver: AttributeResolver, format_inline: Callable[[str], str]):
        self.resolver = resolver
        self.format_inline = format_inline

    def build(self, lines: list[str], index: int) -> tuple[Node, int]:
        """Build a table starting at ``lines[index]``.

        Parameters
        ----------
        lines : list[str]
            All source lines
        index : int
            Index of the header row

        Returns
        -------
        tuple[Node, int]
            The table node and the number of lines consumed (at least 1)

        """
        header_cells = split_cells(lines[index])
        cursor = index + 1

        alignments: list[Alignment] = []
        if cursor < len(lines) and is_alignment_row(lines[cursor]):
            alignments = [parse_alignment(cell) for cell in lines[cursor].split("|")[1:-1]]
            cursor += 1

        body_rows: list[list[str]] = []
        while cursor < len(lines) and is_table_row(lines[cursor]):
            row = lines[cursor]
            if is_alignment_row(row):
                break
            # A row followed by an alignment row is the header of the next table
            if cursor + 1 < len(lines) and is_alignment_row(lines[cursor + 1]):
                break
            body_rows.append(split_cells(row))
            cursor += 1

        if not body_rows:
            logger.debug("Table at line %d has a header row only", index + 1)

        head = Node(
            "table-head",
            children=[
                Node(
                    "table-row",
                    children=[
                        self._cell("table-header-cell", text, alignments, i) for i, text in enumerate(header_cells)
                    ],
                )
            ],
        )
        body = Node(
            "table-body",
            children=[
                Node(
                    "table-row",
                    children=[self._cell("table-cell", text, alignments, i) for i, text in enumerate(row)],
                )
                for row in body_rows
            ],
        )

        table = Node(
            "table",
            children=[head, body],
            attributes=self.resolver.attributes("tables"),
            metadata={"alignments": list(alignments)},
            source_location=SourceLocation(line=index + 1, end_line=cursor),
        )
        return table, cursor - index

    def _cell(self, kind: str, text: str, alignments: list[Alignment], column: int) -> Node:
        alignment = alignments[column] if column < len(alignments) else DEFAULT_TABLE_ALIGNMENT
        return Node(
            kind,  # type: ignore[arg-type]
            children=[self.format_inline(text)] if text else [],
            attributes={"style": {"text-align": alignment}},
        )

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdnodes/parsers/__init__.py
"""Parsers package initialization.

``MarkdownParser`` is the block scanner; the private modules hold its
collaborators (inline formatting, attribute merging, tables, nesting).
"""

from mdnodes.parsers.base import BaseParser
from mdnodes.parsers.markdown import MarkdownParser, ScannerState

__all__ = ["BaseParser", "MarkdownParser", "ScannerState"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option dataclasses for the mdnodes parser."""

from mdnodes.options.base import BaseParserOptions, CloneFrozenMixin
from mdnodes.options.markdown import ElementClasses, ElementStyles, ParseOptions, StyleMapping

__all__ = [
    "BaseParserOptions",
    "CloneFrozenMixin",
    "ElementClasses",
    "ElementStyles",
    "ParseOptions",
    "StyleMapping",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mdnodes library.

This module centralizes the literal types, defaults and exit codes used across
the package. Constants are organized by category:

1. Type Definitions - All Literal types and type aliases
2. Parser Defaults - Default values for ``ParseOptions``
3. Rendering Hints - Values written into node attributes
4. CLI - Configuration file names and exit codes
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

# Top-level node kinds emitted by the block dispatcher
BlockKind = Literal[
    "heading",
    "paragraph",
    "unordered-list",
    "ordered-list",
    "task-item",
    "table",
    "code-block",
    "blockquote",
    "image",
    "definition-list",
    "error",
]

# Kinds that only ever appear nested inside a block node
PartKind = Literal[
    "term",
    "definition",
    "list-item",
    "checkbox",
    "text",
    "citation",
    "code",
    "table-head",
    "table-body",
    "table-row",
    "table-header-cell",
    "table-cell",
]

NodeKind = Literal[BlockKind, PartKind]

# Element types that accept custom classes and styles
ElementType = Literal[
    "headings",
    "paragraphs",
    "lists",
    "blockquotes",
    "code_blocks",
    "tables",
    "links",
    "images",
]

LinkTarget = Literal["_blank", "_self", "_parent", "_top"]
Alignment = Literal["left", "center", "right"]
OutputFormat = Literal["json", "tree"]

BLOCK_KINDS: tuple[str, ...] = BlockKind.__args__  # type: ignore[attr-defined]
PART_KINDS: tuple[str, ...] = PartKind.__args__  # type: ignore[attr-defined]
ELEMENT_TYPES: tuple[str, ...] = ElementType.__args__  # type: ignore[attr-defined]
LINK_TARGETS: tuple[str, ...] = LinkTarget.__args__  # type: ignore[attr-defined]

# camelCase spellings accepted in configuration mappings
ELEMENT_TYPE_ALIASES: dict[str, str] = {"codeBlocks": "code_blocks"}

# =============================================================================
# Parser Defaults
# =============================================================================

DEFAULT_LANG_PREFIX = "language-"
DEFAULT_LINK_TARGET: LinkTarget = "_blank"
DEFAULT_SANITIZE_HTML = True
DEFAULT_MAX_NESTING_LEVEL = 6

# Spaces of indentation per nesting level for lists and task items
NESTING_INDENT_WIDTH = 2

# =============================================================================
# Rendering Hints
# =============================================================================

# Pixels of left margin per nesting level
NESTING_MARGIN_PX = 20

NEW_TAB_TARGET: LinkTarget = "_blank"
NEW_TAB_REL = "noopener noreferrer"
MATH_INLINE_CLASS = "math-inline"
DEFAULT_TABLE_ALIGNMENT: Alignment = "left"
MAX_NESTING_MESSAGE = "Maximum nesting level reached"

# =============================================================================
# CLI
# =============================================================================

CONFIG_FILENAMES = [".mdnodes.toml", ".mdnodes.yaml", ".mdnodes.yml", ".mdnodes.json"]
CONFIG_ENV_VAR = "MDNODES_CONFIG"
PYPROJECT_SECTION = "mdnodes"

EXIT_SUCCESS = 0
EXIT_PARSING_ERROR = 1
EXIT_VALIDATION_ERROR = 2
EXIT_INPUT_ERROR = 3

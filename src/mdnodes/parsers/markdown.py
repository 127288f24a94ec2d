#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdnodes/parsers/markdown.py
"""Markdown to content node converter.

This module scans markdown one line at a time and classifies each line, or a
short lookahead window of lines, into a block construct. Recognizers are
tried in a fixed order and the first match wins:

1. Definition list (a term line followed by ``: definition`` lines)
2. Task item (``- [x] done``)
3. Heading (``#`` to ``######``, optional ``{#id}``)
4. Code fence (`````` ```lang {attrs} ``````)
5. Blockquote (``> text -- citation``)
6. Table (pipe rows with an optional alignment row)
7. Image (a line holding only ``![alt](src "title")``)
8. List (``-``, ``*``, ``+`` or ``1.``)
9. Paragraph

Lists and blockquotes are emitted one node per source line. Nesting is
expressed through a ``margin-left`` style rather than through nested nodes.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Optional, Union

from mdnodes.ast.nodes import Node, SourceLocation
from mdnodes.constants import MAX_NESTING_MESSAGE, NESTING_MARGIN_PX
from mdnodes.exceptions import ParsingError
from mdnodes.options.markdown import ParseOptions
from mdnodes.parsers._attributes import AttributeResolver
from mdnodes.parsers._inline import InlineFormatter
from mdnodes.parsers._nesting import NestingGuard, indentation_level
from mdnodes.parsers._tables import TableBuilder, is_alignment_row, is_table_row
from mdnodes.parsers.base import BaseParser

logger = logging.getLogger(__name__)

# =============================================================================
# Regex Patterns for Block Constructs
# =============================================================================

LINE_SPLIT_PATTERN = re.compile(r"\r\n|\n")

# Definition marker: ": text" or a lone ":" (applied to the trimmed line)
DEFINITION_PATTERN = re.compile(r"^:(?:\s|$)")

TASK_ITEM_PATTERN = re.compile(r"^(\s*)-\s\[(x| )\]\s*")

HEADING_PATTERN = re.compile(r"^(#{1,6})\s")
HEADING_ID_PATTERN = re.compile(r"\{#([^}]+)\}")

# ```lang {attrs}
CODE_FENCE_PATTERN = re.compile(r"^```(\S+)?(\s+\{.*\})?$")

BLOCKQUOTE_PATTERN = re.compile(r"^>\s")
BLOCKQUOTE_CONTENT_PATTERN = re.compile(r"^>\s?(.+?)(?:\s+--\s+(.+))?$")

IMAGE_LINE_PATTERN = re.compile(r'!\[([^\]]*)\]\(([^)\s]+)(?:\s+"([^"]+)")?\)')

LIST_ITEM_PATTERN = re.compile(r"^(\s*)([-*+]|\d+\.)\s")


@dataclass
class ScannerState:
    """Mutable state for a single ``MarkdownParser.parse`` call.

    Parameters
    ----------
    nesting : NestingGuard
        Running list depth and ceiling
    in_code_block : bool, default False
        Whether a code fence is open
    code_block_language : str or None, default None
        Language token of the open fence
    code_block_info : str or None, default None
        ``{...}`` attribute block of the open fence
    code_block_buffer : list of str, default empty
        Raw lines collected inside the open fence
    code_block_start : int, default 0
        Index of the opening fence line

    """

    nesting: NestingGuard
    in_code_block: bool = False
    code_block_language: Optional[str] = None
    code_block_info: Optional[str] = None
    code_block_buffer: list[str] = field(default_factory=list)
    code_block_start: int = 0

    @property
    def nesting_level(self) -> int:
        """Current running list depth."""
        return self.nesting.level

    def open_fence(self, index: int, language: Optional[str], info: Optional[str]) -> None:
        self.in_code_block = True
        self.code_block_language = language
        self.code_block_info = info
        self.code_block_buffer = []
        self.code_block_start = index

    def close_fence(self) -> None:
        self.in_code_block = False
        self.code_block_language = None
        self.code_block_info = None
        self.code_block_buffer = []


class MarkdownParser(BaseParser):
    r"""Convert markdown text into a flat list of content nodes.

    The parser holds no per-document state; every ``parse`` call builds its
    own ``ScannerState``, so one instance may be reused and shared.

    Parameters
    ----------
    options : ParseOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> parser = MarkdownParser()
        >>> nodes = parser.parse("# Title\n\nSome **bold** text")
        >>> [node.kind for node in nodes]
        ['heading', 'paragraph']

    With options:

        >>> options = ParseOptions(custom_classes={"headings": "title"})
        >>> MarkdownParser(options).parse("## Hi")[0].attributes
        {'class': 'title'}

    """

    def __init__(self, options: ParseOptions | None = None):
        """Initialize the markdown parser with options."""
        BaseParser._validate_options_type(options, ParseOptions, "markdown")
        options = options or ParseOptions()
        super().__init__(options)
        self.options: ParseOptions = options
        self.resolver = AttributeResolver(options.custom_classes, options.custom_styles)
        self.formatter = InlineFormatter(options, self.resolver)
        self.table_builder = TableBuilder(self.resolver, self.formatter.format)

    def parse(self, input_data: Union[str, bytes]) -> list[Node]:
        """Parse markdown into block nodes.

        Parameters
        ----------
        input_data : str or bytes
            Markdown text; bytes are decoded with encoding detection

        Returns
        -------
        list[Node]
            Block nodes in source order; empty for empty or blank input

        Raises
        ------
        ParsingError
            If an unexpected internal failure occurs while scanning

        """
        text = self._load_text_content(input_data).strip()
        if not text:
            return []

        lines = LINE_SPLIT_PATTERN.split(text)
        state = ScannerState(nesting=NestingGuard(self.options.max_nesting_level))
        result: list[Node] = []
        i = 0

        try:
            while i < len(lines):
                i = self._process_line(lines, i, state, result)
            self._flush_unterminated_fence(lines, state, result)
        except ParsingError:
            raise
        except Exception as e:
            raise ParsingError(
                f"Failed to parse markdown at line {i + 1}: {e}", line_number=i + 1, original_error=e
            ) from e

        return result

    def _process_line(self, lines: list[str], i: int, state: ScannerState, result: list[Node]) -> int:
        """Classify ``lines[i]`` and return the index of the next unconsumed line."""
        if state.in_code_block:
            return self._process_fenced_line(lines, i, state, result)

        if state.nesting.observe(lines[i]):
            result.append(
                Node(
                    "error",
                    children=[MAX_NESTING_MESSAGE],
                    metadata={"depth": state.nesting_level},
                    source_location=SourceLocation(line=i + 1),
                )
            )
            return i + 1

        for recognizer in (
            self._try_parse_definition_list,
            self._try_parse_task_item,
            self._try_parse_heading,
            self._try_parse_code_fence,
            self._try_parse_blockquote,
            self._try_parse_table,
            self._try_parse_image,
            self._try_parse_list,
        ):
            matched, new_i = recognizer(lines, i, state, result)
            if matched:
                return new_i

        self._parse_paragraph(lines[i], i, result)
        return i + 1

    def _process_fenced_line(self, lines: list[str], i: int, state: ScannerState, result: list[Node]) -> int:
        """Close the open fence or add ``lines[i]`` to its body."""
        if CODE_FENCE_PATTERN.match(lines[i]):
            result.append(self._build_code_block(state, end_line=i + 1))
            state.close_fence()
        else:
            state.code_block_buffer.append(lines[i])
        return i + 1

    def _flush_unterminated_fence(self, lines: list[str], state: ScannerState, result: list[Node]) -> None:
        if not state.in_code_block:
            return
        logger.debug(
            "Code fence opened at line %d is never closed; flushing %d lines",
            state.code_block_start + 1,
            len(state.code_block_buffer),
        )
        node = self._build_code_block(state, end_line=len(lines))
        node.metadata["unterminated"] = True
        result.append(node)
        state.close_fence()

    def _try_parse_definition_list(
        self, lines: list[str], i: int, state: ScannerState, result: list[Node]
    ) -> tuple[bool, int]:
        """Try to parse a definition list.

        A term line is followed by one or more lines starting with ``:``.
        The term and every contiguous definition line become one node.

        Parameters
        ----------
        lines : list[str]
            All lines
        i : int
            Current line index
        state : ScannerState
            Scanner state for this call
        result : list[Node]
            Result list

        Returns
        -------
        tuple[bool, int]
            (matched, new_index)

        """
        term = lines[i].strip()
        if not term or term.startswith(":"):
            return False, i
        if i + 1 >= len(lines) or not DEFINITION_PATTERN.match(lines[i + 1].strip()):
            return False, i

        children: list[Union[Node, str]] = [Node("term", children=self._inline_children(term))]
        j = i + 1
        while j < len(lines) and DEFINITION_PATTERN.match(lines[j].strip()):
            definition = lines[j].strip()[1:].strip()
            children.append(Node("definition", children=self._inline_children(definition)))
            j += 1

        result.append(
            Node(
                "definition-list",
                children=children,
                attributes=self.resolver.attributes("lists"),
                source_location=SourceLocation(line=i + 1, end_line=j),
            )
        )
        state.nesting.level = 0
        return True, j

    def _try_parse_task_item(
        self, lines: list[str], i: int, state: ScannerState, result: list[Node]
    ) -> tuple[bool, int]:
        """Try to parse a task list item (``- [ ]`` or ``- [x]``).

        Returns
        -------
        tuple[bool, int]
            (matched, new_index)

        """
        line = lines[i]
        match = TASK_ITEM_PATTERN.match(line)
        if not match:
            return False, i

        depth = indentation_level(line)
        checkbox = Node("checkbox", attributes={"type": "checkbox", "checked": match.group(2) == "x"})
        text = Node("text", children=self._inline_children(line[match.end() :]))
        result.append(
            Node(
                "task-item",
                children=[checkbox, text],
                attributes=self.resolver.attributes("lists", style=self._indent_style(depth)),
                metadata={"depth": depth},
                source_location=SourceLocation(line=i + 1),
            )
        )
        return True, i + 1

    def _try_parse_heading(
        self, lines: list[str], i: int, state: ScannerState, result: list[Node]
    ) -> tuple[bool, int]:
        """Try to parse an ATX heading with an optional ``{#id}`` anchor.

        Returns
        -------
        tuple[bool, int]
            (matched, new_index)

        """
        line = lines[i]
        match = HEADING_PATTERN.match(line)
        if not match:
            return False, i

        text = line[match.end() :]
        id_match = HEADING_ID_PATTERN.search(text)
        heading_id = id_match.group(1) if id_match else None
        clean_text = HEADING_ID_PATTERN.sub("", text, count=1).strip()

        result.append(
            Node(
                "heading",
                children=self._inline_children(clean_text),
                attributes=self.resolver.attributes("headings"),
                level=len(match.group(1)),
                id=heading_id,
                source_location=SourceLocation(line=i + 1),
            )
        )
        return True, i + 1

    def _try_parse_code_fence(
        self, lines: list[str], i: int, state: ScannerState, result: list[Node]
    ) -> tuple[bool, int]:
        """Try to open a fenced code block.

        The fence body and the closing fence are handled by
        ``_process_fenced_line`` while the fence is open.

        Returns
        -------
        tuple[bool, int]
            (matched, new_index)

        """
        match = CODE_FENCE_PATTERN.match(lines[i])
        if not match:
            return False, i

        info = match.group(2).strip() if match.group(2) else None
        state.open_fence(i, match.group(1), info)
        return True, i + 1

    def _try_parse_blockquote(
        self, lines: list[str], i: int, state: ScannerState, result: list[Node]
    ) -> tuple[bool, int]:
        """Try to parse a single-line blockquote with an optional citation.

        Returns
        -------
        tuple[bool, int]
            (matched, new_index)

        """
        line = lines[i]
        if not BLOCKQUOTE_PATTERN.match(line):
            return False, i

        children: list[Union[Node, str]] = []
        content = BLOCKQUOTE_CONTENT_PATTERN.match(line)
        if content:
            children.extend(self._inline_children(content.group(1).strip()))
            if content.group(2):
                children.append(Node("citation", children=self._inline_children(content.group(2).strip())))

        result.append(
            Node(
                "blockquote",
                children=children,
                attributes=self.resolver.attributes("blockquotes"),
                source_location=SourceLocation(line=i + 1),
            )
        )
        return True, i + 1

    def _try_parse_table(
        self, lines: list[str], i: int, state: ScannerState, result: list[Node]
    ) -> tuple[bool, int]:
        """Try to parse a pipe table.

        An alignment row directly below a pipe row belongs to that row's
        table and never starts a table of its own.

        Returns
        -------
        tuple[bool, int]
            (matched, new_index)

        """
        line = lines[i]
        if not is_table_row(line):
            return False, i
        if is_alignment_row(line) and i > 0 and is_table_row(lines[i - 1]):
            return False, i

        table, consumed = self.table_builder.build(lines, i)
        result.append(table)
        state.nesting.level = 0
        return True, i + consumed

    def _try_parse_image(
        self, lines: list[str], i: int, state: ScannerState, result: list[Node]
    ) -> tuple[bool, int]:
        """Try to parse a line consisting of a single image.

        Returns
        -------
        tuple[bool, int]
            (matched, new_index)

        """
        match = IMAGE_LINE_PATTERN.fullmatch(lines[i].strip())
        if not match:
            return False, i

        alt, src, title = match.groups()
        attributes = self.resolver.attributes("images", src=src, alt=alt, title=title)
        attributes.setdefault("alt", "")
        result.append(Node("image", attributes=attributes, source_location=SourceLocation(line=i + 1)))
        return True, i + 1

    def _try_parse_list(
        self, lines: list[str], i: int, state: ScannerState, result: list[Node]
    ) -> tuple[bool, int]:
        """Try to parse an ordered or unordered list line.

        Returns
        -------
        tuple[bool, int]
            (matched, new_index)

        """
        line = lines[i]
        match = LIST_ITEM_PATTERN.match(line)
        if not match:
            return False, i

        depth = indentation_level(line)
        marker = match.group(2)
        ordered = marker[0].isdigit()
        item = Node("list-item", children=self._inline_children(line[match.end() :]))
        result.append(
            Node(
                "ordered-list" if ordered else "unordered-list",
                children=[item],
                attributes=self.resolver.attributes(
                    "lists",
                    style=self._indent_style(depth),
                    start=int(marker[:-1]) if ordered else None,
                ),
                metadata={"depth": depth},
                source_location=SourceLocation(line=i + 1),
            )
        )
        return True, i + 1

    def _parse_paragraph(self, line: str, i: int, result: list[Node]) -> None:
        formatted = self.formatter.format(line.strip())
        if not formatted.strip():
            return
        result.append(
            Node(
                "paragraph",
                children=[formatted],
                attributes=self.resolver.attributes("paragraphs"),
                source_location=SourceLocation(line=i + 1),
            )
        )

    def _build_code_block(self, state: ScannerState, end_line: int) -> Node:
        language = state.code_block_language
        code = Node(
            "code",
            children=[self.formatter.sanitize("\n".join(state.code_block_buffer))],
            attributes={"class": f"{self.options.lang_prefix}{language}"} if language else {},
        )
        metadata: dict[str, str] = {}
        if language:
            metadata["language"] = language
        if state.code_block_info:
            metadata["info"] = state.code_block_info
        return Node(
            "code-block",
            children=[code],
            attributes=self.resolver.attributes("code_blocks"),
            metadata=metadata,
            source_location=SourceLocation(line=state.code_block_start + 1, end_line=end_line),
        )

    def _inline_children(self, text: str) -> list[Union[Node, str]]:
        formatted = self.formatter.format(text)
        return [formatted] if formatted else []

    @staticmethod
    def _indent_style(depth: int) -> dict[str, str]:
        return {"margin-left": f"{depth * NESTING_MARGIN_PX}px"}

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdnodes/parsers/_nesting.py
"""Nesting depth tracking for list and task lines."""

from __future__ import annotations

import logging
import re

from mdnodes.constants import NESTING_INDENT_WIDTH

logger = logging.getLogger(__name__)

# Covers task items too: ``- [x]`` is also an unordered list marker
LIST_MARKER_PATTERN = re.compile(r"^(\s*)([-*+]|\d+\.)\s")


def indentation_level(line: str) -> int:
    """Return the nesting level implied by the leading whitespace of ``line``."""
    return (len(line) - len(line.lstrip())) // NESTING_INDENT_WIDTH


class NestingGuard:
    """Track the running list depth and enforce a ceiling.

    A list or task line sets the running level from its indentation. Any
    other non-blank line ends the list run and resets it to zero. Blank lines
    leave it unchanged.

    Parameters
    ----------
    max_level : int
        Deepest permitted level

    Examples
    --------
        >>> guard = NestingGuard(max_level=1)
        >>> guard.observe("- top")
        False
        >>> guard.observe("    - too deep")
        True
        >>> guard.level
        2

    """

    def __init__(self, max_level: int):
        self.max_level = max_level
        self.level = 0

    def observe(self, line: str) -> bool:
        """Update the running level from ``line``.

        Returns
        -------
        bool
            True when the line exceeds the ceiling and must not be
            classified; always False for blank lines

        """
        if not line.strip():
            return False
        if LIST_MARKER_PATTERN.match(line):
            self.level = indentation_level(line)
        else:
            self.level = 0

        if self.level > self.max_level:
            logger.debug("Nesting level %d exceeds maximum %d", self.level, self.max_level)
            return True
        return False

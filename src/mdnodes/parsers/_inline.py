#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdnodes/parsers/_inline.py
"""Inline (span-level) markdown formatting.

Block text is rewritten by an ordered list of substitution rules. Order is
part of the contract: later rules see the output of earlier ones, and several
delimiters are prefixes of others (``~~`` before ``~``, ``***`` before ``**``
before ``*``).

Three kinds of content are set aside before the first rule runs: code span
bodies, restored by the ``code`` rule; whole inline images, rendered by the
``image`` rule; and link destinations, consumed by the ``link`` rule.
Emphasis rules therefore never reach inside code, into alt text or into a
URL.

Rules are plain substitutions, not a nesting parser. Delimiters that
interleave produce interleaved tags: ``$x^2$ and y^3^`` becomes
``<span class="math-inline">x<sup>2</span> and y</sup>3^``.

"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from mdnodes.constants import MATH_INLINE_CLASS, NEW_TAB_REL, NEW_TAB_TARGET
from mdnodes.options.markdown import ParseOptions
from mdnodes.parsers._attributes import AttributeResolver, render_attributes
from mdnodes.utils.escape import escape_html

# Private-use code points mark stashed content; no delimiter below matches them
_CODE_OPEN, _CODE_CLOSE = "\ue000", "\ue001"
_DEST_OPEN, _DEST_CLOSE = "\ue002", "\ue003"
_IMAGE_OPEN, _IMAGE_CLOSE = "\ue004", "\ue005"
_STRIP_MARKERS = str.maketrans(
    "", "", _CODE_OPEN + _CODE_CLOSE + _DEST_OPEN + _DEST_CLOSE + _IMAGE_OPEN + _IMAGE_CLOSE
)

# Titles may be quoted with a literal or an already-escaped double quote
_TITLE = r'(?:\s+(?:"|&quot;)(.+?)(?:"|&quot;))?'

CODE_SPAN_PATTERN = re.compile(r"`([^`]+)`")
IMAGE_SOURCE_PATTERN = re.compile(r"!\[([^\]]*)\]\(([^)\s]+)" + _TITLE + r"\)")
DESTINATION_PATTERN = re.compile(r"\]\(([^)\s]+)" + _TITLE + r"\)")

MATH_PATTERN = re.compile(r"\$(.+?)\$")
STRIKETHROUGH_PATTERN = re.compile(r"~~(.+?)~~")
SUPERSCRIPT_PATTERN = re.compile(r"\^(.+?)\^")
SUBSCRIPT_PATTERN = re.compile(r"~(.+?)~")
HIGHLIGHT_PATTERN = re.compile(r"==(.+?)==")
BOLD_ITALIC_ASTERISK_PATTERN = re.compile(r"\*\*\*(.+?)\*\*\*")
BOLD_ITALIC_UNDERSCORE_PATTERN = re.compile(r"___(.+?)___")
BOLD_ASTERISK_PATTERN = re.compile(r"\*\*(.+?)\*\*")
BOLD_UNDERSCORE_PATTERN = re.compile(r"__(.+?)__")
ITALIC_ASTERISK_PATTERN = re.compile(r"\*(.+?)\*")
ITALIC_UNDERSCORE_PATTERN = re.compile(r"_(.+?)_")
CODE_PLACEHOLDER_PATTERN = re.compile(_CODE_OPEN + r"(\d+)" + _CODE_CLOSE)
IMAGE_PATTERN = re.compile(_IMAGE_OPEN + r"(\d+)" + _IMAGE_CLOSE)
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(" + _DEST_OPEN + r"(\d+)" + _DEST_CLOSE + r"\)")
DESTINATION_PLACEHOLDER_PATTERN = re.compile(r"\]\(" + _DEST_OPEN + r"(\d+)" + _DEST_CLOSE + r"\)")


@dataclass
class _Stash:
    code_spans: list[str] = field(default_factory=list)
    # (url, title, original source text)
    destinations: list[tuple[str, Optional[str], str]] = field(default_factory=list)
    # (alt, src, title)
    images: list[tuple[str, str, Optional[str]]] = field(default_factory=list)

    def stash_code(self, match: re.Match[str]) -> str:
        self.code_spans.append(match.group(1))
        return f"{_CODE_OPEN}{len(self.code_spans) - 1}{_CODE_CLOSE}"

    def stash_destination(self, match: re.Match[str]) -> str:
        self.destinations.append((match.group(1), match.group(2), match.group(0)))
        return f"]({_DEST_OPEN}{len(self.destinations) - 1}{_DEST_CLOSE})"

    def stash_image(self, match: re.Match[str]) -> str:
        self.images.append((match.group(1), match.group(2), match.group(3)))
        return f"{_IMAGE_OPEN}{len(self.images) - 1}{_IMAGE_CLOSE}"

    def restore_destination(self, match: re.Match[str]) -> str:
        return self.destinations[int(match.group(1))][2]


Replacement = Union[str, Callable[["re.Match[str]", _Stash], str]]


@dataclass(frozen=True)
class InlineRule:
    """One step of the inline pipeline.

    Parameters
    ----------
    name : str
        Rule identifier
    pattern : re.Pattern
        Non-greedy, single-line pattern
    replacement : str or callable
        A ``re.sub`` template, or a callable receiving the match and the
        content set aside for the current call

    """

    name: str
    pattern: re.Pattern[str]
    replacement: Replacement

    def apply(self, text: str, stash: _Stash) -> str:
        """Apply this rule to ``text``."""
        replacement = self.replacement
        if isinstance(replacement, str):
            return self.pattern.sub(replacement, text)
        return self.pattern.sub(lambda match: replacement(match, stash), text)


def _restore_code_span(match: re.Match[str], stash: _Stash) -> str:
    return f"<code>{stash.code_spans[int(match.group(1))]}</code>"


class InlineFormatter:
    """Resolve span-level markup within a line of block text.

    Parameters
    ----------
    options : ParseOptions
        Controls sanitization and link targets
    resolver : AttributeResolver
        Supplies configured classes and styles for links and images

    Examples
    --------
        >>> options = ParseOptions()
        >>> formatter = InlineFormatter(options, AttributeResolver(options.custom_classes, options.custom_styles))
        >>> formatter.format("**bold** and ~~gone~~")
        '<strong>bold</strong> and <del>gone</del>'

    """

    def __init__(self, options: ParseOptions, resolver: AttributeResolver):
        self.options = options
        self.resolver = resolver
        self.rules: tuple[InlineRule, ...] = (
            InlineRule("math", MATH_PATTERN, rf'<span class="{MATH_INLINE_CLASS}">\1</span>'),
            InlineRule("strikethrough", STRIKETHROUGH_PATTERN, r"<del>\1</del>"),
            InlineRule("superscript", SUPERSCRIPT_PATTERN, r"<sup>\1</sup>"),
            InlineRule("subscript", SUBSCRIPT_PATTERN, r"<sub>\1</sub>"),
            InlineRule("highlight", HIGHLIGHT_PATTERN, r"<mark>\1</mark>"),
            InlineRule("bold_italic_asterisk", BOLD_ITALIC_ASTERISK_PATTERN, r"<strong><em>\1</em></strong>"),
            InlineRule("bold_italic_underscore", BOLD_ITALIC_UNDERSCORE_PATTERN, r"<strong><em>\1</em></strong>"),
            InlineRule("bold_asterisk", BOLD_ASTERISK_PATTERN, r"<strong>\1</strong>"),
            InlineRule("bold_underscore", BOLD_UNDERSCORE_PATTERN, r"<strong>\1</strong>"),
            InlineRule("italic_asterisk", ITALIC_ASTERISK_PATTERN, r"<em>\1</em>"),
            InlineRule("italic_underscore", ITALIC_UNDERSCORE_PATTERN, r"<em>\1</em>"),
            InlineRule("code", CODE_PLACEHOLDER_PATTERN, _restore_code_span),
            InlineRule("image", IMAGE_PATTERN, self._replace_image),
            InlineRule("link", LINK_PATTERN, self._replace_link),
        )

    def sanitize(self, text: str) -> str:
        """Escape raw text when sanitization is enabled."""
        if not self.options.sanitize_html:
            return text
        return escape_html(text)

    def format(self, text: Optional[str]) -> str:
        """Return ``text`` with inline markup resolved.

        Unmatched or unbalanced delimiters are left as literal text. The
        private-use characters reserved for stash markers are dropped from
        the input.
        """
        if not text:
            return ""

        stash = _Stash()
        processed = self.sanitize(text.translate(_STRIP_MARKERS))
        processed = CODE_SPAN_PATTERN.sub(stash.stash_code, processed)
        processed = IMAGE_SOURCE_PATTERN.sub(stash.stash_image, processed)
        processed = DESTINATION_PATTERN.sub(stash.stash_destination, processed)
        for rule in self.rules:
            processed = rule.apply(processed, stash)
        # Destinations with no bracketed text in front of them stay literal
        return DESTINATION_PLACEHOLDER_PATTERN.sub(stash.restore_destination, processed)

    def _replace_image(self, match: re.Match[str], stash: _Stash) -> str:
        alt, src, title = stash.images[int(match.group(1))]
        alt = CODE_PLACEHOLDER_PATTERN.sub(lambda code: stash.code_spans[int(code.group(1))], alt)
        attributes = self.resolver.attributes("images", src=src, alt=alt, title=title)
        attributes.setdefault("alt", "")
        return f"<img{render_attributes(attributes)} />"

    def _replace_link(self, match: re.Match[str], stash: _Stash) -> str:
        url, title, _ = stash.destinations[int(match.group(2))]
        target = self.options.link_target
        attributes = self.resolver.attributes(
            "links",
            href=url,
            title=title,
            target=target,
            rel=NEW_TAB_REL if target == NEW_TAB_TARGET else None,
        )
        return f"<a{render_attributes(attributes)}>{match.group(1)}</a>"


def format_inline(text: str, options: Optional[ParseOptions] = None) -> str:
    """Format a single string with the inline pipeline.

    Parameters
    ----------
    text : str
        Raw markdown text (one line of block content)
    options : ParseOptions or None, default = None
        Parser options; defaults are used when omitted

    Returns
    -------
    str
        Markup text

    """
    options = options or ParseOptions()
    resolver = AttributeResolver(options.custom_classes, options.custom_styles)
    return InlineFormatter(options, resolver).format(text)

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the public parsing API."""

import logging

import pytest

import mdnodes
from mdnodes import ParseOptions, parse, parse_with_fallback
from mdnodes.exceptions import ParsingError, ValidationError
from mdnodes.parsers.markdown import MarkdownParser


def _raise_parsing_error(self, input_data):
    raise ParsingError("scanner exploded", line_number=2)


class TestParse:
    """Tests for ``parse``."""

    def test_parse_returns_nodes(self) -> None:
        """Test the basic call."""
        nodes = parse("# Title\n\nBody")

        assert [node.kind for node in nodes] == ["heading", "paragraph"]

    def test_keyword_options(self) -> None:
        """Test that keyword arguments build options."""
        nodes = parse("<i>x</i>", sanitize_html=False)

        assert nodes[0].text == "<i>x</i>"

    def test_keyword_options_override(self) -> None:
        """Test that keyword arguments override an options object."""
        options = ParseOptions(link_target="_self", lang_prefix="lang-")
        nodes = parse("[a](u)\n```py\nx\n```", options, link_target="_top")

        assert 'target="_top"' in nodes[0].text
        assert nodes[1].find_children("code")[0].attributes["class"] == "lang-py"

    def test_invalid_keyword_option(self) -> None:
        """Test that bad option values raise ValueError."""
        with pytest.raises(ValueError):
            parse("x", max_nesting_level=-1)

    def test_unsupported_input_type(self) -> None:
        """Test that non-text input is rejected."""
        with pytest.raises(ValidationError):
            parse(12345)  # type: ignore[arg-type]

    def test_package_exports(self) -> None:
        """Test the top-level package surface."""
        assert mdnodes.parse is parse
        assert mdnodes.MarkdownParser is MarkdownParser
        assert isinstance(mdnodes.__version__, str)


class TestParseWithFallback:
    """Tests for ``parse_with_fallback``."""

    def test_success_matches_parse(self) -> None:
        """Test that successful parses are returned unchanged."""
        assert parse_with_fallback("- a\n- b") == parse("- a\n- b")

    def test_failure_returns_raw_paragraph(self, monkeypatch, caplog) -> None:
        """Test the single escaped paragraph returned on failure."""
        monkeypatch.setattr(MarkdownParser, "parse", _raise_parsing_error)

        with caplog.at_level(logging.ERROR, logger="mdnodes.api"):
            nodes = parse_with_fallback("<b>raw</b>")

        assert len(nodes) == 1
        assert nodes[0].kind == "paragraph"
        assert nodes[0].text == "&lt;b&gt;raw&lt;/b&gt;"
        assert nodes[0].metadata["parse_error"] == "scanner exploded"
        assert nodes[0].source_location.line == 2
        assert "falling back" in caplog.text

    def test_failure_unsanitized(self, monkeypatch) -> None:
        """Test that the fallback text is raw when sanitization is off."""
        monkeypatch.setattr(MarkdownParser, "parse", _raise_parsing_error)

        nodes = parse_with_fallback("<b>raw</b>", sanitize_html=False)

        assert nodes[0].text == "<b>raw</b>"

    def test_invalid_options_still_raise(self) -> None:
        """Test that option errors are not swallowed."""
        with pytest.raises(ValueError):
            parse_with_fallback("x", link_target="nowhere")

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the inline formatting pipeline."""

import pytest

from mdnodes.options import ParseOptions
from mdnodes.parsers._attributes import AttributeResolver
from mdnodes.parsers._inline import InlineFormatter, format_inline


def make_formatter(**kwargs) -> InlineFormatter:
    options = ParseOptions(**kwargs)
    return InlineFormatter(options, AttributeResolver(options.custom_classes, options.custom_styles))


class TestInlineFormatterEmphasis:
    """Tests for emphasis-style delimiters."""

    def test_mixed_formatting(self) -> None:
        """Test the common delimiters together on one line."""
        result = format_inline("**bold** *italic* ~~strike~~ `code` $E=mc^2$")

        assert "<strong>bold</strong>" in result
        assert "<em>italic</em>" in result
        assert "<del>strike</del>" in result
        assert "<code>code</code>" in result
        assert '<span class="math-inline">E=mc^2</span>' in result

    @pytest.mark.parametrize("text", ["***x***", "___x___"])
    def test_bold_italic(self, text) -> None:
        """Test that triple delimiters nest em inside strong."""
        assert format_inline(text) == "<strong><em>x</em></strong>"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("__bold__", "<strong>bold</strong>"),
            ("_it_", "<em>it</em>"),
            ("H~2~O", "H<sub>2</sub>O"),
            ("x^2^", "x<sup>2</sup>"),
            ("==marked==", "<mark>marked</mark>"),
        ],
    )
    def test_single_rules(self, text, expected) -> None:
        """Test each remaining delimiter on its own."""
        assert format_inline(text) == expected

    def test_strikethrough_before_subscript(self) -> None:
        """Test that a double tilde is not read as two subscripts."""
        assert format_inline("~~gone~~") == "<del>gone</del>"

    def test_unbalanced_delimiters_stay_literal(self) -> None:
        """Test that lone delimiters are not consumed."""
        assert format_inline("2 * 3 and snake_case") == "2 * 3 and snake_case"

    def test_empty_text(self) -> None:
        """Test that empty text formats to an empty string."""
        assert format_inline("") == ""

    def test_interleaved_delimiters_cross(self) -> None:
        """Test that overlapping delimiters yield crossed tags rather than nesting."""
        assert format_inline("$x^2$ and y^3^") == (
            '<span class="math-inline">x<sup>2</span> and y</sup>3^'
        )


class TestInlineFormatterCode:
    """Tests for code spans."""

    def test_code_span_contents_not_formatted(self) -> None:
        """Test that emphasis markers inside code are left alone."""
        assert format_inline("`a*b*c` and *d*") == "<code>a*b*c</code> and <em>d</em>"

    def test_code_span_contents_escaped(self) -> None:
        """Test that code span text is sanitized like any other text."""
        assert format_inline("`<tag>`") == "<code>&lt;tag&gt;</code>"

    def test_marker_characters_removed(self) -> None:
        """Test that reserved placeholder characters in the input are dropped."""
        assert format_inline("a\ue0000\ue001b") == "a0b"


class TestInlineFormatterLinks:
    """Tests for links and inline images."""

    def test_link_defaults_to_new_tab(self) -> None:
        """Test that _blank links get a noopener rel."""
        assert (
            format_inline("[Docs](https://example.com)")
            == '<a href="https://example.com" target="_blank" rel="noopener noreferrer">Docs</a>'
        )

    def test_link_with_title(self) -> None:
        """Test that a quoted title becomes the title attribute."""
        result = format_inline('[Docs](https://example.com "Read me")')

        assert result == (
            '<a href="https://example.com" title="Read me" target="_blank" rel="noopener noreferrer">Docs</a>'
        )

    def test_link_with_title_unsanitized(self) -> None:
        """Test that titles are recognized with literal quotes too."""
        formatter = make_formatter(sanitize_html=False)

        assert formatter.format('[a](u "t")') == '<a href="u" title="t" target="_blank" rel="noopener noreferrer">a</a>'

    def test_link_same_tab(self) -> None:
        """Test that other targets carry no rel attribute."""
        formatter = make_formatter(link_target="_self")

        assert formatter.format("[x](u)") == '<a href="u" target="_self">x</a>'

    def test_link_url_not_formatted(self) -> None:
        """Test that underscores and asterisks in a URL survive emphasis rules."""
        result = format_inline("[x](https://example.com/a_b_c*d*)")

        assert 'href="https://example.com/a_b_c*d*"' in result
        assert "<em>" not in result

    def test_link_query_string_escaped_once(self) -> None:
        """Test that ampersands in URLs are escaped exactly once."""
        result = format_inline("[q](https://example.com/?a=1&b=2)")

        assert 'href="https://example.com/?a=1&amp;b=2"' in result

    def test_link_text_formatted(self) -> None:
        """Test that link text keeps inline formatting."""
        result = format_inline("[**bold**](u)")

        assert result.endswith("><strong>bold</strong></a>")

    def test_link_custom_class(self) -> None:
        """Test that configured link classes are appended after computed attributes."""
        formatter = make_formatter(custom_classes={"links": "ext"})

        assert formatter.format("[x](u)") == '<a href="u" target="_blank" rel="noopener noreferrer" class="ext">x</a>'

    def test_inline_image(self) -> None:
        """Test that an inline image is not turned into a link."""
        assert format_inline("![alt](a.png)") == '<img src="a.png" alt="alt" />'

    def test_inline_image_alt_not_formatted(self) -> None:
        """Test that underscores in alt text are not read as emphasis."""
        assert format_inline("see ![my_pic_x](u.png)") == 'see <img src="u.png" alt="my_pic_x" />'

    def test_inline_image_title_and_code_alt(self) -> None:
        """Test an image with a title and a code span in its alt text."""
        result = format_inline('![a `b_c` d](i.png "The *title*")')

        assert result == '<img src="i.png" alt="a b_c d" title="The *title*" />'

    def test_image_inside_link(self) -> None:
        """Test a linked image."""
        result = make_formatter(link_target="_self").format("[![logo_x](l.png)](home)")

        assert result == '<a href="home" target="_self"><img src="l.png" alt="logo_x" /></a>'

    def test_orphan_destination_restored(self) -> None:
        """Test that a destination without bracketed text stays literal."""
        assert format_inline("see ](u) end") == "see ](u) end"


class TestInlineFormatterSanitize:
    """Tests for escaping."""

    def test_sanitize_enabled(self) -> None:
        """Test that special characters are escaped."""
        assert format_inline("<b>\"x\" & 'y'</b>") == "&lt;b&gt;&quot;x&quot; &amp; &#x27;y&#x27;&lt;/b&gt;"

    def test_sanitize_disabled(self) -> None:
        """Test that raw text is kept verbatim."""
        assert make_formatter(sanitize_html=False).format("<b>x</b>") == "<b>x</b>"

    def test_rule_order(self) -> None:
        """Test the fixed rule order."""
        names = [rule.name for rule in make_formatter().rules]

        assert names[:5] == ["math", "strikethrough", "superscript", "subscript", "highlight"]
        assert names[-3:] == ["code", "image", "link"]

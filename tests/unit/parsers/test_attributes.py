#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for attribute resolution."""

from mdnodes.options import ElementClasses, ElementStyles
from mdnodes.parsers._attributes import AttributeResolver, ElementProperties, render_attributes, style_to_css


class TestAttributeResolver:
    """Tests for merging configured and computed attributes."""

    def test_configured_class_comes_first(self) -> None:
        """Test that the configured class precedes the local one."""
        resolver = AttributeResolver(ElementClasses(headings="title"), ElementStyles())

        assert resolver.resolve("headings", class_name="anchor").class_name == "title anchor"

    def test_local_style_overrides_configured(self) -> None:
        """Test that local style fields win over configured ones."""
        resolver = AttributeResolver(ElementClasses(), ElementStyles(lists={"color": "red", "margin-left": "5px"}))
        props = resolver.resolve("lists", style={"margin-left": "20px"})

        assert props.style == {"color": "red", "margin-left": "20px"}

    def test_empty_results_are_none(self) -> None:
        """Test that nothing configured and nothing local yields no properties."""
        resolver = AttributeResolver(ElementClasses(), ElementStyles())

        assert resolver.resolve("tables") == ElementProperties(class_name=None, style=None)
        assert resolver.attributes("tables") == {}

    def test_configured_style_is_not_mutated(self) -> None:
        """Test that merging does not modify the configured mapping."""
        styles = ElementStyles(tables={"width": "100%"})
        resolver = AttributeResolver(ElementClasses(), styles)
        resolver.resolve("tables", style={"width": "50%"})

        assert styles.tables == {"width": "100%"}

    def test_attributes_drop_empty_values(self) -> None:
        """Test that None and empty strings are dropped and False is kept."""
        resolver = AttributeResolver(ElementClasses(links="ext"), ElementStyles())
        attributes = resolver.attributes("links", href="u", title=None, alt="", checked=False)

        assert attributes == {"href": "u", "checked": False, "class": "ext"}
        assert list(attributes) == ["href", "checked", "class"]


class TestAttributeRendering:
    """Tests for serializing attributes as markup."""

    def test_style_to_css(self) -> None:
        """Test CSS declaration formatting."""
        assert style_to_css({"color": "red", "margin-left": "20px"}) == "color: red; margin-left: 20px"

    def test_render_attributes(self) -> None:
        """Test attribute escaping and style serialization."""
        rendered = render_attributes({"href": "a&b", "style": {"color": "red"}})

        assert rendered == ' href="a&amp;b" style="color: red"'

    def test_render_attributes_no_double_escape(self) -> None:
        """Test that already-escaped values are not escaped again."""
        assert render_attributes({"title": "&quot;x&quot;"}) == ' title="&quot;x&quot;"'

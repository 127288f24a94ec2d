#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdnodes/parsers/_attributes.py
"""Attribute resolution for parsed nodes.

Configured per-element classes and styles are merged with the attributes the
parser computes locally (alignment, indentation, link targets). Empty results
are normalized to ``None`` and never stored on a node, so a renderer can treat
the presence of ``class`` or ``style`` as meaningful.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from mdnodes.constants import ElementType
from mdnodes.options.markdown import ElementClasses, ElementStyles, StyleMapping
from mdnodes.utils.escape import escape_attribute


@dataclass(frozen=True)
class ElementProperties:
    """Merged class and style for one element.

    Parameters
    ----------
    class_name : str or None
        Space-separated class list, None when empty
    style : dict or None
        CSS property mapping, None when empty

    """

    class_name: Optional[str] = None
    style: Optional[StyleMapping] = None

    def as_attributes(self) -> dict[str, Any]:
        """Return the non-empty properties keyed as node attributes."""
        attributes: dict[str, Any] = {}
        if self.class_name:
            attributes["class"] = self.class_name
        if self.style:
            attributes["style"] = dict(self.style)
        return attributes


class AttributeResolver:
    """Merge configured element classes and styles with computed ones.

    Parameters
    ----------
    custom_classes : ElementClasses
        Configured class per element type
    custom_styles : ElementStyles
        Configured style per element type

    Examples
    --------
        >>> resolver = AttributeResolver(ElementClasses(headings="title"), ElementStyles())
        >>> resolver.resolve("headings", class_name="anchor")
        ElementProperties(class_name='title anchor', style=None)

    """

    def __init__(self, custom_classes: ElementClasses, custom_styles: ElementStyles):
        self.custom_classes = custom_classes
        self.custom_styles = custom_styles

    def resolve(
        self,
        element_type: ElementType,
        class_name: Optional[str] = None,
        style: Optional[StyleMapping] = None,
    ) -> ElementProperties:
        """Merge configuration for ``element_type`` with local values.

        The configured class comes first, followed by the local class. The
        configured style is the base and local style fields override it.
        """
        classes = [name for name in (self.custom_classes.get(element_type), class_name) if name]
        merged_style: StyleMapping = {}
        merged_style.update(self.custom_styles.get(element_type) or {})
        merged_style.update(style or {})
        return ElementProperties(
            class_name=" ".join(classes) or None,
            style=merged_style or None,
        )

    def attributes(
        self,
        element_type: ElementType,
        class_name: Optional[str] = None,
        style: Optional[StyleMapping] = None,
        **extra: Any,
    ) -> dict[str, Any]:
        """Build a node attribute mapping.

        Extra attributes keep their keyword order and come before ``class``
        and ``style``; ``None`` and empty-string values are dropped while
        ``False`` is kept.
        """
        attributes = {key: value for key, value in extra.items() if value is not None and value != ""}
        attributes.update(self.resolve(element_type, class_name, style).as_attributes())
        return attributes


def style_to_css(style: StyleMapping) -> str:
    """Serialize a style mapping as an inline CSS declaration list.

    Examples
    --------
        >>> style_to_css({"color": "red", "margin-left": "20px"})
        'color: red; margin-left: 20px'

    """
    return "; ".join(f"{prop}: {value}" for prop, value in style.items())


def render_attributes(attributes: dict[str, Any]) -> str:
    """Render attributes as a markup attribute string with a leading space."""
    parts = []
    for key, value in attributes.items():
        if isinstance(value, dict):
            value = style_to_css(value)
        parts.append(f' {key}="{escape_attribute(str(value))}"')
    return "".join(parts)

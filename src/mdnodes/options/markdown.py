#  Copyright (c) 2025 Tom Villani, Ph.D.
# mdnodes/options/markdown.py
"""Configuration options for markdown parsing.

This module defines the options accepted by the markdown parser. Per-element
classes and styles are keyed by a fixed set of element types rather than an
open dictionary, so a misspelled key is reported instead of silently ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Optional

from mdnodes.constants import (
    DEFAULT_LANG_PREFIX,
    DEFAULT_LINK_TARGET,
    DEFAULT_MAX_NESTING_LEVEL,
    DEFAULT_SANITIZE_HTML,
    ELEMENT_TYPE_ALIASES,
    ELEMENT_TYPES,
    LINK_TARGETS,
    ElementType,
    LinkTarget,
)
from mdnodes.exceptions import ValidationError
from mdnodes.options.base import BaseParserOptions, CloneFrozenMixin

StyleMapping = dict[str, str]

# camelCase option names accepted by ParseOptions.from_dict
_OPTION_ALIASES = {
    "langPrefix": "lang_prefix",
    "customClasses": "custom_classes",
    "customStyles": "custom_styles",
    "linkTarget": "link_target",
    "sanitizeHtml": "sanitize_html",
    "maxNestingLevel": "max_nesting_level",
}


def _normalize_element_keys(mapping: Mapping[str, Any], parameter_name: str) -> dict[str, Any]:
    normalized: dict[str, Any] = {}
    for key, value in mapping.items():
        element_type = ELEMENT_TYPE_ALIASES.get(key, key)
        if element_type not in ELEMENT_TYPES:
            raise ValidationError(
                f"Unknown element type '{key}' in {parameter_name}. "
                f"Expected one of: {', '.join(ELEMENT_TYPES)}",
                parameter_name=parameter_name,
                parameter_value=key,
            )
        normalized[element_type] = value
    return normalized


@dataclass(frozen=True)
class ElementClasses(CloneFrozenMixin):
    """Extra CSS class names, one optional value per element type.

    Examples
    --------
        >>> classes = ElementClasses(headings="title", paragraphs="body-text")
        >>> classes.get("headings")
        'title'

    """

    headings: Optional[str] = None
    paragraphs: Optional[str] = None
    lists: Optional[str] = None
    blockquotes: Optional[str] = None
    code_blocks: Optional[str] = None
    tables: Optional[str] = None
    links: Optional[str] = None
    images: Optional[str] = None

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"Class name for '{f.name}' must be a string, got {type(value).__name__}")

    def get(self, element_type: ElementType) -> Optional[str]:
        """Return the configured class name for an element type."""
        return getattr(self, element_type)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> ElementClasses:
        """Build from a mapping keyed by element type (``codeBlocks`` is accepted)."""
        return cls(**_normalize_element_keys(mapping, "custom_classes"))


@dataclass(frozen=True)
class ElementStyles(CloneFrozenMixin):
    """Inline style mappings, one optional mapping per element type.

    Style keys are CSS property names (``"color"``, ``"font-size"``); values
    are coerced to strings.
    """

    headings: Optional[StyleMapping] = None
    paragraphs: Optional[StyleMapping] = None
    lists: Optional[StyleMapping] = None
    blockquotes: Optional[StyleMapping] = None
    code_blocks: Optional[StyleMapping] = None
    tables: Optional[StyleMapping] = None
    links: Optional[StyleMapping] = None
    images: Optional[StyleMapping] = None

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if not isinstance(value, Mapping):
                raise ValueError(f"Style for '{f.name}' must be a mapping, got {type(value).__name__}")
            object.__setattr__(self, f.name, {str(k): str(v) for k, v in value.items()})

    def get(self, element_type: ElementType) -> Optional[StyleMapping]:
        """Return the configured style mapping for an element type."""
        return getattr(self, element_type)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> ElementStyles:
        """Build from a mapping keyed by element type (``codeBlocks`` is accepted)."""
        return cls(**_normalize_element_keys(mapping, "custom_styles"))


@dataclass(frozen=True)
class ParseOptions(BaseParserOptions):
    """Configuration options for markdown-to-node parsing.

    Parameters
    ----------
    lang_prefix : str, default "language-"
        Prefix joined to a code fence language token to form the class of the
        code element (``language-python``).
    custom_classes : ElementClasses or mapping, default empty
        Extra class name per element type, prepended to computed classes.
    custom_styles : ElementStyles or mapping, default empty
        Base inline style per element type; computed style fields win.
    link_target : {"_blank", "_self", "_parent", "_top"}, default "_blank"
        Anchor ``target``. ``_blank`` also sets ``rel="noopener noreferrer"``.
    sanitize_html : bool, default True
        Escape ``& < > " '`` in raw text before markup is injected. Disable
        only for trusted content.
    max_nesting_level : int, default 6
        Deepest list/task nesting level before an error node is emitted.

    Examples
    --------
        >>> options = ParseOptions(custom_classes={"headings": "title"}, link_target="_self")
        >>> options.custom_classes.headings
        'title'

    """

    lang_prefix: str = field(
        default=DEFAULT_LANG_PREFIX,
        metadata={"help": "Prefix for the code fence language class", "cli_name": "lang-prefix"},
    )
    custom_classes: ElementClasses = field(
        default_factory=ElementClasses,
        metadata={"help": "Extra class name per element type", "exclude_from_cli": True},
    )
    custom_styles: ElementStyles = field(
        default_factory=ElementStyles,
        metadata={"help": "Extra inline style per element type", "exclude_from_cli": True},
    )
    link_target: LinkTarget = field(
        default=DEFAULT_LINK_TARGET,
        metadata={"help": "Target attribute for links", "choices": list(LINK_TARGETS), "cli_name": "link-target"},
    )
    sanitize_html: bool = field(
        default=DEFAULT_SANITIZE_HTML,
        metadata={
            "help": "Escape HTML special characters in raw text",
            "cli_name": "no-sanitize",
            "cli_negates_default": True,
        },
    )
    max_nesting_level: int = field(
        default=DEFAULT_MAX_NESTING_LEVEL,
        metadata={"help": "Maximum list nesting depth before an error node is emitted", "type": int},
    )

    def __post_init__(self) -> None:
        """Coerce element mappings and validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if isinstance(self.custom_classes, Mapping):
            object.__setattr__(self, "custom_classes", ElementClasses.from_mapping(self.custom_classes))
        elif not isinstance(self.custom_classes, ElementClasses):
            raise ValueError(
                f"custom_classes must be ElementClasses or a mapping, got {type(self.custom_classes).__name__}"
            )

        if isinstance(self.custom_styles, Mapping):
            object.__setattr__(self, "custom_styles", ElementStyles.from_mapping(self.custom_styles))
        elif not isinstance(self.custom_styles, ElementStyles):
            raise ValueError(
                f"custom_styles must be ElementStyles or a mapping, got {type(self.custom_styles).__name__}"
            )

        if not isinstance(self.lang_prefix, str):
            raise ValueError(f"lang_prefix must be a string, got {type(self.lang_prefix).__name__}")

        if self.link_target not in LINK_TARGETS:
            raise ValueError(f"link_target must be one of {', '.join(LINK_TARGETS)}, got {self.link_target!r}")

        if isinstance(self.max_nesting_level, bool) or not isinstance(self.max_nesting_level, int):
            raise ValueError(f"max_nesting_level must be an integer, got {self.max_nesting_level!r}")
        if self.max_nesting_level < 0:
            raise ValueError(f"max_nesting_level must be non-negative, got {self.max_nesting_level}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ParseOptions:
        """Build options from a plain mapping, e.g. a loaded configuration file.

        Both snake_case field names and their camelCase spellings
        (``langPrefix``, ``maxNestingLevel``, ...) are accepted.

        Raises
        ------
        ValidationError
            If the mapping contains an unknown option name.

        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                raise ValidationError(f"Unknown parse option '{key}'", parameter_name=key, parameter_value=value)
            kwargs[name] = value
        return cls(**kwargs)

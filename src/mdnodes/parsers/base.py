#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdnodes/parsers/base.py
"""Base class for markup parsers.

The BaseParser provides the option validation and input loading shared by
parsers that turn source text into a list of content nodes.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Union

from mdnodes.ast.nodes import Node
from mdnodes.exceptions import InvalidOptionsError, ValidationError
from mdnodes.options.base import BaseParserOptions
from mdnodes.utils.encoding import read_text_with_encoding_detection

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Parser options

    Examples
    --------
    Creating a custom parser:

        >>> from mdnodes.ast import Node
        >>> class PlainParser(BaseParser):
        ...     def parse(self, input_data):
        ...         text = self._load_text_content(input_data)
        ...         return [Node("paragraph", children=[text])]

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                parser_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: Union[str, bytes]) -> list[Node]:
        """Parse the input into an ordered list of block nodes.

        Parameters
        ----------
        input_data : str or bytes
            Source text, or raw bytes to be decoded

        Returns
        -------
        list[Node]
            Block nodes in source order

        Raises
        ------
        ParsingError
            If parsing fails for a structural reason
        ValidationError
            If the input is neither text nor bytes

        """
        raise NotImplementedError

    @staticmethod
    def _load_text_content(input_data: Union[str, bytes]) -> str:
        """Return ``input_data`` as text, decoding bytes with encoding detection.

        Raises
        ------
        ValidationError
            If ``input_data`` is neither ``str`` nor ``bytes``

        """
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, (bytes, bytearray)):
            return read_text_with_encoding_detection(bytes(input_data))
        raise ValidationError(
            f"Unsupported input type: {type(input_data).__name__}",
            parameter_name="input_data",
            parameter_value=input_data,
        )

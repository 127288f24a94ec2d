#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mdnodes library.

Malformed markdown never raises: the parser degrades to paragraphs, partial
tables or inline error nodes instead. The exceptions below cover the
structural failures that are allowed to reach the caller.

Exception Hierarchy
-------------------
- MdNodesError (base exception)

  - ValidationError (bad option value or input type)
    - InvalidOptionsError (options object of the wrong class)

  - ParsingError (unexpected internal failure while scanning)

"""

from typing import Any


class MdNodesError(Exception):
    """Root of the mdnodes exception hierarchy.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        Lower-level exception this error wraps

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Store the message and the wrapped exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(MdNodesError):
    """Raised when an option value or the parser input is not acceptable.

    ``parameter_name`` names the offending option (as spelled by the caller,
    so camelCase keys from configuration files are reported as given).
    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Raised when a parser is handed an options object of the wrong class.

    Parameters
    ----------
    parser_name : str
        Short name of the parser, e.g. ``"markdown"``
    expected_type : type
        Options class the parser accepts
    received_type : type
        Class of the object that was passed

    """

    def __init__(self, parser_name: str, expected_type: type, received_type: type):
        super().__init__(
            f"{parser_name} parser expects {expected_type.__name__}, got {received_type.__name__}",
            parameter_name="options",
            parameter_value=received_type,
        )
        self.parser_name = parser_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(MdNodesError):
    """Raised when the scanner fails for a reason other than bad markdown.

    Parameters
    ----------
    message : str
        Description of the failure
    line_number : int, optional
        1-based source line being scanned when the failure occurred
    original_error : Exception, optional
        The exception raised inside the scanner

    """

    def __init__(self, message: str, line_number: int | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.line_number = line_number


__all__ = [
    "MdNodesError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
]

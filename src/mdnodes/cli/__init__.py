"""Command-line interface for the mdnodes markdown parser.

Reads markdown from a file or standard input and prints the parsed nodes as
JSON or as a tree.

Configuration
-------------
Options are read from the first configuration file found (``--config``, the
``MDNODES_CONFIG`` environment variable, ``.mdnodes.toml`` / ``.yaml`` /
``.json`` or ``[tool.mdnodes]`` in ``pyproject.toml`` in the current or a
parent directory, then the home directory). Command line flags override the
file.

Examples
--------
Print nodes as JSON::

    $ mdnodes README.md

Show the node tree::

    $ mdnodes README.md --format tree

Read from standard input with same-tab links::

    $ cat notes.md | mdnodes - --link-target _self

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from mdnodes.api import parse
from mdnodes.cli.builder import add_parse_option_arguments, cli_option_fields
from mdnodes.cli.config import load_config_with_priority, merge_configs
from mdnodes.cli.output import render_nodes
from mdnodes.constants import (
    CONFIG_ENV_VAR,
    EXIT_INPUT_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from mdnodes.exceptions import MdNodesError, ParsingError, ValidationError
from mdnodes.logging_utils import configure_logging
from mdnodes.options.markdown import ParseOptions
from mdnodes.utils.encoding import read_text_with_encoding_detection

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``mdnodes`` command."""
    parser = argparse.ArgumentParser(
        prog="mdnodes",
        description="Parse markdown into abstract content nodes.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", nargs="?", default="-", help="Markdown file to parse, or '-' for stdin (default)")
    parser.add_argument("--config", help="Path to a configuration file (.toml, .yaml, .json or pyproject.toml)")
    parser.add_argument("--no-config", action="store_true", help="Ignore configuration files and MDNODES_CONFIG")
    parser.add_argument("--format", choices=["json", "tree"], default="json", help="Output format (default: json)")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")

    add_parse_option_arguments(parser.add_argument_group("parse options"))

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", help="Also write log messages to this file")
    logging_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level.upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _collect_cli_overrides(parsed_args: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for field in cli_option_fields():
        value = getattr(parsed_args, field.name)
        if value is not None:
            overrides[field.name] = value
    return overrides


def build_options(parsed_args: argparse.Namespace) -> ParseOptions:
    """Build parse options from configuration files and command line flags.

    Raises
    ------
    argparse.ArgumentTypeError
        If a configuration file cannot be loaded or holds invalid options

    """
    env_config: Optional[str] = None
    if not parsed_args.no_config:
        env_config = os.environ.get(CONFIG_ENV_VAR)

    config = load_config_with_priority(
        explicit_path=parsed_args.config,
        env_var_path=env_config,
        discover=not parsed_args.no_config,
    )
    config = merge_configs(config, _collect_cli_overrides(parsed_args))

    try:
        return ParseOptions.from_dict(config)
    except (ValidationError, ValueError, TypeError) as e:
        raise argparse.ArgumentTypeError(f"Invalid parse options: {e}") from e


def _read_input(source: str) -> str:
    if source == "-":
        return read_text_with_encoding_detection(sys.stdin.buffer.read())
    return read_text_with_encoding_detection(Path(source).read_bytes())


def main(args: list[str] | None = None) -> int:
    """Execute the ``mdnodes`` command and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        options = build_options(parsed_args)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        markdown = _read_input(parsed_args.input)
    except OSError as e:
        print(f"Error: cannot read input {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    try:
        nodes = parse(markdown, options)
    except ParsingError as e:
        logger.debug("Parsing failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_PARSING_ERROR
    except MdNodesError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    render_nodes(nodes, parsed_args.format, indent=parsed_args.indent)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())

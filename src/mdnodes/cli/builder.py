#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Build command line arguments from ``ParseOptions`` field metadata.

Each dataclass field becomes one flag. Field metadata controls the mapping:

- ``help``: argument help text
- ``cli_name``: flag name without the leading dashes (default: kebab-case
  field name)
- ``choices``: allowed values
- ``type``: argparse value converter
- ``cli_negates_default``: boolean field whose flag turns the option off
- ``exclude_from_cli``: field has no flag (set through config files only)

Every generated argument defaults to ``None`` so that only flags the user
actually passed override configuration file values.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import MISSING, Field, fields
from typing import Any, Dict

from mdnodes.options.markdown import ParseOptions

logger = logging.getLogger(__name__)

CLI_METADATA_NEGATES_DEFAULT = "cli_negates_default"


def snake_to_kebab(name: str) -> str:
    """Convert ``max_nesting_level`` to ``max-nesting-level``."""
    return name.replace("_", "-")


def cli_option_fields(options_class: type = ParseOptions) -> list[Field]:
    """Return the option fields that have a command line flag."""
    return [f for f in fields(options_class) if not f.metadata.get("exclude_from_cli", False)]


def get_argument_kwargs(field: Field) -> Dict[str, Any]:
    """Translate one dataclass field into ``add_argument`` keyword arguments.

    Parameters
    ----------
    field : Field
        Option field

    Returns
    -------
    dict
        Keyword arguments for ``argparse.ArgumentParser.add_argument``

    """
    metadata = field.metadata
    kwargs: Dict[str, Any] = {"dest": field.name, "default": None, "help": metadata.get("help")}

    if isinstance(field.default, bool):
        if metadata.get(CLI_METADATA_NEGATES_DEFAULT, False) or field.default is True:
            kwargs["action"] = "store_false"
            kwargs["help"] = f"{kwargs['help']} (on by default; this flag turns it off)"
        else:
            kwargs["action"] = "store_true"
        return kwargs

    if "choices" in metadata:
        kwargs["choices"] = list(metadata["choices"])
    if "type" in metadata:
        kwargs["type"] = metadata["type"]
    if field.default is not MISSING:
        kwargs["help"] = f"{kwargs['help']} (default: {field.default})"
    return kwargs


def add_parse_option_arguments(group: argparse._ArgumentGroup, options_class: type = ParseOptions) -> None:
    """Add one flag per non-excluded field of ``options_class`` to ``group``."""
    for field in cli_option_fields(options_class):
        cli_name = "--" + field.metadata.get("cli_name", snake_to_kebab(field.name))
        group.add_argument(cli_name, **get_argument_kwargs(field))
        logger.debug("Added option argument %s for field %s", cli_name, field.name)

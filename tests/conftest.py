"""Pytest configuration and shared fixtures for the mdnodes test suite.

This module provides shared fixtures and test configuration that are used
across the entire test suite.
"""

import logging
import os

import pytest
from hypothesis import Phase, Verbosity, settings

from mdnodes.options import ParseOptions
from mdnodes.parsers.markdown import MarkdownParser

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def parser() -> MarkdownParser:
    """Provide a parser with default options."""
    return MarkdownParser()


@pytest.fixture
def unsanitized_parser() -> MarkdownParser:
    """Provide a parser that passes raw text through unescaped."""
    return MarkdownParser(ParseOptions(sanitize_html=False))


@pytest.fixture
def sample_markdown() -> str:
    """Provide a document that exercises every block construct."""
    return "\n".join(
        [
            "# Project {#top}",
            "",
            "Intro with **bold** and a [link](https://example.com).",
            "",
            "- item one",
            "  - nested item",
            "1. first",
            "- [x] finished task",
            "- [ ] open task",
            "",
            "> Stay hungry -- Steve",
            "",
            "| Name | Score |",
            "|:-----|------:|",
            "| Ada  | 10    |",
            "",
            "```python {linenos}",
            "print(1 < 2)",
            "```",
            "",
            "![Logo](logo.png \"The logo\")",
            "",
            "Term",
            ": Definition",
        ]
    )


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo root logger changes made by ``configure_logging`` in CLI tests."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)

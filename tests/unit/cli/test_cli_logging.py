"""Unit tests for CLI logging configuration.

Tests for --log-file, --trace flags and the logging helpers.
"""

import logging

import pytest

from mdnodes.cli import main
from mdnodes.logging_utils import configure_logging, resolve_log_level


@pytest.mark.unit
@pytest.mark.cli
class TestLoggingConfiguration:
    """Test logging configuration functions."""

    def test_resolve_log_level(self):
        """Test level names and numbers."""
        assert resolve_log_level("debug") == logging.DEBUG
        assert resolve_log_level(logging.ERROR) == logging.ERROR
        assert resolve_log_level("nonsense") == logging.INFO

    def test_configure_logging_basic(self):
        """Test that a single stderr handler is installed."""
        root = configure_logging("WARNING")

        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_trace_format(self):
        """Test that trace mode adds timestamps and logger names."""
        root = configure_logging(logging.DEBUG, trace_mode=True)

        assert "%(asctime)s" in root.handlers[0].formatter._fmt
        assert "%(name)s" in root.handlers[0].formatter._fmt

    def test_log_file(self, tmp_path):
        """Test that messages are also written to the log file."""
        log_file = tmp_path / "mdnodes.log"
        configure_logging(logging.INFO, log_file=str(log_file))

        logging.getLogger("mdnodes.test").info("hello file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "hello file" in log_file.read_text(encoding="utf-8")

    def test_unwritable_log_file(self, tmp_path):
        """Test that a bad log path only removes the file handler."""
        root = configure_logging(logging.INFO, log_file=str(tmp_path / "missing" / "x.log"))

        assert len(root.handlers) == 1


@pytest.mark.unit
@pytest.mark.cli
class TestMainLogging:
    """Test logging flags on the command line."""

    def test_trace_flag_sets_debug(self, tmp_path):
        """Test that --trace turns on debug logging."""
        source = tmp_path / "doc.md"
        source.write_text("# Title\n")

        assert main([str(source), "--no-config", "--trace"]) == 0
        assert logging.getLogger().level == logging.DEBUG

    def test_log_file_flag(self, tmp_path):
        """Test that --log-file records the debug messages of a parse."""
        source = tmp_path / "doc.md"
        source.write_text("| a | b |\n")
        log_file = tmp_path / "run.log"

        assert main([str(source), "--no-config", "--log-level", "DEBUG", "--log-file", str(log_file)]) == 0
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "header" in log_file.read_text(encoding="utf-8").lower()

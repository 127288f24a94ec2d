#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_encoding.py
"""Unit tests for encoding detection and handling utilities."""

from __future__ import annotations

from unittest.mock import patch

from mdnodes.utils.encoding import detect_encoding, read_text_with_encoding_detection


class TestDetectEncoding:
    """Test cases for detect_encoding function."""

    def test_detect_utf8(self):
        """Test detection of UTF-8 encoded text."""
        encoding = detect_encoding("Hello, world! 你好世界".encode("utf-8"))
        assert encoding is not None
        assert encoding.lower() in ["utf-8", "ascii"]

    def test_empty_data(self):
        """Test detection with empty data."""
        assert detect_encoding(b"") is None

    def test_below_threshold(self):
        """Test that low-confidence results are discarded."""
        with patch("mdnodes.utils.encoding.chardet.detect", return_value={"encoding": "cp1252", "confidence": 0.3}):
            assert detect_encoding(b"abc") is None

    def test_sample_size(self):
        """Test that only the first bytes are sampled."""
        with patch(
            "mdnodes.utils.encoding.chardet.detect", return_value={"encoding": "ascii", "confidence": 1.0}
        ) as mock_detect:
            detect_encoding(b"x" * 100, sample_size=10)

        mock_detect.assert_called_once_with(b"x" * 10)


class TestReadTextWithEncodingDetection:
    """Test cases for read_text_with_encoding_detection."""

    def test_utf8(self):
        """Test plain UTF-8 input."""
        assert read_text_with_encoding_detection("# Überschrift".encode("utf-8")) == "# Überschrift"

    def test_utf8_bom_removed(self):
        """Test that a UTF-8 byte order mark is dropped."""
        assert read_text_with_encoding_detection(b"\xef\xbb\xbf# Title") == "# Title"

    def test_valid_utf8_skips_chardet(self):
        """Test that valid UTF-8 never reaches chardet."""
        with patch("mdnodes.utils.encoding.detect_encoding") as mock_detect:
            read_text_with_encoding_detection("naïve".encode("utf-8"))

        mock_detect.assert_not_called()

    def test_latin1_fallback(self):
        """Test decoding when chardet is disabled."""
        data = "Café résumé".encode("latin-1")

        assert read_text_with_encoding_detection(data, use_chardet=False) == "Café résumé"

    def test_unknown_fallback_encoding_skipped(self):
        """Test that unknown codec names are skipped."""
        data = "Café".encode("latin-1")

        result = read_text_with_encoding_detection(
            data, fallback_encodings=["no-such-codec", "latin-1"], use_chardet=False
        )

        assert result == "Café"

    def test_replacement_when_everything_fails(self):
        """Test the final lossy decode."""
        result = read_text_with_encoding_detection(b"ok \xff", fallback_encodings=["ascii"], use_chardet=False)

        assert result.startswith("ok ")
        assert "\ufffd" in result

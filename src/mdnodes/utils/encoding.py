#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdnodes/utils/encoding.py
"""Character encoding detection for markdown read from bytes."""

from __future__ import annotations

import logging

import chardet

logger = logging.getLogger(__name__)


def detect_encoding(
    data: bytes,
    sample_size: int = 8192,
    confidence_threshold: float = 0.7,
) -> str | None:
    """Detect character encoding of binary data using chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int, default 8192
        Number of bytes to sample for detection (uses first N bytes)
    confidence_threshold : float, default 0.7
        Minimum confidence level (0.0-1.0) required to trust detection

    Returns
    -------
    str | None
        Detected encoding name, or None if detection fails or confidence is
        below the threshold

    """
    sample = data[:sample_size]
    result = chardet.detect(sample)

    if not result or not result.get("encoding"):
        logger.debug("chardet: No encoding detected")
        return None

    encoding = result["encoding"]
    confidence = result.get("confidence") or 0.0
    logger.debug("chardet detected encoding: %s (confidence: %.2f)", encoding, confidence)

    if confidence >= confidence_threshold:
        return encoding

    logger.debug("chardet confidence %.2f below threshold %s", confidence, confidence_threshold)
    return None


def read_text_with_encoding_detection(
    data: bytes,
    fallback_encodings: list[str] | None = None,
    use_chardet: bool = True,
) -> str:
    """Read binary data as text with automatic encoding detection.

    Attempts to decode binary data using multiple strategies:
    1. Strict UTF-8 (with or without a byte order mark)
    2. chardet-based detection (if enabled)
    3. Fallback encodings in order
    4. Final fallback with error replacement

    Parameters
    ----------
    data : bytes
        Binary data to decode
    fallback_encodings : list[str] | None, default None
        List of encodings to try in order. If None, uses:
        ['utf-8', 'utf-8-sig', 'latin-1']
    use_chardet : bool, default True
        Whether to attempt chardet-based detection first

    Returns
    -------
    str
        Decoded text content

    Examples
    --------
    >>> read_text_with_encoding_detection(b"# Hello")
    '# Hello'

    """
    if fallback_encodings is None:
        fallback_encodings = ["utf-8", "utf-8-sig", "latin-1"]

    if data.startswith(b"\xef\xbb\xbf"):
        return data.decode("utf-8-sig")

    # Valid UTF-8 is taken as-is; chardet misreads short UTF-8 samples
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        pass

    if use_chardet:
        detected_encoding = detect_encoding(data)
        if detected_encoding:
            try:
                return data.decode(detected_encoding)
            except (UnicodeDecodeError, LookupError) as e:
                logger.debug("Failed to decode with chardet-detected encoding %s: %s", detected_encoding, e)

    for encoding in fallback_encodings:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as e:
            logger.debug("Failed to decode with %s: %s", encoding, e)
        except LookupError as e:
            logger.debug("Unknown encoding %s: %s", encoding, e)

    logger.warning("All encoding attempts failed, using utf-8 with error replacement")
    return data.decode("utf-8", errors="replace")

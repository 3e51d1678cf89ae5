#!/usr/bin/env python3

# Copyright 2025 Emasoft
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
common_file_utils.py - Shared file handling utilities for the manuscript assembler

Encoding detection and decoding for chapter text files, and safe writing
of text/JSON reports.
"""

import json
import logging
from pathlib import Path
from typing import Any

import chardet

# Default logger
logger = logging.getLogger(__name__)

# Tried in order after UTF-8 and the detected encoding
DEFAULT_FALLBACK_ENCODINGS = ["utf-8-sig", "cp1252", "latin-1"]


def detect_encoding(
    raw_data: bytes,
    sample_size: int = 32 * 1024,
    logger: logging.Logger | None = None,
) -> tuple[str, float]:
    """
    Detect the encoding of raw file bytes with chardet.

    Parameters:
    - raw_data: File content
    - sample_size: Bytes handed to chardet (32KB default)
    - logger: Logger instance (uses module logger if None)

    Returns: (encoding, confidence) tuple; ("utf-8", 0.0) if undetectable
    """
    if logger is None:
        logger = globals()["logger"]

    result = chardet.detect(raw_data[:sample_size])
    encoding = result.get("encoding") or "utf-8"
    confidence = result.get("confidence") or 0.0
    logger.debug(f"chardet.detect: {encoding} (confidence: {confidence})")
    return encoding, confidence


def decode_bytes(
    raw_data: bytes,
    confidence_threshold: float = 0.5,
    fallback_encodings: list[str] | None = None,
    logger: logging.Logger | None = None,
) -> str:
    """
    Decode file bytes, preferring UTF-8.

    Order: strict UTF-8, the chardet guess (if confident enough), the
    fallback encodings, and finally UTF-8 with replacement characters.
    """
    if logger is None:
        logger = globals()["logger"]

    if fallback_encodings is None:
        fallback_encodings = DEFAULT_FALLBACK_ENCODINGS

    try:
        return raw_data.decode("utf-8")
    except UnicodeDecodeError:
        pass

    encoding, confidence = detect_encoding(raw_data, logger=logger)
    candidates = [encoding] if confidence >= confidence_threshold else []
    candidates.extend(enc for enc in fallback_encodings if enc != encoding)

    for enc in candidates:
        try:
            content = raw_data.decode(enc)
            logger.debug(f"Successfully decoded with {enc}")
            return content
        except (UnicodeDecodeError, LookupError):
            continue

    logger.warning("All encodings failed, using utf-8 with error replacement")
    return raw_data.decode("utf-8", errors="replace")


def safe_write_file(
    file_path: str | Path,
    content: str | dict[str, Any] | Any,
    encoding: str = "utf-8",
    mode: str = "text",
    logger: logging.Logger | None = None,
) -> bool:
    """
    Write a text or JSON file, creating parent directories.

    Args:
        file_path: Path to the file to write
        content: String for text mode, JSON-serialisable data for json mode
        encoding: Text encoding (default: utf-8)
        mode: "text" or "json"
        logger: Optional logger instance

    Returns:
        True if successful, False on error
    """
    if logger is None:
        logger = globals()["logger"]

    file_path = Path(file_path)

    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, "w", encoding=encoding) as f:
            if mode == "json":
                json.dump(content, f, indent=2, ensure_ascii=False)
            else:
                f.write(str(content))
        logger.debug(f"Successfully wrote to {file_path}")
        return True

    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Failed to write to {file_path}: {e}")
        return False

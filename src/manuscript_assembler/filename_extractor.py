#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Created module for per-filename extraction
# - Extracts chapter number, date token and residual title
# - Split into small helpers so each stage can be tested on its own
#

"""
filename_extractor.py - Chapter number, date and title extraction
=================================================================

Classifies a single filename. Nothing here looks at other files in the
batch, so extraction can run on any number of workers at once.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from .filename_patterns import CHAPTER_NUMBER_RE, DATE_PATTERNS, LEADING_CHAPTER_RE
from .models import ExtractedName

logger = logging.getLogger(__name__)


def split_filename(filepath: str) -> tuple[str, str]:
    """
    Split a path into its basename and its stem (basename without extension).

    Args:
        filepath: Path to a chapter file

    Returns:
        Tuple of (basename, stem)
    """
    filename = os.path.basename(filepath)
    stem, _ext = os.path.splitext(filename)
    return filename, stem


def extract_chapter_number(stem: str) -> Optional[int]:
    """Return the first run of decimal digits in ``stem`` as an int, or None."""
    match = CHAPTER_NUMBER_RE.search(stem)
    if not match:
        return None
    try:
        return int(match.group(0))
    except ValueError:
        # Digit run longer than the interpreter will convert
        logger.debug(f"Chapter number too long to parse in {stem!r}")
        return None


def extract_date_string(stem: str) -> Optional[str]:
    """
    Find a historical date token in a filename stem.

    Patterns are tried in priority order (era-prefixed, era-suffixed,
    BCE-suffixed, BCE-prefixed, bare 3-4 digit year) and the first one that
    matches wins, so "AD 1982" beats a bare "1982" elsewhere in the name.

    Args:
        stem: Filename without extension

    Returns:
        The matched substring exactly as written, or None
    """
    for _name, pattern in DATE_PATTERNS:
        match = pattern.search(stem)
        if match:
            return match.group(0)
    return None


def extract_residual_title(stem: str, chapter_number: Optional[int], date_string: Optional[str]) -> str:
    """
    Remove the chapter prefix and date token from a filename stem.

    The result still carries separator noise; see title_normalizer.
    """
    title = stem
    if chapter_number is not None:
        title = LEADING_CHAPTER_RE.sub("", title, count=1)
    if date_string:
        title = title.replace(date_string, "", 1)
    return title


def extract(filename: str) -> ExtractedName:
    """
    Classify one filename.

    Args:
        filename: Basename (or full path) of a chapter file

    Returns:
        ExtractedName with chapter number, date string, residual title and validity
    """
    _basename, stem = split_filename(filename)
    chapter_number = extract_chapter_number(stem)
    date_string = extract_date_string(stem)
    residual = extract_residual_title(stem, chapter_number, date_string)
    return ExtractedName(
        chapter_number=chapter_number,
        date_string=date_string,
        residual_title=residual,
        is_valid=chapter_number is not None,
    )

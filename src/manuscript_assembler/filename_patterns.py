#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Collected every filename and title regex in one module
# - Date patterns are kept as an ordered list; the first match wins
# - Title cleanup patterns are listed in the order they are applied
#

"""
filename_patterns.py - Regex patterns and constants for filename classification
===============================================================================

Contains the compiled regular expressions used to pull a chapter number,
a historical date token and a title out of a chapter filename, and the
built-in separator patterns stripped from titles.

Word boundaries are expressed as "not next to an ASCII letter or digit"
so that underscores and hyphens both separate tokens ("01_1972_title").
"""

from __future__ import annotations

import re

# Characters treated as separators around chapter numbers and titles
SEPARATOR_CHARS = r"\s\-_:."

# Default value of the user's ignore-separators setting
DEFAULT_IGNORE_SEPARATORS = "-d-, --, -- HERE --, --c--"

_NOT_AFTER_ALNUM = r"(?<![A-Za-z0-9])"
_NOT_BEFORE_ALNUM = r"(?![A-Za-z0-9])"

# ────────────────────────── chapter number ────────────────────────── #

# First contiguous run of decimal digits anywhere in the stem
CHAPTER_NUMBER_RE = re.compile(r"[0-9]+")

# Leading "chapter" word, the leading digit run and any separators after it
LEADING_CHAPTER_RE = re.compile(rf"^(?:chapter\s*)?[0-9]+[{SEPARATOR_CHARS}]*", re.IGNORECASE)

# ────────────────────────── date tokens ────────────────────────── #

# Tried in this order; the first pattern that matches anywhere wins.
DATE_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    # "AD 1982", "CE 2020"
    ("era_prefix", re.compile(rf"{_NOT_AFTER_ALNUM}(?:AD|CE)\s*[0-9]+{_NOT_BEFORE_ALNUM}", re.IGNORECASE)),
    # "1982 AD", "2020 CE"
    ("era_suffix", re.compile(rf"{_NOT_AFTER_ALNUM}[0-9]+\s*(?:AD|CE){_NOT_BEFORE_ALNUM}", re.IGNORECASE)),
    # "78 BCE", "78 BC"
    ("bce_suffix", re.compile(rf"{_NOT_AFTER_ALNUM}[0-9]+\s*(?:BCE|BC){_NOT_BEFORE_ALNUM}", re.IGNORECASE)),
    # "BCE 30000", "BC 30000"
    ("bce_prefix", re.compile(rf"{_NOT_AFTER_ALNUM}(?:BCE|BC)\s*[0-9]+{_NOT_BEFORE_ALNUM}", re.IGNORECASE)),
    # "1972": bare 3-4 digit year not followed by the word "chapter"
    ("bare_year", re.compile(rf"{_NOT_AFTER_ALNUM}[0-9]{{3,4}}{_NOT_BEFORE_ALNUM}(?!\s*chapter)", re.IGNORECASE)),
]

# ────────────────────────── title cleanup ────────────────────────── #
#
# A match may only start where a whitespace or hyphen run starts, so a long
# run that never matches is scanned once instead of once per character.

_RUN_START_SPACE = r"(?:(?<!\s)\s+)?(?<!-)"

# 1. "-d-", "--c--", "- x -": hyphens, one letter, hyphens
DASH_LETTER_DASH_RE = re.compile(rf"{_RUN_START_SPACE}-+\s*[a-z]\s*-+\s*", re.IGNORECASE)

# 2. "-- HERE --" marker with any number of hyphens
HERE_MARKER_RE = re.compile(rf"{_RUN_START_SPACE}-+\s+HERE\s+-+\s*", re.IGNORECASE)

# 3. Two or more hyphens with the whitespace around them
DASH_RUN_RE = re.compile(rf"{_RUN_START_SPACE}-{{2,}}\s*")

# 4. Separator characters at either end
LEADING_SEPARATORS_RE = re.compile(rf"^[{SEPARATOR_CHARS}]+")
TRAILING_SEPARATORS_RE = re.compile(rf"(?<![{SEPARATOR_CHARS}])[{SEPARATOR_CHARS}]+\Z")

# 5. Internal whitespace runs
WHITESPACE_RUN_RE = re.compile(r"\s+")


def custom_separator_pattern(token: str) -> re.Pattern[str]:
    """
    Build the pattern that removes a user-supplied separator token.

    The token is escaped, so it always matches as literal text.

    Args:
        token: Separator text as typed by the user

    Returns:
        Case-insensitive pattern matching the token and surrounding whitespace
    """
    return re.compile(rf"(?:(?<!\s)\s+)?{re.escape(token)}\s*", re.IGNORECASE)

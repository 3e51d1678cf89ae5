#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Reworked sequence checks for an already sorted batch of chapter numbers
# - Duplicate detection keeps first-encounter order and reports each number once
# - Missing numbers are reported as ranges so large gaps stay cheap
#

"""
chapter_issues.py - Issue detection for chapter number collections
==================================================================

Contains functions to detect duplicate and missing chapter numbers in a
batch, and to format number lists for warning messages.
"""

from __future__ import annotations

from typing import Iterable


def find_duplicate_chapters(numbers: Iterable[int]) -> list[int]:
    """
    Find chapter numbers that occur more than once.

    Args:
        numbers: Chapter numbers in batch order

    Returns:
        Each repeated number once, in the order its repeat was first seen
    """
    seen: set[int] = set()
    reported: set[int] = set()
    duplicates: list[int] = []

    for value in numbers:
        if value in seen:
            # Repeats: only on second+ occurrence
            if value not in reported:
                duplicates.append(value)
                reported.add(value)
        else:
            seen.add(value)

    return duplicates


def find_missing_ranges(numbers: Iterable[int]) -> list[tuple[int, int]]:
    """
    Find gaps between the lowest and highest chapter number.

    Works on the distinct values only, so a gap of a million numbers costs
    the same as a gap of one.

    Args:
        numbers: Chapter numbers in any order, duplicates allowed

    Returns:
        Inclusive (first, last) ranges of absent numbers, ascending
    """
    gaps: list[tuple[int, int]] = []
    previous: int | None = None

    for value in sorted(set(numbers)):
        if previous is not None and value > previous + 1:
            gaps.append((previous + 1, value - 1))
        previous = value

    return gaps


def format_number_ranges(ranges: Iterable[tuple[int, int]]) -> str:
    """Format ranges as "3-5, 9" (single numbers are written once)."""
    parts = []
    for first, last in ranges:
        parts.append(str(first) if first == last else f"{first}-{last}")
    return ", ".join(parts)

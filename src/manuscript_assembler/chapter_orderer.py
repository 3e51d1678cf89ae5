#!/usr/bin/env python3
# -*- coding: utf-8 -*-

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

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Created batch classification entry point
# - Files are classified independently, then sorted and validated in one pass
# - Added optional thread pool for per-file classification
# - Added opt-in missing chapter warning
#

"""
chapter_orderer.py - Batch classification, ordering and validation
==================================================================

``classify_batch`` is a pure function from (paths, separator setting) to a
BatchResult. Records are never dropped: a file without a chapter number is
kept, flagged invalid and placed after every numbered file.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Optional, Sequence

from .chapter_issues import find_duplicate_chapters, find_missing_ranges, format_number_ranges
from .filename_extractor import extract, split_filename
from .models import BatchResult, BatchWarning, ChapterRange, FileRecord, WarningKind
from .title_normalizer import SeparatorConfig, normalize, parse_separator_config

logger = logging.getLogger(__name__)


def classify_file(filepath: str, separators: Sequence[str] = ()) -> FileRecord:
    """
    Classify one chapter file by its name.

    Args:
        filepath: Path to the file (never opened)
        separators: Parsed custom separator tokens

    Returns:
        FileRecord for the path
    """
    filename, _stem = split_filename(filepath)
    extracted = extract(filename)
    title = normalize(extracted.residual_title, separators, fallback=filename)

    record = FileRecord(
        filepath=filepath,
        filename=filename,
        chapter_number=extracted.chapter_number,
        date_string=extracted.date_string,
        title=title,
    )
    logger.debug(f"Classified {filename!r}: chapter={record.chapter_number} date={record.date_string!r} title={record.title!r}")
    return record


def _classify_all(filepaths: Sequence[str], separators: list[str], max_workers: Optional[int]) -> list[FileRecord]:
    """Classify every path, returning records in input order."""
    if not max_workers or max_workers <= 1 or len(filepaths) <= 1:
        return [classify_file(filepath, separators) for filepath in filepaths]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(classify_file, filepath, separators) for filepath in filepaths]
        # Collected in submission order, not completion order
        return [future.result() for future in futures]


def sort_records(records: Iterable[FileRecord]) -> list[FileRecord]:
    """
    Sort records by chapter number, unnumbered records last.

    The input position is part of the sort key, so records sharing a chapter
    number (or both lacking one) always keep their relative input order.
    """
    indexed = list(enumerate(records))
    indexed.sort(
        key=lambda item: (
            item[1].chapter_number is None,
            item[1].chapter_number if item[1].chapter_number is not None else 0,
            item[0],
        )
    )
    return [record for _index, record in indexed]


def compute_chapter_range(records: Iterable[FileRecord]) -> Optional[ChapterRange]:
    """Return min/max over present chapter numbers, or None if there are none."""
    numbers = [record.chapter_number for record in records if record.chapter_number is not None]
    if not numbers:
        return None
    return ChapterRange(min=min(numbers), max=max(numbers))


def build_warnings(records: Sequence[FileRecord], report_missing: bool = False) -> list[BatchWarning]:
    """
    Collect batch findings for sorted records.

    Args:
        records: Records in manuscript order
        report_missing: Also report gaps in the chapter numbering

    Returns:
        Warnings in fixed order: invalid filenames, duplicates, missing numbers
    """
    warnings: list[BatchWarning] = []

    invalid = [record for record in records if not record.is_valid]
    if invalid:
        warnings.append(
            BatchWarning(
                kind=WarningKind.INVALID_FILENAME,
                message=f"{len(invalid)} file(s) don't match expected naming pattern",
                files=tuple(record.filename for record in invalid),
            )
        )

    numbers = [record.chapter_number for record in records if record.chapter_number is not None]

    duplicates = find_duplicate_chapters(numbers)
    if duplicates:
        duplicate_set = set(duplicates)
        warnings.append(
            BatchWarning(
                kind=WarningKind.DUPLICATE_CHAPTERS,
                message=f"Duplicate chapter numbers found: {', '.join(str(number) for number in duplicates)}",
                files=tuple(record.filename for record in records if record.chapter_number in duplicate_set),
            )
        )

    if report_missing:
        gaps = find_missing_ranges(numbers)
        if gaps:
            warnings.append(
                BatchWarning(
                    kind=WarningKind.MISSING_CHAPTERS,
                    message=f"Missing chapter numbers: {format_number_ranges(gaps)}",
                )
            )

    return warnings


def classify_batch(
    filepaths: Iterable[str],
    custom_separator_config: SeparatorConfig = None,
    max_workers: Optional[int] = None,
    report_missing: bool = False,
) -> BatchResult:
    """
    Classify, order and validate a batch of chapter files.

    Args:
        filepaths: Paths of the chapter files (not opened)
        custom_separator_config: Comma-separated separator setting or token list
        max_workers: Thread count for per-file classification (None/1 = inline)
        report_missing: Add a warning for gaps in the chapter numbering

    Returns:
        BatchResult with one record per input path

    Raises:
        TypeError: If ``filepaths`` is a single string instead of a collection
    """
    if isinstance(filepaths, (str, bytes)):
        raise TypeError("filepaths must be a collection of paths, not a single string")

    paths = list(filepaths)
    if not paths:
        return BatchResult.empty()

    separators = parse_separator_config(custom_separator_config)
    records = sort_records(_classify_all(paths, separators, max_workers))
    warnings = build_warnings(records, report_missing=report_missing)

    result = BatchResult(
        files=tuple(records),
        warnings=tuple(warnings),
        chapter_range=compute_chapter_range(records),
        has_dates=any(record.date_string is not None for record in records),
    )
    logger.info(f"Classified {len(records)} file(s): {result.valid_count} numbered, {len(warnings)} warning(s)")
    return result

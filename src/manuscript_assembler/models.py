#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# Copyright (c) 2025 Emasoft
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
#
# CHANGELOG:
# - Added FileRecord and ExtractedName for per-file classification
# - Added WarningKind enum and BatchWarning
# - Added ChapterRange and BatchResult for batch ordering output
#

"""Data models for the manuscript assembler classification engine."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, NamedTuple, Optional


class WarningKind(enum.Enum):
    """Kinds of batch-level findings."""

    INVALID_FILENAME = "invalid_filename"
    """One or more files have no detectable chapter number."""
    DUPLICATE_CHAPTERS = "duplicate_chapters"
    """A chapter number is used by more than one file."""
    MISSING_CHAPTERS = "missing_chapters"
    """Some chapter numbers inside the chapter range have no file."""


class ExtractedName(NamedTuple):
    """Raw output of filename extraction, before title normalization."""

    chapter_number: Optional[int]
    date_string: Optional[str]
    residual_title: str
    is_valid: bool


@dataclass(frozen=True)
class FileRecord:
    """
    One classified input file.

    A record without a chapter number is kept in the batch and sorted last;
    ``is_valid`` only tells whether it can be placed by chapter number.
    """

    filepath: str
    filename: str
    chapter_number: Optional[int]
    date_string: Optional[str]
    title: str

    @property
    def is_valid(self) -> bool:
        return self.chapter_number is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "filepath": self.filepath,
            "filename": self.filename,
            "chapter_number": self.chapter_number,
            "date_string": self.date_string,
            "title": self.title,
            "is_valid": self.is_valid,
        }


@dataclass(frozen=True)
class ChapterRange:
    """Lowest and highest chapter number present in a batch."""

    min: int
    max: int

    def to_dict(self) -> dict[str, int]:
        return {"min": self.min, "max": self.max}


@dataclass(frozen=True)
class BatchWarning:
    """A structured validation finding about a batch."""

    kind: WarningKind
    message: str
    files: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"type": self.kind.value, "message": self.message}
        if self.files:
            result["files"] = list(self.files)
        return result


@dataclass(frozen=True)
class BatchResult:
    """
    Ordered, annotated output of one batch classification.

    Attributes:
        files: Records in manuscript order (one per input path)
        warnings: Findings in a fixed order (invalid, duplicate, missing)
        chapter_range: Min/max chapter number, or None if no record has one
        has_dates: True if any record carries a date string
    """

    files: tuple[FileRecord, ...] = ()
    warnings: tuple[BatchWarning, ...] = ()
    chapter_range: Optional[ChapterRange] = None
    has_dates: bool = False

    @property
    def valid_count(self) -> int:
        return sum(1 for record in self.files if record.is_valid)

    @classmethod
    def empty(cls) -> BatchResult:
        """Result for an empty batch: no files, no warnings, no range."""
        return cls()

    def warnings_of(self, kind: WarningKind) -> list[BatchWarning]:
        """Return the warnings of a given kind."""
        return [warning for warning in self.warnings if warning.kind is kind]

    def to_dict(self) -> dict[str, Any]:
        return {
            "files": [record.to_dict() for record in self.files],
            "warnings": [warning.to_dict() for warning in self.warnings],
            "chapter_range": self.chapter_range.to_dict() if self.chapter_range else None,
            "has_dates": self.has_dates,
        }

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

"""
source_archiver.py - ZIP archive of a manuscript's source files
===============================================================

Packs the ordered chapter files into a single ZIP next to the generated
manuscript, and prepares the versioned output directory.
"""

from __future__ import annotations

import logging
import re
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from .models import FileRecord

logger = logging.getLogger(__name__)

MAX_TITLE_LENGTH = 100
INVALID_PATH_CHARS_RE = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


@dataclass
class ArchiveResult:
    """Outcome of writing a source archive."""

    path: Path
    added: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def sanitize_manuscript_title(title: str) -> str:
    """
    Make a manuscript title safe to use as a directory name.

    Removes filesystem-invalid and control characters, replaces whitespace
    runs with underscores and truncates to 100 characters.

    Args:
        title: Manuscript title as entered by the user

    Returns:
        Sanitized name, or "manuscript" if nothing usable is left
    """
    sanitized = INVALID_PATH_CHARS_RE.sub("", title or "")
    sanitized = re.sub(r"\s+", "_", sanitized)[:MAX_TITLE_LENGTH]
    if not sanitized.strip("_"):
        return "manuscript"
    return sanitized


def prepare_output_dir(base_dir: str | Path, title: str) -> Path:
    """
    Create a fresh output directory for a manuscript.

    Uses ``<base>/<title>`` or, if that exists, the first free
    ``<base>/<title>_vN`` starting at N=2.

    Returns:
        Path of the created directory
    """
    base = Path(base_dir)
    output_dir = base / sanitize_manuscript_title(title)

    candidate = output_dir
    version = 1
    while candidate.exists():
        version += 1
        candidate = output_dir.with_name(f"{output_dir.name}_v{version}")

    candidate.mkdir(parents=True)
    logger.info(f"Created output directory: {candidate}")
    return candidate


def _unique_name(name: str, used: set[str]) -> str:
    if name not in used:
        return name
    stem, suffix = Path(name).stem, Path(name).suffix
    counter = 2
    while f"{stem} ({counter}){suffix}" in used:
        counter += 1
    return f"{stem} ({counter}){suffix}"


def create_zip_archive(records: Iterable[FileRecord], output_path: str | Path) -> ArchiveResult:
    """
    Write the source files of a batch into a ZIP archive.

    Entries are added in manuscript order, named by basename. Missing files
    are skipped and listed in the result.

    Args:
        records: Classified records, already ordered
        output_path: Destination .zip path

    Returns:
        ArchiveResult with the archive path, added and skipped filenames

    Raises:
        OSError: If the archive itself cannot be written
    """
    output_path = Path(output_path)
    result = ArchiveResult(path=output_path)
    used_names: set[str] = set()

    with zipfile.ZipFile(output_path, "w", zipfile.ZIP_DEFLATED, compresslevel=9) as zf:
        for record in records:
            source = Path(record.filepath)
            if not source.is_file():
                logger.warning(f"Archive: skipping missing file {source}")
                result.skipped.append(record.filename)
                continue

            arc_name = _unique_name(record.filename, used_names)
            used_names.add(arc_name)
            zf.write(source, arc_name)
            result.added.append(arc_name)

    logger.info(f"Wrote source archive {output_path} ({len(result.added)} file(s), {len(result.skipped)} skipped)")
    return result

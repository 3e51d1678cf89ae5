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
# - Added chapter content reading with encoding detection
# - Added FileReadError carrying the failing file's basename
# - Added input collection from files and directories
#

"""
File handling utilities for the manuscript assembler.

``read_file_content`` is the entry point the renderers use to load the text
of each ordered chapter; classification itself never opens a file.
``collect_input_files`` expands the command-line paths into a batch.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from .common_file_utils import decode_bytes

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".txt", ".md", ".rtf")


class FileReadError(Exception):
    """Raised when a chapter file cannot be read."""


def read_file_content(filepath: str | Path, logger: Optional[logging.Logger] = None) -> str:
    """
    Read a chapter file as text.

    Args:
        filepath: Path to the chapter file
        logger: Optional logger for debug output

    Returns:
        Decoded file contents

    Raises:
        FileReadError: If the file cannot be read
    """
    log = logger or globals()["logger"]
    path = Path(filepath)
    try:
        raw_data = path.read_bytes()
    except OSError as e:
        log.error(f"Error reading file {path}: {e}")
        raise FileReadError(f"Failed to read {path.name}: {e.strerror or e}") from e

    log.debug(f"Read {len(raw_data)} bytes from {path}")
    return decode_bytes(raw_data, logger=log)


def collect_input_files(
    paths: Iterable[str | Path],
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    recursive: bool = False,
) -> list[str]:
    """
    Expand command-line paths into a list of chapter files.

    Files are kept as given. Directories contribute their files whose
    extension is in ``extensions`` (case-insensitive), sorted by name;
    hidden files are skipped.

    Args:
        paths: Files and/or directories
        extensions: Accepted extensions, with leading dot
        recursive: Also search subdirectories

    Returns:
        List of file paths as strings
    """
    accepted = {ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in extensions}
    collected: list[str] = []

    for item in paths:
        path = Path(item)
        if path.is_dir():
            candidates = path.rglob("*") if recursive else path.glob("*")
            found = sorted(
                (p for p in candidates if p.is_file() and not p.name.startswith(".") and p.suffix.lower() in accepted),
                key=lambda p: str(p),
            )
            logger.debug(f"Found {len(found)} chapter file(s) in {path}")
            collected.extend(str(p) for p in found)
        else:
            collected.append(str(path))

    return collected

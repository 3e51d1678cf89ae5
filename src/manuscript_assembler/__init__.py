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
Manuscript Assembler

Orders loose chapter files into a manuscript by the chapter number, date
and title found in their filenames, and reports numbering problems.
"""

__version__ = "1.0.0"
__author__ = "Emasoft"
__email__ = "713559+Emasoft@users.noreply.github.com"
__license__ = "Apache-2.0"

from .chapter_orderer import classify_batch, classify_file
from .filename_extractor import extract
from .models import BatchResult, BatchWarning, ChapterRange, ExtractedName, FileRecord, WarningKind
from .title_normalizer import normalize, parse_separator_config

__all__ = [
    "classify_batch",
    "classify_file",
    "extract",
    "normalize",
    "parse_separator_config",
    "BatchResult",
    "BatchWarning",
    "ChapterRange",
    "ExtractedName",
    "FileRecord",
    "WarningKind",
]

#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for common_print_utils module.
"""

import pytest
import sys
from pathlib import Path
from unittest.mock import patch
from io import StringIO

from rich.console import Console

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from manuscript_assembler.chapter_orderer import classify_batch
from manuscript_assembler.common_print_utils import (
    build_chapter_table,
    format_warning,
    print_batch_result,
    safe_print,
)
from manuscript_assembler.models import BatchResult, BatchWarning, WarningKind


def _render(result):
    output = StringIO()
    print_batch_result(result, console=Console(file=output, width=200, color_system=None))
    return output.getvalue()


class TestSafePrint:
    """Test the safe_print function."""

    @patch("manuscript_assembler.common_print_utils.rich_print")
    def test_passes_through(self, mock_rich_print):
        """Test that arguments reach rich unchanged."""
        safe_print("Hello", "World", end="")
        mock_rich_print.assert_called_once_with("Hello", "World", end="")


class TestBuildChapterTable:
    """Test the build_chapter_table function."""

    def test_columns_without_dates(self):
        """Test that the date column is hidden when no file has a date."""
        table = build_chapter_table(classify_batch(["1_a.txt", "2_b.txt"]))
        assert [column.header for column in table.columns] == ["#", "Chapter", "Title", "File"]
        assert table.row_count == 2

    def test_columns_with_dates(self):
        """Test that the date column appears when a file has a date."""
        table = build_chapter_table(classify_batch(["1_a.txt", "2_1972_b.txt"]))
        assert [column.header for column in table.columns] == ["#", "Chapter", "Date", "Title", "File"]


class TestFormatWarning:
    """Test the format_warning function."""

    def test_with_files(self):
        """Test a warning that lists files."""
        text = format_warning(BatchWarning(WarningKind.INVALID_FILENAME, "1 file(s) don't match", ("notes.txt",)))
        assert "1 file(s) don't match" in text
        assert "notes.txt" in text

    def test_markup_escaped(self):
        """Test that brackets in filenames are not read as markup."""
        text = format_warning(BatchWarning(WarningKind.INVALID_FILENAME, "x", ("[draft].txt",)))
        assert "\\[draft]" in text


class TestPrintBatchResult:
    """Test the print_batch_result function."""

    def test_empty(self):
        """Test output for an empty batch."""
        assert "No files to classify." in _render(BatchResult.empty())

    def test_full_output(self):
        """Test table, range and warnings together."""
        out = _render(classify_batch(["2_Second.txt", "1_First.txt", "notes.txt", "2_Again.txt"]))
        assert out.index("First") < out.index("Second") < out.index("notes.txt")
        assert "Chapter range: 1 - 2" in out
        assert "1 file(s) don't match expected naming pattern" in out
        assert "Duplicate chapter numbers found: 2" in out

    def test_no_chapter_numbers(self):
        """Test output when nothing is numbered."""
        assert "No chapter numbers detected." in _render(classify_batch(["notes.txt"]))

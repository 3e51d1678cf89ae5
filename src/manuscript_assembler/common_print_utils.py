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
Common print utilities for console output with rich formatting.

Renders a classified batch the way the chapter list is shown to the user:
one row per file in manuscript order, the chapter range, then warnings.
"""

from typing import Any, Optional

from rich import print as rich_print
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .models import BatchResult, BatchWarning


def safe_print(*args: Any, **kwargs: Any) -> None:
    """Print with rich markup support."""
    rich_print(*args, **kwargs)


def build_chapter_table(result: BatchResult) -> Table:
    """
    Build a rich table of the ordered chapter list.

    The date column is only shown when at least one file has a date.
    """
    table = Table(title="Chapter order", show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Chapter", justify="right")
    if result.has_dates:
        table.add_column("Date")
    table.add_column("Title", style="bold")
    table.add_column("File", style="dim")

    for position, record in enumerate(result.files, 1):
        chapter = str(record.chapter_number) if record.is_valid else "[red]?[/red]"
        row = [str(position), chapter]
        if result.has_dates:
            row.append(escape(record.date_string or ""))
        row.extend([escape(record.title), escape(record.filename)])
        table.add_row(*row)

    return table


def format_warning(warning: BatchWarning) -> str:
    """Format a warning as a one-line rich markup string."""
    text = f"[yellow]⚠ {escape(warning.message)}[/yellow]"
    if warning.files:
        text += f"\n    [dim]{escape(', '.join(warning.files))}[/dim]"
    return text


def print_batch_result(result: BatchResult, console: Optional[Console] = None) -> None:
    """
    Print a classified batch: chapter table, chapter range and warnings.

    Args:
        result: Batch to display
        console: Console to print on (a new stdout console if None)
    """
    console = console or Console()

    if not result.files:
        console.print("[bold yellow]No files to classify.[/bold yellow]")
        return

    console.print(build_chapter_table(result))

    if result.chapter_range:
        console.print(f"Chapter range: [bold]{result.chapter_range.min} - {result.chapter_range.max}[/bold]")
    else:
        console.print("[yellow]No chapter numbers detected.[/yellow]")

    for warning in result.warnings:
        console.print(format_warning(warning))

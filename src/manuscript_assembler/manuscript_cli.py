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
# - Created the command-line entry point
# - Classifies the given chapter files and shows the ordered chapter list
# - Added JSON report, source archive and separator persistence
#

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .chapter_orderer import classify_batch
from .cli_parser import create_parser, validate_args
from .cli_setup import setup_configuration, setup_console, setup_logging, setup_signal_handler
from .common_file_utils import safe_write_file
from .common_print_utils import print_batch_result, safe_print
from .file_handler import collect_input_files
from .source_archiver import create_zip_archive, prepare_output_dir, sanitize_manuscript_title

APP_NAME = "Manuscript Assembler"
APP_VERSION = "1.0.0"

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_WARNINGS = 2

# Global logger - will be initialized in main()
tolog: logging.Logger | None = None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the manuscript assembler CLI.

    Args:
        argv: Command-line arguments (sys.argv[1:] if None)

    Returns:
        Process exit status
    """
    global tolog

    # Set up configuration first
    config_manager, config = setup_configuration(argv)

    # Set up logging based on config
    tolog = setup_logging(config)
    setup_console()
    setup_signal_handler(tolog)

    parser = create_parser(config)
    try:
        args = parser.parse_args(argv)
        validate_args(args, parser)
    except SystemExit as e:
        # argparse exits with 2 on usage errors; 2 is reserved for --strict
        return EXIT_OK if not e.code else EXIT_ERROR

    # Status lines go to stderr while stdout carries the JSON report
    status_file = sys.stderr if args.json == "-" else None

    # Command-line arguments take precedence over the config file
    config = config_manager.update_with_args(args)

    if args.save_separators:
        config_manager.set("parsing.ignore_separators", args.ignore_separators)
        try:
            config_manager.save()
        except ValueError as e:
            tolog.error(f"Could not save separator setting: {e}")
            safe_print(f"[bold red]Could not save separator setting: {e}[/bold red]", file=status_file)
            return EXIT_ERROR
        safe_print(f"[green]Saved separator setting to {config_manager.config_path}[/green]", file=status_file)

    filepaths = collect_input_files(
        args.paths,
        extensions=config["input"]["extensions"],
        recursive=config["input"]["recursive"],
    )
    if not filepaths:
        tolog.error("No chapter files found")
        safe_print("[bold red]No chapter files found in the given paths[/bold red]", file=status_file)
        return EXIT_ERROR

    tolog.info(f"Classifying {len(filepaths)} file(s)")
    result = classify_batch(
        filepaths,
        config["parsing"]["ignore_separators"],
        max_workers=config["parsing"]["max_workers"],
        report_missing=config["validation"]["report_missing_chapters"],
    )

    if args.json == "-":
        # Keep stdout machine-readable
        sys.stdout.write(json.dumps(result.to_dict(), indent=2, ensure_ascii=False) + "\n")
    else:
        print_batch_result(result)
        if args.json:
            if not safe_write_file(args.json, result.to_dict(), mode="json", logger=tolog):
                safe_print(f"[bold red]Could not write report to {args.json}[/bold red]", file=status_file)
                return EXIT_ERROR
            safe_print(f"[green]Report written to {args.json}[/green]", file=status_file)

    if args.archive:
        title = config["manuscript"]["title"]
        base_dir = Path(config["output"]["directory"] or Path.cwd())
        try:
            output_dir = prepare_output_dir(base_dir, title)
            archive = create_zip_archive(result.files, output_dir / f"{sanitize_manuscript_title(title)}_source.zip")
        except OSError as e:
            tolog.error(f"Failed to create source archive: {e}")
            safe_print(f"[bold red]Failed to create source archive: {e}[/bold red]", file=status_file)
            return EXIT_ERROR
        safe_print(f"[green]Source archive written to {archive.path} ({len(archive.added)} file(s))[/green]", file=status_file)
        if archive.skipped:
            safe_print(f"[yellow]Skipped missing file(s): {', '.join(archive.skipped)}[/yellow]", file=status_file)

    if args.strict and result.warnings:
        return EXIT_WARNINGS
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

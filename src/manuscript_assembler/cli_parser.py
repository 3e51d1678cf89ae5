#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Initial creation of command-line parsing for the manuscript assembler
# - Split into _add_input_args, _add_parsing_args, _add_output_args
#

"""
cli_parser.py - Command-line argument parsing for the manuscript assembler
==========================================================================

Handles parsing and validation of command-line arguments. Defaults shown in
help text come from the loaded configuration; options left unset do not
override it.
"""

from __future__ import annotations

import argparse
from typing import Any

from .config_schema import DEFAULT_CONFIG_FILENAME

EPILOG = """
Examples:
  manuscript-assembler chapters/
      Classify every .txt/.md/.rtf file in chapters/ and show the chapter order.

  manuscript-assembler chapters/ --ignore-separators "##, ~~" --save-separators
      Strip "##" and "~~" from titles and remember the setting.

  manuscript-assembler chapters/*.txt --json report.json --archive --title "My Novel"
      Write a JSON report and a ZIP of the source files into ./My_Novel/.
"""


def _add_input_args(parser: argparse.ArgumentParser, config: dict[str, Any]) -> None:
    """Add input arguments to the parser.

    Args:
        parser: ArgumentParser instance to add arguments to
        config: Configuration dictionary for default values
    """
    parser.add_argument(
        "paths",
        nargs="*",
        help="Chapter files and/or directories containing chapter files",
    )

    parser.add_argument(
        "--config",
        type=str,
        default=DEFAULT_CONFIG_FILENAME,
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_FILENAME})",
    )

    parser.add_argument(
        "--recursive",
        action="store_true",
        default=None,
        help=f"Search directories recursively (config default: {config['input']['recursive']})",
    )


def _add_parsing_args(parser: argparse.ArgumentParser, config: dict[str, Any]) -> None:
    """Add filename parsing arguments to the parser."""
    parser.add_argument(
        "--ignore-separators",
        type=str,
        help=f"Comma-separated decorations to strip from titles (current: \"{config['parsing']['ignore_separators']}\")",
    )

    parser.add_argument(
        "--save-separators",
        action="store_true",
        help="Store --ignore-separators in the configuration file for future runs",
    )

    parser.add_argument(
        "--workers",
        type=int,
        help=f"Worker threads for filename classification (config default: {config['parsing']['max_workers']})",
    )

    parser.add_argument(
        "--no-missing-check",
        action="store_true",
        help="Do not warn about gaps in the chapter numbering",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 2 if the batch has any warnings",
    )


def _add_output_args(parser: argparse.ArgumentParser) -> None:
    """Add output arguments to the parser."""
    parser.add_argument(
        "--json",
        type=str,
        metavar="FILE",
        help="Write the classification report as JSON to FILE ('-' for stdout)",
    )

    parser.add_argument(
        "--archive",
        action="store_true",
        help="Write a ZIP archive of the source files in manuscript order",
    )

    parser.add_argument(
        "--output-dir",
        type=str,
        help="Base directory for generated files (overrides config)",
    )

    parser.add_argument(
        "--title",
        type=str,
        help="Manuscript title, used for the output directory and archive name",
    )


def create_parser(config: dict[str, Any]) -> argparse.ArgumentParser:
    """Create the argument parser with all command-line options.

    Args:
        config: Configuration dictionary for default values

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="manuscript-assembler",
        description="Order chapter files by the chapter number in their names and check the sequence",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )

    _add_input_args(parser, config)
    _add_parsing_args(parser, config)
    _add_output_args(parser)

    return parser


def validate_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Validate parsed arguments.

    Args:
        args: Parsed command-line arguments
        parser: ArgumentParser instance for error reporting

    Raises:
        SystemExit: If validation fails
    """
    if not args.paths:
        parser.error("at least one chapter file or directory is required")

    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be at least 1")

    if args.save_separators and args.ignore_separators is None:
        parser.error("--save-separators requires --ignore-separators")

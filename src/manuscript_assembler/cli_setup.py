#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Initial creation of CLI setup for the manuscript assembler
# - Contains setup functions for configuration, logging, console and signals
#

"""
cli_setup.py - CLI setup and initialization
==========================================

Handles initialization of configuration, logging and the console for the
manuscript assembler CLI.
"""

from __future__ import annotations

import argparse
import logging
import signal
import sys
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple

import colorama

from .config_manager import ConfigManager
from .config_schema import DEFAULT_CONFIG_FILENAME


def setup_configuration(argv: Optional[Sequence[str]] = None) -> Tuple[ConfigManager, dict[str, Any]]:
    """Load and validate configuration from config file.

    Args:
        argv: Command-line arguments (sys.argv[1:] if None)

    Returns:
        Tuple of (ConfigManager instance, configuration dictionary)
    """
    # Pre-parse to get config file path
    config_parser = argparse.ArgumentParser(add_help=False)
    config_parser.add_argument("--config", type=str, default=DEFAULT_CONFIG_FILENAME)
    config_args, _ = config_parser.parse_known_args(argv)

    try:
        config_manager = ConfigManager(config_path=Path(config_args.config))
        return config_manager, config_manager.config
    except ValueError as e:
        print(f"Configuration error: {e}")
        print("Please fix the configuration file or delete it to regenerate defaults.")
        sys.exit(1)


def setup_logging(config: dict[str, Any]) -> logging.Logger:
    """Set up logging based on configuration.

    Args:
        config: Configuration dictionary

    Returns:
        Configured logger instance
    """
    log_level = getattr(logging, str(config["logging"]["level"]).upper(), logging.WARNING)
    log_format = config["logging"]["format"]

    logging.basicConfig(level=log_level, format=log_format)
    logger = logging.getLogger("manuscript_assembler")

    # Set up file logging if enabled
    if config["logging"]["file_enabled"]:
        try:
            file_handler = logging.FileHandler(config["logging"]["file_path"], encoding="utf-8")
            file_handler.setLevel(log_level)
            file_handler.setFormatter(logging.Formatter(log_format))
            logger.addHandler(file_handler)
        except OSError as e:
            logger.error(f"Failed to set up file logging to {config['logging']['file_path']}: {e}")
            # Continue without file logging

    return logger


def setup_console() -> None:
    """Enable ANSI colour output on terminals that need it (Windows)."""
    colorama.just_fix_windows_console()


def setup_signal_handler(logger: logging.Logger) -> None:
    """Set up signal handling for graceful termination.

    Args:
        logger: Logger instance
    """

    def signal_handler(sig: int, frame: Any) -> None:
        logger.info("Interrupt received. Exiting gracefully.")
        sys.exit(130)

    signal.signal(signal.SIGINT, signal_handler)

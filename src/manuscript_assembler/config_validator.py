#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Created module to handle configuration validation
# - Returns the FIRST error found, with the YAML line number when known
#

"""
config_validator.py - Configuration validation utilities for the manuscript assembler
"""

import logging
from typing import Any

from .config_schema import CONFIG_TYPES, VALID_LOG_LEVELS


def find_line_number(key_path: str, config_lines: list[str]) -> int | None:
    """
    Find the line number of a configuration key in the YAML file.

    Args:
        key_path: Dot-separated path to key
        config_lines: Configuration file lines

    Returns:
        Line number (1-based) or None if not found
    """
    if not config_lines:
        return None

    keys = key_path.split(".")
    depth = 0

    for i, line in enumerate(config_lines, 1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        current_indent = len(line) - len(line.lstrip())
        # YAML typically uses 2-space indent
        if current_indent == depth * 2 and stripped.startswith(f"{keys[depth]}:"):
            if depth == len(keys) - 1:
                return i
            depth += 1

    return None


def _lookup(config: dict[str, Any], key_path: str) -> tuple[bool, Any]:
    value: Any = config
    for key in key_path.split("."):
        if not isinstance(value, dict) or key not in value:
            return False, None
        value = value[key]
    return True, value


class ConfigValidator:
    """Validates configuration structure and values."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    def validate_config_first_error(self, config: dict[str, Any], defaults: dict[str, Any], config_lines: list[str]) -> dict[str, Any] | None:
        """
        Validate configuration and return only the FIRST error found.

        Args:
            config: Configuration to validate (before merging with defaults)
            defaults: Default configuration for reference
            config_lines: Configuration file lines for error reporting

        Returns:
            First error found or None if valid
        """
        valid_top_keys = set(defaults.keys())

        for key in config.keys():
            if key not in valid_top_keys:
                return {
                    "type": "unknown_key",
                    "key": key,
                    "line": find_line_number(key, config_lines),
                    "message": f"Unknown configuration section '{key}'. Valid sections: {', '.join(sorted(valid_top_keys))}",
                }
            if isinstance(defaults[key], dict) and not isinstance(config[key], dict):
                return {
                    "type": "invalid_type",
                    "path": key,
                    "value": config[key],
                    "line": find_line_number(key, config_lines),
                    "message": f"Section '{key}' must be a mapping, got {type(config[key]).__name__}",
                }

        for key_path, expected_type in CONFIG_TYPES.items():
            present, value = _lookup(config, key_path)
            if not present:
                continue
            # bool is an int subclass; keep the two apart
            wrong_bool = expected_type is int and isinstance(value, bool)
            if wrong_bool or not isinstance(value, expected_type):
                return {
                    "type": "invalid_type",
                    "path": key_path,
                    "value": value,
                    "line": find_line_number(key_path, config_lines),
                    "message": f"Invalid type for {key_path}: expected {expected_type.__name__}, got {type(value).__name__}",
                }

        present, level = _lookup(config, "logging.level")
        if present and str(level).upper() not in VALID_LOG_LEVELS:
            return {
                "type": "invalid_value",
                "path": "logging.level",
                "value": level,
                "valid_values": VALID_LOG_LEVELS,
                "line": find_line_number("logging.level", config_lines),
                "message": f"Invalid value '{level}' for logging.level. Must be one of {', '.join(VALID_LOG_LEVELS)}",
            }

        present, workers = _lookup(config, "parsing.max_workers")
        if present and workers < 1:
            return {
                "type": "invalid_value",
                "path": "parsing.max_workers",
                "value": workers,
                "line": find_line_number("parsing.max_workers", config_lines),
                "message": f"Invalid value '{workers}' for parsing.max_workers. Must be at least 1",
            }

        return None

    def format_error(self, error: dict[str, Any]) -> str:
        """Format a validation error as a single message with its line."""
        line = error.get("line")
        prefix = f"line {line}: " if line is not None else ""
        return f"{prefix}{error['message']}"

#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Created module to handle configuration loading, merging and saving
# - Handles file I/O, YAML parsing, and config merging
#

"""
config_loader.py - Configuration loading and merging utilities for the manuscript assembler
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from .config_schema import DEFAULT_CONFIG_TEMPLATE


def merge_configs(base_config: dict[str, Any], override_config: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two configurations, with override taking precedence.

    Args:
        base_config: Base configuration dictionary
        override_config: Override configuration dictionary

    Returns:
        Merged configuration dictionary
    """
    result = base_config.copy()

    for key, value in override_config.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


class ConfigLoader:
    """Handles loading, merging and saving of configuration files."""

    def __init__(self, config_path: Path, logger: logging.Logger | None = None):
        """
        Initialize configuration loader.

        Args:
            config_path: Path to configuration file
            logger: Logger instance
        """
        self.config_path = config_path
        self.logger = logger or logging.getLogger(__name__)
        self._config_lines: list[str] = []  # Store file lines for error reporting

    def load_config(self) -> dict[str, Any]:
        """
        Load configuration from file, creating the default file if missing.

        Returns:
            Configuration dictionary (empty if the file is empty)

        Raises:
            ValueError: If the file cannot be parsed or is not a mapping
        """
        if not self.config_path.exists():
            self.logger.info(f"Configuration file not found. Creating default at: {self.config_path}")
            self._create_default_config()

        try:
            file_content = self.config_path.read_text(encoding="utf-8")
        except OSError as e:
            self.logger.error(f"Error loading configuration: {e}")
            raise ValueError(f"Cannot read configuration file {self.config_path}: {e}") from e

        self._config_lines = file_content.split("\n")

        try:
            config = yaml.safe_load(file_content)
        except yaml.YAMLError as e:
            location = ""
            mark = getattr(e, "problem_mark", None)
            if mark is not None:
                location = f" (line {mark.line + 1}, column {mark.column + 1})"
            raise ValueError(f"Error parsing YAML file {self.config_path}{location}: {e}") from e

        if config is None:
            self.logger.warning("Configuration file is empty. Using defaults.")
            return {}

        if not isinstance(config, dict):
            raise ValueError(f"Configuration file must contain a mapping at the root level, got {type(config).__name__}")

        return config

    def _create_default_config(self) -> None:
        """Create default configuration file."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            self.config_path.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
            self.logger.info("Default configuration file created successfully.")
        except OSError as e:
            self.logger.error(f"Failed to create configuration file: {e}")
            raise

    def get_default_config(self) -> dict[str, Any]:
        """
        Get default configuration as dictionary.

        Returns:
            Default configuration dictionary
        """
        result = yaml.safe_load(DEFAULT_CONFIG_TEMPLATE)
        return result if isinstance(result, dict) else {}

    def merge_with_defaults(self, config: dict[str, Any]) -> dict[str, Any]:
        """Merge user config with defaults to ensure all keys exist."""
        return merge_configs(self.get_default_config(), config)

    def save_config(self, config: dict[str, Any]) -> None:
        """
        Write configuration back to the file.

        Comments from the template are not preserved.

        Raises:
            ValueError: If the data cannot be serialized or saved
        """
        try:
            with open(self.config_path, "w", encoding="utf-8") as f:
                yaml.safe_dump(config, f, default_flow_style=False, allow_unicode=True, sort_keys=False)
        except (yaml.YAMLError, OSError) as e:
            raise ValueError(f"Error saving YAML file {self.config_path}: {e}") from e
        self._config_lines = self.config_path.read_text(encoding="utf-8").split("\n")
        self.logger.debug(f"Saved configuration to {self.config_path}")

    def get_config_lines(self) -> list[str]:
        """Get configuration file lines for error reporting."""
        return self._config_lines

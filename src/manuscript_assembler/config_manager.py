#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Created config_schema.py for configuration template
# - Created config_loader.py for loading, merging and saving logic
# - Created config_validator.py for validation logic
# - Main config_manager.py acts as orchestrator
# - Added set/save so the separator setting can be persisted
#

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
config_manager.py - Configuration management for the manuscript assembler
"""

import argparse
import copy
import logging
from pathlib import Path
from typing import Any

from .config_loader import ConfigLoader
from .config_schema import DEFAULT_CONFIG_FILENAME
from .config_validator import ConfigValidator

# Command-line attribute -> config key path
ARG_OVERRIDES = {
    "ignore_separators": "parsing.ignore_separators",
    "workers": "parsing.max_workers",
    "recursive": "input.recursive",
    "output_dir": "output.directory",
    "title": "manuscript.title",
}


class ConfigManager:
    """Manages configuration for the manuscript assembler."""

    def __init__(
        self,
        config_path: Path | None = None,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to configuration file (default: manuscript_config.yml)
            logger: Logger instance

        Raises:
            ValueError: If the configuration file is malformed or invalid
        """
        self.logger = logger or logging.getLogger(__name__)
        self.config_path = config_path or Path(DEFAULT_CONFIG_FILENAME)

        self.loader = ConfigLoader(self.config_path, self.logger)
        self.validator = ConfigValidator(self.logger)

        self._user_config: dict[str, Any] = {}
        self.config = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        """Load, validate and merge configuration."""
        config = self.loader.load_config()
        defaults = self.loader.get_default_config()

        first_error = self.validator.validate_config_first_error(config, defaults, self.loader.get_config_lines())
        if first_error:
            message = self.validator.format_error(first_error)
            self.logger.error(f"Configuration error in {self.config_path}: {message}")
            raise ValueError(message)

        self._user_config = config
        return self.loader.merge_with_defaults(config)

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key_path: Dot-separated path (e.g., 'parsing.ignore_separators')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value: Any = self.config
        for key in key_path.split("."):
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default
        return value

    def set(self, key_path: str, value: Any) -> None:
        """
        Set a configuration value using dot notation.

        The change is kept in memory until save() is called.
        """
        keys = key_path.split(".")
        for target in (self.config, self._user_config):
            node = target
            for key in keys[:-1]:
                node = node.setdefault(key, {})
            node[keys[-1]] = value

    def save(self) -> None:
        """
        Persist the user's settings to the configuration file.

        Raises:
            ValueError: If the file cannot be written
        """
        self.loader.save_config(self.loader.merge_with_defaults(self._user_config))
        self.logger.info(f"Saved settings to {self.config_path}")

    def update_with_args(self, args: argparse.Namespace) -> dict[str, Any]:
        """
        Return a copy of the configuration with command-line overrides applied.

        Arguments left at None are ignored, so config values stay in force.

        Args:
            args: Parsed command-line arguments

        Returns:
            Updated configuration dictionary
        """
        config = copy.deepcopy(self.config)
        for attr, key_path in ARG_OVERRIDES.items():
            value = getattr(args, attr, None)
            if value is None:
                continue
            section, key = key_path.split(".")
            config.setdefault(section, {})[key] = value

        if getattr(args, "no_missing_check", False):
            config.setdefault("validation", {})["report_missing_chapters"] = False

        return config

#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Created module to hold configuration schema and default template
# - Template is commented YAML written verbatim on first run
# - CONFIG_TYPES lists the expected type of every known setting
#

"""
config_schema.py - Configuration schema and default template for the manuscript assembler
"""

from __future__ import annotations

from .filename_patterns import DEFAULT_IGNORE_SEPARATORS

DEFAULT_CONFIG_FILENAME = "manuscript_config.yml"

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Default configuration template with extensive comments
DEFAULT_CONFIG_TEMPLATE = f"""# Manuscript Assembler Configuration File
# =======================================
# This file contains default settings for assembling chapter files into a manuscript.
# Any command-line arguments will override these settings.

# Manuscript Settings
# -------------------
manuscript:
  # Title used for the output directory and archive name
  title: "Manuscript"
  # Author shown by renderers (optional)
  author: ""

# Filename Parsing
# ----------------
parsing:
  # Comma-separated decorations removed from chapter titles.
  # Each token is matched literally and case-insensitively.
  ignore_separators: "{DEFAULT_IGNORE_SEPARATORS}"
  # Worker threads used to classify filenames (default: 1)
  max_workers: 1

# Validation
# ----------
validation:
  # Warn about chapter numbers missing between the first and last chapter (default: true)
  report_missing_chapters: true

# Input Files
# -----------
input:
  # Extensions picked up when a directory is given
  extensions:
    - ".txt"
    - ".md"
    - ".rtf"
  # Search subdirectories (default: false)
  recursive: false

# Output
# ------
output:
  # Base directory for generated files (empty = current directory)
  directory: ""

# Logging Settings
# ----------------
logging:
  # Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: WARNING)
  level: WARNING

  # Log to file (default: false)
  file_enabled: false
  file_path: "manuscript_assembler.log"

  # Log format
  format: "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
"""

# Expected value types, by dot-separated key path
CONFIG_TYPES: dict[str, type | tuple[type, ...]] = {
    "manuscript.title": str,
    "manuscript.author": str,
    "parsing.ignore_separators": str,
    "parsing.max_workers": int,
    "validation.report_missing_chapters": bool,
    "input.extensions": list,
    "input.recursive": bool,
    "output.directory": str,
    "logging.level": str,
    "logging.file_enabled": bool,
    "logging.file_path": str,
    "logging.format": str,
}

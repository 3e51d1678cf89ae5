#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for config_loader module.
"""

import pytest
import yaml
import logging
from pathlib import Path
from unittest.mock import Mock, patch
import sys

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from manuscript_assembler.config_loader import ConfigLoader, merge_configs
from manuscript_assembler.config_schema import DEFAULT_CONFIG_TEMPLATE
from manuscript_assembler.filename_patterns import DEFAULT_IGNORE_SEPARATORS


class TestMergeConfigs:
    """Test the merge_configs function."""

    def test_deep_merge(self):
        """Test that nested sections are merged key by key."""
        base = {"a": {"x": 1, "y": 2}, "b": 3}
        override = {"a": {"y": 20}, "c": 4}
        assert merge_configs(base, override) == {"a": {"x": 1, "y": 20}, "b": 3, "c": 4}

    def test_base_not_modified(self):
        """Test that inputs are left untouched."""
        base = {"a": {"x": 1}}
        merge_configs(base, {"a": {"x": 2}})
        assert base == {"a": {"x": 1}}

    def test_non_dict_override_replaces(self):
        """Test that a scalar replaces a section."""
        assert merge_configs({"a": {"x": 1}}, {"a": 5}) == {"a": 5}


class TestConfigLoader:
    """Test the ConfigLoader class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.logger = Mock(spec=logging.Logger)

    def test_init(self, temp_dir):
        """Test ConfigLoader initialization."""
        loader = ConfigLoader(temp_dir / "config.yml", self.logger)
        assert loader.config_path == temp_dir / "config.yml"
        assert loader.logger == self.logger
        assert loader.get_config_lines() == []

        with patch("manuscript_assembler.config_loader.logging.getLogger") as mock_get_logger:
            loader = ConfigLoader(temp_dir / "config.yml")
            mock_get_logger.assert_called_once_with("manuscript_assembler.config_loader")

    def test_load_config_existing_file(self, temp_dir):
        """Test loading configuration from an existing file."""
        path = temp_dir / "config.yml"
        path.write_text("parsing:\n  max_workers: 4\n", encoding="utf-8")
        loader = ConfigLoader(path, self.logger)

        assert loader.load_config() == {"parsing": {"max_workers": 4}}
        assert loader.get_config_lines() == ["parsing:", "  max_workers: 4", ""]

    def test_load_config_create_default(self, temp_dir):
        """Test that a missing file is created from the template."""
        path = temp_dir / "sub" / "config.yml"
        loader = ConfigLoader(path, self.logger)

        config = loader.load_config()
        assert path.read_text(encoding="utf-8") == DEFAULT_CONFIG_TEMPLATE
        assert config["parsing"]["ignore_separators"] == DEFAULT_IGNORE_SEPARATORS

    def test_load_config_empty_file(self, temp_dir):
        """Test that an empty file yields an empty mapping."""
        path = temp_dir / "config.yml"
        path.write_text("", encoding="utf-8")
        loader = ConfigLoader(path, self.logger)

        assert loader.load_config() == {}
        self.logger.warning.assert_called_once()

    def test_load_config_yaml_error(self, temp_dir):
        """Test that broken YAML raises ValueError with a location."""
        path = temp_dir / "config.yml"
        path.write_text("parsing:\n  max_workers: [1, 2\n", encoding="utf-8")
        loader = ConfigLoader(path, self.logger)

        with pytest.raises(ValueError, match="Error parsing YAML file") as exc_info:
            loader.load_config()
        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)
        assert "line " in str(exc_info.value)

    def test_load_config_not_mapping(self, temp_dir):
        """Test that a list at the root is rejected."""
        path = temp_dir / "config.yml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ValueError, match="mapping at the root level, got list"):
            ConfigLoader(path, self.logger).load_config()

    def test_load_config_unreadable(self, temp_dir):
        """Test that a directory in place of the file raises ValueError."""
        path = temp_dir / "config.yml"
        path.mkdir()

        with pytest.raises(ValueError, match="Cannot read configuration file"):
            ConfigLoader(path, self.logger).load_config()

    def test_get_default_config(self, temp_dir):
        """Test the parsed default template."""
        defaults = ConfigLoader(temp_dir / "c.yml", self.logger).get_default_config()
        assert set(defaults) == {"manuscript", "parsing", "validation", "input", "output", "logging"}
        assert defaults["parsing"]["max_workers"] == 1
        assert defaults["validation"]["report_missing_chapters"] is True
        assert defaults["input"]["extensions"] == [".txt", ".md", ".rtf"]
        assert defaults["logging"]["level"] == "WARNING"

    @patch("manuscript_assembler.config_loader.yaml.safe_load")
    def test_get_default_config_non_dict(self, mock_yaml_load, temp_dir):
        """Test get_default_config when YAML returns non-dict."""
        mock_yaml_load.return_value = "not a dict"
        assert ConfigLoader(temp_dir / "c.yml", self.logger).get_default_config() == {}

    def test_merge_with_defaults(self, temp_dir):
        """Test that user values win and defaults fill the rest."""
        loader = ConfigLoader(temp_dir / "c.yml", self.logger)
        merged = loader.merge_with_defaults({"parsing": {"ignore_separators": "##"}})
        assert merged["parsing"]["ignore_separators"] == "##"
        assert merged["parsing"]["max_workers"] == 1
        assert merged["manuscript"]["title"] == "Manuscript"

    def test_save_config(self, temp_dir):
        """Test that saved settings load back unchanged."""
        path = temp_dir / "config.yml"
        loader = ConfigLoader(path, self.logger)
        config = {"manuscript": {"title": "Café"}, "parsing": {"ignore_separators": "##, ~~"}}

        loader.save_config(config)

        assert loader.load_config() == config
        assert "Café" in path.read_text(encoding="utf-8")
        assert loader.get_config_lines()[0] == "manuscript:"

    def test_save_config_error(self, temp_dir):
        """Test that a write failure raises ValueError."""
        loader = ConfigLoader(temp_dir / "missing" / "config.yml", self.logger)
        with pytest.raises(ValueError, match="Error saving YAML file"):
            loader.save_config({"a": 1})

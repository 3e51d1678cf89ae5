#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for cli_setup module.
"""

import pytest
import logging
import signal
import sys
from pathlib import Path
from unittest.mock import Mock, patch

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from manuscript_assembler.cli_setup import (
    setup_configuration,
    setup_console,
    setup_logging,
    setup_signal_handler,
)


def _logging_config(**overrides):
    config = {
        "level": "INFO",
        "format": "%(levelname)s - %(message)s",
        "file_enabled": False,
        "file_path": "manuscript_assembler.log",
    }
    config.update(overrides)
    return {"logging": config}


class TestSetupConfiguration:
    """Test the setup_configuration function."""

    @patch("manuscript_assembler.cli_setup.ConfigManager")
    def test_setup_configuration_default(self, mock_config_manager_class):
        """Test setup with the default configuration path."""
        mock_config_manager = Mock()
        mock_config_manager.config = {"test": "config"}
        mock_config_manager_class.return_value = mock_config_manager

        config_manager, config = setup_configuration(["chapters/"])

        mock_config_manager_class.assert_called_once_with(config_path=Path("manuscript_config.yml"))
        assert config_manager == mock_config_manager
        assert config == {"test": "config"}

    @patch("manuscript_assembler.cli_setup.ConfigManager")
    def test_setup_configuration_custom_path(self, mock_config_manager_class):
        """Test that --config is picked out of the full argument list."""
        setup_configuration(["chapters/", "--strict", "--config", "other.yml", "--workers", "2"])
        mock_config_manager_class.assert_called_once_with(config_path=Path("other.yml"))

    @patch("manuscript_assembler.cli_setup.ConfigManager")
    def test_setup_configuration_value_error(self, mock_config_manager_class, capsys):
        """Test that a configuration error exits with status 1."""
        mock_config_manager_class.side_effect = ValueError("line 3: Unknown configuration section 'x'")

        with pytest.raises(SystemExit) as exc_info:
            setup_configuration(["chapters/"])

        assert exc_info.value.code == 1
        assert "Configuration error: line 3: Unknown configuration section 'x'" in capsys.readouterr().out


class TestSetupLogging:
    """Test the setup_logging function."""

    @patch("manuscript_assembler.cli_setup.logging.basicConfig")
    def test_setup_logging_basic(self, mock_basic_config):
        """Test basic logging setup."""
        logger = setup_logging(_logging_config())

        mock_basic_config.assert_called_once_with(level=logging.INFO, format="%(levelname)s - %(message)s")
        assert logger.name == "manuscript_assembler"

    @patch("manuscript_assembler.cli_setup.logging.basicConfig")
    def test_setup_logging_lowercase_level(self, mock_basic_config):
        """Test that level names are case-insensitive."""
        setup_logging(_logging_config(level="debug"))
        assert mock_basic_config.call_args.kwargs["level"] == logging.DEBUG

    @patch("manuscript_assembler.cli_setup.logging.basicConfig")
    def test_setup_logging_with_file(self, mock_basic_config, temp_dir):
        """Test that file logging adds a handler."""
        log_path = temp_dir / "run.log"
        logger = setup_logging(_logging_config(file_enabled=True, file_path=str(log_path)))
        try:
            handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
            assert any(Path(h.baseFilename) == log_path for h in handlers)
        finally:
            for handler in list(logger.handlers):
                if isinstance(handler, logging.FileHandler):
                    handler.close()
                    logger.removeHandler(handler)

    @patch("manuscript_assembler.cli_setup.logging.basicConfig")
    @patch("manuscript_assembler.cli_setup.logging.FileHandler")
    def test_setup_logging_file_error(self, mock_file_handler_class, mock_basic_config):
        """Test that a file handler error does not stop the run."""
        mock_file_handler_class.side_effect = PermissionError("denied")

        with patch("manuscript_assembler.cli_setup.logging.getLogger") as mock_get_logger:
            logger = setup_logging(_logging_config(file_enabled=True))

        logger.error.assert_called_once()
        assert mock_get_logger.return_value is logger


class TestSetupConsole:
    """Test the setup_console function."""

    @patch("manuscript_assembler.cli_setup.colorama.just_fix_windows_console")
    def test_setup_console(self, mock_fix):
        """Test that colorama prepares the terminal."""
        setup_console()
        mock_fix.assert_called_once_with()


class TestSetupSignalHandler:
    """Test the setup_signal_handler function."""

    @patch("manuscript_assembler.cli_setup.signal.signal")
    def test_handler_exits_with_130(self, mock_signal):
        """Test that Ctrl-C exits with the conventional status."""
        logger = Mock()
        setup_signal_handler(logger)

        sig, handler = mock_signal.call_args.args
        assert sig == signal.SIGINT
        with pytest.raises(SystemExit) as exc_info:
            handler(signal.SIGINT, None)
        assert exc_info.value.code == 130
        logger.info.assert_called_once()

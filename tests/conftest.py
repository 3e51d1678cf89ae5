#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest configuration and shared fixtures for all tests
"""

import pytest
import sys
import os
import tempfile
import shutil
from pathlib import Path
from unittest.mock import Mock

# Add src directory to path so we can import our modules
src_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
sys.path.insert(0, src_dir)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files"""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path)


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing"""
    logger = Mock()
    logger.info = Mock()
    logger.debug = Mock()
    logger.warning = Mock()
    logger.error = Mock()
    logger.exception = Mock()
    return logger


@pytest.fixture
def chapter_dir(temp_dir):
    """Directory with a small, shuffled set of chapter files"""
    files = {
        "03 - The Return.txt": "Third chapter.",
        "1_The Beginning.txt": "First chapter.",
        "Chapter 2 - AD 1982 - Middle Ground.md": "Second chapter.",
        "notes.txt": "Loose notes.",
        ".hidden.txt": "Hidden file.",
        "cover.png": "not text",
    }
    for name, content in files.items():
        (temp_dir / name).write_text(content, encoding="utf-8")
    return temp_dir

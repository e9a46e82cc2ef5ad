"""Pytest configuration and shared fixtures for themereload tests

This module provides common fixtures and test utilities used across
the unit tests.
"""

import pytest
import logging

from themereload.common.config import Config, ConfigLoader


@pytest.fixture
def default_config(monkeypatch, tmp_path) -> Config:
    """Built-in default configuration rooted in a temporary XDG_CONFIG_HOME

    Returns:
        Config object with default values
    """
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    return ConfigLoader.config_parse({})


@pytest.fixture(autouse=True)
def setup_logging(caplog):
    """Setup logging for tests"""
    caplog.set_level(logging.DEBUG)

"""Pytest configuration and fixtures for dockgen-common tests."""
import logging

import pytest

from dockgen_common import get_settings
from dockgen_common.logger import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Start every test without DOCKGEN_* variables or cached settings."""
    for name in ("LOG_LEVEL", "LOG_JSON", "NODE_VERSION", "PYTHON_VERSION", "TEMPLATE_DIR"):
        monkeypatch.delenv(f"DOCKGEN_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_logging():
    """Undo handlers and level changes made by configure_logging."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)

"""Pytest configuration and fixtures for CLI tests."""
import logging

import pytest
import pyperclip
from typer.testing import CliRunner

from dockgen_common import get_settings
from dockgen_sdk.templates import reset_renderer


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    """Run each command from an empty directory with default settings."""
    for name in ("LOG_LEVEL", "LOG_JSON", "NODE_VERSION", "PYTHON_VERSION", "TEMPLATE_DIR"):
        monkeypatch.delenv(f"DOCKGEN_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    reset_renderer()
    yield
    get_settings.cache_clear()
    reset_renderer()


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo level and handler changes made by --log-level and --verbose."""
    root = logging.getLogger("dockgen")
    level, handlers = root.level, list(root.handlers)
    yield
    root.setLevel(level)
    root.handlers = handlers


@pytest.fixture
def interactive_stdin(monkeypatch):
    """Treat the runner's piped input as a terminal so prompts are shown."""
    monkeypatch.setattr("dockgen_cli.generate_cmd.stdin_is_interactive", lambda: True)


@pytest.fixture
def clipboard(monkeypatch):
    """Capture clipboard writes instead of touching the real clipboard."""
    copied = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)
    return copied


@pytest.fixture
def broken_clipboard(monkeypatch):
    def fail(text):
        raise pyperclip.PyperclipException("could not find a copy/paste mechanism")

    monkeypatch.setattr(pyperclip, "copy", fail)

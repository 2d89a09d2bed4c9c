"""Pytest configuration and fixtures for SDK tests."""
import pytest
import pyperclip

from dockgen_common import get_settings
from dockgen_sdk.templates import reset_renderer


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """
    Run every test from an empty directory with default settings.

    The renderer looks for ./templates and reads DOCKGEN_* variables, so both
    are reset to keep tests independent of the developer's shell.
    """
    for name in ("LOG_LEVEL", "LOG_JSON", "NODE_VERSION", "PYTHON_VERSION", "TEMPLATE_DIR"):
        monkeypatch.delenv(f"DOCKGEN_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    reset_renderer()
    yield
    get_settings.cache_clear()
    reset_renderer()


@pytest.fixture
def clipboard(monkeypatch):
    """Replace the system clipboard with an in-memory list."""
    copied = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)
    return copied


@pytest.fixture
def broken_clipboard(monkeypatch):
    """Simulate a machine without any clipboard mechanism."""
    def fail(text):
        raise pyperclip.PyperclipException("could not find a copy/paste mechanism")

    monkeypatch.setattr(pyperclip, "copy", fail)


@pytest.fixture
def custom_templates(tmp_path):
    """A user template directory overriding the FastAPI Dockerfile."""
    template_root = tmp_path / "custom-templates"
    dockerfiles = template_root / "dockerfiles"
    dockerfiles.mkdir(parents=True)
    (dockerfiles / "fastapi.Dockerfile.j2").write_text(
        "FROM {{ base_image }}:{{ version }}\nEXPOSE {{ container_port }}\n"
    )
    return template_root

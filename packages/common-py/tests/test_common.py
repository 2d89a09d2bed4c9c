"""
Tests for dockgen-common: errors, constants, logging and settings.
"""

import io
import json
import logging

import pytest

from dockgen_common import (
    # Errors
    DockgenError,
    ValidationError,
    TemplateRenderError,
    ClipboardError,
    # Constants
    SUPPORTED_FRAMEWORKS,
    NODE_FRAMEWORKS,
    PYTHON_FRAMEWORKS,
    DEFAULT_NODE_VERSION,
    DEFAULT_PYTHON_VERSION,
    PLACEHOLDER_DOCKERFILE,
    # Logger
    DockgenLogger,
    configure_logging,
    get_logger,
    # Settings
    Settings,
    get_settings,
)


class TestErrors:
    """Test error classes"""

    def test_base_error(self):
        error = DockgenError("Something broke")
        assert error.code == "DOCKGEN_ERROR"
        assert error.message == "Something broke"
        assert str(error) == "Something broke"

    def test_validation_error(self):
        error = ValidationError("Bad value")
        assert error.code == "VALIDATION_ERROR"
        assert isinstance(error, DockgenError)

    def test_template_error_to_dict(self):
        error = TemplateRenderError("Missing", template="dockerfiles/x.j2")
        data = error.to_dict()
        assert data["error"] == "TemplateRenderError"
        assert data["code"] == "TEMPLATE_ERROR"
        assert data["message"] == "Missing"
        assert data["template"] == "dockerfiles/x.j2"

    def test_clipboard_error(self):
        error = ClipboardError("No clipboard")
        assert error.code == "CLIPBOARD_ERROR"
        assert error.to_dict()["error"] == "ClipboardError"


class TestConstants:
    """Test constants"""

    def test_supported_frameworks(self):
        assert SUPPORTED_FRAMEWORKS == ["react-vite", "nextjs", "express", "fastapi", "django"]

    def test_families_partition_frameworks(self):
        assert set(NODE_FRAMEWORKS) | set(PYTHON_FRAMEWORKS) == set(SUPPORTED_FRAMEWORKS)
        assert not set(NODE_FRAMEWORKS) & set(PYTHON_FRAMEWORKS)

    def test_defaults(self):
        assert DEFAULT_NODE_VERSION == "20-alpine"
        assert DEFAULT_PYTHON_VERSION == "3.11-slim"
        assert PLACEHOLDER_DOCKERFILE == "# Please select a framework"


class TestLogger:
    """Test logging helpers"""

    def test_get_logger_namespaces_module_names(self):
        assert get_logger("dockgen_sdk.generator").name == "dockgen.dockgen_sdk.generator"
        assert get_logger("dockgen.cli").name == "dockgen.cli"
        assert get_logger().name == "dockgen"

    def test_configure_logging_plain(self, restore_logging):
        stream = io.StringIO()
        configure_logging("info", stream=stream)
        get_logger("tests").info("hello plain")
        assert "hello plain" in stream.getvalue()
        assert "INFO" in stream.getvalue()

    def test_configure_logging_respects_level(self, restore_logging):
        stream = io.StringIO()
        configure_logging("error", stream=stream)
        get_logger("tests").warning("should not appear")
        assert stream.getvalue() == ""

    def test_configure_logging_json(self, restore_logging):
        stream = io.StringIO()
        configure_logging("debug", json_output=True, stream=stream)
        get_logger("tests").debug("rendered", extra={"framework": "fastapi"})

        record = json.loads(stream.getvalue().strip())
        assert record["message"] == "rendered"
        assert record["level"] == "debug"
        assert record["logger"] == "dockgen.tests"
        assert record["framework"] == "fastapi"

    def test_configure_logging_replaces_previous_handler(self, restore_logging):
        configure_logging("info", stream=io.StringIO())
        configure_logging("info", stream=io.StringIO())
        owned = [h for h in restore_logging.handlers if getattr(h, "_dockgen_handler", False)]
        assert len(owned) == 1

    def test_configure_logging_accepts_warn_alias(self, restore_logging):
        root = configure_logging("warn", stream=io.StringIO())
        assert root.level == logging.WARNING

    def test_configure_logging_invalid_level(self, restore_logging):
        with pytest.raises(ValidationError) as exc_info:
            configure_logging("verbose")
        assert "Invalid log level" in str(exc_info.value)

    def test_bound_logger_adds_context(self, restore_logging):
        stream = io.StringIO()
        configure_logging("info", json_output=True, stream=stream)
        log = DockgenLogger(get_logger("tests"), framework="django").bind(version="3.12-slim")
        log.info("generated")

        record = json.loads(stream.getvalue().strip())
        assert record["framework"] == "django"
        assert record["version"] == "3.12-slim"


class TestSettings:
    """Test environment-driven settings"""

    def test_defaults(self):
        settings = Settings()
        assert settings.log_level == "warning"
        assert settings.log_json is False
        assert settings.node_version == "20-alpine"
        assert settings.python_version == "3.11-slim"
        assert settings.template_dir is None

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("DOCKGEN_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("DOCKGEN_LOG_JSON", "true")
        monkeypatch.setenv("DOCKGEN_NODE_VERSION", "18-alpine")
        monkeypatch.setenv("DOCKGEN_PYTHON_VERSION", "3.12-slim")

        settings = Settings()
        assert settings.log_level == "debug"
        assert settings.log_json is True
        assert settings.node_version == "18-alpine"
        assert settings.python_version == "3.12-slim"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("DOCKGEN_LOG_LEVEL", "loud")
        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

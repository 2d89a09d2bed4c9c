"""Tests for the frameworks command."""
import json

import yaml
from typer.testing import CliRunner

from dockgen_cli.main import app

runner = CliRunner()


def test_frameworks_table():
    result = runner.invoke(app, ["frameworks"])
    assert result.exit_code == 0
    assert "Supported Frameworks" in result.stdout
    for key in ["react-vite", "nextjs", "express", "fastapi", "django"]:
        assert key in result.stdout
    assert "python:3.11-slim" in result.stdout


def test_frameworks_json():
    result = runner.invoke(app, ["frameworks", "--format", "json"])
    assert result.exit_code == 0
    rows = json.loads(result.stdout)
    assert [row["key"] for row in rows] == ["react-vite", "nextjs", "express", "fastapi", "django"]
    react = rows[0]
    assert react["container_port"] == 80
    assert react["host_port"] == 8080
    assert react["default_version"] == "20-alpine"


def test_frameworks_yaml():
    result = runner.invoke(app, ["frameworks", "-f", "yaml"])
    assert result.exit_code == 0
    rows = yaml.safe_load(result.stdout)
    django = rows[-1]
    assert django["key"] == "django"
    assert django["base_image"] == "python"
    assert django["container_port"] == 8000


def test_frameworks_invalid_format():
    result = runner.invoke(app, ["frameworks", "--format", "xml"])
    assert result.exit_code == 1
    assert "invalid format" in result.stdout.lower()

"""Tests for config subcommands."""

import json

import pytest
from typer.testing import CliRunner

from arabic_search.cli.main import app
from arabic_search.utils.config import load_settings

runner = CliRunner()


class TestConfigSetGet:
    def test_set_and_get(self, clean_config):
        result = runner.invoke(app, ["config", "set", "folder_path", "Notes/Quran"])
        assert result.exit_code == 0

        result = runner.invoke(app, ["config", "get", "folder_path"])
        assert result.exit_code == 0
        assert "Notes/Quran" in result.output

    def test_get_default(self, clean_config):
        result = runner.invoke(app, ["config", "get", "folder_path", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {"key": "folder_path", "value": "Learning/Arabic", "default": True}

    def test_set_bool(self, clean_config):
        result = runner.invoke(app, ["config", "set", "strict_folder_boundary", "yes", "--format", "json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["value"] is True
        assert load_settings().strict_folder_boundary is True

    def test_set_extensions(self, clean_config):
        result = runner.invoke(app, ["config", "set", "extensions", "md, .txt", "--format", "json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["value"] == ["md", "txt"]
        assert load_settings().extensions == ["md", "txt"]

    def test_invalid_key(self, clean_config):
        result = runner.invoke(app, ["config", "set", "nonexistent", "value"])
        assert result.exit_code == 1

    def test_invalid_bool(self, clean_config):
        result = runner.invoke(app, ["config", "set", "strict_folder_boundary", "bogus"])
        assert result.exit_code == 1

    def test_unset(self, clean_config):
        runner.invoke(app, ["config", "set", "folder_path", "Notes"])
        result = runner.invoke(app, ["config", "unset", "folder_path"])
        assert result.exit_code == 0
        assert load_settings().folder_path == "Learning/Arabic"


class TestConfigList:
    def test_list_empty(self, clean_config):
        result = runner.invoke(app, ["config", "list"])
        assert result.exit_code == 0
        assert "No configuration" in result.output

    def test_list_json(self, clean_config):
        runner.invoke(app, ["config", "set", "folder_path", "Notes"])
        result = runner.invoke(app, ["config", "list", "--format", "json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"folder_path": "Notes"}


class TestLoadSettings:
    def test_ignores_unknown_keys(self, clean_config):
        (clean_config / "config.json").write_text(json.dumps({"folder_path": "X", "theme": "dark"}))
        assert load_settings().folder_path == "X"

    @pytest.mark.parametrize("value", [[1], None, 5, {"md": True}])
    def test_malformed_extensions_fall_back(self, clean_config, value):
        (clean_config / "config.json").write_text(json.dumps({"folder_path": "X", "extensions": value}))
        settings = load_settings()
        assert settings.extensions == ["md"]
        assert settings.folder_path == "Learning/Arabic"

    def test_invalid_stored_value_falls_back(self, clean_config):
        (clean_config / "config.json").write_text(json.dumps({"strict_folder_boundary": "maybe"}))
        assert load_settings().strict_folder_boundary is False

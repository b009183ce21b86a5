"""Tests for configuration loading."""

import json
import os
from unittest.mock import patch

import pytest
import yaml

from singleton_idioms.config import DEFAULT_CONFIG, AppConfig, ConfigurationLoader
from singleton_idioms.domain.exceptions import ConfigurationError


class TestInterpolation:
    """Test ${VAR:default} expansion."""

    def test_default_used_when_unset(self):
        """Test that the default is used for unset variables."""
        assert ConfigurationLoader.interpolate("${UNSET_TEST_VAR:fallback}") == "fallback"

    def test_environment_value_wins(self):
        """Test that a set variable replaces the reference."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            result = ConfigurationLoader.interpolate("${TEST_VAR:ignored}/sub")
            assert result == "/test/path/sub"

    def test_unresolved_reference_left_untouched(self):
        """Test that a reference without default stays as written."""
        assert ConfigurationLoader.interpolate("${UNSET_TEST_VAR}") == "${UNSET_TEST_VAR}"

    def test_nested_structures(self):
        """Test expansion of dict and list values."""
        with patch.dict(os.environ, {"TEST_VAR": "x"}):
            config = {"a": {"b": "${TEST_VAR}"}, "c": ["${TEST_VAR:y}", 3], "d": None}
            assert ConfigurationLoader.interpolate(config) == {
                "a": {"b": "x"},
                "c": ["x", 3],
                "d": None,
            }


class TestConfigurationLoader:
    """Test sources and precedence."""

    def test_defaults_only(self, tmp_path, monkeypatch):
        """Test loading with no file and no overrides."""
        monkeypatch.chdir(tmp_path)
        config = ConfigurationLoader.load()

        assert config["logging"]["level"] == "INFO"
        assert config["logging"]["destination"] == "stdout"
        assert config["logging"]["file"]["path"] == "logs/singleton_idioms.log"
        assert config["race"]["workers"] == 10

    def test_defaults_not_mutated(self, tmp_path, monkeypatch):
        """Test that loading never modifies DEFAULT_CONFIG."""
        monkeypatch.chdir(tmp_path)
        ConfigurationLoader.load()

        assert DEFAULT_CONFIG["logging"]["level"] == "${LOG_LEVEL:INFO}"

    def test_yaml_file_deep_merges(self, tmp_path):
        """Test that a YAML file overrides only the keys it names."""
        path = tmp_path / "config.yml"
        path.write_text(yaml.safe_dump({"race": {"workers": 4}, "environment": "testing"}))

        config = ConfigurationLoader.load(str(path))

        assert config["race"]["workers"] == 4
        assert config["race"]["construction_delay"] == 0.05
        assert config["environment"] == "testing"

    def test_json_file(self, tmp_path):
        """Test JSON configuration files."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"logging": {"level": "DEBUG"}}))

        config = ConfigurationLoader.load(str(path))

        assert config["logging"]["level"] == "DEBUG"

    def test_file_from_environment_variable(self, tmp_path):
        """Test that SINGLETON_IDIOMS_CONFIG selects the file."""
        path = tmp_path / "env.yml"
        path.write_text("race:\n  workers: 3\n")

        with patch.dict(os.environ, {"SINGLETON_IDIOMS_CONFIG": str(path)}):
            config = ConfigurationLoader.load()

        assert config["race"]["workers"] == 3

    def test_default_file_in_working_directory(self, tmp_path, monkeypatch):
        """Test discovery of ./singleton_idioms.yml."""
        (tmp_path / "singleton_idioms.yml").write_text("debug: true\n")
        monkeypatch.chdir(tmp_path)

        assert ConfigurationLoader.load()["debug"] is True

    def test_missing_explicit_file_raises(self, tmp_path):
        """Test that a missing explicit path is an error."""
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigurationLoader.load(str(tmp_path / "missing.yml"))

    def test_missing_env_file_raises(self, tmp_path):
        """Test that a missing SINGLETON_IDIOMS_CONFIG path is an error."""
        with patch.dict(os.environ, {"SINGLETON_IDIOMS_CONFIG": str(tmp_path / "missing.yml")}):
            with pytest.raises(ConfigurationError, match="SINGLETON_IDIOMS_CONFIG"):
                ConfigurationLoader.load()

    def test_unparseable_file_raises(self, tmp_path):
        """Test that syntax errors become ConfigurationError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(ConfigurationError, match="Failed to load"):
            ConfigurationLoader.load_from_file(str(path))

    def test_non_mapping_file_raises(self, tmp_path):
        """Test that a top-level list is rejected."""
        path = tmp_path / "list.yml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            ConfigurationLoader.load_from_file(str(path))

    def test_empty_file_is_empty_mapping(self, tmp_path):
        """Test that an empty YAML file loads as {}."""
        path = tmp_path / "empty.yml"
        path.write_text("")

        assert ConfigurationLoader.load_from_file(str(path)) == {}

    def test_environment_overrides_file(self, tmp_path):
        """Test that SINGLETON_IDIOMS_* variables win over the file."""
        path = tmp_path / "config.yml"
        path.write_text("race:\n  workers: 4\n")

        with patch.dict(os.environ, {
            "SINGLETON_IDIOMS_RACE_WORKERS": "12",
            "SINGLETON_IDIOMS_LOG_LEVEL": "warning",
        }):
            config = ConfigurationLoader.load(str(path))

        assert config["race"]["workers"] == "12"
        assert config["logging"]["level"] == "warning"

    def test_interpolation_variable_changes_default(self, tmp_path, monkeypatch):
        """Test that LOG_LEVEL feeds the ${LOG_LEVEL:INFO} default."""
        monkeypatch.chdir(tmp_path)
        with patch.dict(os.environ, {"LOG_LEVEL": "ERROR"}):
            config = ConfigurationLoader.load()

        assert config["logging"]["level"] == "ERROR"


class TestCreateAppConfig:
    """Test validation into AppConfig."""

    def test_valid_config(self, tmp_path, monkeypatch):
        """Test that loaded defaults validate."""
        monkeypatch.chdir(tmp_path)
        with patch.dict(os.environ, {"SINGLETON_IDIOMS_RACE_WORKERS": "12"}):
            app_config = ConfigurationLoader.create_app_config(ConfigurationLoader.load())

        assert isinstance(app_config, AppConfig)
        assert app_config.race.workers == 12
        assert app_config.logging.level == "INFO"

    def test_invalid_config_wrapped(self):
        """Test that pydantic errors become ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationLoader.create_app_config({"race": {"workers": 0}})

        assert "race.workers" in exc_info.value.missing_fields

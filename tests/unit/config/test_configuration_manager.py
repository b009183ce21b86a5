"""Tests for ConfigurationManager."""

import os
import threading
import time
from unittest.mock import patch

import pytest

from singleton_idioms.config import (
    AppConfig,
    ConfigurationLoader,
    ConfigurationManager,
    LoggingConfig,
    RaceConfig,
    get_config_manager,
)
from singleton_idioms.domain.exceptions import ConfigurationError


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text(
        "environment: testing\n"
        "race:\n"
        "  workers: 4\n"
        "custom:\n"
        "  retries: three\n"
        "  ratio: not-a-number\n"
        "  enabled: 'yes'\n"
    )
    return str(path)


class TestConfigurationManagerSingleton:
    """Test the manager's own singleton behaviour."""

    def test_same_instance(self, config_file):
        """Test that construction always returns the first instance."""
        first = ConfigurationManager(config_file)
        second = ConfigurationManager()

        assert first is second
        assert get_config_manager() is first

    def test_concurrent_construction(self, config_file):
        """Test that racing threads share one manager."""
        results = []
        barrier = threading.Barrier(8)

        def build():
            barrier.wait()
            results.append(get_config_manager(config_file))

        threads = [threading.Thread(target=build) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len({id(m) for m in results}) == 1

    def test_concurrent_construction_loads_once(self, config_file):
        """Test that racing constructors run the configuration load once."""
        original_load = ConfigurationLoader.load.__func__
        calls = []
        calls_lock = threading.Lock()

        def slow_load(cls, config_path=None):
            with calls_lock:
                calls.append(threading.current_thread().name)
            time.sleep(0.1)
            return original_load(cls, config_path)

        barrier = threading.Barrier(8)

        def build():
            barrier.wait()
            get_config_manager(config_file)

        with patch.object(ConfigurationLoader, "load", classmethod(slow_load)):
            threads = [threading.Thread(target=build) for _ in range(8)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

        assert len(calls) == 1

    def test_override_survives_racing_constructors(self, config_file):
        """Test that a runtime override is not wiped by a later constructor."""
        original_load = ConfigurationLoader.load.__func__
        first_loaded = threading.Event()

        def slow_load(cls, config_path=None):
            first_loaded.set()
            time.sleep(0.1)
            return original_load(cls, config_path)

        with patch.object(ConfigurationLoader, "load", classmethod(slow_load)):
            builder = threading.Thread(target=get_config_manager, args=(config_file,))
            builder.start()
            first_loaded.wait(5)
            manager = get_config_manager(config_file)
            manager.set("race.workers", 3)
            builder.join()

        assert ConfigurationManager().get_int("race.workers") == 3

    def test_reset_instance_reloads(self, config_file):
        """Test that reset_instance forces a fresh load."""
        first = ConfigurationManager(config_file)
        ConfigurationManager.reset_instance()

        with patch.dict(os.environ, {"SINGLETON_IDIOMS_RACE_WORKERS": "6"}):
            second = ConfigurationManager(config_file)

        assert second is not first
        assert second.app_config.race.workers == 6


class TestConfigurationAccess:
    """Test typed and dotted access."""

    def test_typed_sections(self, config_file):
        manager = ConfigurationManager(config_file)

        assert isinstance(manager.get_typed(AppConfig), AppConfig)
        assert manager.get_typed(RaceConfig).workers == 4
        assert isinstance(manager.get_typed(LoggingConfig), LoggingConfig)

    def test_unknown_typed_section(self, config_file):
        manager = ConfigurationManager(config_file)

        with pytest.raises(ValueError, match="Unknown configuration type"):
            manager.get_typed(dict)

    def test_get_with_dot_notation(self, config_file):
        manager = ConfigurationManager(config_file)

        assert manager.get("race.workers") == 4
        assert manager.get("environment") == "testing"
        assert manager.get("race.missing", "fallback") == "fallback"
        assert manager.get_str("race.workers") == "4"

    def test_malformed_int_defaults_to_zero(self, config_file):
        """Test that malformed integers are logged and returned as 0."""
        manager = ConfigurationManager(config_file)

        assert manager.get_int("custom.retries", 5) == 0
        assert manager.get_int("custom.missing", 5) == 5
        assert manager.get_int("race.workers") == 4

    def test_malformed_float_defaults_to_zero(self, config_file):
        """Test that malformed floats are logged and returned as 0.0."""
        manager = ConfigurationManager(config_file)

        assert manager.get_float("custom.ratio", 1.5) == 0.0
        assert manager.get_float("race.construction_delay") == 0.05

    def test_get_bool(self, config_file):
        manager = ConfigurationManager(config_file)

        assert manager.get_bool("custom.enabled") is True
        assert manager.get_bool("debug") is False
        assert manager.get_bool("custom.missing", True) is True

    def test_runtime_override_wins(self, config_file):
        """Test that set() takes precedence over loaded values."""
        manager = ConfigurationManager(config_file)
        manager.set("race.workers", 99)

        assert manager.get_int("race.workers") == 99
        assert manager.has_key("race.workers")
        assert manager.has_key("custom.ratio")
        assert not manager.has_key("custom.nope")

    def test_reload_keeps_runtime_overrides(self, config_file):
        manager = ConfigurationManager(config_file)
        manager.set("custom.flag", True)
        manager.reload()

        assert manager.get("custom.flag") is True

    def test_statistics(self, config_file):
        manager = ConfigurationManager(config_file)
        manager.set("a", 1)
        manager.get("a")
        manager.get("race.workers")

        stats = manager.statistics()
        assert stats["access_count"] == 2
        assert stats["runtime_overrides"] == 1
        assert "loaded_at" in stats

    def test_invalid_file_content_raises(self, tmp_path):
        """Test that schema violations surface as ConfigurationError."""
        path = tmp_path / "bad.yml"
        path.write_text("environment: qa\n")

        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            ConfigurationManager(str(path))

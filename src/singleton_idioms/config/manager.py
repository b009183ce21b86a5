"""Unified configuration management for the application."""
from __future__ import annotations

import threading
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Type, TypeVar

from singleton_idioms.config.loader import ConfigurationLoader
from singleton_idioms.config.schemas import AppConfig, LoggingConfig, RaceConfig
from singleton_idioms.domain.exceptions import ConfigurationError
from singleton_idioms.infrastructure.logging.logger import get_logger

T = TypeVar("T")
logger = get_logger(__name__)

_MISSING = object()


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Values are read from the loaded configuration (defaults, file, environment)
    with runtime overrides taking precedence. Keys use dot notation, e.g.
    ``race.workers``.
    """

    # Singleton instance with thread safety
    _instance: Optional[ConfigurationManager] = None
    _lock = threading.Lock()

    def __new__(cls, *args, **kwargs) -> ConfigurationManager:
        """Thread-safe singleton pattern."""
        if cls._instance is None:
            with cls._lock:
                # Double-checked locking pattern
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to configuration file
        """
        # Only initialize once
        if getattr(self, "initialized", False):
            return

        with self._lock:
            # Racing constructors wait here while the first one loads
            if getattr(self, "initialized", False):
                return

            self._config_path = config_path
            self._state_lock = threading.RLock()
            self._runtime_config: Dict[str, Any] = {}
            self._access_count = 0
            self._load()
            self.initialized = True

    def _load(self) -> None:
        self.raw_config = ConfigurationLoader.load(self._config_path)
        self._app_config = ConfigurationLoader.create_app_config(self.raw_config)
        self.loaded_at = datetime.now(timezone.utc)
        logger.info("Configuration loaded successfully", config_path=self._config_path)

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the singleton so the next construction reloads from scratch."""
        with cls._lock:
            cls._instance = None

    @property
    def app_config(self) -> AppConfig:
        """Get typed application configuration."""
        if getattr(self, "_app_config", None) is None:
            raise ConfigurationError("Configuration not initialized")
        return self._app_config

    def get_typed(self, config_type: Type[T]) -> T:
        """Get a typed configuration section."""
        type_mapping = {
            AppConfig: lambda c: c,
            LoggingConfig: lambda c: c.logging,
            RaceConfig: lambda c: c.race,
        }
        if config_type not in type_mapping:
            raise ValueError(f"Unknown configuration type: {config_type.__name__}")
        return type_mapping[config_type](self.app_config)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key (dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Configuration value
        """
        with self._state_lock:
            self._access_count += 1
            if key in self._runtime_config:
                return self._runtime_config[key]

        value = self._lookup(key)
        return default if value is _MISSING else value

    def _lookup(self, key: str) -> Any:
        value: Any = self.raw_config
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return _MISSING
        return value

    def get_str(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get configuration value as a string."""
        value = self.get(key)
        return default if value is None else str(value)

    def get_int(self, key: str, default: int = 0) -> int:
        """
        Get integer configuration value.

        Missing keys return ``default``. Malformed values are logged and
        returned as 0.
        """
        value = self.get(key)
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning("Invalid integer for configuration key", key=key, value=value)
            return 0

    def get_float(self, key: str, default: float = 0.0) -> float:
        """
        Get float configuration value.

        Missing keys return ``default``. Malformed values are logged and
        returned as 0.0.
        """
        value = self.get(key)
        if value is None:
            return default
        try:
            return float(value)
        except (TypeError, ValueError):
            logger.warning("Invalid float for configuration key", key=key, value=value)
            return 0.0

    def get_bool(self, key: str, default: bool = False) -> bool:
        """
        Get boolean configuration value.

        Args:
            key: Configuration key (dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Boolean configuration value
        """
        value = self.get(key)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.strip().lower() in ("true", "yes", "1", "on")
        return bool(value)

    def set(self, key: str, value: Any) -> None:
        """
        Set a runtime override for key.

        Overrides are visible through ``get`` and the typed getters. The
        validated ``app_config`` is not rebuilt.
        """
        with self._state_lock:
            self._runtime_config[key] = value
        logger.info("Configuration updated", key=key, value=value)

    def has_key(self, key: str) -> bool:
        """Check whether key exists in runtime overrides or loaded configuration."""
        with self._state_lock:
            if key in self._runtime_config:
                return True
        return self._lookup(key) is not _MISSING

    def reload(self) -> None:
        """Reload configuration from sources. Runtime overrides are kept."""
        with self._state_lock:
            self._load()
        logger.info("Configuration reloaded")

    def statistics(self) -> Dict[str, Any]:
        """Return access statistics."""
        with self._state_lock:
            return {
                "access_count": self._access_count,
                "runtime_overrides": len(self._runtime_config),
                "loaded_at": self.loaded_at.isoformat(),
            }


def get_config_manager(config_path: Optional[str] = None) -> ConfigurationManager:
    """Return the process-wide configuration manager."""
    return ConfigurationManager(config_path)

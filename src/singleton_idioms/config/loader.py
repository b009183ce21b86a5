"""Configuration loading from defaults, files and environment variables."""
import copy
import json
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from singleton_idioms.config.defaults import (
    CONFIG_FILE_ENV_VAR,
    DEFAULT_CONFIG,
    DEFAULT_CONFIG_FILES,
    ENV_OVERRIDES,
)
from singleton_idioms.config.schemas import AppConfig
from singleton_idioms.domain.exceptions import ConfigurationError
from singleton_idioms.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

_ENV_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::([^}]*))?\}")


class ConfigurationLoader:
    """
    Builds the raw configuration dictionary.

    Precedence, lowest to highest:
    1. DEFAULT_CONFIG
    2. Configuration file (JSON or YAML)
    3. Environment variable overrides (ENV_OVERRIDES)

    ``${VAR:default}`` references are interpolated last.
    """

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration from all sources."""
        config = cls._deep_copy(DEFAULT_CONFIG)

        path = cls._resolve_config_path(config_path)
        if path is not None:
            cls._merge_config(config, cls.load_from_file(path))

        config = cls.apply_environment_overrides(config)
        return cls.interpolate(config)

    @classmethod
    def _resolve_config_path(cls, config_path: Optional[str]) -> Optional[str]:
        if config_path:
            if not os.path.exists(config_path):
                raise ConfigurationError(f"Configuration file not found: {config_path}")
            return config_path

        env_path = os.environ.get(CONFIG_FILE_ENV_VAR)
        if env_path:
            if not os.path.exists(env_path):
                raise ConfigurationError(
                    f"Configuration file from {CONFIG_FILE_ENV_VAR} not found: {env_path}"
                )
            return env_path

        for candidate in DEFAULT_CONFIG_FILES:
            if os.path.exists(candidate):
                return candidate
        return None

    @staticmethod
    def load_from_file(config_path: str) -> Dict[str, Any]:
        """
        Load a configuration file.

        Args:
            config_path: Path to a .json, .yml or .yaml file

        Returns:
            Parsed configuration dictionary

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        path = Path(config_path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration from {config_path}: {e}")

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_path} must contain a mapping, got {type(data).__name__}"
            )

        logger.debug("Configuration file loaded", path=str(path), keys=sorted(data))
        return data

    @classmethod
    def apply_environment_overrides(cls, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply SINGLETON_IDIOMS_* environment variables on top of config."""
        result = cls._deep_copy(config)
        for env_var, key in ENV_OVERRIDES.items():
            if env_var in os.environ:
                cls._set_nested_value(result, tuple(key.split(".")), os.environ[env_var])
                logger.debug("Environment override applied", env_var=env_var, key=key)
        return result

    @classmethod
    def interpolate(cls, value: Any) -> Any:
        """Expand ``${VAR}`` and ``${VAR:default}`` references recursively."""
        if isinstance(value, str):
            return _ENV_PATTERN.sub(cls._expand_match, value)
        elif isinstance(value, dict):
            return {k: cls.interpolate(v) for k, v in value.items()}
        elif isinstance(value, list):
            return [cls.interpolate(v) for v in value]
        return value

    @staticmethod
    def _expand_match(match: "re.Match[str]") -> str:
        name, default = match.group(1), match.group(2)
        if name in os.environ:
            return os.environ[name]
        if default is not None:
            return default
        # Leave unresolved references untouched
        return match.group(0)

    @classmethod
    def create_app_config(cls, raw_config: Dict[str, Any]) -> AppConfig:
        """Validate raw configuration into a typed AppConfig."""
        try:
            return AppConfig.model_validate(raw_config)
        except PydanticValidationError as e:
            fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields)

    @staticmethod
    def _merge_config(target: Dict[str, Any], source: Dict[str, Any]) -> None:
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                ConfigurationLoader._merge_config(target[key], value)
            else:
                target[key] = value

    @staticmethod
    def _set_nested_value(config: Dict[str, Any], path: tuple, value: Any) -> None:
        current = config
        for key in path[:-1]:
            current = current.setdefault(key, {})
        current[path[-1]] = value

    @staticmethod
    def _deep_copy(config: Dict[str, Any]) -> Dict[str, Any]:
        return copy.deepcopy(config)

"""Configuration package with clean public API."""

# Main configuration classes
from .schemas import AppConfig, LogFileConfig, LoggingConfig, RaceConfig

# Defaults
from .defaults import DEFAULT_CONFIG, LogDestination, LogLevel

# Configuration management
from .loader import ConfigurationLoader
from .manager import ConfigurationManager, get_config_manager

__all__ = [
    # Main configuration
    "AppConfig",
    "LoggingConfig",
    "LogFileConfig",
    "RaceConfig",

    # Defaults
    "DEFAULT_CONFIG",
    "LogLevel",
    "LogDestination",

    # Configuration management
    "ConfigurationLoader",
    "ConfigurationManager",
    "get_config_manager",
]

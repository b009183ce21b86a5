"""Configuration schemas package."""

from .app_schema import AppConfig
from .logging_schema import LogFileConfig, LoggingConfig
from .race_schema import RaceConfig

__all__ = [
    "AppConfig",
    "LogFileConfig",
    "LoggingConfig",
    "RaceConfig",
]

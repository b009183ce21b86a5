# src/singleton_idioms/config/defaults.py
from enum import Enum
from typing import Any, Dict


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


CONFIG_FILE_ENV_VAR = "SINGLETON_IDIOMS_CONFIG"
DEFAULT_CONFIG_FILES = ("singleton_idioms.yml", "singleton_idioms.yaml", "singleton_idioms.json")

# Environment variable -> dotted configuration key
ENV_OVERRIDES: Dict[str, str] = {
    "SINGLETON_IDIOMS_LOG_LEVEL": "logging.level",
    "SINGLETON_IDIOMS_LOG_DESTINATION": "logging.destination",
    "SINGLETON_IDIOMS_LOG_FILE": "logging.file.path",
    "SINGLETON_IDIOMS_RACE_WORKERS": "race.workers",
    "SINGLETON_IDIOMS_CONSTRUCTION_DELAY": "race.construction_delay",
    "SINGLETON_IDIOMS_ENVIRONMENT": "environment",
}

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "environment": "development",
    "debug": False,

    # Logging configuration
    "logging": {
        "level": "${LOG_LEVEL:INFO}",
        "destination": "${LOG_DESTINATION:stdout}",
        "format": "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s",
        "file": {
            "path": "${SINGLETON_IDIOMS_LOGDIR:logs}/singleton_idioms.log",
            "max_size_mb": 10,
            "backup_count": 5,
        },
    },

    # Race harness configuration
    "race": {
        "workers": 10,
        "construction_delay": 0.05,
        "start_timeout": 5.0,
        "join_timeout": 10.0,
        "benchmark_calls": 1000,
    },
}

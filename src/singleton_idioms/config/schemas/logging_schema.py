"""Logging configuration schema."""
from pydantic import BaseModel, Field, field_validator

from ..defaults import LogDestination, LogLevel


class LogFileConfig(BaseModel):
    """Log file configuration."""

    path: str = Field("logs/singleton_idioms.log", description="Log file path")
    max_size_mb: int = Field(10, description="Maximum log file size before rotation")
    backup_count: int = Field(5, description="Number of rotated files to keep")

    @field_validator("max_size_mb")
    @classmethod
    def validate_max_size(cls, v: int) -> int:
        """Validate max file size."""
        if v < 1:
            raise ValueError("Maximum log file size must be at least 1 MB")
        return v

    @field_validator("backup_count")
    @classmethod
    def validate_backup_count(cls, v: int) -> int:
        """Validate backup count."""
        if v < 0:
            raise ValueError("Backup count must be non-negative")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(LogLevel.INFO.value, description="Root log level")
    destination: str = Field(LogDestination.STDOUT.value, description="file, stdout or both")
    format: str = Field(
        "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s",
        description="Record format for stdlib handlers",
    )
    file: LogFileConfig = Field(default_factory=LogFileConfig)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        level = v.upper()
        if level not in LogLevel.__members__:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        """Validate log destination."""
        destination = v.lower()
        try:
            LogDestination(destination)
        except ValueError:
            raise ValueError(
                f"Invalid log destination: {v}. Must be one of: "
                f"{', '.join(d.value for d in LogDestination)}"
            )
        return destination

    @property
    def to_file(self) -> bool:
        return self.destination in (LogDestination.FILE.value, LogDestination.BOTH.value)

    @property
    def to_stdout(self) -> bool:
        return self.destination in (LogDestination.STDOUT.value, LogDestination.BOTH.value)

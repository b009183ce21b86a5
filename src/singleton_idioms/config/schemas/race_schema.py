"""Race harness configuration schema."""
from pydantic import BaseModel, Field, field_validator


class RaceConfig(BaseModel):
    """Settings for racing accessors from many threads."""

    workers: int = Field(10, description="Number of threads racing the accessor")
    construction_delay: float = Field(
        0.05, description="Seconds each constructor sleeps to widen the race window"
    )
    start_timeout: float = Field(5.0, description="Seconds a worker waits at the start barrier")
    join_timeout: float = Field(10.0, description="Seconds to wait for each worker to finish")
    benchmark_calls: int = Field(1000, description="Accessor calls per benchmark")

    @field_validator("workers", "benchmark_calls")
    @classmethod
    def validate_positive_count(cls, v: int) -> int:
        """Validate counts."""
        if v < 1:
            raise ValueError("Count must be at least 1")
        return v

    @field_validator("construction_delay")
    @classmethod
    def validate_delay(cls, v: float) -> float:
        """Validate construction delay."""
        if v < 0:
            raise ValueError("Construction delay must be non-negative")
        return v

    @field_validator("start_timeout", "join_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate timeouts."""
        if v <= 0:
            raise ValueError("Timeout must be positive")
        return v

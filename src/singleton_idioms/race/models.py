"""Result models for accessor races and benchmarks."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class BaseResult(BaseModel):
    """Immutable result model with a stable dict API."""
    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BaseResult":
        return cls.model_validate(data)


class RaceReport(BaseResult):
    """
    Outcome of racing one accessor from many threads.

    ``identities`` maps each worker thread name to ``id()`` of the object it
    received; ``errors`` maps worker thread names to the error they hit.
    ``constructions`` is None when the accessor exposes no construction count.
    """

    variant: str
    workers: int
    constructions: Optional[int] = None
    distinct_instances: int
    identities: Dict[str, int] = Field(default_factory=dict)
    errors: Dict[str, str] = Field(default_factory=dict)
    elapsed_seconds: float

    @property
    def consistent(self) -> bool:
        """True when every worker saw the same object built exactly once."""
        return (
            not self.errors
            and self.distinct_instances == 1
            and self.constructions in (None, 1)
        )


class AccessBenchmark(BaseResult):
    """Timing of repeated accessor calls on an existing instance."""

    variant: str
    calls: int
    total_seconds: float

    @property
    def per_call_ns(self) -> float:
        return self.total_seconds * 1e9 / self.calls

"""Shared machinery for the class-based singleton variants."""

import threading
import time
from datetime import datetime, timezone
from typing import ClassVar

from singleton_idioms.domain.exceptions import DirectInstantiationError, ValidationError
from singleton_idioms.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

# Only accessors inside this package hold the token, which keeps construction private
_CREATION_TOKEN = object()


class ThreadSafeCounter:
    """Integer counter whose updates are serialized by its own lock."""

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    def reset(self) -> None:
        with self._lock:
            self._value = 0

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


def validate_delay(seconds: float) -> float:
    """Validate a construction delay in seconds."""
    if seconds < 0:
        raise ValidationError("Construction delay must be non-negative", details={"seconds": seconds})
    return float(seconds)


class SingletonBase:
    """
    Base class for singleton variants built around a class-level reference.

    Subclasses implement ``get_instance`` and ``reset_instance``. Every
    subclass gets its own construction counter, so ``construction_count``
    reports how often *that* constructor ran since the last reset.

    ``construction_delay`` makes the constructor sleep after it has been
    counted, which simulates slow initialization and widens the window in
    which racing callers can observe a missing instance.
    """

    variant_name: ClassVar[str] = "base"
    construction_delay: ClassVar[float] = 0.0
    _constructions: ClassVar[ThreadSafeCounter] = ThreadSafeCounter()

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls._constructions = ThreadSafeCounter()

    def __init__(self, _token: object = None) -> None:
        if _token is not _CREATION_TOKEN:
            raise DirectInstantiationError(type(self).__name__)

        self._constructions.increment()
        self.created_by = threading.current_thread().name
        self.created_at = datetime.now(timezone.utc)
        logger.debug(
            "Singleton instance being created",
            variant=self.variant_name,
            thread=self.created_by,
        )
        if self.construction_delay:
            time.sleep(self.construction_delay)

    @classmethod
    def _create(cls):
        return cls(_CREATION_TOKEN)

    @classmethod
    def get_instance(cls):
        raise NotImplementedError

    @classmethod
    def reset_instance(cls) -> None:
        raise NotImplementedError

    @classmethod
    def construction_count(cls) -> int:
        return cls._constructions.value

    @classmethod
    def set_construction_delay(cls, seconds: float) -> float:
        """Set the simulated construction time and return the previous value."""
        previous = cls.construction_delay
        cls.construction_delay = validate_delay(seconds)
        return previous

    def do_something(self) -> str:
        """Business method shared by all variants."""
        thread = threading.current_thread().name
        logger.info("Singleton is working", variant=self.variant_name, thread=thread)
        return f"{type(self).__name__} working in {thread}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={id(self):#x}, created_by='{self.created_by}')"

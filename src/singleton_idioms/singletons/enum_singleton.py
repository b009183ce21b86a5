"""
Enum-based singleton.

An ``Enum`` with a single member is a singleton the runtime enforces: the
member is built once when the class body is executed, lookups by value return
the existing member, and copying or pickling yields the same object.
"""

import threading
from enum import Enum

from singleton_idioms.infrastructure.logging.logger import get_logger
from singleton_idioms.singletons.base import ThreadSafeCounter, validate_delay

logger = get_logger(__name__)

_constructions = ThreadSafeCounter()


class EnumSingleton(Enum):
    """Single-member enumeration holding shared state."""

    INSTANCE = "instance"

    def __init__(self, _value: str) -> None:
        _constructions.increment()
        self._counter = 0
        self._counter_lock = threading.Lock()
        self.created_by = threading.current_thread().name
        logger.debug("EnumSingleton constructor called", thread=self.created_by)

    @classmethod
    def get_instance(cls) -> "EnumSingleton":
        return cls.INSTANCE

    @classmethod
    def reset_instance(cls) -> None:
        """Zero the shared counter; the member itself is never rebuilt."""
        with cls.INSTANCE._counter_lock:
            cls.INSTANCE._counter = 0

    @classmethod
    def construction_count(cls) -> int:
        return _constructions.value

    @classmethod
    def set_construction_delay(cls, seconds: float) -> float:
        """Validate seconds. The member was built at import, so no delay ever applies and 0.0 is returned."""
        validate_delay(seconds)
        return 0.0

    def increment(self) -> int:
        with self._counter_lock:
            self._counter += 1
            value = self._counter
        logger.debug("Counter incremented", counter=value)
        return value

    @property
    def counter(self) -> int:
        with self._counter_lock:
            return self._counter

    def do_something(self) -> str:
        thread = threading.current_thread().name
        logger.info("Singleton is working", variant="enum", thread=thread)
        return f"EnumSingleton working in {thread}"

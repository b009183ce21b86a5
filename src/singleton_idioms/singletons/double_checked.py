"""Lazy singleton using double-checked locking."""

import threading
from typing import Dict, Optional

from singleton_idioms.infrastructure.logging.logger import get_logger
from singleton_idioms.singletons.base import SingletonBase, ThreadSafeCounter

logger = get_logger(__name__)


class DoubleCheckedLockingSingleton(SingletonBase):
    """
    Thread-safe lazy singleton that only locks while no instance exists.

    1. First check, without the lock: return the published instance if any.
    2. Take the lock.
    3. Second check, under the lock: another thread may have published
       while we waited.
    4. Construct into a local name and publish only the finished object, so
       a reader on the fast path never sees a partially initialized instance.
    """

    variant_name = "double_checked"
    _instance: Optional["DoubleCheckedLockingSingleton"] = None
    _lock = threading.Lock()
    _creation_attempts = ThreadSafeCounter()
    _lock_entries = ThreadSafeCounter()

    @classmethod
    def get_instance(cls) -> "DoubleCheckedLockingSingleton":
        instance = cls._instance
        if instance is not None:
            return instance

        cls._creation_attempts.increment()
        with cls._lock:
            cls._lock_entries.increment()
            if cls._instance is None:
                logger.debug(
                    "Second check passed, creating instance",
                    variant=cls.variant_name,
                    thread=threading.current_thread().name,
                )
                instance = cls._create()
                cls._instance = instance
            return cls._instance

    @classmethod
    def statistics(cls) -> Dict[str, int]:
        """Slow-path counters since the last reset."""
        return {
            "creation_attempts": cls._creation_attempts.value,
            "lock_entries": cls._lock_entries.value,
        }

    @classmethod
    def reset_instance(cls) -> None:
        with cls._lock:
            cls._instance = None
            cls._creation_attempts.reset()
            cls._lock_entries.reset()
            cls._constructions.reset()

"""Lazy singleton whose accessor holds a lock on every call."""

import threading
from typing import Optional

from singleton_idioms.infrastructure.logging.logger import get_logger
from singleton_idioms.singletons.base import SingletonBase

logger = get_logger(__name__)


class SynchronizedSingleton(SingletonBase):
    """
    Thread-safe lazy singleton.

    The whole check-and-create sequence runs under one class-level lock, so
    only one thread can construct. Every later call still pays for the lock
    even though the instance no longer changes.
    """

    variant_name = "synchronized"
    _instance: Optional["SynchronizedSingleton"] = None
    _lock = threading.Lock()
    _call_count = 0

    @classmethod
    def get_instance(cls) -> "SynchronizedSingleton":
        with cls._lock:
            cls._call_count += 1
            if cls._instance is None:
                logger.debug(
                    "Creating new instance",
                    variant=cls.variant_name,
                    thread=threading.current_thread().name,
                )
                cls._instance = cls._create()
            return cls._instance

    @classmethod
    def call_count(cls) -> int:
        """Number of accessor calls since the last reset."""
        with cls._lock:
            return cls._call_count

    @classmethod
    def reset_instance(cls) -> None:
        with cls._lock:
            cls._instance = None
            cls._call_count = 0
            cls._constructions.reset()

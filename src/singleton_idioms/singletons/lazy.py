"""
Lazy singleton without synchronization.

The instance is built on the first ``get_instance`` call. Nothing guards the
check-then-create sequence, so threads that race while construction is in
progress all see ``None`` and each build their own instance::

    Thread A: _instance is None -> True
    Thread B: _instance is None -> True   (A is still constructing)
    Thread A: _instance = LazySingleton()
    Thread B: _instance = LazySingleton()  (second instance)

Only safe in single-threaded code.
"""

from typing import Optional

from singleton_idioms.infrastructure.logging.logger import get_logger
from singleton_idioms.singletons.base import SingletonBase

logger = get_logger(__name__)


class LazySingleton(SingletonBase):
    """Lazily created singleton that is NOT thread-safe."""

    variant_name = "lazy"
    _instance: Optional["LazySingleton"] = None

    @classmethod
    def get_instance(cls) -> "LazySingleton":
        instance = cls._instance
        if instance is None:
            logger.debug("Creating new instance", variant=cls.variant_name)
            instance = cls._create()
            cls._instance = instance
        return instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None
        cls._constructions.reset()

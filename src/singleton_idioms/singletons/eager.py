"""
Eager singleton.

The instance is built while this module is imported. Module import runs once
under the import lock, so the instance exists before any caller can reach the
accessor and no further synchronization is needed. The cost is that the
instance is built even if nobody uses it.
"""

from singleton_idioms.infrastructure.logging.logger import get_logger
from singleton_idioms.singletons.base import SingletonBase

logger = get_logger(__name__)


class EagerSingleton(SingletonBase):
    """Singleton created at module import time."""

    variant_name = "eager"

    @classmethod
    def get_instance(cls) -> "EagerSingleton":
        return _INSTANCE

    @classmethod
    def reset_instance(cls) -> None:
        logger.debug("Eager instance is fixed for the process lifetime", variant=cls.variant_name)


_INSTANCE = EagerSingleton._create()

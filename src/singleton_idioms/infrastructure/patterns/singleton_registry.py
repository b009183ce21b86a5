"""Registry holding one instance per class, created under a lock."""

import threading
from typing import Any, Dict, List, Optional, Type, TypeVar

from singleton_idioms.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Process-wide registry of singleton instances keyed by class.

    The registry itself is a double-checked-locking singleton. Instance
    creation for every registered class happens under a single re-entrant
    lock, so a constructor may itself call ``get`` for another class.

    Thread-safe singleton implementation.
    """

    _instance: Optional["SingletonRegistry"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "SingletonRegistry":
        """Ensure singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize singleton registry."""
        if hasattr(self, "_initialized"):
            return

        self._instances: Dict[type, Any] = {}
        self._registry_lock = threading.RLock()
        self.logger = get_logger(__name__)
        self._initialized = True

        self.logger.debug("Singleton registry initialized")

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Return the registry."""
        return cls()

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of singleton_class, creating it on first use.

        Args:
            singleton_class: The class to get an instance of
            *args: Constructor arguments, used only on first creation
            **kwargs: Constructor keyword arguments, used only on first creation

        Returns:
            The singleton instance
        """
        instance = self._instances.get(singleton_class)
        if instance is not None:
            return instance

        with self._registry_lock:
            instance = self._instances.get(singleton_class)
            if instance is None:
                instance = singleton_class(*args, **kwargs)
                self._instances[singleton_class] = instance
                self.logger.debug("Singleton created", singleton_class=singleton_class.__name__)
            return instance

    def has(self, singleton_class: type) -> bool:
        """Check whether an instance of singleton_class exists."""
        return singleton_class in self._instances

    def reset(self, singleton_class: type) -> None:
        """Forget the instance of singleton_class."""
        with self._registry_lock:
            self._instances.pop(singleton_class, None)

    def clear(self) -> None:
        """Forget all instances."""
        with self._registry_lock:
            self._instances.clear()

    def registered_classes(self) -> List[str]:
        """Names of the classes currently holding an instance."""
        with self._registry_lock:
            return [cls.__name__ for cls in self._instances]

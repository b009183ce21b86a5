"""Variant Catalog - registry of the singleton variants under comparison.

The catalog maps a short variant name (``lazy``, ``double_checked`` ...) to
its class and metadata, so the race harness can look variants up by name
without importing each module itself.
"""

import threading
from typing import Any, Dict, List, Optional

from singleton_idioms.domain.exceptions import ConfigurationError, UnknownVariantError
from singleton_idioms.infrastructure.logging.logger import get_logger
from singleton_idioms.infrastructure.patterns import get_singleton


class VariantRegistration:
    """Container for variant registration information."""

    def __init__(self,
                 name: str,
                 variant: Any,
                 thread_safe: bool,
                 lazy: bool,
                 resettable: bool = True,
                 summary: str = ""):
        """
        Initialize variant registration.

        Args:
            name: Identifier for the variant (e.g. 'lazy', 'holder')
            variant: Class exposing get_instance/reset_instance/construction_count
            thread_safe: Whether concurrent first access yields one instance
            lazy: Whether the instance is built on first access
            resettable: Whether reset_instance discards the instance
            summary: One-line description
        """
        self.name = name
        self.variant = variant
        self.thread_safe = thread_safe
        self.lazy = lazy
        self.resettable = resettable
        self.summary = summary

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "variant": self.variant.__name__,
            "thread_safe": self.thread_safe,
            "lazy": self.lazy,
            "resettable": self.resettable,
            "summary": self.summary,
        }

    def __repr__(self) -> str:
        return f"VariantRegistration(name='{self.name}', variant={self.variant.__name__})"


class VariantCatalog:
    """
    Registry of singleton variants.

    Obtained through ``get_singleton``; registrations keep insertion order.
    """

    def __init__(self):
        """Initialize variant catalog."""
        self._registrations: Dict[str, VariantRegistration] = {}
        self._catalog_lock = threading.RLock()
        self.logger = get_logger(__name__)

        self.logger.debug("Variant catalog initialized")

    def register_variant(self,
                         name: str,
                         variant: Any,
                         thread_safe: bool,
                         lazy: bool,
                         resettable: bool = True,
                         summary: str = "") -> VariantRegistration:
        """
        Register a singleton variant.

        Raises:
            ConfigurationError: If the name is already registered
        """
        with self._catalog_lock:
            if name in self._registrations:
                raise ConfigurationError(f"Singleton variant '{name}' is already registered")

            registration = VariantRegistration(
                name=name,
                variant=variant,
                thread_safe=thread_safe,
                lazy=lazy,
                resettable=resettable,
                summary=summary,
            )
            self._registrations[name] = registration

        self.logger.debug("Registered singleton variant", variant=name)
        return registration

    def get_registration(self, name: str) -> VariantRegistration:
        """
        Get the registration for name.

        Raises:
            UnknownVariantError: If name is not registered
        """
        with self._catalog_lock:
            registration = self._registrations.get(name)
            if registration is None:
                raise UnknownVariantError(name, list(self._registrations))
            return registration

    def get_variant(self, name: str) -> Any:
        """Get the variant class registered under name."""
        return self.get_registration(name).variant

    def get_registered_variants(self) -> List[str]:
        """Registered names in registration order."""
        with self._catalog_lock:
            return list(self._registrations)

    def is_registered(self, name: str) -> bool:
        with self._catalog_lock:
            return name in self._registrations

    def unregister_variant(self, name: str) -> bool:
        """Remove a registration. Returns False if name was not registered."""
        with self._catalog_lock:
            if name not in self._registrations:
                return False
            del self._registrations[name]

        self.logger.debug("Unregistered singleton variant", variant=name)
        return True

    def clear_registrations(self) -> None:
        with self._catalog_lock:
            self._registrations.clear()


def register_default_variants(catalog: Optional[VariantCatalog] = None) -> VariantCatalog:
    """Register the built-in variants that are not registered yet."""
    from singleton_idioms.singletons.double_checked import DoubleCheckedLockingSingleton
    from singleton_idioms.singletons.eager import EagerSingleton
    from singleton_idioms.singletons.enum_singleton import EnumSingleton
    from singleton_idioms.singletons.holder import HolderSingleton
    from singleton_idioms.singletons.lazy import LazySingleton
    from singleton_idioms.singletons.registry_managed import RegistryManagedSingleton
    from singleton_idioms.singletons.synchronized import SynchronizedSingleton

    catalog = catalog or get_singleton(VariantCatalog)
    defaults = [
        ("lazy", LazySingleton, False, True, True,
         "Check-then-create with no synchronization"),
        ("synchronized", SynchronizedSingleton, True, True, True,
         "Lock held on every accessor call"),
        ("double_checked", DoubleCheckedLockingSingleton, True, True, True,
         "Unlocked check, lock, second check"),
        ("eager", EagerSingleton, True, False, False,
         "Built while the module is imported"),
        ("enum", EnumSingleton, True, False, False,
         "Single-member enumeration"),
        ("holder", HolderSingleton, True, True, True,
         "Holder module initialized on first access"),
        ("registry", RegistryManagedSingleton, True, True, True,
         "Created through the generic SingletonRegistry"),
    ]

    with catalog._catalog_lock:
        for name, variant, thread_safe, lazy, resettable, summary in defaults:
            if not catalog.is_registered(name):
                catalog.register_variant(
                    name,
                    variant,
                    thread_safe=thread_safe,
                    lazy=lazy,
                    resettable=resettable,
                    summary=summary,
                )
    return catalog


def get_variant_catalog() -> VariantCatalog:
    """Return the catalog with the built-in variants registered."""
    return register_default_variants(get_singleton(VariantCatalog))

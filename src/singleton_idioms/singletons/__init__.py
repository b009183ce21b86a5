"""Singleton variants compared for thread safety.

``_holder`` is deliberately not imported here: importing it is what builds
the HolderSingleton instance.
"""

from .base import SingletonBase, ThreadSafeCounter
from .catalog import VariantCatalog, VariantRegistration, get_variant_catalog, register_default_variants
from .double_checked import DoubleCheckedLockingSingleton
from .eager import EagerSingleton
from .enum_singleton import EnumSingleton
from .holder import HolderSingleton
from .lazy import LazySingleton
from .registry_managed import RegistryManagedSingleton
from .synchronized import SynchronizedSingleton

__all__ = [
    "SingletonBase",
    "ThreadSafeCounter",
    "VariantCatalog",
    "VariantRegistration",
    "get_variant_catalog",
    "register_default_variants",
    "LazySingleton",
    "SynchronizedSingleton",
    "DoubleCheckedLockingSingleton",
    "EagerSingleton",
    "EnumSingleton",
    "HolderSingleton",
    "RegistryManagedSingleton",
]

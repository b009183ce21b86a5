"""Singleton whose lifetime is owned by the generic SingletonRegistry."""

from singleton_idioms.infrastructure.patterns import get_singleton, reset_singleton
from singleton_idioms.singletons.base import _CREATION_TOKEN, SingletonBase


class RegistryManagedSingleton(SingletonBase):
    """
    Lazy singleton obtained through ``get_singleton``.

    The registry performs the check-and-create under its own lock, so the
    class carries no instance reference or lock of its own.
    """

    variant_name = "registry"

    @classmethod
    def get_instance(cls) -> "RegistryManagedSingleton":
        return get_singleton(cls, _CREATION_TOKEN)

    @classmethod
    def reset_instance(cls) -> None:
        reset_singleton(cls)
        cls._constructions.reset()

"""
Initialization-on-demand holder singleton.

The instance lives in the private module ``singletons._holder``, whose body
constructs it. Importing this module does not import the holder, so nothing
is built until the first ``get_instance`` call. Python executes a module body
once under a per-module import lock: concurrent first callers block on that
lock and then all read the same, fully built ``INSTANCE``. The variant itself
needs no lock or flag.
"""

import importlib
import sys

from singleton_idioms.domain.exceptions import InstanceAlreadyCreatedError
from singleton_idioms.infrastructure.logging.logger import get_logger
from singleton_idioms.singletons.base import SingletonBase

logger = get_logger(__name__)

HOLDER_MODULE = "singleton_idioms.singletons._holder"
_PACKAGE = "singleton_idioms.singletons"


class HolderSingleton(SingletonBase):
    """Lazily created singleton backed by a holder module."""

    variant_name = "holder"

    def __init__(self, _token: object = None) -> None:
        if _holder_has_instance():
            raise InstanceAlreadyCreatedError(type(self).__name__)
        super().__init__(_token)

    @classmethod
    def get_instance(cls) -> "HolderSingleton":
        return importlib.import_module(HOLDER_MODULE).INSTANCE

    @classmethod
    def is_initialized(cls) -> bool:
        """True once the holder module has finished building the instance."""
        return _holder_has_instance()

    @classmethod
    def reset_instance(cls) -> None:
        sys.modules.pop(HOLDER_MODULE, None)
        package = sys.modules.get(_PACKAGE)
        if package is not None and hasattr(package, "_holder"):
            delattr(package, "_holder")
        cls._constructions.reset()
        logger.debug("Holder module unloaded", variant=cls.variant_name)


def _holder_has_instance() -> bool:
    holder = sys.modules.get(HOLDER_MODULE)
    return holder is not None and getattr(holder, "INSTANCE", None) is not None

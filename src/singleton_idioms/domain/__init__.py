"""Domain layer - exceptions shared across the package."""

from .exceptions import (
    ConfigurationError,
    DirectInstantiationError,
    DomainException,
    InstanceAlreadyCreatedError,
    SingletonError,
    UnknownVariantError,
    ValidationError,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "ConfigurationError",
    "SingletonError",
    "DirectInstantiationError",
    "InstanceAlreadyCreatedError",
    "UnknownVariantError",
]

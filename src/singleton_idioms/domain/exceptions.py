# src/singleton_idioms/domain/exceptions.py
from typing import Any, Optional, List


class DomainException(Exception):
    """Base exception for all singleton-idioms errors."""
    pass


class ValidationError(DomainException):
    """Raised when an argument or value fails validation."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class SingletonError(DomainException):
    """Base exception for singleton access violations."""
    def __init__(self, message: str, class_name: str):
        super().__init__(message)
        self.class_name = class_name


class DirectInstantiationError(SingletonError):
    """Raised when a singleton class is constructed outside its accessor."""
    def __init__(self, class_name: str):
        super().__init__(
            f"{class_name} cannot be instantiated directly; use {class_name}.get_instance()",
            class_name,
        )


class InstanceAlreadyCreatedError(SingletonError):
    """Raised when a second construction of a singleton is attempted."""
    def __init__(self, class_name: str):
        super().__init__(f"{class_name} instance already created", class_name)


class UnknownVariantError(DomainException):
    """Raised when a singleton variant name is not registered."""
    def __init__(self, name: str, available: Optional[List[str]] = None):
        available = available or []
        super().__init__(
            f"Singleton variant '{name}' is not registered. "
            f"Available: {', '.join(available) or 'none'}"
        )
        self.name = name
        self.available = available

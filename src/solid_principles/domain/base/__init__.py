"""Base domain building blocks shared by every example domain."""

from .capability import Capability, Variant
from .exceptions import (
    ConfigurationError,
    DomainException,
    NotSupportedError,
    SimulatedFailureError,
    ValidationError,
)
from .principles import SolidPrinciple

__all__ = [
    "Capability",
    "Variant",
    "DomainException",
    "NotSupportedError",
    "SimulatedFailureError",
    "ValidationError",
    "ConfigurationError",
    "SolidPrinciple",
]

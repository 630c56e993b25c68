"""Domain exceptions shared by all example domains."""
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class NotSupportedError(DomainException):
    """Raised when an operation is invoked on a variant lacking the capability."""

    def __init__(self, operation: str, variant: str):
        super().__init__(f"{variant} cannot {operation}")
        self.operation = operation
        self.variant = variant


class SimulatedFailureError(DomainException):
    """Raised by a variant whose own operation body fails on purpose."""

    def __init__(self, reason: str = "Simulated error"):
        super().__init__(reason)
        self.reason = reason


class ValidationError(DomainException):
    """Raised when domain validation fails."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""

    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []

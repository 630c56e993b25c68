"""Error handling infrastructure package."""

from solid_principles.infrastructure.error.error_middleware import (
    ErrorMiddleware,
    with_error_logging,
)

__all__ = [
    "ErrorMiddleware",
    "with_error_logging",
]

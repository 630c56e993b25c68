"""Infrastructure registry patterns."""

from .example_registry import (
    ExampleRegistration,
    ExampleRegistry,
    UnsupportedExampleError,
)

__all__ = [
    'ExampleRegistration',
    'ExampleRegistry',
    'UnsupportedExampleError',
]

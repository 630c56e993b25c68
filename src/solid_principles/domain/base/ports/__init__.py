"""Domain ports for infrastructure concerns."""

from .logging_port import LoggingPort

__all__ = [
    "LoggingPort",
]

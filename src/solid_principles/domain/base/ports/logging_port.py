"""Domain port for logging."""

from abc import ABC, abstractmethod
from typing import Any


class LoggingPort(ABC):
    """Port for emitting human-readable log lines.

    One call produces one line. Implementations must not raise and must
    preserve call order.
    """

    @abstractmethod
    def debug(self, message: str, **context: Any) -> None:
        """Log a debug message."""

    @abstractmethod
    def info(self, message: str, **context: Any) -> None:
        """Log an info message."""

    @abstractmethod
    def warning(self, message: str, **context: Any) -> None:
        """Log a warning message."""

    @abstractmethod
    def error(self, message: str, **context: Any) -> None:
        """Log an error message."""

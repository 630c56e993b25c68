"""Logging adapter implementing LoggingPort."""
from typing import Any, Optional

from solid_principles._package import PACKAGE_NAME_PYTHON
from solid_principles.domain.base.ports import LoggingPort
from solid_principles.infrastructure.logging.logger import get_logger


class LoggingAdapter(LoggingPort):
    """Adapter that implements LoggingPort on a structlog logger."""

    def __init__(self, name: str = PACKAGE_NAME_PYTHON, logger: Optional[Any] = None):
        """
        Initialize the logging adapter.

        Args:
            name: Logger name used when no logger is given
            logger: Optional pre-built structlog logger to wrap
        """
        self._logger = logger if logger is not None else get_logger(name)

    def bind(self, **context: Any) -> "LoggingAdapter":
        """Get an adapter whose lines carry additional context."""
        return LoggingAdapter(logger=self._logger.bind(**context))

    def debug(self, message: str, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(self, message: str, **context: Any) -> None:
        self._logger.error(message, **context)

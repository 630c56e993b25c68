"""Structured logging setup using structlog on top of stdlib logging.

Records below ERROR go to the info stream (stdout by default) and records at
ERROR and above go to the error stream (stderr by default). Every record is
written and flushed as one line; there is no buffering or rotation.
"""
import logging
import os
import sys
from typing import Any, Optional, TextIO

import structlog

from solid_principles.config.schemas import LogFormat, LoggingConfig


class _BelowLevelFilter(logging.Filter):
    """Pass only records strictly below a level."""

    def __init__(self, level: int):
        super().__init__()
        self._level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._level


def _render_plain(logger: Any, method_name: str, event_dict: Any) -> str:
    # Message only, so example output stays byte-for-byte deterministic
    return str(event_dict.get("event", ""))


def _build_renderer(log_format: LogFormat):
    if log_format == LogFormat.CONSOLE:
        return structlog.dev.ConsoleRenderer(colors=False)
    if log_format == LogFormat.JSON:
        return structlog.processors.JSONRenderer()
    return _render_plain


def setup_logging(
    config: Optional[LoggingConfig] = None,
    info_stream: Optional[TextIO] = None,
    error_stream: Optional[TextIO] = None,
) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging configuration. If None, defaults are used.
        info_stream: Stream for records below ERROR (default: sys.stdout)
        error_stream: Stream for ERROR and above (default: sys.stderr)

    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.value))

    shared_processors = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _build_renderer(config.format),
        ],
        foreign_pre_chain=shared_processors,
    )

    # Configure handlers
    handlers = []

    if config.writes_to_console:
        info_handler = logging.StreamHandler(info_stream or sys.stdout)
        info_handler.addFilter(_BelowLevelFilter(logging.ERROR))
        error_handler = logging.StreamHandler(error_stream or sys.stderr)
        error_handler.setLevel(logging.ERROR)
        handlers.extend([info_handler, error_handler])

    if config.writes_to_file:
        log_path = os.path.expandvars(config.file_path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger = get_logger(__name__)
    logger.debug(
        "Logging configured",
        log_level=config.level.value,
        log_format=config.format.value,
        log_destination=config.destination.value,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to the given name."""
    return structlog.stdlib.get_logger(name)

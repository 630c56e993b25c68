"""Configuration schemas."""
from .app_schema import AppConfig
from .examples_schema import ExamplesConfig
from .logging_schema import LogDestination, LogFormat, LoggingConfig, LogLevel

__all__ = [
    "AppConfig",
    "ExamplesConfig",
    "LoggingConfig",
    "LogLevel",
    "LogFormat",
    "LogDestination",
]

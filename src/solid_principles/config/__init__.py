"""Configuration package with clean public API."""

from .manager import ConfigurationManager, get_config_manager
from .schemas import (
    AppConfig,
    ExamplesConfig,
    LogDestination,
    LogFormat,
    LoggingConfig,
    LogLevel,
)

__all__ = [
    'AppConfig',
    'ExamplesConfig',
    'LoggingConfig',
    'LogLevel',
    'LogFormat',
    'LogDestination',
    'ConfigurationManager',
    'get_config_manager',
]

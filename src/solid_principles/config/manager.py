"""Unified configuration management for the application."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar

import yaml
from pydantic import ValidationError as PydanticValidationError

from solid_principles._package import ENV_PREFIX
from solid_principles.config.schemas import AppConfig, ExamplesConfig, LoggingConfig
from solid_principles.config.utils.env_expansion import expand_config_env_vars
from solid_principles.domain.base.exceptions import ConfigurationError

T = TypeVar('T')
logger = logging.getLogger(__name__)

# Environment variable suffix -> dotted configuration key
ENV_OVERRIDES: Dict[str, str] = {
    "LOG_LEVEL": "logging.level",
    "LOG_FORMAT": "logging.format",
    "LOG_DESTINATION": "logging.destination",
    "LOG_FILE": "logging.file_path",
}


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    This class handles:
    - Loading an optional JSON or YAML configuration file
    - Expanding environment variables in configuration values
    - Applying environment variable overrides (highest priority)
    - Validating into typed pydantic models, lazily and cached
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration manager with lazy loading.

        Args:
            config_file: Optional path to a .json, .yaml or .yml file
        """
        self._config_file = config_file
        self._raw_config: Optional[Dict[str, Any]] = None
        self._app_config: Optional[AppConfig] = None

    @property
    def raw_config(self) -> Dict[str, Any]:
        """Lazy load raw configuration data."""
        if self._raw_config is None:
            self._raw_config = self._load_raw_config()
        return self._raw_config

    @property
    def app_config(self) -> AppConfig:
        """Lazy load validated application configuration."""
        if self._app_config is None:
            self._app_config = self._validate(self.raw_config)
        return self._app_config

    def get_typed(self, config_type: Type[T]) -> T:
        """Get a typed configuration section."""
        sections: Dict[type, Any] = {
            AppConfig: self.app_config,
            LoggingConfig: self.app_config.logging,
            ExamplesConfig: self.app_config.examples,
        }
        if config_type not in sections:
            raise ConfigurationError(f"Unknown configuration type: {config_type.__name__}")
        return sections[config_type]

    def get(self, key: str, default: Any = None) -> Any:
        """Get a raw configuration value by dotted key."""
        current: Any = self.raw_config
        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def set(self, key: str, value: Any) -> None:
        """Override a configuration value by dotted key."""
        _set_dotted(self.raw_config, key, value)
        # Typed configuration is rebuilt on next access
        self._app_config = None

    def _load_raw_config(self) -> Dict[str, Any]:
        config_data: Dict[str, Any] = {}
        if self._config_file:
            config_data = self._load_config_file(self._config_file)

        config_data = expand_config_env_vars(config_data)
        self._apply_environment_overrides(config_data)
        return config_data

    def _load_config_file(self, config_path: str) -> Dict[str, Any]:
        """Load configuration from a JSON or YAML file."""
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                if path.suffix.lower() in ('.yaml', '.yml'):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file must contain a mapping: {config_path}"
            )
        logger.debug("Loaded configuration from %s", config_path)
        return data

    def _apply_environment_overrides(self, config_data: Dict[str, Any]) -> None:
        for suffix, key in ENV_OVERRIDES.items():
            value = os.environ.get(f"{ENV_PREFIX}{suffix}")
            if value:
                _set_dotted(config_data, key, value)

    @staticmethod
    def _validate(config_data: Dict[str, Any]) -> AppConfig:
        try:
            return AppConfig.model_validate(config_data)
        except PydanticValidationError as e:
            missing = _missing_fields(e)
            raise ConfigurationError(f"Invalid configuration: {e}", missing) from e


def _set_dotted(data: Dict[str, Any], key: str, value: Any) -> None:
    parts = key.split(".")
    current = data
    for part in parts[:-1]:
        current = current.setdefault(part, {})
    current[parts[-1]] = value


def _missing_fields(error: PydanticValidationError) -> List[str]:
    return [
        ".".join(str(loc) for loc in detail["loc"])
        for detail in error.errors()
        if detail["type"] == "missing"
    ]


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """Create a configuration manager for the given file."""
    return ConfigurationManager(config_file)

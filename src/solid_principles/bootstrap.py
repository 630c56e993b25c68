"""Application bootstrap - wires configuration, logging and examples."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from solid_principles.application.examples.registration import register_all_examples
from solid_principles.config.manager import ConfigurationManager, get_config_manager
from solid_principles.config.schemas import AppConfig
from solid_principles.domain.base.ports import LoggingPort
from solid_principles.infrastructure.adapters.logging_adapter import LoggingAdapter
from solid_principles.infrastructure.logging.logger import get_logger, setup_logging
from solid_principles.infrastructure.registry.example_registry import (
    ExampleRegistration,
    ExampleRegistry,
)


class Application:
    """Application context running registered examples against one logger."""

    def __init__(
        self,
        config_path: Optional[str] = None,
        config_manager: Optional[ConfigurationManager] = None,
        registry: Optional[ExampleRegistry] = None,
        logger: Optional[LoggingPort] = None,
    ) -> None:
        """
        Initialize the instance.

        Args:
            config_path: Optional configuration file path
            config_manager: Pre-built configuration manager (overrides config_path)
            registry: Example registry; a private one is created if omitted
            logger: Logger injected into examples; if omitted, logging is
                configured from the application configuration
        """
        self.config_manager = config_manager or get_config_manager(config_path)
        self.registry = registry or ExampleRegistry(logger=logger)
        self._example_logger = logger
        self._initialized = False
        # An injected logger is the only output sink
        self.logger = logger or get_logger(__name__)

    @property
    def config(self) -> AppConfig:
        return self.config_manager.app_config

    def initialize(self) -> bool:
        """Configure logging and register examples. Safe to call repeatedly."""
        if self._initialized:
            return True

        if self._example_logger is None:
            setup_logging(self.config.logging)
            self._example_logger = LoggingAdapter()

        register_all_examples(self.registry)
        self._initialized = True
        self.logger.debug(
            "Application initialized",
            examples=self.registry.get_registered_examples(),
        )
        return True

    def list_examples(self) -> List[Dict[str, Any]]:
        """Describe every registered example."""
        self.initialize()
        return [registration.to_dict() for registration in self.registry.get_registrations()]

    def selected_examples(self, names: Optional[Iterable[str]] = None) -> List[ExampleRegistration]:
        """
        Resolve the examples to run.

        Explicit names win over the configured selection; with neither, every
        registered example runs in registration order.

        Raises:
            UnsupportedExampleError: If a name is not registered
        """
        self.initialize()
        names = list(names or self.config.examples.enabled)
        if not names:
            return self.registry.get_registrations()
        return [self.registry.get_registration(name) for name in names]

    def run(self, names: Optional[Iterable[str]] = None) -> Dict[str, str]:
        """
        Run examples in order.

        Each example is independent: an unexpected failure in one is logged
        and the remaining examples still run.

        Returns:
            Mapping of example name to "ok" or "failed"
        """
        results: Dict[str, str] = {}
        for registration in self.selected_examples(names):
            try:
                registration.driver(self._example_logger)
                results[registration.name] = "ok"
            except Exception as e:
                self._example_logger.error(
                    f"Example {registration.name} failed: {e}",
                    error_type=type(e).__name__,
                )
                results[registration.name] = "failed"
        return results


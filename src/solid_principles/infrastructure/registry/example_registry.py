"""Example Registry - Registry pattern for runnable example drivers.

New examples are added by registering a driver under a name; nothing that
lists or runs examples has to change.
"""

from typing import Any, Callable, Dict, List, Optional

from solid_principles.domain.base.exceptions import DomainException
from solid_principles.domain.base.ports import LoggingPort
from solid_principles.domain.base.principles import SolidPrinciple
from solid_principles.infrastructure.logging.logger import get_logger

ExampleDriver = Callable[[LoggingPort], None]


class UnsupportedExampleError(DomainException):
    """Exception raised when an unknown example is requested."""

    def __init__(self, name: str, available: List[str]):
        super().__init__(f"Unknown example: {name!r}. Available: {available}")
        self.name = name
        self.available = available


class ExampleRegistration:
    """Container for example registration information."""

    def __init__(self,
                 name: str,
                 principle: SolidPrinciple,
                 description: str,
                 driver: ExampleDriver):
        """
        Initialize example registration.

        Args:
            name: Unique example name (e.g., 'birds')
            principle: SOLID principle the example illustrates
            description: One-line description of the example
            driver: Callable running the example against an injected logger
        """
        self.name = name
        self.principle = principle
        self.description = description
        self.driver = driver

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "principle": self.principle.value,
            "description": self.description,
        }


class ExampleRegistry:
    """
    Registry for example drivers.

    Registration order is preserved and is the default run order.
    """

    def __init__(self, logger: Optional[LoggingPort] = None):
        """
        Initialize example registry.

        Args:
            logger: Sink for registration diagnostics (default: module logger)
        """
        self._registrations: Dict[str, ExampleRegistration] = {}
        self._logger = logger or get_logger(__name__)

    def register_example(self,
                         name: str,
                         principle: SolidPrinciple,
                         description: str,
                         driver: ExampleDriver) -> None:
        """
        Register an example driver.

        Raises:
            ValueError: If the name is already registered
        """
        if name in self._registrations:
            raise ValueError(f"Example '{name}' is already registered")

        self._registrations[name] = ExampleRegistration(
            name=name,
            principle=principle,
            description=description,
            driver=driver,
        )
        self._logger.debug(f"Registered example: {name}")

    def get_registration(self, name: str) -> ExampleRegistration:
        """
        Get the registration for an example.

        Raises:
            UnsupportedExampleError: If the example is not registered
        """
        if name not in self._registrations:
            raise UnsupportedExampleError(name, self.get_registered_examples())
        return self._registrations[name]

    def is_example_registered(self, name: str) -> bool:
        return name in self._registrations

    def get_registered_examples(self) -> List[str]:
        return list(self._registrations)

    def get_registrations(self) -> List[ExampleRegistration]:
        return list(self._registrations.values())

    def clear_registrations(self) -> None:
        """Clear all registrations. Use in test fixtures for isolation."""
        self._registrations.clear()

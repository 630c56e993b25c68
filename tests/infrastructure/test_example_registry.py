"""Tests for the example registry."""

from unittest.mock import Mock

import pytest

from solid_principles.domain.base.principles import SolidPrinciple
from solid_principles.infrastructure.registry.example_registry import (
    ExampleRegistry,
    UnsupportedExampleError,
)


class TestExampleRegistry:
    """Test example registry functionality."""

    def setup_method(self):
        """Set up test fixtures."""
        self.registry = ExampleRegistry()
        self.driver = Mock()

    def test_register_and_get(self):
        self.registry.register_example(
            "birds", SolidPrinciple.LISKOV_SUBSTITUTION, "Birds", self.driver
        )

        registration = self.registry.get_registration("birds")

        assert self.registry.is_example_registered("birds")
        assert registration.driver is self.driver
        assert registration.to_dict() == {
            "name": "birds",
            "principle": "liskov-substitution",
            "description": "Birds",
        }

    def test_duplicate_registration_is_rejected(self):
        self.registry.register_example("quiz", SolidPrinciple.OPEN_CLOSED, "Quiz", self.driver)

        with pytest.raises(ValueError, match="already registered"):
            self.registry.register_example("quiz", SolidPrinciple.OPEN_CLOSED, "Quiz", self.driver)

    def test_unknown_example(self):
        self.registry.register_example("quiz", SolidPrinciple.OPEN_CLOSED, "Quiz", self.driver)

        with pytest.raises(UnsupportedExampleError, match="Unknown example: 'missing'") as exc_info:
            self.registry.get_registration("missing")

        assert exc_info.value.available == ["quiz"]

    def test_registration_order_is_preserved(self):
        for name in ("c", "a", "b"):
            self.registry.register_example(name, SolidPrinciple.OPEN_CLOSED, name, self.driver)

        assert self.registry.get_registered_examples() == ["c", "a", "b"]
        assert [r.name for r in self.registry.get_registrations()] == ["c", "a", "b"]

    def test_clear_registrations(self):
        self.registry.register_example("quiz", SolidPrinciple.OPEN_CLOSED, "Quiz", self.driver)

        self.registry.clear_registrations()

        assert self.registry.get_registered_examples() == []

    def test_registration_is_logged_to_injected_logger(self, capturing_logger):
        registry = ExampleRegistry(logger=capturing_logger)

        registry.register_example("quiz", SolidPrinciple.OPEN_CLOSED, "Quiz", self.driver)

        assert capturing_logger.records == [("debug", "Registered example: quiz")]

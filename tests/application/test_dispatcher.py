"""Tests for the variant dispatcher."""

from unittest.mock import Mock

import pytest

from solid_principles.application.dispatcher import VariantDispatcher
from solid_principles.domain.base.exceptions import NotSupportedError, SimulatedFailureError
from solid_principles.domain.bird.birds import Bird, Duck, Flying, Penguin, Sparrow, Swan, Swimming
from solid_principles.domain.entity.entities import Character, Vehicle


class TestVariantDispatcher:
    """Test cases for VariantDispatcher."""

    def test_invokes_supported_operation(self, capturing_logger, dispatcher):
        duck = Duck(capturing_logger)

        dispatcher.invoke(duck, "fly")
        dispatcher.invoke(duck, "swim")

        assert capturing_logger.lines == [("info", "I can fly"), ("info", "I can swim")]

    def test_returns_operation_result(self, capturing_logger, dispatcher):
        character = Character(capturing_logger)
        dispatcher.invoke(character, "take_damage", 20)

        assert dispatcher.invoke(character, "get_health") == 80
        assert dispatcher.invoke(character, "get_health") == 80

    def test_unsupported_operation_raises(self, capturing_logger, dispatcher):
        penguin = Penguin(capturing_logger)

        with pytest.raises(NotSupportedError) as exc_info:
            dispatcher.invoke(penguin, "fly")

        assert exc_info.value.operation == "fly"
        assert exc_info.value.variant == "Penguin"
        assert "cannot fly" in str(exc_info.value)
        assert capturing_logger.records == []

    @pytest.mark.parametrize("bird_class", [Penguin, Swan])
    def test_every_flightless_bird_raises(self, capturing_logger, dispatcher, bird_class):
        with pytest.raises(NotSupportedError, match="cannot fly"):
            dispatcher.invoke(bird_class(capturing_logger), "fly")

    def test_sparrow_cannot_swim(self, capturing_logger, dispatcher):
        with pytest.raises(NotSupportedError, match="Sparrow cannot swim"):
            dispatcher.invoke(Sparrow(capturing_logger), "swim")

    @pytest.mark.parametrize("operation, args", [("attack", ()), ("take_damage", (10,)), ("get_health", ())])
    def test_vehicle_lacks_segregated_capabilities(self, capturing_logger, dispatcher, operation, args):
        with pytest.raises(NotSupportedError, match=f"Vehicle cannot {operation}"):
            dispatcher.invoke(Vehicle(capturing_logger), operation, *args)

    def test_variant_failures_propagate(self, dispatcher):
        processor = Mock()
        processor.process_payment.side_effect = SimulatedFailureError("boom")

        with pytest.raises(SimulatedFailureError, match="boom"):
            dispatcher.invoke(processor, "process_payment", 10)

    def test_operation_outside_any_contract_is_structural(self, capturing_logger, dispatcher):
        dispatcher.invoke(Duck(capturing_logger), "quack")

        assert capturing_logger.infos == ["I can quack"]

    def test_plain_object_is_supported_structurally(self, dispatcher):
        processor = Mock(spec=["process_payment"])

        dispatcher.invoke(processor, "process_payment", 250)

        processor.process_payment.assert_called_once_with(250)

    def test_plain_object_without_operation_raises(self, dispatcher):
        with pytest.raises(NotSupportedError, match="object cannot process_payment"):
            dispatcher.invoke(object(), "process_payment", 250)

    def test_supports(self, capturing_logger, dispatcher):
        penguin = Penguin(capturing_logger)

        assert dispatcher.supports(penguin, "swim")
        assert not dispatcher.supports(penguin, "fly")

    def test_logs_dispatch_at_debug_level(self, capturing_logger):
        dispatcher = VariantDispatcher(capturing_logger)

        dispatcher.invoke(Duck(capturing_logger), "fly")

        assert capturing_logger.records == [
            ("debug", "Dispatching fly to Duck"),
            ("info", "I can fly"),
        ]


class TestNewVariants:
    """New variants need no change to the dispatcher or existing variants."""

    def test_new_bird_with_both_capabilities(self, capturing_logger, dispatcher):
        class Pelican(Bird, Flying, Swimming):
            def fly(self):
                self.logger.info("I glide over the sea")

            def swim(self):
                self.logger.info("I float on the waves")

        pelican = Pelican(capturing_logger)
        dispatcher.invoke(pelican, "fly")
        dispatcher.invoke(pelican, "swim")

        assert capturing_logger.infos == ["I glide over the sea", "I float on the waves"]

    def test_new_bird_without_capabilities(self, capturing_logger, dispatcher):
        class Kiwi(Bird):
            pass

        with pytest.raises(NotSupportedError, match="Kiwi cannot swim"):
            dispatcher.invoke(Kiwi(capturing_logger), "swim")

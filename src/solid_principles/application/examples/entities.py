"""Interface segregation: entities carry only the capabilities they use.

Two flavours are shown. ``run_entity_mixins`` uses entity classes declared
with their mixins; ``run_entity_assembly`` builds the same entities at
runtime from a list of capabilities.
"""
from solid_principles.application.dispatcher import VariantDispatcher
from solid_principles.domain.base.ports import LoggingPort
from solid_principles.domain.entity.capabilities import Attackable, Damageable, Movable
from solid_principles.domain.entity.entities import (
    BaseEntity,
    Character,
    Turret,
    Vehicle,
    assemble_entity,
)
from solid_principles.infrastructure.error.error_middleware import ErrorMiddleware


def _exercise_entities(
    logger: LoggingPort,
    character: BaseEntity,
    turret: BaseEntity,
    vehicle: BaseEntity,
) -> None:
    dispatcher = VariantDispatcher(logger)
    invoke_or_log = ErrorMiddleware(logger).wrap_handler(dispatcher.invoke)

    dispatcher.invoke(character, "move")
    dispatcher.invoke(character, "attack")
    dispatcher.invoke(character, "take_damage", 20)
    logger.info(
        f"{character.variant_name} health: {dispatcher.invoke(character, 'get_health')}"
    )

    dispatcher.invoke(turret, "attack")
    dispatcher.invoke(turret, "take_damage", 30)
    logger.info(f"{turret.variant_name} health: {dispatcher.invoke(turret, 'get_health')}")

    dispatcher.invoke(vehicle, "move")

    # The vehicle never signed up for these
    invoke_or_log(vehicle, "attack")
    invoke_or_log(vehicle, "take_damage", 10)
    invoke_or_log(vehicle, "get_health")


def run_entity_mixins(logger: LoggingPort) -> None:
    _exercise_entities(logger, Character(logger), Turret(logger), Vehicle(logger))


def run_entity_assembly(logger: LoggingPort) -> None:
    character_class = assemble_entity("Character", Movable, Attackable, Damageable)
    turret_class = assemble_entity("Turret", Attackable, Damageable)
    vehicle_class = assemble_entity("Vehicle", Movable)
    _exercise_entities(
        logger, character_class(logger), turret_class(logger), vehicle_class(logger)
    )

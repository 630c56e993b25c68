"""Game entities composed from the capability mixins they need."""
import types
from typing import Type

from solid_principles.domain.base.capability import Capability, Variant
from solid_principles.domain.base.exceptions import ValidationError
from solid_principles.domain.base.ports import LoggingPort

from .capabilities import Attackable, Damageable, Movable


class BaseEntity(Variant):
    """Common base for game entities; carries only the injected logger."""

    def __init__(self, logger: LoggingPort):
        self.logger = logger
        super().__init__()


class Character(BaseEntity, Movable, Attackable, Damageable):
    """Can move, attack and manage its health."""


class Turret(BaseEntity, Attackable, Damageable):
    """Can attack and manage its health but does not move."""


class Vehicle(BaseEntity, Movable):
    """Can move but neither attacks nor manages health."""


def assemble_entity(name: str, *capabilities: Type[Capability]) -> Type[BaseEntity]:
    """
    Build an entity class at runtime from a chosen set of capability mixins.

    Args:
        name: Class name of the assembled entity (used in its log lines)
        *capabilities: Capability contracts to mix in, in priority order

    Returns:
        A new ``BaseEntity`` subclass implementing exactly those contracts

    Raises:
        ValidationError: If an argument is not a capability contract or is
            given more than once
    """
    for capability in capabilities:
        if not (
            isinstance(capability, type)
            and issubclass(capability, Capability)
            and capability.is_contract()
        ):
            raise ValidationError(f"{capability!r} is not a capability contract")

    if len(set(capabilities)) != len(capabilities):
        raise ValidationError(
            f"Duplicate capabilities for {name}",
            [capability.__name__ for capability in capabilities],
        )

    entity_class = types.new_class(name, (BaseEntity, *capabilities))
    entity_class.__module__ = __name__
    return entity_class

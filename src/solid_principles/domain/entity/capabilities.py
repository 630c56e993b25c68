"""Entity capability mixins.

Each mixin is an independent contract carrying its own behaviour. Hosts are
expected to provide ``logger`` and ``variant_name`` (see ``BaseEntity``).
"""
from typing import ClassVar

from solid_principles.domain.base.capability import Capability
from solid_principles.domain.base.exceptions import ValidationError


class Movable(Capability, contract=True):
    """Provides movement behaviour."""

    operations = ("move",)

    def move(self) -> None:
        self.logger.info(f"{self.variant_name} is moving")


class Attackable(Capability, contract=True):
    """Provides attacking behaviour."""

    operations = ("attack",)

    def attack(self) -> None:
        self.logger.info(f"{self.variant_name} is attacking")


class Damageable(Capability, contract=True):
    """Provides damage handling behaviour and owns the entity's health."""

    operations = ("take_damage", "get_health")

    starting_health: ClassVar[int] = 100

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.health = self.starting_health

    def take_damage(self, damage: int) -> None:
        if damage < 0:
            raise ValidationError(
                f"Damage must not be negative: {damage}", {"damage": damage}
            )
        self.health -= damage
        self.logger.info(f"{self.variant_name} took {damage} damage")

    def get_health(self) -> int:
        return self.health

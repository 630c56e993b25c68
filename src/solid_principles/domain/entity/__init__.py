"""Game entity domain - segregated movement, attack and damage capabilities."""

from .capabilities import Attackable, Damageable, Movable
from .entities import BaseEntity, Character, Turret, Vehicle, assemble_entity

__all__ = [
    "Movable",
    "Attackable",
    "Damageable",
    "BaseEntity",
    "Character",
    "Turret",
    "Vehicle",
    "assemble_entity",
]

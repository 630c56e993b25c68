"""Resizable shapes.

``Square`` is deliberately not a ``Rectangle`` subtype: each shape grows by
its own rule, so callers can resize any shape without knowing which one it is.
"""
from abc import abstractmethod

from solid_principles.domain.base.capability import Capability, Variant
from solid_principles.domain.base.exceptions import ValidationError


class Resizable(Capability, contract=True):
    """Contract for shapes with an area that can grow."""

    operations = ("area", "increase_size")

    @abstractmethod
    def area(self) -> int:
        """Calculate the area of the shape."""

    @abstractmethod
    def increase_size(self) -> None:
        """Grow the shape by one unit according to its own rule."""


def _validate_dimension(name: str, value: int) -> int:
    if value <= 0:
        raise ValidationError(f"{name} must be positive: {value}", {name: value})
    return value


class Shape(Variant, Resizable):
    """Base class for all shapes."""


class Rectangle(Shape):
    def __init__(self, length: int, breadth: int):
        self.length = _validate_dimension("length", length)
        self.breadth = _validate_dimension("breadth", breadth)

    def set_length(self, length: int) -> None:
        self.length = _validate_dimension("length", length)

    def set_breadth(self, breadth: int) -> None:
        self.breadth = _validate_dimension("breadth", breadth)

    def area(self) -> int:
        return self.length * self.breadth

    def increase_size(self) -> None:
        # Rectangles grow along their breadth
        self.set_breadth(self.breadth + 1)


class Square(Shape):
    def __init__(self, side: int):
        self.side = _validate_dimension("side", side)

    def set_side(self, side: int) -> None:
        self.side = _validate_dimension("side", side)

    def area(self) -> int:
        return self.side * self.side

    def increase_size(self) -> None:
        self.set_side(self.side + 1)

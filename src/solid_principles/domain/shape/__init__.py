"""Shape domain - resizable shapes substitutable for one another."""

from .shapes import Rectangle, Resizable, Shape, Square

__all__ = ["Resizable", "Shape", "Rectangle", "Square"]

"""Bird domain - flying and swimming as optional capabilities."""

from .birds import Bird, Duck, Flying, Penguin, Sparrow, Swan, Swimming

__all__ = ["Bird", "Flying", "Swimming", "Duck", "Penguin", "Sparrow", "Swan"]

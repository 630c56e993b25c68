"""Birds and the capabilities they may or may not have.

A bird that cannot fly does not implement ``Flying`` at all, so substituting
any bird for another never breaks a caller that dispatches through the
capability contracts.
"""
from abc import abstractmethod

from solid_principles.domain.base.capability import Capability, Variant
from solid_principles.domain.base.ports import LoggingPort


class Flying(Capability, contract=True):
    """Contract for birds that can fly."""

    operations = ("fly",)

    @abstractmethod
    def fly(self) -> None:
        """Fly."""


class Swimming(Capability, contract=True):
    """Contract for birds that can swim."""

    operations = ("swim",)

    @abstractmethod
    def swim(self) -> None:
        """Swim."""


class Bird(Variant):
    """Base class for all birds."""

    def __init__(self, logger: LoggingPort):
        self.logger = logger


class Duck(Bird, Flying, Swimming):
    def fly(self) -> None:
        self.logger.info("I can fly")

    def swim(self) -> None:
        self.logger.info("I can swim")

    def quack(self) -> None:
        self.logger.info("I can quack")


class Penguin(Bird, Swimming):
    def swim(self) -> None:
        self.logger.info("I can swim")


class Sparrow(Bird, Flying):
    def fly(self) -> None:
        self.logger.info("I can fly high in the sky")


class Swan(Bird, Swimming):
    def swim(self) -> None:
        self.logger.info("I can swim gracefully")

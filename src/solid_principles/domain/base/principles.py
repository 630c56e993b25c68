"""SOLID principle enumeration."""
from enum import Enum


class SolidPrinciple(str, Enum):
    """The five SOLID design principles."""
    SINGLE_RESPONSIBILITY = "single-responsibility"
    OPEN_CLOSED = "open-closed"
    LISKOV_SUBSTITUTION = "liskov-substitution"
    INTERFACE_SEGREGATION = "interface-segregation"
    DEPENDENCY_INVERSION = "dependency-inversion"

    @property
    def display_name(self) -> str:
        return self.value.replace("-", " ").title()

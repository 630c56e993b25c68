"""Example registration - register every example driver with a registry."""

from typing import TYPE_CHECKING, List, Tuple

from solid_principles.domain.base.principles import SolidPrinciple

from .birds import run_birds
from .calories import run_calorie_tracker
from .entities import run_entity_assembly, run_entity_mixins
from .payment import run_payment
from .quiz import run_quiz
from .shapes import run_shapes

if TYPE_CHECKING:
    from solid_principles.infrastructure.registry.example_registry import (
        ExampleDriver,
        ExampleRegistry,
    )

EXAMPLES: List[Tuple[str, SolidPrinciple, str, "ExampleDriver"]] = [
    (
        "calorie-tracker",
        SolidPrinciple.SINGLE_RESPONSIBILITY,
        "Calorie tracking separated from reporting",
        run_calorie_tracker,
    ),
    (
        "quiz",
        SolidPrinciple.OPEN_CLOSED,
        "Quiz printing open to new question types",
        run_quiz,
    ),
    (
        "birds",
        SolidPrinciple.LISKOV_SUBSTITUTION,
        "Birds with optional flying and swimming capabilities",
        run_birds,
    ),
    (
        "shapes",
        SolidPrinciple.LISKOV_SUBSTITUTION,
        "Rectangles and squares resized through one contract",
        run_shapes,
    ),
    (
        "entity-mixins",
        SolidPrinciple.INTERFACE_SEGREGATION,
        "Game entities declared with only the mixins they need",
        run_entity_mixins,
    ),
    (
        "entity-assembly",
        SolidPrinciple.INTERFACE_SEGREGATION,
        "Game entities assembled at runtime from capabilities",
        run_entity_assembly,
    ),
    (
        "payment",
        SolidPrinciple.DEPENDENCY_INVERSION,
        "Payment service with injected payment processors",
        run_payment,
    ),
]


def register_all_examples(registry: "ExampleRegistry") -> None:
    """Register every example driver, skipping names already registered."""
    for name, principle, description, driver in EXAMPLES:
        if registry.is_example_registered(name):
            continue
        registry.register_example(name, principle, description, driver)

"""Liskov substitution: any shape can be resized without type checks."""
from solid_principles.application.dispatcher import VariantDispatcher
from solid_principles.domain.base.ports import LoggingPort
from solid_principles.domain.shape.shapes import Rectangle, Square


def run_shapes(logger: LoggingPort) -> None:
    dispatcher = VariantDispatcher(logger)
    shapes = [Rectangle(10, 2), Square(5)]

    for shape in shapes:
        logger.info(f"{shape.variant_name} area: {dispatcher.invoke(shape, 'area')}")

    for shape in shapes:
        dispatcher.invoke(shape, "increase_size")

    for shape in shapes:
        logger.info(
            f"Updated {shape.variant_name} area: {dispatcher.invoke(shape, 'area')}"
        )

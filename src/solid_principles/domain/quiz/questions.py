"""Quiz question types.

New question types are added by subclassing ``Question`` and implementing
``render_choices``; nothing that prints a quiz has to change.
"""
from abc import abstractmethod
from typing import Sequence

from solid_principles.domain.base.capability import Capability, Variant
from solid_principles.domain.base.exceptions import ValidationError
from solid_principles.domain.base.ports import LoggingPort


class ChoiceRenderer(Capability, contract=True):
    """Contract for anything that can render its answer choices."""

    operations = ("render_choices",)

    @abstractmethod
    def render_choices(self) -> None:
        """Log the answer choices, one line each."""


class Question(Variant, ChoiceRenderer):
    """Base class for quiz questions."""

    def __init__(self, description: str, logger: LoggingPort):
        self.description = description
        self.logger = logger

    def _render_numbered(self, choices: Sequence[str]) -> None:
        for index, choice in enumerate(choices, start=1):
            self.logger.info(f"{index}. {choice}")


class BooleanQuestion(Question):
    """True/False question."""

    def render_choices(self) -> None:
        self._render_numbered(["True", "False"])


class MultipleChoiceQuestion(Question):
    def __init__(self, description: str, options: Sequence[str], logger: LoggingPort):
        super().__init__(description, logger)
        if not options:
            raise ValidationError(
                f"Multiple choice question needs at least one option: {description}"
            )
        self.options = list(options)

    def render_choices(self) -> None:
        self._render_numbered(self.options)


class TextQuestion(Question):
    """Free-text question answered in writing."""

    def render_choices(self) -> None:
        self.logger.info("Ans: _____________")


class RangeQuestion(Question):
    DEFAULT_MINIMUMS = (60, 80, 100, 140)

    def __init__(
        self,
        description: str,
        logger: LoggingPort,
        minimums: Sequence[int] = DEFAULT_MINIMUMS,
    ):
        super().__init__(description, logger)
        self.minimums = tuple(minimums)

    def render_choices(self) -> None:
        self._render_numbered([f"Min {minimum}" for minimum in self.minimums])

"""Quiz domain - question types that render their own choices."""

from .questions import (
    BooleanQuestion,
    ChoiceRenderer,
    MultipleChoiceQuestion,
    Question,
    RangeQuestion,
    TextQuestion,
)

__all__ = [
    "ChoiceRenderer",
    "Question",
    "BooleanQuestion",
    "MultipleChoiceQuestion",
    "TextQuestion",
    "RangeQuestion",
]

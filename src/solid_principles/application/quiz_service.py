"""Quiz application service."""
from typing import Iterable

from solid_principles.domain.base.ports import LoggingPort
from solid_principles.domain.quiz.questions import Question

from .dispatcher import VariantDispatcher


class QuizService:
    """Prints quizzes made of any question types."""

    def __init__(self, logger: LoggingPort):
        self._logger = logger
        self._dispatcher = VariantDispatcher(logger)

    def print_quiz(self, questions: Iterable[Question]) -> int:
        """
        Print each question's description followed by its choices.

        A blank line separates questions.

        Returns:
            Number of questions printed
        """
        count = 0
        for question in questions:
            self._logger.info(question.description)
            self._dispatcher.invoke(question, "render_choices")
            self._logger.info("")
            count += 1
        return count

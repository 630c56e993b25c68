"""Tests for the quiz service."""

from solid_principles.application.quiz_service import QuizService
from solid_principles.domain.quiz.questions import BooleanQuestion, Question, TextQuestion


def test_print_quiz(capturing_logger):
    questions = [
        BooleanQuestion("Is it raining?", capturing_logger),
        TextQuestion("Describe the weather", capturing_logger),
    ]

    count = QuizService(capturing_logger).print_quiz(questions)

    assert count == 2
    assert capturing_logger.infos == [
        "Is it raining?",
        "1. True",
        "2. False",
        "",
        "Describe the weather",
        "Ans: _____________",
        "",
    ]


def test_print_empty_quiz(capturing_logger):
    assert QuizService(capturing_logger).print_quiz([]) == 0
    assert capturing_logger.records == []


def test_new_question_type_needs_no_service_change(capturing_logger):
    class RatingQuestion(Question):
        def render_choices(self):
            self.logger.info("Rate: 1 2 3 4 5")

    QuizService(capturing_logger).print_quiz([RatingQuestion("How was it?", capturing_logger)])

    assert capturing_logger.infos == ["How was it?", "Rate: 1 2 3 4 5", ""]

"""Open/closed: printing a quiz works for any question type."""
from solid_principles.application.quiz_service import QuizService
from solid_principles.domain.base.ports import LoggingPort
from solid_principles.domain.quiz.questions import (
    BooleanQuestion,
    MultipleChoiceQuestion,
    RangeQuestion,
    TextQuestion,
)


def run_quiz(logger: LoggingPort) -> None:
    questions = [
        BooleanQuestion("Is learning SOLID Principles useful?", logger),
        MultipleChoiceQuestion(
            "What is your favourite language?",
            ["CSS", "HTML", "JS", "PYTHON"],
            logger,
        ),
        RangeQuestion("What is the speed limit in your city?", logger),
        TextQuestion("What is the best project you have worked on?", logger),
    ]
    QuizService(logger).print_quiz(questions)

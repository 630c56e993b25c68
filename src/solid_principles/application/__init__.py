"""Application layer - dispatching, services and example drivers."""

from .dispatcher import VariantDispatcher
from .payment_service import PaymentService
from .quiz_service import QuizService

__all__ = ["VariantDispatcher", "PaymentService", "QuizService"]

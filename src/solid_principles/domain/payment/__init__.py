"""Payment domain - the payment processing contract."""

from .processor import PaymentProcessor

__all__ = ["PaymentProcessor"]

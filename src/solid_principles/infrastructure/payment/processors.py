"""Simulated payment processors implementing the PaymentProcessor contract."""
from typing import ClassVar

from solid_principles.domain.base.capability import Variant
from solid_principles.domain.base.ports import LoggingPort
from solid_principles.domain.payment.processor import Amount, PaymentProcessor


class SimulatedPaymentProcessor(Variant, PaymentProcessor):
    """Base for processors that simulate a payment gateway by logging."""

    gateway_name: ClassVar[str] = ""

    def __init__(self, logger: LoggingPort):
        self.logger = logger

    def process_payment(self, amount: Amount) -> None:
        self.logger.info(
            f"Processing ${amount} payment through {self.gateway_name}.",
            gateway=self.gateway_name,
        )


class PayPalProcessor(SimulatedPaymentProcessor):
    gateway_name = "PayPal"


class StripeProcessor(SimulatedPaymentProcessor):
    gateway_name = "Stripe"


class SquareProcessor(SimulatedPaymentProcessor):
    gateway_name = "Square"

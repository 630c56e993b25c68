"""Dependency inversion: the payment service depends on an abstraction only."""
from solid_principles.application.payment_service import PaymentService
from solid_principles.domain.base.exceptions import SimulatedFailureError
from solid_principles.domain.base.ports import LoggingPort
from solid_principles.infrastructure.payment.processors import (
    PayPalProcessor,
    SquareProcessor,
    StripeProcessor,
)


class FaultyProcessor:
    """Injected processor whose payments always fail."""

    def process_payment(self, amount) -> None:
        raise SimulatedFailureError("Simulated error")


def run_payment(logger: LoggingPort) -> None:
    payments = [
        (PayPalProcessor(logger), 100),
        (StripeProcessor(logger), 200),
        (SquareProcessor(logger), 300),
        (FaultyProcessor(), 400),
    ]
    for processor, amount in payments:
        PaymentService(processor, logger).make_payment(amount)

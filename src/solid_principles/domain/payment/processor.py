"""Domain contract for payment processing."""

from abc import abstractmethod
from decimal import Decimal
from typing import Union

from solid_principles.domain.base.capability import Capability

Amount = Union[int, float, Decimal]


class PaymentProcessor(Capability, contract=True):
    """Contract every payment processor must follow.

    High-level services depend on this abstraction only; concrete processors
    live in the infrastructure layer and are injected.
    """

    operations = ("process_payment",)

    @abstractmethod
    def process_payment(self, amount: Amount) -> None:
        """Process a payment of the given amount."""

"""Payment application service."""
from solid_principles.domain.base.ports import LoggingPort
from solid_principles.domain.payment.processor import Amount, PaymentProcessor

from .dispatcher import VariantDispatcher


class PaymentService:
    """High-level payment service depending only on the PaymentProcessor contract.

    The processor is injected, so any object with a ``process_payment``
    operation can be used without changing this service.
    """

    def __init__(self, payment_processor: PaymentProcessor, logger: LoggingPort):
        self.payment_processor = payment_processor
        self._logger = logger
        self._dispatcher = VariantDispatcher(logger)

    def make_payment(self, amount: Amount) -> bool:
        """
        Make a payment through the injected processor.

        Any failure is logged once at error level and not raised further.

        Args:
            amount: Amount to pay

        Returns:
            True if the processor accepted the payment, False otherwise
        """
        try:
            self._dispatcher.invoke(self.payment_processor, "process_payment", amount)
        except Exception as e:
            self._logger.error(
                f"Failed to process ${amount} payment: {e}",
                error_type=type(e).__name__,
            )
            return False
        return True

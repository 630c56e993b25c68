"""Concrete payment processors."""

from .processors import PayPalProcessor, SquareProcessor, StripeProcessor

__all__ = ["PayPalProcessor", "StripeProcessor", "SquareProcessor"]

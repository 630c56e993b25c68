"""Runnable example drivers, one per SOLID principle illustration."""

from .registration import EXAMPLES, register_all_examples

__all__ = ["EXAMPLES", "register_all_examples"]

"""Calorie domain - calorie intake tracking."""

from .tracker import CalorieTracker

__all__ = ["CalorieTracker"]

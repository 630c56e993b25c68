"""Calorie intake tracking.

The tracker only tracks; reporting goes through the injected logger.
"""
from solid_principles.domain.base.exceptions import ValidationError
from solid_principles.domain.base.ports import LoggingPort


class CalorieTracker:
    """Tracks calories consumed against a maximum."""

    def __init__(self, max_calories: int, logger: LoggingPort):
        if max_calories <= 0:
            raise ValidationError(
                f"Maximum calories must be positive: {max_calories}",
                {"max_calories": max_calories},
            )
        self.max_calories = max_calories
        self.current_calories = 0
        self._logger = logger

    @property
    def is_exceeded(self) -> bool:
        return self.current_calories > self.max_calories

    def track_calories(self, calorie_count: int) -> int:
        """
        Add consumed calories to the running total.

        Logs a warning line every time the total is above the maximum.

        Args:
            calorie_count: Calories consumed

        Returns:
            The running total after this intake
        """
        if calorie_count < 0:
            raise ValidationError(
                f"Calorie count must not be negative: {calorie_count}",
                {"calorie_count": calorie_count},
            )
        self.current_calories += calorie_count
        if self.is_exceeded:
            self._logger.info(
                f"Maximum calorie count of {self.max_calories} exceeded! "
                f"-> {self.current_calories}"
            )
        return self.current_calories

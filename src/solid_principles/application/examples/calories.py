"""Single responsibility: a tracker that only tracks calories."""
from solid_principles.domain.base.ports import LoggingPort
from solid_principles.domain.calorie.tracker import CalorieTracker

MAX_CALORIES = 2000
INTAKES = (200, 1000, 1000)


def run_calorie_tracker(logger: LoggingPort) -> None:
    tracker = CalorieTracker(MAX_CALORIES, logger)
    for calorie_count in INTAKES:
        tracker.track_calories(calorie_count)

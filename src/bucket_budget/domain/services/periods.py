"""Calendar helpers for month and week boundaries."""

from datetime import date, timedelta

from bucket_budget.domain.constants import DAYS_PER_WEEK


def month_start(day: date) -> date:
    """Return the first day of the month containing day."""
    return day.replace(day=1)


def week_start(day: date, first_weekday: int = 0) -> date:
    """Return the first day of the week containing day.

    Args:
        day: Any day of the week.
        first_weekday: Weekday the week starts on (0 = Monday, 6 = Sunday).
    """
    offset = (day.weekday() - first_weekday) % DAYS_PER_WEEK
    return day - timedelta(days=offset)


def days_remaining_in_week(day: date, first_weekday: int = 0) -> int:
    """Return the days left in the week, today included (1 to 7)."""
    return DAYS_PER_WEEK - (day.weekday() - first_weekday) % DAYS_PER_WEEK


__all__ = [
    "month_start",
    "week_start",
    "days_remaining_in_week",
]

"""Domain model for the open budget month and week."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class BudgetPeriod:
    """First days of the month and week currently being tracked."""

    month_start: date
    week_start: date


__all__ = ["BudgetPeriod"]

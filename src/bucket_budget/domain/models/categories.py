"""Domain models for budget categories and their monthly and weekly views."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class MonthlyTotals:
    """Spend and goal of the current month."""

    spent: Decimal = Decimal("0")
    goal: Decimal = Decimal("0")


@dataclass(frozen=True)
class BudgetCategory:
    """Single record shared by the monthly and weekly trackers.

    The monthly tracker owns ``last_month`` and ``this_month``; the weekly
    tracker owns ``weekly_limit`` and ``weekly_spent``. Both share ``id`` and
    ``is_tracked``.
    """

    id: str
    name: str
    bucket: str
    is_tracked: bool = False
    last_month: Decimal = Decimal("0")
    this_month: MonthlyTotals = MonthlyTotals()
    weekly_limit: Decimal = Decimal("0")
    weekly_spent: Decimal = Decimal("0")


@dataclass(frozen=True)
class CategoryMonthlyView:
    """Monthly overview row for a category."""

    category_id: str
    name: str
    bucket: str
    is_tracked: bool
    last_month: Decimal
    spent: Decimal
    goal: Decimal

    @property
    def remaining(self) -> Decimal:
        """Return goal minus spent; negative once the goal is exceeded."""
        return self.goal - self.spent

    @property
    def over_goal(self) -> bool:
        return self.spent > self.goal

    @property
    def progress(self) -> Decimal | None:
        """Return spent as a fraction of goal, or None without a goal."""
        if self.goal == 0:
            return None
        return (self.spent / self.goal).quantize(Decimal("0.0001"))


@dataclass(frozen=True)
class TrackedCategoryView:
    """Weekly tracking row for a tracked category."""

    category_id: str
    name: str
    bucket: str
    weekly_limit: Decimal
    weekly_spent: Decimal
    safe_to_spend_today: Decimal

    @property
    def weekly_remaining(self) -> Decimal:
        return max(Decimal("0"), self.weekly_limit - self.weekly_spent)


__all__ = [
    "MonthlyTotals",
    "BudgetCategory",
    "CategoryMonthlyView",
    "TrackedCategoryView",
]

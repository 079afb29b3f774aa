"""Monthly goal and spend tracking over the category registry."""

from dataclasses import replace
from datetime import date
from decimal import Decimal

from bucket_budget.application.budget.category_registry import (
    CategoryRegistry,
)
from bucket_budget.application.state import UnitOfWork
from bucket_budget.domain.errors import InvalidCategory
from bucket_budget.domain.models import (
    BudgetCategory,
    BudgetPeriod,
    CategoryMonthlyView,
    MonthlyTotals,
)
from bucket_budget.domain.services import require_amount


def to_monthly_view(category: BudgetCategory) -> CategoryMonthlyView:
    return CategoryMonthlyView(
        category_id=category.id,
        name=category.name,
        bucket=category.bucket,
        is_tracked=category.is_tracked,
        last_month=category.last_month,
        spent=category.this_month.spent,
        goal=category.this_month.goal,
    )


class MonthlyTracker:
    """Projection owning ``this_month``, ``last_month`` and ``is_tracked``."""

    def __init__(self, registry: CategoryRegistry) -> None:
        self._registry = registry

    def list_categories(self) -> list[CategoryMonthlyView]:
        """Return the monthly view of every category in creation order."""
        return [
            to_monthly_view(category)
            for category in self._registry.all_categories()
        ]

    def view(self, category_id: str) -> CategoryMonthlyView:
        return to_monthly_view(self._registry.get(category_id))

    def set_goal(
        self,
        uow: UnitOfWork,
        category_id: str,
        goal,
    ) -> BudgetCategory:
        """Stage a new monthly goal.

        Raises:
            CategoryNotFound: If the category does not exist.
            InvalidCategory: If the goal is negative or not a number.
        """
        category = uow.get_category(category_id)
        amount = require_amount(
            goal,
            error=InvalidCategory,
            label="Goal",
            category_id=category_id,
        )
        updated = replace(
            category,
            this_month=replace(category.this_month, goal=amount),
        )
        uow.put_category(updated)
        return updated

    def record_spend(
        self,
        uow: UnitOfWork,
        category_id: str,
        amount: Decimal,
    ) -> BudgetCategory:
        """Add a validated expense amount to this month's spend.

        Only the expense ledger calls this, inside its unit of work.
        """
        category = uow.get_category(category_id)
        updated = replace(
            category,
            this_month=replace(
                category.this_month,
                spent=category.this_month.spent + amount,
            ),
        )
        uow.put_category(updated)
        return updated

    def rollover(
        self,
        uow: UnitOfWork,
        new_month_start: date,
    ) -> list[BudgetCategory]:
        """Close the month for every category.

        This month's spend becomes ``last_month`` and spend restarts at zero.
        Goals carry over.
        """
        rolled = []
        for category_id in uow.category_ids():
            category = uow.get_category(category_id)
            updated = replace(
                category,
                last_month=category.this_month.spent,
                this_month=MonthlyTotals(
                    spent=Decimal("0"),
                    goal=category.this_month.goal,
                ),
            )
            uow.put_category(updated)
            rolled.append(updated)
        period = uow.period
        uow.set_period(
            BudgetPeriod(
                month_start=new_month_start,
                week_start=period.week_start if period else new_month_start,
            )
        )
        return rolled

    def toggle_tracking(self, uow: UnitOfWork, category_id: str) -> bool:
        """Flip ``is_tracked`` and return the new value.

        Raises:
            CategoryNotFound: If the category does not exist.
        """
        category = uow.get_category(category_id)
        return self.set_tracking(uow, category_id, not category.is_tracked)

    def set_tracking(
        self,
        uow: UnitOfWork,
        category_id: str,
        tracked: bool,
    ) -> bool:
        """Set ``is_tracked``; setting the current value stages nothing."""
        category = uow.get_category(category_id)
        tracked = bool(tracked)
        if category.is_tracked != tracked:
            uow.put_category(replace(category, is_tracked=tracked))
        return tracked


__all__ = ["MonthlyTracker", "to_monthly_view"]

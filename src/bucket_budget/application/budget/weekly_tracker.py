"""Weekly limit and spend tracking over tracked categories."""

from dataclasses import replace
from datetime import date
from decimal import Decimal

from bucket_budget.application.budget.category_registry import (
    CategoryRegistry,
)
from bucket_budget.application.budget.monthly_tracker import MonthlyTracker
from bucket_budget.application.ports.clock import ClockPort
from bucket_budget.application.state import UnitOfWork
from bucket_budget.domain.errors import InvalidCategory
from bucket_budget.domain.models import (
    BudgetCategory,
    BudgetPeriod,
    TrackedCategoryView,
)
from bucket_budget.domain.services import (
    compute_safe_to_spend_today,
    require_amount,
)


class WeeklyTracker:
    """Derived view over categories whose tracking flag is set.

    The view is recomputed from the registry on every read, so a toggle is
    visible on the very next call.
    """

    def __init__(
        self,
        registry: CategoryRegistry,
        monthly: MonthlyTracker,
        clock: ClockPort,
    ) -> None:
        self._registry = registry
        self._monthly = monthly
        self._clock = clock

    def list_tracked(self) -> list[TrackedCategoryView]:
        """Return tracked categories in creation order."""
        days_remaining = self._clock.days_remaining_in_week()
        return [
            self._to_view(category, days_remaining)
            for category in self._registry.all_categories()
            if category.is_tracked
        ]

    def view(self, category_id: str) -> TrackedCategoryView | None:
        """Return the weekly row of a category, or None when untracked."""
        category = self._registry.get(category_id)
        if not category.is_tracked:
            return None
        return self._to_view(category, self._clock.days_remaining_in_week())

    def record_spend(
        self,
        uow: UnitOfWork,
        category_id: str,
        amount: Decimal,
    ) -> bool:
        """Add an expense amount to this week's spend of a tracked category.

        Untracked categories are left untouched.

        Returns:
            bool: Whether the weekly aggregate changed.
        """
        category = uow.get_category(category_id)
        if not category.is_tracked:
            return False
        uow.put_category(
            replace(category, weekly_spent=category.weekly_spent + amount)
        )
        return True

    def reset_week(
        self,
        uow: UnitOfWork,
        new_week_start: date,
    ) -> list[BudgetCategory]:
        """Zero ``weekly_spent`` for every category, tracked or not."""
        reset = []
        for category_id in uow.category_ids():
            category = uow.get_category(category_id)
            updated = replace(category, weekly_spent=Decimal("0"))
            uow.put_category(updated)
            reset.append(updated)
        period = uow.period
        uow.set_period(
            BudgetPeriod(
                month_start=period.month_start if period else new_week_start,
                week_start=new_week_start,
            )
        )
        return reset

    def set_weekly_limit(
        self,
        uow: UnitOfWork,
        category_id: str,
        limit,
    ) -> BudgetCategory:
        category = uow.get_category(category_id)
        amount = require_amount(
            limit,
            error=InvalidCategory,
            label="Weekly limit",
            category_id=category_id,
        )
        updated = replace(category, weekly_limit=amount)
        uow.put_category(updated)
        return updated

    def toggle_tracking(self, uow: UnitOfWork, category_id: str) -> bool:
        """Toggle from the weekly surface through the same transition."""
        return self._monthly.toggle_tracking(uow, category_id)

    @staticmethod
    def _to_view(
        category: BudgetCategory,
        days_remaining: int,
    ) -> TrackedCategoryView:
        return TrackedCategoryView(
            category_id=category.id,
            name=category.name,
            bucket=category.bucket,
            weekly_limit=category.weekly_limit,
            weekly_spent=category.weekly_spent,
            safe_to_spend_today=compute_safe_to_spend_today(
                category.weekly_limit,
                category.weekly_spent,
                days_remaining,
            ),
        )


__all__ = ["WeeklyTracker"]

"""Use case recording an expense against a category."""

from dataclasses import dataclass

from bucket_budget.application.budget import Budget
from bucket_budget.application.budget.monthly_tracker import to_monthly_view
from bucket_budget.application.state import category_key
from bucket_budget.domain.errors import BudgetError
from bucket_budget.domain.models import (
    CategoryMonthlyView,
    ExpenseEntry,
    TrackedCategoryView,
)
from bucket_budget.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ExpenseResult:
    """Recorded entry and the category's views after recording it.

    Attributes:
        entry: The immutable ledger entry.
        monthly: Monthly view including the new spend.
        weekly: Weekly view, or None when the category is untracked.
    """

    entry: ExpenseEntry
    monthly: CategoryMonthlyView
    weekly: TrackedCategoryView | None


class AddExpenseUseCase:
    """Record spend through the expense ledger."""

    def __init__(self, budget: Budget, logger=None) -> None:
        self._budget = budget
        self._logger = logger or get_app_logger()

    def execute(
        self,
        category_id: str,
        amount,
        note: str | None = None,
    ) -> ExpenseResult:
        """Record an expense as a single transaction.

        Args:
            category_id: Category the money was spent in.
            amount: Positive amount.
            note: Optional free text.

        Returns:
            ExpenseResult: Entry plus the updated monthly and weekly views.

        Raises:
            CategoryNotFound: If the category does not exist.
            InvalidExpense: If the amount is not positive.
        """
        try:
            with self._budget.transaction(category_key(category_id)) as uow:
                entry = self._budget.ledger.add_expense(
                    uow,
                    category_id,
                    amount,
                    note=note,
                )
                category = uow.get_category(category_id)
        except BudgetError as exc:
            self._logger.warning(
                f"Rejected expense for category {category_id}: {exc}"
            )
            raise
        self._logger.info(
            f"Recorded expense {entry.id} of {entry.amount} "
            f"for category {category_id}"
        )
        weekly = None
        if category.is_tracked:
            weekly = self._budget.weekly.view(category_id)
        return ExpenseResult(
            entry=entry,
            monthly=to_monthly_view(category),
            weekly=weekly,
        )


__all__ = ["AddExpenseUseCase", "ExpenseResult"]

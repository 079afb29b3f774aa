"""Use case listing recorded expenses."""

from datetime import date, datetime

from bucket_budget.application.budget import Budget, ExpenseSequence


class ListExpensesUseCase:
    """Return ledger entries ordered by timestamp."""

    def __init__(self, budget: Budget) -> None:
        self._budget = budget

    def execute(
        self,
        category_id: str | None = None,
        since: date | datetime | None = None,
    ) -> ExpenseSequence:
        """Return a lazy, restartable sequence of entries.

        Raises:
            CategoryNotFound: If a category filter names an unknown category.
        """
        return self._budget.ledger.list_expenses(category_id, since)


__all__ = ["ListExpensesUseCase"]

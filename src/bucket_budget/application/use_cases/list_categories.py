"""Use case for the monthly overview."""

from bucket_budget.application.budget import Budget
from bucket_budget.domain.models import CategoryMonthlyView


class ListCategoriesUseCase:
    """Return every category with its monthly goal and spend."""

    def __init__(self, budget: Budget) -> None:
        self._budget = budget

    def execute(self) -> list[CategoryMonthlyView]:
        return self._budget.monthly.list_categories()


__all__ = ["ListCategoriesUseCase"]

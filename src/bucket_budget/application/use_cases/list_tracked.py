"""Use case for the weekly tracking view."""

from bucket_budget.application.budget import Budget
from bucket_budget.domain.models import TrackedCategoryView


class ListTrackedUseCase:
    """Return tracked categories with their safe-to-spend amount."""

    def __init__(self, budget: Budget) -> None:
        self._budget = budget

    def execute(self) -> list[TrackedCategoryView]:
        return self._budget.weekly.list_tracked()


__all__ = ["ListTrackedUseCase"]

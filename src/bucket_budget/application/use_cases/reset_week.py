"""Use case closing the current budget week."""

from datetime import date

from bucket_budget.application.budget import Budget
from bucket_budget.domain.models import TrackedCategoryView
from bucket_budget.infrastructure.logging.logger import get_app_logger


class ResetWeekUseCase:
    """Zero the weekly spend of every category at the week boundary."""

    def __init__(self, budget: Budget, logger=None) -> None:
        self._budget = budget
        self._logger = logger or get_app_logger()

    def execute(
        self,
        new_week_start: date | None = None,
    ) -> list[TrackedCategoryView]:
        """Reset weekly spend and return the refreshed weekly view.

        Args:
            new_week_start: First day of the new week; defaults to the clock's
                current week.
        """
        start = new_week_start or self._budget.clock.week_start()
        with self._budget.all_categories_transaction() as uow:
            reset = self._budget.weekly.reset_week(uow, start)
        self._logger.info(
            f"Reset weekly spend of {len(reset)} categories for week {start}"
        )
        return self._budget.weekly.list_tracked()


__all__ = ["ResetWeekUseCase"]

"""Use case closing the current budget month."""

from datetime import date

from bucket_budget.application.budget import Budget
from bucket_budget.application.budget.monthly_tracker import to_monthly_view
from bucket_budget.domain.models import CategoryMonthlyView
from bucket_budget.infrastructure.logging.logger import get_app_logger


class RolloverMonthUseCase:
    """Move this month's spend into last month for every category.

    Triggered by an external scheduler at the month boundary.
    """

    def __init__(self, budget: Budget, logger=None) -> None:
        self._budget = budget
        self._logger = logger or get_app_logger()

    def execute(
        self,
        new_month_start: date | None = None,
    ) -> list[CategoryMonthlyView]:
        """Roll every category over to a new month.

        Args:
            new_month_start: First day of the new month; defaults to the
                clock's current month.

        Returns:
            list[CategoryMonthlyView]: Monthly views after the rollover.
        """
        start = new_month_start or self._budget.clock.month_start()
        with self._budget.all_categories_transaction() as uow:
            rolled = self._budget.monthly.rollover(uow, start)
        self._logger.info(
            f"Rolled over {len(rolled)} categories into month {start}"
        )
        return [to_monthly_view(category) for category in rolled]


__all__ = ["RolloverMonthUseCase"]

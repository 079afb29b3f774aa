"""Use case detecting month and week boundaries against the clock."""

from dataclasses import dataclass
from datetime import date

from bucket_budget.application.budget import Budget
from bucket_budget.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class AdvancePeriodsResult:
    """Boundaries crossed by an advance run.

    Attributes:
        rolled_over: Whether the month was rolled over.
        week_reset: Whether weekly spend was reset.
        month_start: Open month after the run.
        week_start: Open week after the run.
    """

    rolled_over: bool
    week_reset: bool
    month_start: date
    week_start: date


class AdvancePeriodsUseCase:
    """Run ``rollover`` and ``reset_week`` when the clock crossed a boundary.

    Meant to be called by an external scheduler; running it twice within
    the same week is a no-op.
    """

    def __init__(self, budget: Budget, logger=None) -> None:
        self._budget = budget
        self._logger = logger or get_app_logger()

    def execute(self) -> AdvancePeriodsResult:
        clock = self._budget.clock
        current_month = clock.month_start()
        current_week = clock.week_start()
        with self._budget.all_categories_transaction() as uow:
            period = uow.period
            rolled_over = current_month > period.month_start
            week_reset = current_week > period.week_start
            if rolled_over:
                self._budget.monthly.rollover(uow, current_month)
            if week_reset:
                self._budget.weekly.reset_week(uow, current_week)
            period = uow.period

        if rolled_over:
            self._logger.info(f"Month boundary crossed; now {current_month}")
        if week_reset:
            self._logger.info(f"Week boundary crossed; now {current_week}")
        if not rolled_over and not week_reset:
            self._logger.info("No period boundary crossed")
        return AdvancePeriodsResult(
            rolled_over=rolled_over,
            week_reset=week_reset,
            month_start=period.month_start,
            week_start=period.week_start,
        )


__all__ = ["AdvancePeriodsUseCase", "AdvancePeriodsResult"]

"""Use cases switching weekly tracking of a category on and off."""

from dataclasses import dataclass

from bucket_budget.application.budget import Budget
from bucket_budget.application.state import category_key
from bucket_budget.domain.errors import BudgetError
from bucket_budget.domain.models import BudgetCategory
from bucket_budget.infrastructure.logging.logger import get_app_logger

MONTHLY_SURFACE = "monthly"
WEEKLY_SURFACE = "weekly"


@dataclass(frozen=True)
class TrackingResult:
    """Tracking state of a category after a toggle."""

    category_id: str
    is_tracked: bool
    category: BudgetCategory


class ToggleTrackingUseCase:
    """Flip the tracking flag from either the monthly or the weekly view.

    Both surfaces run the same transition on the shared category record, so
    the outcome does not depend on which one issued the command.
    """

    def __init__(self, budget: Budget, logger=None) -> None:
        self._budget = budget
        self._logger = logger or get_app_logger()

    def execute(
        self,
        category_id: str,
        surface: str = MONTHLY_SURFACE,
    ) -> TrackingResult:
        """Toggle tracking and return the new state.

        Args:
            category_id: Category to toggle.
            surface: View issuing the command, ``monthly`` or ``weekly``.

        Raises:
            CategoryNotFound: If the category does not exist.
            ValueError: If the surface is unknown.
        """
        if surface == MONTHLY_SURFACE:
            tracker = self._budget.monthly
        elif surface == WEEKLY_SURFACE:
            tracker = self._budget.weekly
        else:
            raise ValueError(
                f"Unsupported surface: {surface}. Expected monthly or weekly."
            )
        try:
            with self._budget.transaction(category_key(category_id)) as uow:
                is_tracked = tracker.toggle_tracking(uow, category_id)
                category = uow.get_category(category_id)
        except BudgetError as exc:
            self._logger.warning(
                f"Rejected tracking toggle for category {category_id}: {exc}"
            )
            raise
        self._logger.info(
            f"Category {category_id} tracking={is_tracked} (from {surface})"
        )
        return TrackingResult(
            category_id=category_id,
            is_tracked=is_tracked,
            category=category,
        )


class SetTrackingUseCase:
    """Set the tracking flag to an explicit value."""

    def __init__(self, budget: Budget, logger=None) -> None:
        self._budget = budget
        self._logger = logger or get_app_logger()

    def execute(self, category_id: str, tracked: bool) -> TrackingResult:
        """Set tracking; repeating the current value is a no-op.

        Raises:
            CategoryNotFound: If the category does not exist.
        """
        try:
            with self._budget.transaction(category_key(category_id)) as uow:
                is_tracked = self._budget.monthly.set_tracking(
                    uow,
                    category_id,
                    tracked,
                )
                category = uow.get_category(category_id)
        except BudgetError as exc:
            self._logger.warning(
                f"Rejected tracking update for category {category_id}: {exc}"
            )
            raise
        self._logger.info(f"Category {category_id} tracking={is_tracked}")
        return TrackingResult(
            category_id=category_id,
            is_tracked=is_tracked,
            category=category,
        )


__all__ = [
    "ToggleTrackingUseCase",
    "SetTrackingUseCase",
    "TrackingResult",
    "MONTHLY_SURFACE",
    "WEEKLY_SURFACE",
]

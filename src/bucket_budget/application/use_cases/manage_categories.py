"""Use cases creating and editing budget categories."""

from bucket_budget.application.budget import Budget
from bucket_budget.application.state import category_key, registry_key
from bucket_budget.domain.errors import BudgetError
from bucket_budget.domain.models import BudgetCategory
from bucket_budget.infrastructure.logging.logger import get_app_logger


class AddCategoryUseCase:
    """Create a budget category."""

    def __init__(self, budget: Budget, logger=None) -> None:
        self._budget = budget
        self._logger = logger or get_app_logger()

    def execute(
        self,
        name: str,
        bucket: str,
        goal=0,
        weekly_limit=0,
        is_tracked: bool = False,
        category_id: str | None = None,
    ) -> BudgetCategory:
        """Add a category with zeroed monthly and weekly spend.

        Raises:
            InvalidCategory: If the name, bucket, goal or limit is invalid.
        """
        try:
            with self._budget.transaction(registry_key()) as uow:
                category = self._budget.categories.add(
                    uow,
                    name,
                    bucket,
                    goal=goal,
                    weekly_limit=weekly_limit,
                    is_tracked=is_tracked,
                    category_id=category_id,
                )
        except BudgetError as exc:
            self._logger.warning(f"Rejected new category: {exc}")
            raise
        self._logger.info(
            f"Added category {category.id} ({category.name}) "
            f"bucket={category.bucket} tracked={category.is_tracked}"
        )
        return category


class UpdateCategoryUseCase:
    """Rename a category or move it to another bucket."""

    def __init__(self, budget: Budget, logger=None) -> None:
        self._budget = budget
        self._logger = logger or get_app_logger()

    def execute(
        self,
        category_id: str,
        name: str | None = None,
        bucket: str | None = None,
    ) -> BudgetCategory:
        try:
            with self._budget.transaction(category_key(category_id)) as uow:
                category = uow.get_category(category_id)
                if name is not None:
                    category = self._budget.categories.rename(
                        uow,
                        category_id,
                        name,
                    )
                if bucket is not None:
                    category = self._budget.categories.change_bucket(
                        uow,
                        category_id,
                        bucket,
                    )
        except BudgetError as exc:
            self._logger.warning(
                f"Rejected update of category {category_id}: {exc}"
            )
            raise
        self._logger.info(
            f"Updated category {category.id} ({category.name}) "
            f"bucket={category.bucket}"
        )
        return category


class SetGoalUseCase:
    """Set the monthly spending goal of a category."""

    def __init__(self, budget: Budget, logger=None) -> None:
        self._budget = budget
        self._logger = logger or get_app_logger()

    def execute(self, category_id: str, goal) -> BudgetCategory:
        """Store a new goal; spend and last month are unchanged.

        Raises:
            CategoryNotFound: If the category does not exist.
            InvalidCategory: If the goal is negative.
        """
        try:
            with self._budget.transaction(category_key(category_id)) as uow:
                category = self._budget.monthly.set_goal(uow, category_id, goal)
        except BudgetError as exc:
            self._logger.warning(
                f"Rejected goal for category {category_id}: {exc}"
            )
            raise
        self._logger.info(
            f"Goal for category {category_id} set to "
            f"{category.this_month.goal}"
        )
        return category


class SetWeeklyLimitUseCase:
    """Set the weekly spending limit of a category."""

    def __init__(self, budget: Budget, logger=None) -> None:
        self._budget = budget
        self._logger = logger or get_app_logger()

    def execute(self, category_id: str, limit) -> BudgetCategory:
        try:
            with self._budget.transaction(category_key(category_id)) as uow:
                category = self._budget.weekly.set_weekly_limit(
                    uow,
                    category_id,
                    limit,
                )
        except BudgetError as exc:
            self._logger.warning(
                f"Rejected weekly limit for category {category_id}: {exc}"
            )
            raise
        self._logger.info(
            f"Weekly limit for category {category_id} set to "
            f"{category.weekly_limit}"
        )
        return category


__all__ = [
    "AddCategoryUseCase",
    "UpdateCategoryUseCase",
    "SetGoalUseCase",
    "SetWeeklyLimitUseCase",
]

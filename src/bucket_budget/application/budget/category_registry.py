"""Registry of budget categories."""

from dataclasses import replace
from typing import Callable

from bucket_budget.application.state import BudgetTables, UnitOfWork
from bucket_budget.domain.constants import BUCKETS
from bucket_budget.domain.errors import CategoryNotFound, InvalidCategory
from bucket_budget.domain.models import BudgetCategory, MonthlyTotals
from bucket_budget.domain.policies import is_valid_name
from bucket_budget.domain.services import require_amount
from bucket_budget.utils.identifiers import new_identifier


class CategoryRegistry:
    """Single table of categories shared by the monthly and weekly views."""

    def __init__(
        self,
        tables: BudgetTables,
        id_factory: Callable[[], str] = new_identifier,
    ) -> None:
        self._tables = tables
        self._id_factory = id_factory

    def get(self, category_id: str) -> BudgetCategory:
        category = self._tables.categories.get(category_id)
        if category is None:
            raise CategoryNotFound(category_id)
        return category

    def exists(self, category_id: str) -> bool:
        return category_id in self._tables.categories

    def all_categories(self) -> list[BudgetCategory]:
        """Return every category in creation order."""
        with self._tables.lock:
            return list(self._tables.categories.values())

    def ids(self) -> list[str]:
        with self._tables.lock:
            return list(self._tables.categories)

    def add(
        self,
        uow: UnitOfWork,
        name: str,
        bucket: str,
        goal=0,
        weekly_limit=0,
        is_tracked: bool = False,
        category_id: str | None = None,
    ) -> BudgetCategory:
        """Stage a new category with empty aggregates.

        Raises:
            InvalidCategory: If the name, bucket, goal, weekly limit or
                identifier is invalid.
        """
        resolved_id = category_id or self._id_factory()
        if uow.has_category(resolved_id):
            raise InvalidCategory(
                f"Category already exists: {resolved_id}",
                category_id=resolved_id,
            )
        category = BudgetCategory(
            id=resolved_id,
            name=self._require_name(name, resolved_id),
            bucket=self._require_bucket(bucket, resolved_id),
            is_tracked=bool(is_tracked),
            this_month=MonthlyTotals(
                goal=require_amount(
                    goal,
                    error=InvalidCategory,
                    label="Goal",
                    category_id=resolved_id,
                ),
            ),
            weekly_limit=require_amount(
                weekly_limit,
                error=InvalidCategory,
                label="Weekly limit",
                category_id=resolved_id,
            ),
        )
        uow.put_category(category)
        return category

    def rename(
        self,
        uow: UnitOfWork,
        category_id: str,
        name: str,
    ) -> BudgetCategory:
        category = uow.get_category(category_id)
        updated = replace(category, name=self._require_name(name, category_id))
        uow.put_category(updated)
        return updated

    def change_bucket(
        self,
        uow: UnitOfWork,
        category_id: str,
        bucket: str,
    ) -> BudgetCategory:
        category = uow.get_category(category_id)
        updated = replace(
            category,
            bucket=self._require_bucket(bucket, category_id),
        )
        uow.put_category(updated)
        return updated

    @staticmethod
    def _require_name(name: str, category_id: str) -> str:
        if not is_valid_name(name):
            raise InvalidCategory(
                f"Invalid category name: {name!r}",
                category_id=category_id,
            )
        return name.strip()

    @staticmethod
    def _require_bucket(bucket: str, category_id: str) -> str:
        if bucket not in BUCKETS:
            raise InvalidCategory(
                f"Unknown bucket: {bucket!r}",
                category_id=category_id,
                bucket=bucket,
            )
        return bucket


__all__ = ["CategoryRegistry"]

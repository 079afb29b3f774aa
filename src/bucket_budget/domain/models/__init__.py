"""Domain models package."""

from .categories import (
    BudgetCategory,
    CategoryMonthlyView,
    MonthlyTotals,
    TrackedCategoryView,
)
from .expenses import ExpenseEntry
from .periods import BudgetPeriod
from .streams import (
    BucketAllocation,
    BucketTotal,
    Distribution,
    IncomeStream,
    StreamAllocations,
)

__all__ = [
    "BudgetCategory",
    "CategoryMonthlyView",
    "MonthlyTotals",
    "TrackedCategoryView",
    "ExpenseEntry",
    "BudgetPeriod",
    "BucketAllocation",
    "BucketTotal",
    "Distribution",
    "IncomeStream",
    "StreamAllocations",
]

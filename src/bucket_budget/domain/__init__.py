"""Domain package for budget rules and core models."""

from .constants import BUCKETS, DAYS_PER_WEEK, MAX_PERCENTAGE
from .errors import (
    BudgetError,
    CategoryNotFound,
    InvalidCategory,
    InvalidDistribution,
    InvalidExpense,
    InvalidStream,
    StreamNotFound,
)
from .models import (
    BucketAllocation,
    BucketTotal,
    BudgetCategory,
    BudgetPeriod,
    CategoryMonthlyView,
    Distribution,
    ExpenseEntry,
    IncomeStream,
    MonthlyTotals,
    StreamAllocations,
    TrackedCategoryView,
)

__all__ = [
    "BUCKETS",
    "DAYS_PER_WEEK",
    "MAX_PERCENTAGE",
    "BudgetError",
    "CategoryNotFound",
    "InvalidCategory",
    "InvalidDistribution",
    "InvalidExpense",
    "InvalidStream",
    "StreamNotFound",
    "BucketAllocation",
    "BucketTotal",
    "BudgetCategory",
    "BudgetPeriod",
    "CategoryMonthlyView",
    "Distribution",
    "ExpenseEntry",
    "IncomeStream",
    "MonthlyTotals",
    "StreamAllocations",
    "TrackedCategoryView",
]

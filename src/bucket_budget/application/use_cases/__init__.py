"""Application use cases package."""

from .add_expense import AddExpenseUseCase, ExpenseResult
from .advance_periods import AdvancePeriodsResult, AdvancePeriodsUseCase
from .check_consistency import CheckConsistencyUseCase, ConsistencyIssue
from .get_allocations import GetAllocationsUseCase, GetBucketTotalsUseCase
from .list_categories import ListCategoriesUseCase
from .list_expenses import ListExpensesUseCase
from .list_tracked import ListTrackedUseCase
from .manage_categories import (
    AddCategoryUseCase,
    SetGoalUseCase,
    SetWeeklyLimitUseCase,
    UpdateCategoryUseCase,
)
from .manage_streams import (
    AddStreamUseCase,
    DeleteStreamUseCase,
    UpdateStreamUseCase,
)
from .reset_week import ResetWeekUseCase
from .rollover_month import RolloverMonthUseCase
from .set_distribution import DistributionResult, SetDistributionUseCase
from .toggle_tracking import (
    SetTrackingUseCase,
    ToggleTrackingUseCase,
    TrackingResult,
)

__all__ = [
    "AddExpenseUseCase",
    "ExpenseResult",
    "AdvancePeriodsResult",
    "AdvancePeriodsUseCase",
    "CheckConsistencyUseCase",
    "ConsistencyIssue",
    "GetAllocationsUseCase",
    "GetBucketTotalsUseCase",
    "ListCategoriesUseCase",
    "ListExpensesUseCase",
    "ListTrackedUseCase",
    "AddCategoryUseCase",
    "SetGoalUseCase",
    "SetWeeklyLimitUseCase",
    "UpdateCategoryUseCase",
    "AddStreamUseCase",
    "DeleteStreamUseCase",
    "UpdateStreamUseCase",
    "ResetWeekUseCase",
    "RolloverMonthUseCase",
    "DistributionResult",
    "SetDistributionUseCase",
    "SetTrackingUseCase",
    "ToggleTrackingUseCase",
    "TrackingResult",
]

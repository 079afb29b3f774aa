"""Budget components: streams, distributions, categories, trackers, ledger."""

from .budget import Budget
from .category_registry import CategoryRegistry
from .distribution_engine import DistributionEngine
from .expense_ledger import ExpenseLedger, ExpenseSequence
from .monthly_tracker import MonthlyTracker
from .stream_store import StreamStore
from .weekly_tracker import WeeklyTracker

__all__ = [
    "Budget",
    "CategoryRegistry",
    "DistributionEngine",
    "ExpenseLedger",
    "ExpenseSequence",
    "MonthlyTracker",
    "StreamStore",
    "WeeklyTracker",
]

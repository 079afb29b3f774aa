"""Application ports package."""

from .budget_store import BudgetChangeSet, BudgetSnapshot, BudgetStorePort
from .clock import ClockPort
from .database import DatabaseEnginePort

__all__ = [
    "BudgetChangeSet",
    "BudgetSnapshot",
    "BudgetStorePort",
    "ClockPort",
    "DatabaseEnginePort",
]

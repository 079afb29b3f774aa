"""Shared fixtures building budgets over an in-memory store and fixed clock."""

from datetime import date, datetime
from decimal import Decimal
from itertools import count
from unittest.mock import MagicMock

import pytest

from bucket_budget.application.budget import Budget
from bucket_budget.application.ports.budget_store import BudgetSnapshot
from bucket_budget.domain.models import (
    BudgetCategory,
    BudgetPeriod,
    MonthlyTotals,
)
from bucket_budget.infrastructure.clock import FixedClock
from bucket_budget.infrastructure.memory_store import InMemoryBudgetStore

# Wednesday; five days remain in a Monday-based week.
WEDNESDAY = datetime(2024, 5, 15, 12, 30)


def sequential_ids(prefix: str = "id"):
    counter = count(1)
    return lambda: f"{prefix}-{next(counter)}"


def dining_category(**overrides) -> BudgetCategory:
    values = {
        "id": "dining",
        "name": "Dining & Drinks",
        "bucket": "spending",
        "is_tracked": True,
        "last_month": Decimal("668.14"),
        "this_month": MonthlyTotals(
            spent=Decimal("285.45"),
            goal=Decimal("500.00"),
        ),
        "weekly_limit": Decimal("116.28"),
        "weekly_spent": Decimal("68.45"),
    }
    values.update(overrides)
    return BudgetCategory(**values)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(WEDNESDAY)


@pytest.fixture
def store() -> InMemoryBudgetStore:
    return InMemoryBudgetStore()


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def budget(store, clock) -> Budget:
    return Budget.load(store, clock, id_factory=sequential_ids())


@pytest.fixture
def dining_budget(clock) -> Budget:
    """Budget replayed with the Dining & Drinks opening balances."""
    store = InMemoryBudgetStore(
        BudgetSnapshot(
            categories=[dining_category()],
            period=BudgetPeriod(
                month_start=date(2024, 5, 1),
                week_start=date(2024, 5, 13),
            ),
        )
    )
    return Budget.load(store, clock, id_factory=sequential_ids())

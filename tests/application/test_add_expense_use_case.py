"""Tests for AddExpenseUseCase and the monthly/weekly propagation."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from bucket_budget.application.budget import Budget
from bucket_budget.application.use_cases.add_expense import AddExpenseUseCase
from bucket_budget.application.use_cases.manage_categories import (
    AddCategoryUseCase,
)
from bucket_budget.application.use_cases.toggle_tracking import (
    ToggleTrackingUseCase,
)
from bucket_budget.domain.errors import CategoryNotFound, InvalidExpense
from bucket_budget.infrastructure.memory_store import InMemoryBudgetStore


def test_expense_updates_monthly_and_weekly_totals(dining_budget, logger) -> None:
    """Scenario: 285.45 + 25.50 = 310.95 monthly, 68.45 + 25.50 weekly."""
    result = AddExpenseUseCase(dining_budget, logger=logger).execute(
        "dining",
        "25.50",
        note=" Lunch ",
    )

    assert result.monthly.spent == Decimal("310.95")
    assert result.weekly.weekly_spent == Decimal("93.95")
    assert result.weekly.weekly_limit == Decimal("116.28")
    assert result.weekly.safe_to_spend_today == Decimal("4.47")
    assert result.entry.note == "Lunch"
    assert result.entry.amount == Decimal("25.50")
    category = dining_budget.categories.get("dining")
    assert category.this_month.spent == Decimal("310.95")
    assert category.weekly_spent == Decimal("93.95")


def test_expense_for_untracked_category_skips_weekly(dining_budget, logger) -> None:
    """Scenario: after untracking, spend reaches the monthly view only."""
    ToggleTrackingUseCase(dining_budget, logger=logger).execute("dining")
    assert dining_budget.weekly.list_tracked() == []

    result = AddExpenseUseCase(dining_budget, logger=logger).execute(
        "dining",
        "25.50",
    )

    assert result.weekly is None
    category = dining_budget.categories.get("dining")
    assert category.this_month.spent == Decimal("310.95")
    assert category.weekly_spent == Decimal("68.45")
    assert [entry.id for entry in dining_budget.ledger.list_expenses()] == [
        result.entry.id
    ]


def test_expense_uses_clock_timestamp(dining_budget, clock, logger) -> None:
    result = AddExpenseUseCase(dining_budget, logger=logger).execute("dining", 5)

    assert result.entry.timestamp == clock.now()


@pytest.mark.parametrize("amount", [0, "-3", "0.001", "abc", "1e27"])
def test_non_positive_amount_is_rejected(dining_budget, logger, amount) -> None:
    with pytest.raises(InvalidExpense):
        AddExpenseUseCase(dining_budget, logger=logger).execute("dining", amount)

    category = dining_budget.categories.get("dining")
    assert category.this_month.spent == Decimal("285.45")
    assert category.weekly_spent == Decimal("68.45")
    assert list(dining_budget.ledger.list_expenses()) == []
    logger.warning.assert_called_once()


def test_unknown_category_is_rejected_before_amount(dining_budget, logger) -> None:
    """Category existence is checked first, even with a bad amount."""
    with pytest.raises(CategoryNotFound) as excinfo:
        AddExpenseUseCase(dining_budget, logger=logger).execute("missing", -1)

    assert excinfo.value.category_id == "missing"


def test_failed_store_write_leaves_no_partial_state(clock, logger) -> None:
    """If persistence fails, neither tracker nor ledger changes."""
    store = InMemoryBudgetStore()
    budget = Budget.load(store, clock)
    AddCategoryUseCase(budget, logger=logger).execute(
        "Groceries",
        "spending",
        weekly_limit=100,
        is_tracked=True,
        category_id="groceries",
    )
    failing_store = MagicMock(wraps=store)
    failing_store.save.side_effect = RuntimeError("disk full")
    budget._store = failing_store

    with pytest.raises(RuntimeError):
        AddExpenseUseCase(budget, logger=logger).execute("groceries", 12)

    category = budget.categories.get("groceries")
    assert category.this_month.spent == Decimal("0")
    assert category.weekly_spent == Decimal("0")
    assert list(budget.ledger.list_expenses()) == []


def test_totals_match_ledger_after_many_expenses(budget, logger) -> None:
    """Monthly and weekly spend equal the ledger sums while tracked."""
    add_category = AddCategoryUseCase(budget, logger=logger)
    add_category.execute("Groceries", "spending", is_tracked=True, category_id="g")
    add_category.execute("Fuel", "spending", category_id="f")
    add_expense = AddExpenseUseCase(budget, logger=logger)
    amounts = ["12.10", "3.33", "40", "0.57", "19.99"]
    for index, amount in enumerate(amounts):
        add_expense.execute("g" if index % 2 == 0 else "f", amount)

    groceries = budget.categories.get("g")
    fuel = budget.categories.get("f")
    assert groceries.this_month.spent == budget.ledger.total_for("g")
    assert groceries.weekly_spent == budget.ledger.total_for("g")
    assert groceries.this_month.spent == Decimal("72.09")
    assert fuel.this_month.spent == Decimal("3.90")
    assert fuel.weekly_spent == Decimal("0")

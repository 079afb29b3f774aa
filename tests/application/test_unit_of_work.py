"""Tests for staged writes, commit and rollback."""

from datetime import date, datetime
from decimal import Decimal
import threading
from unittest.mock import MagicMock

import pytest

from bucket_budget.application.state import BudgetTables, UnitOfWork
from bucket_budget.domain.errors import CategoryNotFound, StreamNotFound
from bucket_budget.domain.models import (
    BudgetCategory,
    BudgetPeriod,
    Distribution,
    ExpenseEntry,
    IncomeStream,
)



def _lock_is_free(tables: BudgetTables) -> bool:
    """Return whether another thread can take the tables lock."""
    acquired = []

    def try_lock() -> None:
        got = tables.lock.acquire(timeout=1)
        if got:
            tables.lock.release()
        acquired.append(got)

    thread = threading.Thread(target=try_lock)
    thread.start()
    thread.join(timeout=5)
    return acquired == [True]


@pytest.fixture
def tables() -> BudgetTables:
    return BudgetTables(
        streams={"msci": IncomeStream("msci", "MSCI", Decimal("4161.45"))},
        distributions={
            "msci": Distribution("msci", {"savings": Decimal("5")})
        },
        categories={"rent": BudgetCategory("rent", "Rent", "wolcc")},
    )


def test_staged_writes_are_visible_only_inside(tables) -> None:
    store = MagicMock()
    uow = UnitOfWork(tables, store)

    uow.put_category(BudgetCategory("fuel", "Fuel", "spending"))

    assert uow.get_category("fuel").name == "Fuel"
    assert "fuel" not in tables.categories
    assert uow.category_ids() == ["rent", "fuel"]


def test_commit_saves_then_applies(tables) -> None:
    store = MagicMock()
    entry = ExpenseEntry("e1", "rent", Decimal("10.00"), datetime(2024, 5, 1))

    with UnitOfWork(tables, store) as uow:
        uow.append_expense(entry)
        uow.set_period(BudgetPeriod(date(2024, 5, 1), date(2024, 4, 29)))

    changes = store.save.call_args.args[0]
    assert changes.expenses == [entry]
    assert tables.expenses == [entry]
    assert tables.period.month_start == date(2024, 5, 1)


def test_failed_save_leaves_tables_untouched(tables) -> None:
    store = MagicMock()
    store.save.side_effect = RuntimeError("connection lost")

    with pytest.raises(RuntimeError):
        with UnitOfWork(tables, store) as uow:
            uow.put_category(BudgetCategory("fuel", "Fuel", "spending"))

    assert list(tables.categories) == ["rent"]
    assert _lock_is_free(tables)


def test_exception_inside_block_rolls_back(tables) -> None:
    store = MagicMock()

    with pytest.raises(ValueError):
        with UnitOfWork(tables, store) as uow:
            uow.put_category(BudgetCategory("fuel", "Fuel", "spending"))
            raise ValueError("boom")

    store.save.assert_not_called()
    assert "fuel" not in tables.categories
    assert uow.changes().is_empty


def test_empty_commit_skips_store(tables) -> None:
    store = MagicMock()

    changes = UnitOfWork(tables, store).commit()

    assert changes.is_empty
    store.save.assert_not_called()


def test_commit_twice_is_an_error(tables) -> None:
    uow = UnitOfWork(tables, MagicMock())
    uow.commit()

    with pytest.raises(RuntimeError):
        uow.commit()


def test_delete_stream_drops_its_distribution(tables) -> None:
    store = MagicMock()

    with UnitOfWork(tables, store) as uow:
        uow.delete_stream("msci")
        assert not uow.has_stream("msci")
        with pytest.raises(StreamNotFound):
            uow.get_stream("msci")

    assert tables.streams == {}
    assert tables.distributions == {}
    assert store.save.call_args.args[0].deleted_stream_ids == ["msci"]


def test_delete_then_replace_distribution(tables) -> None:
    uow = UnitOfWork(tables, MagicMock())
    replacement = Distribution("msci", {"taxes": Decimal("10")})

    uow.delete_distribution("msci")
    assert uow.get_distribution("msci") is None
    uow.put_distribution(replacement)
    changes = uow.changes()

    assert changes.distributions == [replacement]
    assert changes.deleted_distribution_ids == []


def test_unknown_category_raises(tables) -> None:
    with pytest.raises(CategoryNotFound):
        UnitOfWork(tables, MagicMock()).get_category("ghost")

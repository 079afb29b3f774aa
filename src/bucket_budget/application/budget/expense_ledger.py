"""Expense ledger: the single write path for recorded spend."""

from bisect import bisect_left
from collections.abc import Iterator
from datetime import date, datetime, time
from decimal import Decimal
from typing import Callable

from bucket_budget.application.budget.category_registry import (
    CategoryRegistry,
)
from bucket_budget.application.budget.monthly_tracker import MonthlyTracker
from bucket_budget.application.budget.weekly_tracker import WeeklyTracker
from bucket_budget.application.ports.clock import ClockPort
from bucket_budget.application.state import BudgetTables, UnitOfWork
from bucket_budget.domain.errors import InvalidExpense
from bucket_budget.domain.models import ExpenseEntry
from bucket_budget.domain.services import require_amount
from bucket_budget.utils.identifiers import new_identifier


def _as_datetime(value: date | datetime, like: datetime) -> datetime:
    """Return value as a datetime comparable with ``like``.

    A date means its midnight. Naive values take the tzinfo of ``like``;
    aware values compared with naive timestamps are read as local time.
    """
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if like.tzinfo is not None and value.tzinfo is None:
        return value.replace(tzinfo=like.tzinfo)
    if like.tzinfo is None and value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


class ExpenseSequence:
    """Lazy, restartable view over ledger entries.

    Each iteration walks the ledger as it is when the iteration starts,
    in ascending timestamp order.
    """

    def __init__(
        self,
        tables: BudgetTables,
        category_id: str | None = None,
        since: date | datetime | None = None,
    ) -> None:
        self._tables = tables
        self._category_id = category_id
        self._since = since

    def __iter__(self) -> Iterator[ExpenseEntry]:
        with self._tables.lock:
            entries = tuple(self._tables.expenses)
        start = 0
        if self._since is not None and entries:
            start = bisect_left(
                entries,
                _as_datetime(self._since, entries[0].timestamp),
                key=lambda entry: entry.timestamp,
            )
        for index in range(start, len(entries)):
            entry = entries[index]
            if (
                self._category_id is None
                or entry.category_id == self._category_id
            ):
                yield entry


class ExpenseLedger:
    """Record expenses and propagate them to both trackers."""

    def __init__(
        self,
        registry: CategoryRegistry,
        monthly: MonthlyTracker,
        weekly: WeeklyTracker,
        tables: BudgetTables,
        clock: ClockPort,
        id_factory: Callable[[], str] = new_identifier,
    ) -> None:
        self._registry = registry
        self._monthly = monthly
        self._weekly = weekly
        self._tables = tables
        self._clock = clock
        self._id_factory = id_factory

    def add_expense(
        self,
        uow: UnitOfWork,
        category_id: str,
        amount,
        note: str | None = None,
    ) -> ExpenseEntry:
        """Stage an expense and its effect on the monthly and weekly totals.

        Steps run inside the caller's unit of work: validate, append the
        entry, update this month's spend, then update this week's spend when
        the category is tracked. Nothing is visible until the unit of work
        commits.

        Args:
            uow: Unit of work receiving every write.
            category_id: Category the expense belongs to.
            amount: Positive amount, rounded to cents.
            note: Optional free text.

        Returns:
            ExpenseEntry: The staged entry.

        Raises:
            CategoryNotFound: If the category does not exist.
            InvalidExpense: If the amount is not positive.
        """
        uow.get_category(category_id)
        value = require_amount(
            amount,
            error=InvalidExpense,
            label="Expense amount",
            allow_zero=False,
            category_id=category_id,
        )
        cleaned_note = note.strip() if note else ""
        entry = ExpenseEntry(
            id=self._id_factory(),
            category_id=category_id,
            amount=value,
            timestamp=self._clock.now(),
            note=cleaned_note or None,
        )
        uow.append_expense(entry)
        self._monthly.record_spend(uow, category_id, value)
        self._weekly.record_spend(uow, category_id, value)
        return entry

    def list_expenses(
        self,
        category_id: str | None = None,
        since: date | datetime | None = None,
    ) -> ExpenseSequence:
        """Return entries ordered by timestamp, optionally filtered.

        Args:
            category_id: Keep only entries of this category.
            since: Keep only entries recorded at or after this moment.
        """
        if category_id is not None:
            self._registry.get(category_id)
        return ExpenseSequence(self._tables, category_id, since)

    def total_for(
        self,
        category_id: str,
        since: date | datetime | None = None,
    ) -> Decimal:
        return sum(
            (entry.amount for entry in self.list_expenses(category_id, since)),
            Decimal("0"),
        )


__all__ = ["ExpenseLedger", "ExpenseSequence"]

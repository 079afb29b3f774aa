"""In-memory tables holding every budget entity."""

from bisect import insort
from dataclasses import dataclass, field
import threading

from bucket_budget.application.ports.budget_store import (
    BudgetChangeSet,
    BudgetSnapshot,
)
from bucket_budget.domain.models import (
    BudgetCategory,
    BudgetPeriod,
    Distribution,
    ExpenseEntry,
    IncomeStream,
)


def _entry_timestamp(entry: ExpenseEntry):
    return entry.timestamp


@dataclass
class BudgetTables:
    """Indexed tables of budget entities.

    Dict insertion order is creation order. Updating an existing key keeps
    its position. Expenses stay sorted by timestamp; entries with equal
    timestamps keep insertion order.

    ``lock`` is held while a change set is saved and applied. Reads that
    span several records hold it too, so they never see a change set
    half applied.
    """

    streams: dict[str, IncomeStream] = field(default_factory=dict)
    distributions: dict[str, Distribution] = field(default_factory=dict)
    categories: dict[str, BudgetCategory] = field(default_factory=dict)
    expenses: list[ExpenseEntry] = field(default_factory=list)
    period: BudgetPeriod | None = None
    lock: threading.RLock = field(
        default_factory=threading.RLock,
        repr=False,
        compare=False,
    )

    @classmethod
    def from_snapshot(cls, snapshot: BudgetSnapshot) -> "BudgetTables":
        """Build tables from records replayed by the store."""
        streams = {stream.id: stream for stream in snapshot.streams}
        return cls(
            streams=streams,
            distributions={
                distribution.stream_id: distribution
                for distribution in snapshot.distributions
                if distribution.stream_id in streams
            },
            categories={
                category.id: category for category in snapshot.categories
            },
            expenses=sorted(snapshot.expenses, key=_entry_timestamp),
            period=snapshot.period,
        )

    def apply(self, changes: BudgetChangeSet) -> None:
        """Apply a committed change set.

        Callers must hold ``lock``.
        """
        for stream in changes.streams:
            self.streams[stream.id] = stream
        for distribution in changes.distributions:
            self.distributions[distribution.stream_id] = distribution
        for stream_id in changes.deleted_distribution_ids:
            self.distributions.pop(stream_id, None)
        for stream_id in changes.deleted_stream_ids:
            self.streams.pop(stream_id, None)
            self.distributions.pop(stream_id, None)
        for category in changes.categories:
            self.categories[category.id] = category
        for entry in changes.expenses:
            insort(self.expenses, entry, key=_entry_timestamp)
        if changes.period is not None:
            self.period = changes.period


__all__ = ["BudgetTables"]

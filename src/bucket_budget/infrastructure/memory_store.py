"""In-memory implementation of BudgetStorePort."""

from bucket_budget.application.ports.budget_store import (
    BudgetChangeSet,
    BudgetSnapshot,
    BudgetStorePort,
)


class InMemoryBudgetStore(BudgetStorePort):
    """Store keeping records in process memory.

    Records survive for the lifetime of the store instance, so a budget can
    be reloaded from it. ``saved`` keeps every committed change set in order.
    """

    def __init__(self, snapshot: BudgetSnapshot | None = None) -> None:
        snapshot = snapshot or BudgetSnapshot()
        self._streams = {stream.id: stream for stream in snapshot.streams}
        self._distributions = {
            distribution.stream_id: distribution
            for distribution in snapshot.distributions
        }
        self._categories = {
            category.id: category for category in snapshot.categories
        }
        self._expenses = list(snapshot.expenses)
        self._period = snapshot.period
        self.saved: list[BudgetChangeSet] = []

    def load(self) -> BudgetSnapshot:
        return BudgetSnapshot(
            streams=list(self._streams.values()),
            distributions=list(self._distributions.values()),
            categories=list(self._categories.values()),
            expenses=list(self._expenses),
            period=self._period,
        )

    def save(self, changes: BudgetChangeSet) -> None:
        for stream in changes.streams:
            self._streams[stream.id] = stream
        for distribution in changes.distributions:
            self._distributions[distribution.stream_id] = distribution
        for stream_id in changes.deleted_distribution_ids:
            self._distributions.pop(stream_id, None)
        for stream_id in changes.deleted_stream_ids:
            self._streams.pop(stream_id, None)
            self._distributions.pop(stream_id, None)
        for category in changes.categories:
            self._categories[category.id] = category
        self._expenses.extend(changes.expenses)
        if changes.period is not None:
            self._period = changes.period
        self.saved.append(changes)


__all__ = ["InMemoryBudgetStore"]

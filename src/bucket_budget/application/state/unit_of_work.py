"""Unit of work staging budget mutations for an all-or-nothing commit."""

from bucket_budget.application.ports.budget_store import (
    BudgetChangeSet,
    BudgetStorePort,
)
from bucket_budget.application.state.tables import BudgetTables
from bucket_budget.domain.errors import CategoryNotFound, StreamNotFound
from bucket_budget.domain.models import (
    BudgetCategory,
    BudgetPeriod,
    Distribution,
    ExpenseEntry,
    IncomeStream,
)


class UnitOfWork:
    """Collect the writes of one command and commit them together.

    Reads made through the unit of work see its own staged writes on top of
    the committed tables. Nothing is visible to other readers until
    :meth:`commit` has written the change set to the store and applied it to
    the tables. Leaving the ``with`` block through an exception discards
    every staged write.
    """

    def __init__(self, tables: BudgetTables, store: BudgetStorePort) -> None:
        self._tables = tables
        self._store = store
        self._streams: dict[str, IncomeStream] = {}
        self._deleted_streams: list[str] = []
        self._distributions: dict[str, Distribution] = {}
        self._deleted_distributions: list[str] = []
        self._categories: dict[str, BudgetCategory] = {}
        self._expenses: list[ExpenseEntry] = []
        self._period: BudgetPeriod | None = None
        self._closed = False

    def __enter__(self) -> "UnitOfWork":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.commit()
        else:
            self.rollback()
        return False

    # Streams

    def has_stream(self, stream_id: str) -> bool:
        if stream_id in self._deleted_streams:
            return False
        return stream_id in self._streams or stream_id in self._tables.streams

    def get_stream(self, stream_id: str) -> IncomeStream:
        if stream_id in self._deleted_streams:
            raise StreamNotFound(stream_id)
        stream = self._streams.get(stream_id) or self._tables.streams.get(
            stream_id
        )
        if stream is None:
            raise StreamNotFound(stream_id)
        return stream

    def put_stream(self, stream: IncomeStream) -> None:
        self._streams[stream.id] = stream

    def delete_stream(self, stream_id: str) -> None:
        self.get_stream(stream_id)
        self._streams.pop(stream_id, None)
        self._distributions.pop(stream_id, None)
        self._deleted_streams.append(stream_id)

    # Distributions

    def get_distribution(self, stream_id: str) -> Distribution | None:
        if stream_id in self._distributions:
            return self._distributions[stream_id]
        if stream_id in self._deleted_distributions:
            return None
        return self._tables.distributions.get(stream_id)

    def put_distribution(self, distribution: Distribution) -> None:
        self._distributions[distribution.stream_id] = distribution

    def delete_distribution(self, stream_id: str) -> None:
        self._distributions.pop(stream_id, None)
        self._deleted_distributions.append(stream_id)

    # Categories

    def has_category(self, category_id: str) -> bool:
        return (
            category_id in self._categories
            or category_id in self._tables.categories
        )

    def get_category(self, category_id: str) -> BudgetCategory:
        category = self._categories.get(category_id) or (
            self._tables.categories.get(category_id)
        )
        if category is None:
            raise CategoryNotFound(category_id)
        return category

    def put_category(self, category: BudgetCategory) -> None:
        self._categories[category.id] = category

    def category_ids(self) -> list[str]:
        """Return committed and staged category ids in creation order."""
        ids = list(self._tables.categories)
        ids.extend(
            category_id
            for category_id in self._categories
            if category_id not in self._tables.categories
        )
        return ids

    # Expenses

    def append_expense(self, entry: ExpenseEntry) -> None:
        self._expenses.append(entry)

    # Period

    @property
    def period(self) -> BudgetPeriod | None:
        return self._period or self._tables.period

    def set_period(self, period: BudgetPeriod) -> None:
        self._period = period

    # Lifecycle

    def changes(self) -> BudgetChangeSet:
        """Return the staged writes as a change set."""
        return BudgetChangeSet(
            streams=list(self._streams.values()),
            deleted_stream_ids=list(self._deleted_streams),
            distributions=list(self._distributions.values()),
            deleted_distribution_ids=[
                stream_id
                for stream_id in self._deleted_distributions
                if stream_id not in self._distributions
            ],
            categories=list(self._categories.values()),
            expenses=list(self._expenses),
            period=self._period,
        )

    def commit(self) -> BudgetChangeSet:
        """Persist the staged writes, then publish them to the tables.

        Returns:
            BudgetChangeSet: The change set that was committed.

        Raises:
            RuntimeError: If the unit of work was already committed or rolled
                back.
        """
        if self._closed:
            raise RuntimeError("Unit of work is already closed")
        changes = self.changes()
        if not changes.is_empty:
            with self._tables.lock:
                self._store.save(changes)
                self._tables.apply(changes)
        self._closed = True
        return changes

    def rollback(self) -> None:
        """Discard every staged write."""
        self._streams.clear()
        self._deleted_streams.clear()
        self._distributions.clear()
        self._deleted_distributions.clear()
        self._categories.clear()
        self._expenses.clear()
        self._period = None
        self._closed = True


__all__ = ["UnitOfWork"]

"""Budget aggregate wiring the components over one set of tables."""

from contextlib import contextmanager
from typing import Callable, Iterator

from bucket_budget.application.budget.category_registry import (
    CategoryRegistry,
)
from bucket_budget.application.budget.distribution_engine import (
    DistributionEngine,
)
from bucket_budget.application.budget.expense_ledger import ExpenseLedger
from bucket_budget.application.budget.monthly_tracker import MonthlyTracker
from bucket_budget.application.budget.stream_store import StreamStore
from bucket_budget.application.budget.weekly_tracker import WeeklyTracker
from bucket_budget.application.ports.budget_store import BudgetStorePort
from bucket_budget.application.ports.clock import ClockPort
from bucket_budget.application.state import (
    BudgetTables,
    EntityLocks,
    LockKey,
    UnitOfWork,
    category_key,
    registry_key,
)
from bucket_budget.domain.models import BudgetPeriod
from bucket_budget.utils.identifiers import new_identifier


class Budget:
    """One user's budget: tables, components, store and clock.

    Components are projections over the same :class:`BudgetTables`, so the
    monthly and weekly views read one record per category and cannot drift
    apart. Every mutation goes through :meth:`transaction`.
    """

    def __init__(
        self,
        store: BudgetStorePort,
        clock: ClockPort,
        tables: BudgetTables | None = None,
        id_factory: Callable[[], str] = new_identifier,
    ) -> None:
        self._store = store
        self._clock = clock
        self._tables = tables if tables is not None else BudgetTables()
        self._locks = EntityLocks()
        if self._tables.period is None:
            self._tables.period = BudgetPeriod(
                month_start=clock.month_start(),
                week_start=clock.week_start(),
            )

        self.streams = StreamStore(self._tables, id_factory=id_factory)
        self.distributions = DistributionEngine(self.streams, self._tables)
        self.categories = CategoryRegistry(self._tables, id_factory=id_factory)
        self.monthly = MonthlyTracker(self.categories)
        self.weekly = WeeklyTracker(self.categories, self.monthly, clock)
        self.ledger = ExpenseLedger(
            self.categories,
            self.monthly,
            self.weekly,
            self._tables,
            clock,
            id_factory=id_factory,
        )

    @classmethod
    def load(
        cls,
        store: BudgetStorePort,
        clock: ClockPort,
        id_factory: Callable[[], str] = new_identifier,
    ) -> "Budget":
        """Replay stored records into a new budget.

        Stored aggregates are restored as they were saved. A store without a
        period gets the clock's current month and week written to it.
        """
        snapshot = store.load()
        tables = BudgetTables.from_snapshot(snapshot)
        budget = cls(store, clock, tables=tables, id_factory=id_factory)
        if snapshot.period is None:
            with budget.transaction() as uow:
                uow.set_period(budget.period)
        return budget

    @property
    def clock(self) -> ClockPort:
        return self._clock

    @property
    def period(self) -> BudgetPeriod:
        return self._tables.period

    def all_category_keys(self) -> list[LockKey]:
        return [category_key(category_id) for category_id in self.categories.ids()]

    @contextmanager
    def reading(self) -> Iterator[None]:
        """Hold the tables steady for a read spanning several records.

        No change set is applied while the block runs. Do not issue commands
        inside it.
        """
        with self._tables.lock:
            yield

    @contextmanager
    def transaction(self, *lock_keys: LockKey) -> Iterator[UnitOfWork]:
        """Open a unit of work while holding the given entity locks.

        The unit of work commits when the block exits normally and rolls back
        when it raises.
        """
        with self._locks.hold(*lock_keys):
            with UnitOfWork(self._tables, self._store) as uow:
                yield uow

    @contextmanager
    def all_categories_transaction(self) -> Iterator[UnitOfWork]:
        """Open a unit of work holding the lock of every category.

        The registry lock is taken first, so no category can be created
        between listing the categories and locking them.
        """
        with self._locks.hold(registry_key()):
            with self.transaction(*self.all_category_keys()) as uow:
                yield uow


__all__ = ["Budget"]

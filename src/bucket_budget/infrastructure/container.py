"""Composition root for wiring infrastructure adapters."""

from bucket_budget.application.budget import Budget
from bucket_budget.application.ports.budget_store import BudgetStorePort
from bucket_budget.application.ports.clock import ClockPort
from bucket_budget.application.ports.database import DatabaseEnginePort
from bucket_budget.infrastructure.clock import SystemClock
from bucket_budget.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from bucket_budget.infrastructure.logging.logger import get_app_logger
from bucket_budget.infrastructure.memory_store import InMemoryBudgetStore
from bucket_budget.infrastructure.settings import BudgetSettings
from bucket_budget.infrastructure.sqlalchemy_store import SqlAlchemyBudgetStore


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_budget_store(
    settings: BudgetSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> BudgetStorePort:
    """Return the configured budget store, with its tables prepared."""
    resolved = settings or BudgetSettings.from_env()
    if resolved.store == "sqlalchemy":
        store = SqlAlchemyBudgetStore(db_port or build_database_adapter())
        store.prepare()
        return store
    get_app_logger().warning(
        "Using the in-memory budget store; records are not persisted"
    )
    return InMemoryBudgetStore()


def build_clock(settings: BudgetSettings | None = None) -> ClockPort:
    """Return the system clock using the configured week start."""
    resolved = settings or BudgetSettings.from_env()
    return SystemClock(first_weekday=resolved.first_weekday)


def build_budget(
    settings: BudgetSettings | None = None,
    store: BudgetStorePort | None = None,
    clock: ClockPort | None = None,
) -> Budget:
    """Return a budget replayed from the configured store."""
    resolved = settings or BudgetSettings.from_env()
    return Budget.load(
        store or build_budget_store(resolved),
        clock or build_clock(resolved),
    )


__all__ = [
    "build_database_adapter",
    "build_budget_store",
    "build_clock",
    "build_budget",
]

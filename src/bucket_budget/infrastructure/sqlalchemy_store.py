"""SQLAlchemy-backed implementation of BudgetStorePort.

Money and percentages are stored as text so Decimal values survive SQLite
unchanged. ``position`` columns keep creation order across reloads.
"""

from datetime import date, datetime

from sqlalchemy import text

from bucket_budget.application.ports.budget_store import (
    BudgetChangeSet,
    BudgetSnapshot,
    BudgetStorePort,
)
from bucket_budget.application.ports.database import DatabaseEnginePort
from bucket_budget.domain.models import (
    BudgetCategory,
    BudgetPeriod,
    Distribution,
    ExpenseEntry,
    IncomeStream,
    MonthlyTotals,
)
from bucket_budget.utils.decimal_utils import coerce_decimal


CREATE_TABLES_SQL = (
    """
    CREATE TABLE IF NOT EXISTS income_streams (
        id TEXT PRIMARY KEY,
        position INTEGER NOT NULL,
        name TEXT NOT NULL,
        amount TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS stream_distributions (
        stream_id TEXT NOT NULL,
        bucket TEXT NOT NULL,
        percentage TEXT NOT NULL,
        PRIMARY KEY (stream_id, bucket)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS budget_categories (
        id TEXT PRIMARY KEY,
        position INTEGER NOT NULL,
        name TEXT NOT NULL,
        bucket TEXT NOT NULL,
        is_tracked INTEGER NOT NULL,
        last_month TEXT NOT NULL,
        spent TEXT NOT NULL,
        goal TEXT NOT NULL,
        weekly_limit TEXT NOT NULL,
        weekly_spent TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS expense_entries (
        id TEXT PRIMARY KEY,
        position INTEGER NOT NULL,
        category_id TEXT NOT NULL,
        amount TEXT NOT NULL,
        recorded_at TEXT NOT NULL,
        note TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS budget_periods (
        id INTEGER PRIMARY KEY,
        month_start TEXT NOT NULL,
        week_start TEXT NOT NULL
    )
    """,
)

SELECT_STREAMS_SQL = text(
    """
    SELECT id, name, amount
    FROM income_streams
    ORDER BY position
    """
)

SELECT_DISTRIBUTIONS_SQL = text(
    """
    SELECT stream_id, bucket, percentage
    FROM stream_distributions
    ORDER BY stream_id
    """
)

SELECT_CATEGORIES_SQL = text(
    """
    SELECT id, name, bucket, is_tracked, last_month, spent, goal,
           weekly_limit, weekly_spent
    FROM budget_categories
    ORDER BY position
    """
)

SELECT_EXPENSES_SQL = text(
    """
    SELECT id, category_id, amount, recorded_at, note
    FROM expense_entries
    ORDER BY recorded_at, position
    """
)

SELECT_PERIOD_SQL = text(
    """
    SELECT month_start, week_start
    FROM budget_periods
    WHERE id = 1
    """
)

UPSERT_STREAM_SQL = text(
    """
    INSERT INTO income_streams (id, position, name, amount)
    VALUES (
        :id,
        (SELECT COALESCE(MAX(position), 0) + 1 FROM income_streams),
        :name,
        :amount
    )
    ON CONFLICT (id) DO UPDATE SET
        name = excluded.name,
        amount = excluded.amount
    """
)

DELETE_STREAM_SQL = text("DELETE FROM income_streams WHERE id = :stream_id")

DELETE_DISTRIBUTION_SQL = text(
    "DELETE FROM stream_distributions WHERE stream_id = :stream_id"
)

INSERT_DISTRIBUTION_SQL = text(
    """
    INSERT INTO stream_distributions (stream_id, bucket, percentage)
    VALUES (:stream_id, :bucket, :percentage)
    """
)

UPSERT_CATEGORY_SQL = text(
    """
    INSERT INTO budget_categories (
        id, position, name, bucket, is_tracked, last_month, spent, goal,
        weekly_limit, weekly_spent
    )
    VALUES (
        :id,
        (SELECT COALESCE(MAX(position), 0) + 1 FROM budget_categories),
        :name,
        :bucket,
        :is_tracked,
        :last_month,
        :spent,
        :goal,
        :weekly_limit,
        :weekly_spent
    )
    ON CONFLICT (id) DO UPDATE SET
        name = excluded.name,
        bucket = excluded.bucket,
        is_tracked = excluded.is_tracked,
        last_month = excluded.last_month,
        spent = excluded.spent,
        goal = excluded.goal,
        weekly_limit = excluded.weekly_limit,
        weekly_spent = excluded.weekly_spent
    """
)

INSERT_EXPENSE_SQL = text(
    """
    INSERT INTO expense_entries (
        id, position, category_id, amount, recorded_at, note
    )
    VALUES (
        :id,
        (SELECT COALESCE(MAX(position), 0) + 1 FROM expense_entries),
        :category_id,
        :amount,
        :recorded_at,
        :note
    )
    """
)

UPSERT_PERIOD_SQL = text(
    """
    INSERT INTO budget_periods (id, month_start, week_start)
    VALUES (1, :month_start, :week_start)
    ON CONFLICT (id) DO UPDATE SET
        month_start = excluded.month_start,
        week_start = excluded.week_start
    """
)


class SqlAlchemyBudgetStore(BudgetStorePort):
    """Budget store backed by SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the budget engine.
        """
        self._db_port = db_port

    def prepare(self) -> None:
        """Create the budget tables if they do not exist."""
        engine = self._db_port.get_budget_engine()
        with engine.begin() as conn:
            for statement in CREATE_TABLES_SQL:
                conn.exec_driver_sql(statement)

    def load(self) -> BudgetSnapshot:
        """Return every stored record in creation order."""
        engine = self._db_port.get_budget_engine()
        with engine.connect() as conn:
            stream_rows = conn.execute(SELECT_STREAMS_SQL).all()
            distribution_rows = conn.execute(SELECT_DISTRIBUTIONS_SQL).all()
            category_rows = conn.execute(SELECT_CATEGORIES_SQL).all()
            expense_rows = conn.execute(SELECT_EXPENSES_SQL).all()
            period_row = conn.execute(SELECT_PERIOD_SQL).first()

        percentages: dict[str, dict] = {}
        for row in distribution_rows:
            percentages.setdefault(row.stream_id, {})[row.bucket] = (
                coerce_decimal(row.percentage)
            )

        return BudgetSnapshot(
            streams=[
                IncomeStream(
                    id=row.id,
                    name=row.name,
                    amount=coerce_decimal(row.amount),
                )
                for row in stream_rows
            ],
            distributions=[
                Distribution(stream_id=stream_id, percentages=values)
                for stream_id, values in percentages.items()
            ],
            categories=[self._to_category(row) for row in category_rows],
            expenses=[
                ExpenseEntry(
                    id=row.id,
                    category_id=row.category_id,
                    amount=coerce_decimal(row.amount),
                    timestamp=datetime.fromisoformat(row.recorded_at),
                    note=row.note,
                )
                for row in expense_rows
            ],
            period=(
                BudgetPeriod(
                    month_start=date.fromisoformat(period_row.month_start),
                    week_start=date.fromisoformat(period_row.week_start),
                )
                if period_row
                else None
            ),
        )

    def save(self, changes: BudgetChangeSet) -> None:
        """Write a change set inside a single database transaction."""
        engine = self._db_port.get_budget_engine()
        with engine.begin() as conn:
            for stream in changes.streams:
                conn.execute(
                    UPSERT_STREAM_SQL,
                    {
                        "id": stream.id,
                        "name": stream.name,
                        "amount": str(stream.amount),
                    },
                )
            for stream_id in [
                *changes.deleted_stream_ids,
                *changes.deleted_distribution_ids,
            ]:
                conn.execute(DELETE_DISTRIBUTION_SQL, {"stream_id": stream_id})
            for stream_id in changes.deleted_stream_ids:
                conn.execute(DELETE_STREAM_SQL, {"stream_id": stream_id})
            for distribution in changes.distributions:
                conn.execute(
                    DELETE_DISTRIBUTION_SQL,
                    {"stream_id": distribution.stream_id},
                )
                rows = [
                    {
                        "stream_id": distribution.stream_id,
                        "bucket": bucket,
                        "percentage": str(percentage),
                    }
                    for bucket, percentage in distribution.percentages.items()
                ]
                if rows:
                    conn.execute(INSERT_DISTRIBUTION_SQL, rows)
            for category in changes.categories:
                conn.execute(UPSERT_CATEGORY_SQL, self._category_params(category))
            for entry in changes.expenses:
                conn.execute(
                    INSERT_EXPENSE_SQL,
                    {
                        "id": entry.id,
                        "category_id": entry.category_id,
                        "amount": str(entry.amount),
                        "recorded_at": entry.timestamp.isoformat(),
                        "note": entry.note,
                    },
                )
            if changes.period is not None:
                conn.execute(
                    UPSERT_PERIOD_SQL,
                    {
                        "month_start": changes.period.month_start.isoformat(),
                        "week_start": changes.period.week_start.isoformat(),
                    },
                )

    @staticmethod
    def _category_params(category: BudgetCategory) -> dict[str, object]:
        return {
            "id": category.id,
            "name": category.name,
            "bucket": category.bucket,
            "is_tracked": int(category.is_tracked),
            "last_month": str(category.last_month),
            "spent": str(category.this_month.spent),
            "goal": str(category.this_month.goal),
            "weekly_limit": str(category.weekly_limit),
            "weekly_spent": str(category.weekly_spent),
        }

    @staticmethod
    def _to_category(row) -> BudgetCategory:
        return BudgetCategory(
            id=row.id,
            name=row.name,
            bucket=row.bucket,
            is_tracked=bool(row.is_tracked),
            last_month=coerce_decimal(row.last_month),
            this_month=MonthlyTotals(
                spent=coerce_decimal(row.spent),
                goal=coerce_decimal(row.goal),
            ),
            weekly_limit=coerce_decimal(row.weekly_limit),
            weekly_spent=coerce_decimal(row.weekly_spent),
        )


__all__ = [
    "SqlAlchemyBudgetStore",
    "CREATE_TABLES_SQL",
    "UPSERT_STREAM_SQL",
    "UPSERT_CATEGORY_SQL",
    "INSERT_EXPENSE_SQL",
]

"""Port for durably storing budget records and replaying them at startup."""

from dataclasses import dataclass, field
from typing import Protocol

from bucket_budget.domain.models import (
    BudgetCategory,
    BudgetPeriod,
    Distribution,
    ExpenseEntry,
    IncomeStream,
)


@dataclass(frozen=True)
class BudgetSnapshot:
    """Every stored record, in creation order.

    Attributes:
        streams: Income streams.
        distributions: Distributions, at most one per stream.
        categories: Budget categories with their stored aggregates.
        expenses: Expense entries ordered by timestamp.
        period: Open month and week, when one was stored.
    """

    streams: list[IncomeStream] = field(default_factory=list)
    distributions: list[Distribution] = field(default_factory=list)
    categories: list[BudgetCategory] = field(default_factory=list)
    expenses: list[ExpenseEntry] = field(default_factory=list)
    period: BudgetPeriod | None = None


@dataclass(frozen=True)
class BudgetChangeSet:
    """Records written by a single committed unit of work."""

    streams: list[IncomeStream] = field(default_factory=list)
    deleted_stream_ids: list[str] = field(default_factory=list)
    distributions: list[Distribution] = field(default_factory=list)
    deleted_distribution_ids: list[str] = field(default_factory=list)
    categories: list[BudgetCategory] = field(default_factory=list)
    expenses: list[ExpenseEntry] = field(default_factory=list)
    period: BudgetPeriod | None = None

    @property
    def is_empty(self) -> bool:
        return not (
            self.streams
            or self.deleted_stream_ids
            or self.distributions
            or self.deleted_distribution_ids
            or self.categories
            or self.expenses
            or self.period is not None
        )


class BudgetStorePort(Protocol):
    """Port exposing durable storage of budget records."""

    def load(self) -> BudgetSnapshot:
        """Return every stored record."""

    def save(self, changes: BudgetChangeSet) -> None:
        """Persist a change set as one transaction."""


__all__ = ["BudgetSnapshot", "BudgetChangeSet", "BudgetStorePort"]

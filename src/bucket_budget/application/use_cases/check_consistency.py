"""Use case comparing monthly aggregates with the expense ledger."""

from dataclasses import dataclass
from decimal import Decimal

from bucket_budget.application.budget import Budget
from bucket_budget.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ConsistencyIssue:
    """Category whose monthly spend differs from its ledger total."""

    category_id: str
    recorded_spent: Decimal
    ledger_total: Decimal

    @property
    def difference(self) -> Decimal:
        return self.recorded_spent - self.ledger_total


class CheckConsistencyUseCase:
    """Recompute this month's spend from the ledger for every category.

    Differences are expected only for budgets replayed from storage with
    opening balances recorded outside the ledger.
    """

    def __init__(self, budget: Budget, logger=None) -> None:
        self._budget = budget
        self._logger = logger or get_app_logger()

    def execute(self) -> list[ConsistencyIssue]:
        issues = []
        with self._budget.reading():
            month_start = self._budget.period.month_start
            for category in self._budget.categories.all_categories():
                ledger_total = self._budget.ledger.total_for(
                    category.id,
                    since=month_start,
                )
                if ledger_total != category.this_month.spent:
                    issues.append(
                        ConsistencyIssue(
                            category_id=category.id,
                            recorded_spent=category.this_month.spent,
                            ledger_total=ledger_total,
                        )
                    )
        if issues:
            self._logger.warning(
                f"{len(issues)} categories differ from the ledger "
                f"since {month_start}"
            )
        return issues


__all__ = ["CheckConsistencyUseCase", "ConsistencyIssue"]

"""CLI adapter printing allocations, the monthly overview and weekly view."""

from bucket_budget.application.budget import Budget
from bucket_budget.application.use_cases.get_allocations import (
    GetAllocationsUseCase,
    GetBucketTotalsUseCase,
)
from bucket_budget.application.use_cases.list_categories import (
    ListCategoriesUseCase,
)
from bucket_budget.application.use_cases.list_tracked import (
    ListTrackedUseCase,
)
from bucket_budget.infrastructure.container import build_budget


def render_report(budget: Budget) -> list[str]:
    """Return the report lines for a budget."""
    with budget.reading():
        return _report_lines(budget)


def _report_lines(budget: Budget) -> list[str]:
    lines = ["Distributions"]
    for allocations in GetAllocationsUseCase(budget).execute():
        parts = ", ".join(
            f"{entry.bucket}={entry.amount}"
            for entry in allocations.allocations
        )
        lines.append(
            f"  {allocations.stream_name} ({allocations.stream_amount}): "
            f"{parts}, unallocated={allocations.unallocated}"
        )
    totals = GetBucketTotalsUseCase(budget).execute()
    lines.append(
        "  Totals: "
        + ", ".join(f"{total.bucket}={total.amount}" for total in totals)
    )

    lines.append("Monthly overview")
    for view in ListCategoriesUseCase(budget).execute():
        lines.append(
            f"  {view.name} [{view.bucket}]: spent {view.spent} "
            f"of {view.goal} (last month {view.last_month})"
        )

    lines.append("Weekly tracking")
    for view in ListTrackedUseCase(budget).execute():
        lines.append(
            f"  {view.name}: spent {view.weekly_spent} of "
            f"{view.weekly_limit}, safe to spend today "
            f"{view.safe_to_spend_today}"
        )
    return lines


def main() -> None:
    """Print the budget report."""
    for line in render_report(build_budget()):
        print(line)


if __name__ == "__main__":  # pragma: no cover
    main()

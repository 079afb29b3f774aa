"""CLI adapter run by a scheduler to close finished months and weeks.

The core never schedules itself; a cron job or timer calls this entry point
(for example daily) and the use case decides whether a boundary was crossed.
"""

from bucket_budget.application.use_cases.advance_periods import (
    AdvancePeriodsUseCase,
)
from bucket_budget.infrastructure.container import build_budget
from bucket_budget.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


def main() -> None:
    """Run the period boundary check."""
    logger = get_app_logger()
    budget = build_budget()
    use_case = AdvancePeriodsUseCase(budget=budget, logger=logger)

    result = use_case.execute()

    get_usage_logger().info(
        f"advance_periods rolled_over={result.rolled_over} "
        f"week_reset={result.week_reset}"
    )
    print(
        f"Month rolled over: {'yes' if result.rolled_over else 'no'} "
        f"(open month {result.month_start})"
    )
    print(
        f"Week reset: {'yes' if result.week_reset else 'no'} "
        f"(open week {result.week_start})"
    )


if __name__ == "__main__":  # pragma: no cover
    main()

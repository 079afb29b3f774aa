"""Domain services for the weekly spending view."""

from decimal import Decimal

from bucket_budget.utils.decimal_utils import round_currency


def compute_safe_to_spend_today(
    weekly_limit: Decimal,
    weekly_spent: Decimal,
    days_remaining: int,
) -> Decimal:
    """Return how much can be spent today without exceeding the limit.

    The remaining weekly budget, floored at zero, is spread evenly over the
    days left in the week (today included).

    Args:
        weekly_limit: Weekly spending limit.
        weekly_spent: Amount spent so far this week.
        days_remaining: Days left in the week, counting today.

    Returns:
        Decimal: Non-negative amount rounded to cents.
    """
    days = max(1, int(days_remaining))
    remaining = max(Decimal("0"), weekly_limit - weekly_spent)
    return round_currency(remaining / days)


__all__ = ["compute_safe_to_spend_today"]

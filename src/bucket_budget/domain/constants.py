"""Domain constants for bucket budgeting."""

from decimal import Decimal

BUCKETS = (
    "wolcc",
    "savings",
    "investments",
    "taxes",
    "spending",
)

MAX_PERCENTAGE = Decimal("100")

DAYS_PER_WEEK = 7


__all__ = ["BUCKETS", "MAX_PERCENTAGE", "DAYS_PER_WEEK"]

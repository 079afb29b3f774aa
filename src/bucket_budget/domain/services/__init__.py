"""Domain services package."""

from .distribution import (
    compute_allocations,
    compute_bucket_totals,
    validate_distribution,
)
from .money import require_amount
from .periods import (
    days_remaining_in_week,
    month_start,
    week_start,
)
from .weekly import compute_safe_to_spend_today

__all__ = [
    "compute_allocations",
    "compute_bucket_totals",
    "validate_distribution",
    "require_amount",
    "days_remaining_in_week",
    "month_start",
    "week_start",
    "compute_safe_to_spend_today",
]

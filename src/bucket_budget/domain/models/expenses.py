"""Domain models for recorded expenses."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class ExpenseEntry:
    """Immutable record of money spent in a category."""

    id: str
    category_id: str
    amount: Decimal
    timestamp: datetime
    note: str | None = None


__all__ = ["ExpenseEntry"]

"""Port for reading the current date and time."""

from datetime import date, datetime
from typing import Protocol


class ClockPort(Protocol):
    """Port exposing the caller's clock to the budget core.

    The core never reads wall-clock time itself; every date it needs comes
    through this port.
    """

    def now(self) -> datetime:
        """Return the current timestamp used for new expenses.

        Timestamps may be naive or timezone-aware, but one clock must stick
        to one kind so ledger entries stay comparable.
        """

    def today(self) -> date:
        """Return the current calendar date."""

    def days_remaining_in_week(self) -> int:
        """Return the days left in the current week, today included."""

    def week_start(self) -> date:
        """Return the first day of the current week."""

    def month_start(self) -> date:
        """Return the first day of the current month."""


__all__ = ["ClockPort"]

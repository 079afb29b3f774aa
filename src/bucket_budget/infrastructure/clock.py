"""Clock adapters implementing ClockPort."""

from datetime import date, datetime

from bucket_budget.application.ports.clock import ClockPort
from bucket_budget.domain.services import (
    days_remaining_in_week,
    month_start,
    week_start,
)


class SystemClock(ClockPort):
    """Clock reading the local wall-clock time."""

    def __init__(self, first_weekday: int = 0) -> None:
        self._first_weekday = first_weekday

    def now(self) -> datetime:
        return datetime.now()

    def today(self) -> date:
        return self.now().date()

    def days_remaining_in_week(self) -> int:
        return days_remaining_in_week(self.today(), self._first_weekday)

    def week_start(self) -> date:
        return week_start(self.today(), self._first_weekday)

    def month_start(self) -> date:
        return month_start(self.today())


class FixedClock(SystemClock):
    """Clock frozen at a given moment until moved explicitly."""

    def __init__(self, moment: datetime, first_weekday: int = 0) -> None:
        super().__init__(first_weekday=first_weekday)
        self._moment = moment

    def now(self) -> datetime:
        return self._moment

    def set(self, moment: datetime) -> None:
        self._moment = moment


__all__ = ["SystemClock", "FixedClock"]

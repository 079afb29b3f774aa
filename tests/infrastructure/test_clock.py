"""Tests for the clock adapters."""

from datetime import date, datetime

from bucket_budget.infrastructure.clock import FixedClock, SystemClock


def test_fixed_clock_derives_calendar_values() -> None:
    clock = FixedClock(datetime(2024, 5, 15, 12, 30))

    assert clock.today() == date(2024, 5, 15)
    assert clock.month_start() == date(2024, 5, 1)
    assert clock.week_start() == date(2024, 5, 13)
    assert clock.days_remaining_in_week() == 5


def test_fixed_clock_with_sunday_weeks() -> None:
    clock = FixedClock(datetime(2024, 5, 18, 23, 0), first_weekday=6)

    assert clock.week_start() == date(2024, 5, 12)
    assert clock.days_remaining_in_week() == 1


def test_fixed_clock_can_move() -> None:
    clock = FixedClock(datetime(2024, 5, 31, 23, 59))

    clock.set(datetime(2024, 6, 1, 0, 0))

    assert clock.month_start() == date(2024, 6, 1)


def test_system_clock_reads_current_time() -> None:
    before = datetime.now()
    now = SystemClock().now()

    assert before <= now <= datetime.now()
    assert 1 <= SystemClock().days_remaining_in_week() <= 7

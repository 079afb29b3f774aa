"""Tests for amount validation and naming policy."""

from decimal import Decimal

import pytest

from bucket_budget.domain.errors import InvalidExpense, InvalidStream
from bucket_budget.domain.policies import is_valid_name
from bucket_budget.domain.services import require_amount


def test_require_amount_rounds_to_cents() -> None:
    amount = require_amount("25.505", error=InvalidExpense, label="Amount")

    assert amount == Decimal("25.51")


def test_require_amount_rejects_zero_when_not_allowed() -> None:
    """Amounts that round to zero are not positive."""
    with pytest.raises(InvalidExpense) as excinfo:
        require_amount(
            "0.004",
            error=InvalidExpense,
            label="Expense amount",
            allow_zero=False,
            category_id="dining",
        )

    assert excinfo.value.details == {"category_id": "dining"}
    assert "> 0" in excinfo.value.message


@pytest.mark.parametrize(
    "value",
    ["-0.01", "abc", None, True, float("inf"), "1e27", Decimal("9" * 27)],
)
def test_require_amount_rejects_invalid_values(value) -> None:
    with pytest.raises(InvalidStream):
        require_amount(value, error=InvalidStream, label="Stream amount")


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Dining & Drinks", True),
        ("  MSCI ", True),
        ("", False),
        ("   ", False),
        (None, False),
        ("x" * 121, False),
    ],
)
def test_is_valid_name(name, expected) -> None:
    assert is_valid_name(name) is expected


def test_require_amount_reports_oversized_values() -> None:
    """Values with more digits than cents can hold raise the typed error."""
    with pytest.raises(InvalidExpense) as excinfo:
        require_amount(
            "1e27",
            error=InvalidExpense,
            label="Expense amount",
            allow_zero=False,
            category_id="dining",
        )

    assert excinfo.value.details == {"category_id": "dining"}
    assert "too large" in excinfo.value.message

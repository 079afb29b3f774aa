"""Tests for distribution validation and allocation services."""

from decimal import Decimal

import pytest

from bucket_budget.domain.constants import BUCKETS
from bucket_budget.domain.errors import InvalidDistribution
from bucket_budget.domain.models import Distribution, IncomeStream
from bucket_budget.domain.services import (
    compute_allocations,
    compute_bucket_totals,
    validate_distribution,
)


def test_validate_distribution_returns_canonical_order() -> None:
    """Percentages should come back as Decimals in bucket order."""
    cleaned = validate_distribution(
        "msci",
        {"spending": 20, "wolcc": "10", "savings": 5.5},
    )

    assert list(cleaned) == ["wolcc", "savings", "spending"]
    assert cleaned["savings"] == Decimal("5.5")
    assert cleaned["wolcc"] == Decimal("10")


def test_validate_distribution_rejects_unknown_bucket() -> None:
    """Keys outside the bucket set should be rejected."""
    with pytest.raises(InvalidDistribution) as excinfo:
        validate_distribution("msci", {"savings": 5, "vacation": 10})

    assert excinfo.value.details["buckets"] == ["vacation"]
    assert excinfo.value.details["stream_id"] == "msci"


@pytest.mark.parametrize("value", [-1, "101", "abc", None, float("nan")])
def test_validate_distribution_rejects_out_of_range_values(value) -> None:
    """Each percentage must be a number within [0, 100]."""
    with pytest.raises(InvalidDistribution):
        validate_distribution("msci", {"taxes": value})


def test_validate_distribution_rejects_sum_above_hundred() -> None:
    """The percentages of a stream may not exceed 100 in total."""
    with pytest.raises(InvalidDistribution) as excinfo:
        validate_distribution(
            "msci",
            {"wolcc": 50, "savings": 30, "spending": "20.01"},
        )

    assert excinfo.value.details["total"] == Decimal("100.01")


def test_validate_distribution_accepts_exactly_hundred() -> None:
    cleaned = validate_distribution(
        "msci",
        {"wolcc": 10, "savings": 5, "investments": 60, "taxes": 5, "spending": 20},
    )

    assert sum(cleaned.values()) == Decimal("100")


def test_compute_allocations_rounds_half_away_from_zero() -> None:
    """MSCI savings allocation should round 208.0725 down to 208.07."""
    stream = IncomeStream(id="msci", name="MSCI", amount=Decimal("4161.45"))
    distribution = Distribution(
        stream_id="msci",
        percentages={
            "wolcc": Decimal("10"),
            "savings": Decimal("5"),
            "investments": Decimal("60"),
            "taxes": Decimal("5"),
            "spending": Decimal("20"),
        },
    )

    result = compute_allocations(stream, distribution)

    assert result.amount_for("savings") == Decimal("208.07")
    assert result.amount_for("wolcc") == Decimal("416.15")
    assert result.amount_for("investments") == Decimal("2496.87")
    assert result.amount_for("spending") == Decimal("832.29")
    assert [entry.bucket for entry in result.allocations] == list(BUCKETS)


def test_compute_allocations_rounds_half_cent_up() -> None:
    """A half cent should round away from zero."""
    stream = IncomeStream(id="s", name="Side", amount=Decimal("0.05"))
    distribution = Distribution(stream_id="s", percentages={"taxes": Decimal("50")})

    result = compute_allocations(stream, distribution)

    assert result.amount_for("taxes") == Decimal("0.03")


def test_compute_allocations_without_distribution_is_all_zero() -> None:
    """A stream without a distribution allocates nothing."""
    stream = IncomeStream(id="amway", name="Amway", amount=Decimal("48.55"))

    result = compute_allocations(stream, None)

    assert all(entry.amount == Decimal("0") for entry in result.allocations)
    assert result.unallocated == Decimal("48.55")


def test_compute_allocations_reports_unallocated_remainder() -> None:
    stream = IncomeStream(id="amway", name="Amway", amount=Decimal("48.55"))
    distribution = Distribution(
        stream_id="amway",
        percentages={"wolcc": Decimal("20"), "savings": Decimal("40")},
    )

    result = compute_allocations(stream, distribution)

    assert result.amount_for("wolcc") == Decimal("9.71")
    assert result.amount_for("savings") == Decimal("19.42")
    assert result.unallocated == Decimal("19.42")
    assert distribution.unallocated_percentage == Decimal("40")


def test_independent_rounding_can_overshoot_the_stream() -> None:
    """Both half cents round up, so the remainder goes below zero."""
    stream = IncomeStream(id="s", name="Side", amount=Decimal("0.05"))
    distribution = Distribution(
        stream_id="s",
        percentages={"savings": Decimal("50"), "spending": Decimal("50")},
    )

    result = compute_allocations(stream, distribution)

    assert result.amount_for("savings") == Decimal("0.03")
    assert result.amount_for("spending") == Decimal("0.03")
    assert result.unallocated == Decimal("-0.01")


def test_compute_bucket_totals_sums_every_stream() -> None:
    first = compute_allocations(
        IncomeStream(id="a", name="A", amount=Decimal("100")),
        Distribution(stream_id="a", percentages={"savings": Decimal("50")}),
    )
    second = compute_allocations(
        IncomeStream(id="b", name="B", amount=Decimal("10")),
        Distribution(stream_id="b", percentages={"savings": Decimal("10")}),
    )

    totals = {total.bucket: total.amount for total in compute_bucket_totals([first, second])}

    assert totals["savings"] == Decimal("51.00")
    assert totals["taxes"] == Decimal("0")

"""Domain services for splitting income streams into buckets."""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from bucket_budget.domain.constants import BUCKETS, MAX_PERCENTAGE
from bucket_budget.domain.errors import InvalidDistribution
from bucket_budget.domain.models import (
    BucketAllocation,
    BucketTotal,
    Distribution,
    IncomeStream,
    StreamAllocations,
)
from bucket_budget.utils.decimal_utils import parse_decimal, round_currency


def validate_distribution(
    stream_id: str,
    percentages: Mapping[str, object],
) -> dict[str, Decimal]:
    """Validate bucket percentages for a stream.

    Args:
        stream_id: Stream the distribution belongs to.
        percentages: Raw mapping of bucket name to percentage.

    Returns:
        dict[str, Decimal]: Percentages in canonical bucket order.

    Raises:
        InvalidDistribution: If a key is not a known bucket, a value is not
            within [0, 100], or the values sum to more than 100.
    """
    if not isinstance(percentages, Mapping):
        raise InvalidDistribution(
            "Distribution must map bucket names to percentages",
            stream_id=stream_id,
        )
    unknown = sorted(str(key) for key in percentages if key not in BUCKETS)
    if unknown:
        raise InvalidDistribution(
            f"Unknown buckets: {', '.join(unknown)}",
            stream_id=stream_id,
            buckets=unknown,
        )

    cleaned: dict[str, Decimal] = {}
    for bucket in BUCKETS:
        if bucket not in percentages:
            continue
        raw = percentages[bucket]
        value = parse_decimal(raw)
        if value is None or value < 0 or value > MAX_PERCENTAGE:
            raise InvalidDistribution(
                f"Percentage for {bucket} must be within [0, 100], got {raw!r}",
                stream_id=stream_id,
                bucket=bucket,
            )
        cleaned[bucket] = value

    total = sum(cleaned.values(), Decimal("0"))
    if total > MAX_PERCENTAGE:
        raise InvalidDistribution(
            f"Percentages sum to {total}, above {MAX_PERCENTAGE}",
            stream_id=stream_id,
            total=total,
        )
    return cleaned


def compute_allocations(
    stream: IncomeStream,
    distribution: Distribution | None,
) -> StreamAllocations:
    """Split a stream amount into every bucket.

    Each bucket receives ``amount * percentage / 100`` rounded half away from
    zero to cents. Buckets without a percentage, or every bucket when the
    stream has no distribution, receive zero.

    ``unallocated`` is the stream amount minus the rounded bucket amounts.
    No bucket absorbs rounding differences, so a fully distributed stream
    can report a remainder of a few cents either side of zero: 0.05 split
    50/50 gives 0.03 twice and an unallocated -0.01.

    Args:
        stream: Income stream to split.
        distribution: Stream distribution, if one was set.

    Returns:
        StreamAllocations: One allocation per bucket plus the remainder.
    """
    percentages = distribution.percentages if distribution else {}
    allocations = []
    for bucket in BUCKETS:
        percentage = percentages.get(bucket, Decimal("0"))
        amount = round_currency(stream.amount * percentage / MAX_PERCENTAGE)
        allocations.append(
            BucketAllocation(
                bucket=bucket,
                percentage=percentage,
                amount=amount,
            )
        )
    allocated = sum((entry.amount for entry in allocations), Decimal("0"))
    return StreamAllocations(
        stream_id=stream.id,
        stream_name=stream.name,
        stream_amount=stream.amount,
        allocations=allocations,
        unallocated=stream.amount - allocated,
    )


def compute_bucket_totals(
    allocations: Iterable[StreamAllocations],
) -> list[BucketTotal]:
    """Sum per-stream allocations into one total per bucket."""
    totals = {bucket: Decimal("0") for bucket in BUCKETS}
    for stream_allocations in allocations:
        for entry in stream_allocations.allocations:
            totals[entry.bucket] += entry.amount
    return [BucketTotal(bucket=bucket, amount=totals[bucket]) for bucket in BUCKETS]


__all__ = [
    "validate_distribution",
    "compute_allocations",
    "compute_bucket_totals",
]

"""Domain models for income streams and their bucket distributions."""

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from bucket_budget.domain.constants import MAX_PERCENTAGE


@dataclass(frozen=True)
class IncomeStream:
    """Named source of income.

    Attributes:
        id: Unique identifier.
        name: Display name.
        amount: Non-negative amount received per month.
    """

    id: str
    name: str
    amount: Decimal


@dataclass(frozen=True)
class Distribution:
    """Percentage split of a stream across buckets.

    Buckets missing from ``percentages`` receive nothing.
    """

    stream_id: str
    percentages: Mapping[str, Decimal] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "percentages",
            MappingProxyType(dict(self.percentages)),
        )

    @property
    def total_percentage(self) -> Decimal:
        return sum(self.percentages.values(), Decimal("0"))

    @property
    def unallocated_percentage(self) -> Decimal:
        return MAX_PERCENTAGE - self.total_percentage


@dataclass(frozen=True)
class BucketAllocation:
    """Amount of a stream assigned to a single bucket."""

    bucket: str
    percentage: Decimal
    amount: Decimal


@dataclass(frozen=True)
class StreamAllocations:
    """Allocations of a stream across every bucket.

    ``unallocated`` can be slightly negative when rounded buckets add up to
    more than the stream amount.
    """

    stream_id: str
    stream_name: str
    stream_amount: Decimal
    allocations: list[BucketAllocation]
    unallocated: Decimal

    def amount_for(self, bucket: str) -> Decimal:
        """Return the amount allocated to bucket."""
        for allocation in self.allocations:
            if allocation.bucket == bucket:
                return allocation.amount
        raise KeyError(bucket)


@dataclass(frozen=True)
class BucketTotal:
    """Sum of allocations for one bucket across every stream."""

    bucket: str
    amount: Decimal


__all__ = [
    "IncomeStream",
    "Distribution",
    "BucketAllocation",
    "StreamAllocations",
    "BucketTotal",
]

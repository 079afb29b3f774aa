"""Distribution of income streams into buckets."""

from bucket_budget.application.budget.stream_store import StreamStore
from bucket_budget.application.state import BudgetTables, UnitOfWork
from bucket_budget.domain.models import (
    BucketTotal,
    Distribution,
    StreamAllocations,
)
from bucket_budget.domain.services import (
    compute_allocations,
    compute_bucket_totals,
    validate_distribution,
)


class DistributionEngine:
    """Own per-stream distributions and compute bucket allocations."""

    def __init__(self, streams: StreamStore, tables: BudgetTables) -> None:
        self._streams = streams
        self._tables = tables

    def set_distribution(
        self,
        uow: UnitOfWork,
        stream_id: str,
        bucket_percentages,
    ) -> Distribution:
        """Stage a replacement of the stream's distribution.

        The whole mapping is validated before anything is staged, so an
        invalid update leaves the previous distribution untouched.

        Raises:
            StreamNotFound: If the stream does not exist.
            InvalidDistribution: If a bucket or percentage is invalid.
        """
        uow.get_stream(stream_id)
        percentages = validate_distribution(stream_id, bucket_percentages)
        distribution = Distribution(
            stream_id=stream_id,
            percentages=percentages,
        )
        uow.put_distribution(distribution)
        return distribution

    def get_distribution(self, stream_id: str) -> Distribution | None:
        self._streams.get(stream_id)
        return self._tables.distributions.get(stream_id)

    def compute_allocations(self, stream_id: str) -> StreamAllocations:
        """Return the stream's allocation for every bucket.

        A stream without a distribution yields zero for every bucket.
        """
        with self._tables.lock:
            stream = self._streams.get(stream_id)
            distribution = self._tables.distributions.get(stream_id)
        return compute_allocations(stream, distribution)

    def compute_all_allocations(self) -> list[StreamAllocations]:
        with self._tables.lock:
            pairs = [
                (stream, self._tables.distributions.get(stream.id))
                for stream in self._streams.list_streams()
            ]
        return [
            compute_allocations(stream, distribution)
            for stream, distribution in pairs
        ]

    def compute_bucket_totals(self) -> list[BucketTotal]:
        return compute_bucket_totals(self.compute_all_allocations())


__all__ = ["DistributionEngine"]

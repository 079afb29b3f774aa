"""Use cases reading bucket allocations of income streams."""

from bucket_budget.application.budget import Budget
from bucket_budget.domain.models import BucketTotal, StreamAllocations


class GetAllocationsUseCase:
    """Return bucket allocations for one stream or every stream."""

    def __init__(self, budget: Budget) -> None:
        self._budget = budget

    def execute(self, stream_id: str | None = None) -> list[StreamAllocations]:
        if stream_id is not None:
            return [self._budget.distributions.compute_allocations(stream_id)]
        return self._budget.distributions.compute_all_allocations()


class GetBucketTotalsUseCase:
    """Return the total allocated to each bucket across every stream."""

    def __init__(self, budget: Budget) -> None:
        self._budget = budget

    def execute(self) -> list[BucketTotal]:
        return self._budget.distributions.compute_bucket_totals()


__all__ = ["GetAllocationsUseCase", "GetBucketTotalsUseCase"]

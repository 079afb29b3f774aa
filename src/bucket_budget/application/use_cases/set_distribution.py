"""Use case replacing the bucket distribution of an income stream."""

from dataclasses import dataclass

from bucket_budget.application.budget import Budget
from bucket_budget.application.state import stream_key
from bucket_budget.domain.errors import BudgetError
from bucket_budget.domain.models import Distribution, StreamAllocations
from bucket_budget.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DistributionResult:
    """New distribution of a stream and the allocations it produces."""

    distribution: Distribution
    allocations: StreamAllocations


class SetDistributionUseCase:
    """Validate and store a stream's bucket percentages."""

    def __init__(self, budget: Budget, logger=None) -> None:
        self._budget = budget
        self._logger = logger or get_app_logger()

    def execute(
        self,
        stream_id: str,
        bucket_percentages,
    ) -> DistributionResult:
        """Replace the distribution of a stream.

        Args:
            stream_id: Stream to distribute.
            bucket_percentages: Mapping of bucket name to percentage.

        Returns:
            DistributionResult: Stored distribution and resulting allocations.

        Raises:
            StreamNotFound: If the stream does not exist.
            InvalidDistribution: If the mapping is invalid; the previous
                distribution is kept.
        """
        try:
            with self._budget.transaction(stream_key(stream_id)) as uow:
                distribution = self._budget.distributions.set_distribution(
                    uow,
                    stream_id,
                    bucket_percentages,
                )
        except BudgetError as exc:
            self._logger.warning(
                f"Rejected distribution for stream {stream_id}: {exc}"
            )
            raise
        self._logger.info(
            f"Distribution set for stream {stream_id}: "
            f"allocated={distribution.total_percentage}%"
        )
        return DistributionResult(
            distribution=distribution,
            allocations=self._budget.distributions.compute_allocations(
                stream_id
            ),
        )


__all__ = ["SetDistributionUseCase", "DistributionResult"]

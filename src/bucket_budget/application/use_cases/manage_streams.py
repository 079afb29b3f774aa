"""Use cases creating, editing and deleting income streams."""

from bucket_budget.application.budget import Budget
from bucket_budget.application.state import stream_key
from bucket_budget.domain.errors import BudgetError
from bucket_budget.domain.models import IncomeStream
from bucket_budget.infrastructure.logging.logger import get_app_logger


class AddStreamUseCase:
    """Register a new income stream."""

    def __init__(self, budget: Budget, logger=None) -> None:
        self._budget = budget
        self._logger = logger or get_app_logger()

    def execute(
        self,
        name: str,
        amount,
        stream_id: str | None = None,
    ) -> IncomeStream:
        """Add a stream and return it.

        Raises:
            InvalidStream: If the name, amount or identifier is invalid.
        """
        keys = (stream_key(stream_id),) if stream_id else ()
        try:
            with self._budget.transaction(*keys) as uow:
                stream = self._budget.streams.add(uow, name, amount, stream_id)
        except BudgetError as exc:
            self._logger.warning(f"Rejected new income stream: {exc}")
            raise
        self._logger.info(
            f"Added income stream {stream.id} ({stream.name}) "
            f"amount={stream.amount}"
        )
        return stream


class UpdateStreamUseCase:
    """Rename a stream or change its amount."""

    def __init__(self, budget: Budget, logger=None) -> None:
        self._budget = budget
        self._logger = logger or get_app_logger()

    def execute(
        self,
        stream_id: str,
        name: str | None = None,
        amount=None,
    ) -> IncomeStream:
        """Apply the provided edits together.

        Raises:
            StreamNotFound: If the stream does not exist.
            InvalidStream: If the new name or amount is invalid.
        """
        try:
            with self._budget.transaction(stream_key(stream_id)) as uow:
                stream = uow.get_stream(stream_id)
                if name is not None:
                    stream = self._budget.streams.rename(uow, stream_id, name)
                if amount is not None:
                    stream = self._budget.streams.set_amount(
                        uow,
                        stream_id,
                        amount,
                    )
        except BudgetError as exc:
            self._logger.warning(
                f"Rejected update of income stream {stream_id}: {exc}"
            )
            raise
        self._logger.info(
            f"Updated income stream {stream.id} ({stream.name}) "
            f"amount={stream.amount}"
        )
        return stream


class DeleteStreamUseCase:
    """Delete a stream and its distribution."""

    def __init__(self, budget: Budget, logger=None) -> None:
        self._budget = budget
        self._logger = logger or get_app_logger()

    def execute(self, stream_id: str) -> IncomeStream:
        try:
            with self._budget.transaction(stream_key(stream_id)) as uow:
                stream = self._budget.streams.delete(uow, stream_id)
        except BudgetError as exc:
            self._logger.warning(
                f"Rejected deletion of income stream {stream_id}: {exc}"
            )
            raise
        self._logger.info(f"Deleted income stream {stream_id}")
        return stream


__all__ = ["AddStreamUseCase", "UpdateStreamUseCase", "DeleteStreamUseCase"]

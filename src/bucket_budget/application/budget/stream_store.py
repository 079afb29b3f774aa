"""Store of income streams."""

from dataclasses import replace
from typing import Callable

from bucket_budget.application.state import BudgetTables, UnitOfWork
from bucket_budget.domain.errors import InvalidStream, StreamNotFound
from bucket_budget.domain.models import IncomeStream
from bucket_budget.domain.policies import is_valid_name
from bucket_budget.domain.services import require_amount
from bucket_budget.utils.identifiers import new_identifier


class StreamStore:
    """Hold income streams and stage their changes."""

    def __init__(
        self,
        tables: BudgetTables,
        id_factory: Callable[[], str] = new_identifier,
    ) -> None:
        self._tables = tables
        self._id_factory = id_factory

    def get(self, stream_id: str) -> IncomeStream:
        stream = self._tables.streams.get(stream_id)
        if stream is None:
            raise StreamNotFound(stream_id)
        return stream

    def list_streams(self) -> list[IncomeStream]:
        """Return every stream in creation order."""
        with self._tables.lock:
            return list(self._tables.streams.values())

    def add(
        self,
        uow: UnitOfWork,
        name: str,
        amount,
        stream_id: str | None = None,
    ) -> IncomeStream:
        """Stage a new income stream.

        Args:
            uow: Unit of work receiving the write.
            name: Display name.
            amount: Non-negative amount.
            stream_id: Optional identifier; generated when omitted.

        Returns:
            IncomeStream: The staged stream.

        Raises:
            InvalidStream: If the name, amount or identifier is invalid.
        """
        resolved_id = stream_id or self._id_factory()
        if uow.has_stream(resolved_id):
            raise InvalidStream(
                f"Income stream already exists: {resolved_id}",
                stream_id=resolved_id,
            )
        stream = IncomeStream(
            id=resolved_id,
            name=self._require_name(name, resolved_id),
            amount=require_amount(
                amount,
                error=InvalidStream,
                label="Stream amount",
                stream_id=resolved_id,
            ),
        )
        uow.put_stream(stream)
        return stream

    def rename(self, uow: UnitOfWork, stream_id: str, name: str) -> IncomeStream:
        stream = uow.get_stream(stream_id)
        updated = replace(stream, name=self._require_name(name, stream_id))
        uow.put_stream(updated)
        return updated

    def set_amount(self, uow: UnitOfWork, stream_id: str, amount) -> IncomeStream:
        stream = uow.get_stream(stream_id)
        updated = replace(
            stream,
            amount=require_amount(
                amount,
                error=InvalidStream,
                label="Stream amount",
                stream_id=stream_id,
            ),
        )
        uow.put_stream(updated)
        return updated

    def delete(self, uow: UnitOfWork, stream_id: str) -> IncomeStream:
        """Stage the removal of a stream together with its distribution."""
        stream = uow.get_stream(stream_id)
        uow.delete_stream(stream_id)
        return stream

    @staticmethod
    def _require_name(name: str, stream_id: str) -> str:
        if not is_valid_name(name):
            raise InvalidStream(
                f"Invalid income stream name: {name!r}",
                stream_id=stream_id,
            )
        return name.strip()


__all__ = ["StreamStore"]

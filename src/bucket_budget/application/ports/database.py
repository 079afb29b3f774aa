"""Database port for the budget store.

Infrastructure implementations provide the concrete engine; use cases and
stores depend only on this protocol.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the database engine holding budget records."""

    def get_budget_engine(self) -> Engine:
        """Get the engine for the budget database.

        Returns:
            Engine: SQLAlchemy engine connected to the budget database.
        """


__all__ = ["DatabaseEnginePort"]

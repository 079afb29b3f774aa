"""Database infrastructure for the budget store.

This module creates and reuses the SQLAlchemy engine connected to the budget
database. Connection details come from the environment, optionally loaded
from a ``.env`` file.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from bucket_budget.application.ports.database import DatabaseEnginePort

BUDGET_DB_URL_ENV_VAR = "BUDGET_DB_URL"


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    SQLite URLs keep SQLAlchemy's default pool and allow cross-thread use;
    server databases get a small pool with health checks.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: A SQLAlchemy engine instance.
    """
    if make_url(db_url).drivername.startswith("sqlite"):
        return create_engine(
            db_url,
            connect_args={"check_same_thread": False},
            future=True,
        )
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_budget_engine: Optional[Engine] = None


def get_budget_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the budget database.

    Returns:
        Engine: Lazily initialized engine.
    """
    global _budget_engine
    if _budget_engine is None:
        db_url = _get_env_var(BUDGET_DB_URL_ENV_VAR)
        _budget_engine = _create_engine(db_url)
    return _budget_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine."""

    def __init__(self, engine: Engine | None = None) -> None:
        """Initialize the adapter.

        Args:
            engine: Optional engine; the environment-configured singleton is
                used when omitted.
        """
        self._engine = engine

    def get_budget_engine(self) -> Engine:
        if self._engine is not None:
            return self._engine
        return get_budget_engine()


__all__ = [
    "BUDGET_DB_URL_ENV_VAR",
    "get_budget_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]

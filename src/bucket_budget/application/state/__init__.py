"""Budget state: indexed tables, entity locks and the unit of work."""

from .locks import (
    EntityLocks,
    LockKey,
    category_key,
    registry_key,
    stream_key,
)
from .tables import BudgetTables
from .unit_of_work import UnitOfWork

__all__ = [
    "EntityLocks",
    "LockKey",
    "category_key",
    "registry_key",
    "stream_key",
    "BudgetTables",
    "UnitOfWork",
]

"""Per-entity mutual exclusion for budget commands."""

from contextlib import ExitStack, contextmanager
import threading
from typing import Hashable, Iterator

LockKey = tuple[str, Hashable]


def category_key(category_id: str) -> LockKey:
    return ("category", category_id)


def stream_key(stream_id: str) -> LockKey:
    return ("stream", stream_id)


def registry_key() -> LockKey:
    """Key guarding the set of categories.

    Creating a category holds it, as do commands that touch every category.
    """
    return ("registry", "categories")


class EntityLocks:
    """Registry of re-entrant locks keyed by entity.

    Commands touching the same category or stream are serialized; commands on
    different entities run independently. Keys are acquired in sorted order so
    multi-entity commands cannot deadlock each other.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[LockKey, threading.RLock] = {}

    def _lock_for(self, key: LockKey) -> threading.RLock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.RLock()
                self._locks[key] = lock
            return lock

    @contextmanager
    def hold(self, *keys: LockKey) -> Iterator[None]:
        """Hold the locks for every key until the block exits."""
        ordered = sorted(set(keys), key=lambda key: (key[0], str(key[1])))
        with ExitStack() as stack:
            for key in ordered:
                stack.enter_context(self._lock_for(key))
            yield


__all__ = [
    "EntityLocks",
    "LockKey",
    "category_key",
    "registry_key",
    "stream_key",
]

"""
infrastructure.persistence.proverbs_store - Process-wide proverb list.

Volatile, in-memory implementation of ProverbsStorePort. One instance is
created by the ServiceFactory and injected into every SessionContext; it is
the only state shared between concurrent runs.

All access goes through a single lock. Critical sections are plain list
manipulation only; inputs are materialized before the lock is taken and
nothing is logged while it is held.
"""

from __future__ import annotations

import threading
from typing import Iterable

from domain.models import ProverbsSnapshot


class InMemoryProverbsStore:
    """Linearizable, thread-safe list of proverbs.

    Safe to share between the event loop and the thread-pool workers that
    run LangChain's synchronous tool calls.
    """

    def __init__(self, initial: Iterable[str] = ()):
        self._lock = threading.Lock()
        self._proverbs: list[str] = list(initial)

    def get_all(self) -> tuple[str, ...]:
        """Return an immutable copy of the current list."""
        with self._lock:
            return tuple(self._proverbs)

    def append(self, items: Iterable[str]) -> ProverbsSnapshot:
        """Append ``items`` in order and return the resulting full list.

        An empty ``items`` is a no-op that still returns a valid snapshot.
        """
        new_items = list(items)
        with self._lock:
            self._proverbs.extend(new_items)
            return ProverbsSnapshot(tuple(self._proverbs))

    def replace(self, items: Iterable[str]) -> ProverbsSnapshot:
        """Discard the current content and store a copy of ``items``."""
        new_items = list(items)
        with self._lock:
            self._proverbs = new_items
            return ProverbsSnapshot(tuple(new_items))

    def __len__(self) -> int:
        with self._lock:
            return len(self._proverbs)

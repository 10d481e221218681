"""Process-wide memo of member resolution results."""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from .accessors import Accessor
from .exceptions import InvalidUsageError
from .resolver import resolve_member

logger = logging.getLogger(__name__)

Resolver = Callable[[type, str], Accessor]


@dataclass(frozen=True)
class CacheStats:
    """Point-in-time counters for a resolution cache."""

    types: int
    entries: int
    hits: int
    misses: int


class _MemberTable:
    """Name to accessor bindings for a single type."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._members: Dict[str, Accessor] = {}
        self.hits = 0
        self.misses = 0

    def lookup(self, name: str) -> Optional[Accessor]:
        with self._lock:
            accessor = self._members.get(name)
            if accessor is None:
                self.misses += 1
            else:
                self.hits += 1
            return accessor

    def peek(self, name: str) -> Optional[Accessor]:
        with self._lock:
            return self._members.get(name)

    def bind(self, name: str, accessor: Accessor) -> Accessor:
        """Store ``accessor`` unless another thread got there first."""

        with self._lock:
            return self._members.setdefault(name, accessor)

    def __len__(self) -> int:
        with self._lock:
            return len(self._members)


class ResolutionCache:
    """Thread-safe ``type -> name -> Accessor`` cache in front of a resolver.

    Tables are created once per type under the cache lock; bindings inside a
    table are guarded by that table's own lock, so warm lookups on unrelated
    types never contend. The resolver runs outside any lock: a race may
    resolve a pair twice, but only the first stored accessor is returned.
    """

    def __init__(self, resolver: Resolver = resolve_member) -> None:
        self._resolver = resolver
        self._lock = threading.Lock()
        self._tables: Dict[type, _MemberTable] = {}

    def lookup_or_resolve(self, cls: type, name: str) -> Accessor:
        if cls is None:
            raise InvalidUsageError("cls must not be None")
        if name is None:
            raise InvalidUsageError("name must not be None")
        table = self._table_for(cls)
        accessor = table.lookup(name)
        if accessor is not None:
            return accessor
        return table.bind(name, self._resolver(cls, name))

    def peek(self, cls: type, name: str) -> Optional[Accessor]:
        """Return the cached accessor, or ``None`` when not looked up yet."""

        table = self._tables.get(cls)
        if table is None:
            return None
        return table.peek(name)

    def clear(self) -> None:
        with self._lock:
            self._tables = {}

    def stats(self) -> CacheStats:
        with self._lock:
            tables = list(self._tables.values())
        return CacheStats(
            types=len(tables),
            entries=sum(len(table) for table in tables),
            hits=sum(table.hits for table in tables),
            misses=sum(table.misses for table in tables),
        )

    def types(self) -> Iterable[type]:
        with self._lock:
            return tuple(self._tables)

    def __contains__(self, cls: object) -> bool:
        return cls in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def _table_for(self, cls: type) -> _MemberTable:
        table = self._tables.get(cls)
        if table is not None:
            return table
        with self._lock:
            table = self._tables.get(cls)
            if table is None:
                table = _MemberTable()
                self._tables[cls] = table
                logger.debug("Created member table for %r", cls)
            return table


resolution_cache = ResolutionCache()


def clear_cache() -> None:
    resolution_cache.clear()

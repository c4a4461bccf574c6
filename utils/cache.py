"""
utils/cache.py
--------------
Process-local cache used by the services for cache-aside reads.

Entries are keyed by (kind, key), e.g. ("sport", 7), so several entity
kinds can share one Cache instance. There is no TTL, size bound or
eviction: an entry lives until it is overwritten, invalidated or the
cache is cleared.

A stored None means "looked up, does not exist" and is a hit. Use
invalidate() to make the next lookup go back to the database.

No locking: two threads missing on the same key will both query the
store and both write; the last write wins.
"""

from typing import Any, Hashable


class _Miss:
    """Sentinel type returned by Cache.get() when nothing is stored."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<MISS>"

    def __bool__(self) -> bool:
        return False


MISS = _Miss()


class Cache:
    """Unbounded in-memory map of (kind, key) -> value."""

    def __init__(self):
        self._entries: dict[tuple[str, Hashable], Any] = {}

    def get(self, kind: str, key: Hashable) -> Any:
        """
        Look up a cached value.

        Returns:
            The stored value (which may be None), or MISS if the key was never set.
        """
        return self._entries.get((kind, key), MISS)

    def set(self, kind: str, key: Hashable, value: Any) -> Any:
        """Store ``value`` under (kind, key) and return it unchanged."""
        self._entries[(kind, key)] = value
        return value

    def invalidate(self, kind: str, key: Hashable) -> None:
        """Forget (kind, key) so the next get() is a MISS."""
        self._entries.pop((kind, key), None)

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def __contains__(self, item: tuple[str, Hashable]) -> bool:
        return item in self._entries

    def __len__(self) -> int:
        return len(self._entries)

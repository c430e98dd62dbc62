"""
Fixed-capacity in-memory LRU cache.
Pure stdlib, backed by an OrderedDict.
"""
from collections import OrderedDict
from typing import Any, Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_MISSING = object()


class LRUCache(Generic[K, V]):
    """
    Least-recently-used cache holding at most ``max_size`` keys.
    Reads and writes both count as a use.
    """

    def __init__(self, max_size: int = 10):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._store: "OrderedDict[K, V]" = OrderedDict()

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Return the cached value and mark it most recently used."""
        value = self._store.get(key, _MISSING)
        if value is _MISSING:
            return default
        self._store.move_to_end(key)
        return value  # type: ignore[return-value]

    def set(self, key: K, value: V) -> None:
        """Store value, evicting the least recently used key when full."""
        if key in self._store:
            self._store.move_to_end(key)
        elif len(self._store) >= self.max_size:
            self._store.popitem(last=False)
        self._store[key] = value

    def has(self, key: K) -> bool:
        return key in self._store

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)

    def clear(self) -> None:
        """Invalidate all cached entries."""
        self._store.clear()

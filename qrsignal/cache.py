"""In-memory memoization of analysis results.

Analysis is deterministic, so a result can be reused for an identical
payload. Entries are evicted least-recently-used once ``max_entries`` is
reached. Thread-safe.
"""

import logging
import threading
from collections import OrderedDict
from typing import Any, Callable, Dict, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResultCache:
    """
    Bounded LRU cache keyed by payload string.

    Usage:
        cache = ResultCache(max_entries=256)
        result = cache.get_or_set(payload, lambda: analyzer.analyze(payload))
    """

    def __init__(self, max_entries: int = 256, namespace: str = ""):
        if not isinstance(max_entries, int) or max_entries < 1:
            raise ValueError(f"max_entries must be a positive integer, got {max_entries!r}")
        self.max_entries = max_entries
        self.namespace = namespace

        self._memory: "OrderedDict[str, Any]" = OrderedDict()
        self._lock = threading.RLock()
        self._hits = 0
        self._misses = 0

    def _make_key(self, key: str) -> str:
        """Generate full cache key with namespace."""
        if self.namespace:
            return f"{self.namespace}:{key}"
        return key

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None when absent."""
        full_key = self._make_key(key)
        with self._lock:
            if full_key in self._memory:
                self._memory.move_to_end(full_key)
                self._hits += 1
                return self._memory[full_key]
            self._misses += 1
        return None

    def set(self, key: str, value: Any) -> None:
        full_key = self._make_key(key)
        with self._lock:
            self._memory[full_key] = value
            self._memory.move_to_end(full_key)
            while len(self._memory) > self.max_entries:
                evicted, _ = self._memory.popitem(last=False)
                logger.debug("Evicted cached result for %r", evicted)

    def delete(self, key: str) -> None:
        with self._lock:
            self._memory.pop(self._make_key(key), None)

    def clear(self) -> None:
        with self._lock:
            self._memory.clear()
            self._hits = 0
            self._misses = 0

    def get_or_set(self, key: str, fetch_fn: Callable[[], T]) -> T:
        """
        Get cached value or compute and cache it.

        Args:
            key: Cache key
            fetch_fn: Synchronous function computing the value if not cached

        Returns:
            Cached or freshly computed value
        """
        cached = self.get(key)
        if cached is not None:
            return cached

        value = fetch_fn()
        self.set(key, value)
        return value

    def __len__(self) -> int:
        with self._lock:
            return len(self._memory)

    def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            return {
                "namespace": self.namespace,
                "entries": len(self._memory),
                "max_entries": self.max_entries,
                "hits": self._hits,
                "misses": self._misses,
            }

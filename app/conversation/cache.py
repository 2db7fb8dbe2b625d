"""
conversation/cache.py — Time-boxed, size-bounded response cache.

Keyed by the stripped, lower-cased raw question. Entries older than the TTL
are treated as absent and evicted when read. When the cache grows past
max_entries the oldest inserted key is dropped.

Sync FastAPI routes run in a thread pool, so every operation holds a lock.
"""
import threading
import time
from collections import OrderedDict
from typing import Any, Callable


def cache_key(question: str) -> str:
    return question.strip().lower()


class ResponseCache:
    def __init__(
        self,
        ttl_seconds: float = 300.0,
        max_entries: int = 50,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[str, tuple[Any, float]] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, question: str) -> Any | None:
        """Cached value if present and fresh, else None (expired entries are dropped)."""
        key = cache_key(question)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, created = entry
            if self._clock() - created >= self.ttl_seconds:
                del self._entries[key]
                return None
            return value

    def put(self, question: str, value: Any) -> None:
        """Insert or refresh an entry, evicting the oldest if over capacity."""
        key = cache_key(question)
        with self._lock:
            self._entries.pop(key, None)
            self._entries[key] = (value, self._clock())
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, question: str) -> bool:
        return self.get(question) is not None

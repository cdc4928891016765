"""
Time-bounded cache for module lists.

Entries expire `ttl` seconds after they were written. The cache is bounded:
once `max_entries` keys are held, writing a new key evicts the least recently
used one, and every write prunes expired entries first. Single-slot caches
(`max_entries=1`) keep only the last key written, so switching branch
overwrites the previous branch's list.
"""
from typing import Any, Callable, Hashable, Optional
import logging
import threading
import time
import cachetools

logger = logging.getLogger(__name__)

# Module list TTL: 2 minutes
DEFAULT_TTL = 120.0
DEFAULT_MAX_ENTRIES = 128


class TTLCache:
    def __init__(self, name: str, ttl: float = DEFAULT_TTL, max_entries: Optional[int] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.name = name
        self.ttl = ttl
        self.max_entries = max_entries or DEFAULT_MAX_ENTRIES
        self._entries = cachetools.TTLCache(maxsize=self.max_entries, ttl=ttl, timer=clock)
        # cachetools caches are not thread-safe
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> Optional[Any]:
        with self._lock:
            value = self._entries.get(key)
        if value is None:
            logger.debug(f"{self.name} cache miss for key {key!r}")
        else:
            logger.debug(f"Using cached {self.name} data for key {key!r}")
        return value

    def set(self, key: Hashable, value: Any):
        with self._lock:
            self._entries[key] = value

    def invalidate(self):
        with self._lock:
            self._entries.clear()
        logger.debug(f"{self.name} cache invalidated")

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            self._entries.expire()
            return len(self._entries)

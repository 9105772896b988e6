"""
In-memory arc path cache.

Memoizes generated arcs per rounded endpoint pair so repeated progress
queries for the same flight (e.g. on every animation tick) skip the
Bezier sampling.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Optional

from flight_progress.ports.arc_cache import ArcCacheKey
from flight_progress.schemas.geo import ArcPath

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 1024


class InMemoryArcPathCache:
    """
    In-process, bounded, write-once arc cache.

    Thread-safe for concurrent access within a single process. When full,
    the least recently used arc is evicted; an evicted key may be stored
    again later, and regeneration yields an identical arc.

    Attributes:
        _entries: Cached arcs in least-recently-used order.
        _max_entries: Capacity before eviction.
        _lock: Lock for thread-safe access.
        _hits: Number of cache hits.
        _misses: Number of cache misses.
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        """
        Initialize an empty cache.

        Args:
            max_entries: Maximum number of arcs kept.
        """
        if max_entries < 1:
            raise ValueError(f"max_entries must be >= 1, got {max_entries}")
        self._entries: OrderedDict[ArcCacheKey, ArcPath] = OrderedDict()
        self._max_entries = max_entries
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: ArcCacheKey) -> Optional[ArcPath]:
        """Get cached arc or None if miss."""
        with self._lock:
            path = self._entries.get(key)
            if path is None:
                self._misses += 1
                return None
            self._entries.move_to_end(key)
            self._hits += 1
            return path

    def set(self, key: ArcCacheKey, path: ArcPath) -> ArcPath:
        """Store arc unless present; return the arc held for the key."""
        with self._lock:
            existing = self._entries.get(key)
            if existing is not None:
                return existing

            self._entries[key] = path
            if len(self._entries) > self._max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted arc for %s -> %s", evicted.departure, evicted.arrival)
            return path

    def clear(self) -> None:
        """Drop all cached arcs."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    @property
    def stats(self) -> dict[str, int]:
        """Hit/miss counters and current size."""
        with self._lock:
            return {
                "hits": self._hits,
                "misses": self._misses,
                "size": len(self._entries),
            }

"""
Property cache keyed by chroma, with LRU (Least Recently Used) eviction.

A property record is a pure function of its chroma, so entries never go
stale and there is no TTL. The key space is the 4096 possible chromas, so a
cache of ``MAX_CACHE_SIZE`` entries never evicts.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Callable
from threading import Lock

from pcset.types import PcsetProperties

logger = logging.getLogger(__name__)

MAX_CACHE_SIZE = 4096


class ChromaCache:
    """
    Thread-safe chroma → PcsetProperties cache with LRU eviction.

    Args:
        max_size: Maximum number of entries (default: 4096, the whole domain)
    """

    def __init__(self, max_size: int = MAX_CACHE_SIZE) -> None:
        """Initialize an empty cache."""
        if max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self.max_size = max_size
        self._cache: OrderedDict[str, PcsetProperties] = OrderedDict()
        self._lock = Lock()
        self._hits = 0
        self._misses = 0

    def get(self, chroma: str) -> PcsetProperties | None:
        """
        Retrieve the cached record for a chroma.

        Args:
            chroma: 12-char chroma string

        Returns:
            Cached record if present, None otherwise
        """
        with self._lock:
            entry = self._cache.get(chroma)
            if entry is None:
                self._misses += 1
                return None

            self._hits += 1
            self._cache.move_to_end(chroma)
            return entry

    def put(self, chroma: str, properties: PcsetProperties) -> None:
        """
        Store a record, evicting the least-recently-used entry if full.

        Args:
            chroma: 12-char chroma string
            properties: Record derived from ``chroma``
        """
        with self._lock:
            if len(self._cache) >= self.max_size and chroma not in self._cache:
                evicted, _ = self._cache.popitem(last=False)
                logger.debug("ChromaCache: evicted %s", evicted)

            self._cache[chroma] = properties
            self._cache.move_to_end(chroma)

    def get_or_create(
        self,
        chroma: str,
        factory: Callable[[str], PcsetProperties],
    ) -> PcsetProperties:
        """
        Return the cached record, deriving and storing it on a miss.

        Two threads missing on the same chroma both call ``factory``; both
        results are equal, so the second store is an idempotent overwrite.

        Args:
            chroma: 12-char chroma string
            factory: Pure function deriving the record from the chroma

        Returns:
            The record for ``chroma``
        """
        cached = self.get(chroma)
        if cached is not None:
            return cached

        logger.debug("ChromaCache MISS: %s", chroma)
        properties = factory(chroma)
        self.put(chroma, properties)
        return properties

    def clear(self) -> None:
        """Clear all cached entries and counters."""
        with self._lock:
            count = len(self._cache)
            self._cache.clear()
            self._hits = 0
            self._misses = 0
        logger.info("ChromaCache: cleared %d entries", count)

    def size(self) -> int:
        """Return current number of cached entries."""
        with self._lock:
            return len(self._cache)

    def stats(self) -> dict[str, int]:
        """Return basic cache statistics.

        Returns:
            Dict with keys: size, max_size, hits, misses.
        """
        with self._lock:
            return {
                "size": len(self._cache),
                "max_size": self.max_size,
                "hits": self._hits,
                "misses": self._misses,
            }

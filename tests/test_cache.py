"""Tests for the chroma property cache with LRU eviction."""

import logging
import threading

import pytest

from pcset.cache import MAX_CACHE_SIZE, ChromaCache
from pcset.properties import derive_properties

MAJOR_TRIAD = "100010010000"
MINOR_TRIAD = "100100010000"


class TestChromaCache:
    """Tests for ChromaCache class."""

    def test_cache_hit(self) -> None:
        """Cached record is retrieved on second request."""
        cache = ChromaCache(max_size=10)
        record = derive_properties(MAJOR_TRIAD)

        # First request - miss
        assert cache.get(MAJOR_TRIAD) is None

        cache.put(MAJOR_TRIAD, record)

        # Second request - hit
        assert cache.get(MAJOR_TRIAD) is record

    def test_cache_miss_different_chroma(self) -> None:
        """Different chroma results in cache miss."""
        cache = ChromaCache(max_size=10)
        cache.put(MAJOR_TRIAD, derive_properties(MAJOR_TRIAD))

        assert cache.get(MINOR_TRIAD) is None

    def test_lru_eviction(self) -> None:
        """Least recently used entry is evicted when cache is full."""
        cache = ChromaCache(max_size=3)
        chromas = ["100000000000", "010000000000", "001000000000", "000100000000"]

        for chroma in chromas[:3]:
            cache.put(chroma, derive_properties(chroma))
        assert cache.size() == 3

        # 4th entry evicts the oldest
        cache.put(chromas[3], derive_properties(chromas[3]))

        assert cache.size() == 3
        assert cache.get(chromas[0]) is None
        assert cache.get(chromas[1]) is not None
        assert cache.get(chromas[3]) is not None

    def test_lru_reordering_on_get(self) -> None:
        """Accessing an entry marks it as recently used."""
        cache = ChromaCache(max_size=2)
        cache.put(MAJOR_TRIAD, derive_properties(MAJOR_TRIAD))
        cache.put(MINOR_TRIAD, derive_properties(MINOR_TRIAD))

        cache.get(MAJOR_TRIAD)
        cache.put("100000000000", derive_properties("100000000000"))

        assert cache.get(MAJOR_TRIAD) is not None
        assert cache.get(MINOR_TRIAD) is None

    def test_overwrite_does_not_evict(self) -> None:
        """Storing an existing key in a full cache keeps every entry."""
        cache = ChromaCache(max_size=2)
        cache.put(MAJOR_TRIAD, derive_properties(MAJOR_TRIAD))
        cache.put(MINOR_TRIAD, derive_properties(MINOR_TRIAD))

        cache.put(MAJOR_TRIAD, derive_properties(MAJOR_TRIAD))

        assert cache.size() == 2
        assert cache.get(MINOR_TRIAD) is not None

    def test_get_or_create(self) -> None:
        """Factory runs once per chroma."""
        cache = ChromaCache(max_size=10)
        calls: list[str] = []

        def factory(chroma: str):
            calls.append(chroma)
            return derive_properties(chroma)

        first = cache.get_or_create(MAJOR_TRIAD, factory)
        second = cache.get_or_create(MAJOR_TRIAD, factory)

        assert first is second
        assert calls == [MAJOR_TRIAD]

    def test_stats(self) -> None:
        """Hits and misses are counted."""
        cache = ChromaCache(max_size=10)
        cache.get_or_create(MAJOR_TRIAD, derive_properties)
        cache.get_or_create(MAJOR_TRIAD, derive_properties)

        assert cache.stats() == {"size": 1, "max_size": 10, "hits": 1, "misses": 1}

    def test_clear(self, caplog: pytest.LogCaptureFixture) -> None:
        """Clear removes all entries and resets counters."""
        cache = ChromaCache(max_size=10)
        cache.get_or_create(MAJOR_TRIAD, derive_properties)
        cache.get_or_create(MINOR_TRIAD, derive_properties)

        with caplog.at_level(logging.INFO, logger="pcset.cache"):
            cache.clear()

        assert cache.size() == 0
        assert cache.stats()["misses"] == 0
        assert "cleared 2 entries" in caplog.text

    def test_default_size_covers_domain(self) -> None:
        """Default cache holds every chroma without evicting."""
        cache = ChromaCache()
        assert cache.max_size == MAX_CACHE_SIZE == 4096

        for num in range(4096):
            chroma = format(num, "012b")
            cache.get_or_create(chroma, derive_properties)

        assert cache.size() == 4096
        assert cache.get("000000000000") is not None

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_size_raises(self, size: int) -> None:
        with pytest.raises(ValueError, match="max_size must be positive"):
            ChromaCache(max_size=size)

    def test_thread_safety(self) -> None:
        """Concurrent lookups never exceed max_size."""
        cache = ChromaCache(max_size=50)

        def worker(start: int) -> None:
            for num in range(start, start + 200):
                cache.get_or_create(format(num % 4096, "012b"), derive_properties)

        threads = [threading.Thread(target=worker, args=(i * 100,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert cache.size() <= 50

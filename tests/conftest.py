"""
Shared fixtures for the test suite.

Every test gets a fresh default builder so cache contents and counters never
leak between tests.
"""

import pytest

from pcset.cache import ChromaCache
from pcset.properties import PcsetBuilder, set_default_builder

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

C_MAJOR_SCALE = "101011010101"
"""C D E F G A B."""

C_MAJOR_TRIAD = "100010010000"
"""C E G."""


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def fresh_default_builder():
    """Install a new default builder for the duration of each test."""
    builder = PcsetBuilder()
    previous = set_default_builder(builder)
    yield builder
    set_default_builder(previous)


@pytest.fixture
def builder() -> PcsetBuilder:
    """A private builder with its own small cache."""
    return PcsetBuilder(cache=ChromaCache(max_size=64))

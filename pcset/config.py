"""
Configuration dataclass for pitch class set construction.

Immutable config objects decouple tuning knobs from function signatures, so a
builder can be configured once and shared.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from pcset.cache import MAX_CACHE_SIZE

_TRUE_VALUES: frozenset[str] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: frozenset[str] = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class PcsetConfig:
    """
    Configuration for a PcsetBuilder.

    Attributes:
        cache_size: Maximum number of property records kept in the builder's
            cache. Defaults to 4096, the number of distinct chromas, so
            nothing is ever evicted.
        sharps: Spell altered pitch classes with sharps (True, "C#") or flats
            (False, "Db") when naming set members.

    Example:
        >>> config = PcsetConfig(cache_size=256, sharps=False)
        >>> builder = PcsetBuilder(config=config)
    """

    cache_size: int = MAX_CACHE_SIZE
    sharps: bool = True

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not (1 <= self.cache_size <= MAX_CACHE_SIZE):
            raise ValueError(
                f"cache_size must be in [1, {MAX_CACHE_SIZE}], got {self.cache_size}"
            )

    @classmethod
    def from_env(cls) -> PcsetConfig:
        """
        Build a config from PCSET_CACHE_SIZE and PCSET_SHARPS.

        Unset variables keep their defaults.

        Raises:
            ValueError: If a variable is set to an unparseable value
        """
        cache_size = MAX_CACHE_SIZE
        raw_size = os.environ.get("PCSET_CACHE_SIZE", "").strip()
        if raw_size:
            try:
                cache_size = int(raw_size)
            except ValueError:
                raise ValueError(f"PCSET_CACHE_SIZE must be an integer, got {raw_size!r}") from None

        sharps = True
        raw_sharps = os.environ.get("PCSET_SHARPS", "").strip().lower()
        if raw_sharps:
            if raw_sharps in _TRUE_VALUES:
                sharps = True
            elif raw_sharps in _FALSE_VALUES:
                sharps = False
            else:
                raise ValueError(f"PCSET_SHARPS must be a boolean flag, got {raw_sharps!r}")

        return cls(cache_size=cache_size, sharps=sharps)


# Pre-defined configurations

DEFAULT_CONFIG = PcsetConfig()
"""Default configuration: whole-domain cache, sharp spelling."""

SMALL_CACHE_CONFIG = PcsetConfig(cache_size=128)
"""Small cache for short-lived builders."""

FLAT_SPELLING_CONFIG = PcsetConfig(sharps=False)
"""Whole-domain cache, flat spelling."""

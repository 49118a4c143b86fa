"""
pcset/catalog.py - Enumeration of chromas and modes.

Exports:
    CATALOG_FIRST, CATALOG_LAST
    chroma_catalog(length) → list[str]
    modes(pcs, normalized) → list[str]
"""

from __future__ import annotations

from typing import Any

from pcset.chroma import chroma_from_num
from pcset.normalize import rotate
from pcset.properties import PcsetBuilder, default_builder

# pcnums with the most significant bit set: every chroma that contains C
CATALOG_FIRST: int = 2048
CATALOG_LAST: int = 4095


def chroma_catalog(length: int | None = None, *, builder: PcsetBuilder | None = None) -> list[str]:
    """Return every chroma that contains C, optionally of a given size.

    There are 2048 of them, from '100000000000' to '111111111111'.

    Args:
        length: Keep only chromas with this many pitch classes

    Returns:
        Chromas in increasing pcnum order

    Examples:
        >>> chroma_catalog(1)
        ['100000000000']
        >>> len(chroma_catalog(3))
        55
    """
    catalog = [chroma_from_num(num) for num in range(CATALOG_FIRST, CATALOG_LAST + 1)]
    if length is None:
        return catalog

    b = builder or default_builder()
    return [chroma for chroma in catalog if b.derive(chroma).length == length]


def modes(pcs: Any, normalized: bool = True, *, builder: PcsetBuilder | None = None) -> list[str]:
    """Return the rotations of a set's chroma.

    Args:
        pcs: Set in any accepted shape
        normalized: Keep only rotations that start with a member ('1')

    Returns:
        Rotated chromas in rotation order 0..11

    Examples:
        >>> modes(["C", "D", "E"])
        ['101010000000', '101000000010', '100000001010']
    """
    chroma = (builder or default_builder()).get(pcs).chroma
    rotations = (rotate(chroma, steps) for steps in range(12))
    return [rotation for rotation in rotations if not (normalized and rotation[0] == "0")]

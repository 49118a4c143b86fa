"""
pcset/normalize.py - Chroma rotation and normalization.

``normalize`` rotates a chroma so its first set bit lands on index 0. The
rotation is anchored at the first set bit of the given chroma; it is not the
numerically smallest rotation, so two rotations of the same set can
normalize to different strings.
"""

from __future__ import annotations


def rotate(chroma: str, steps: int) -> str:
    """Rotate a chroma left by ``steps`` positions.

    Examples:
        >>> rotate("101011010101", 2)
        '101101010110'
    """
    steps %= len(chroma) or 1
    return chroma[steps:] + chroma[:steps]


def normalize(chroma: str) -> str:
    """Rotate ``chroma`` so it starts with its first '1'.

    The all-zero chroma is its own normal form. Idempotent.

    Examples:
        >>> normalize("001001000100")
        '100100010000'
    """
    first = chroma.find("1")
    if first <= 0:
        return chroma
    return rotate(chroma, first)

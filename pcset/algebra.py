"""
pcset/algebra.py - Set comparisons as bitmask tests on pcnums.

Every operand may be given in any shape the constructor accepts (chroma,
pcnum, note or interval list, record, ...); invalid operands count as the
empty set. Subset and superset tests are strict: equal sets are neither.

Exports:
    is_equal(one, other) → bool
    is_strict_subset(superset, subset) → bool
    is_strict_superset(base, other) → bool
    subset_test(superset) → Callable
    superset_test(base) → Callable
    contains_note(pcs, note_name) → bool
    note_filter(pcs) → Callable
    filter_notes(pcs, notes) → list[str]
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from pcset.notes import note
from pcset.properties import PcsetBuilder, default_builder


def _pcnum(source: Any, builder: PcsetBuilder | None) -> int:
    return (builder or default_builder()).get(source).pcnum


def _subset(s: int, o: int) -> bool:
    # every bit of o is set in s, and they differ
    return s != o and (o & s) == o


def _superset(s: int, o: int) -> bool:
    # every bit of s is set in o, and they differ
    return s != o and (o | s) == o


def is_equal(one: Any, other: Any, *, builder: PcsetBuilder | None = None) -> bool:
    """True if both inputs denote the same pitch classes.

    Examples:
        >>> is_equal(["c2", "d3"], ["c5", "d2"])
        True
    """
    return _pcnum(one, builder) == _pcnum(other, builder)


def is_strict_subset(superset: Any, subset: Any, *, builder: PcsetBuilder | None = None) -> bool:
    """True if ``subset`` is strictly contained in ``superset``.

    Examples:
        >>> is_strict_subset(["C", "E", "G"], ["C"])
        True
        >>> is_strict_subset(["C"], ["C"])
        False
    """
    return _subset(_pcnum(superset, builder), _pcnum(subset, builder))


def is_strict_superset(base: Any, other: Any, *, builder: PcsetBuilder | None = None) -> bool:
    """True if ``other`` contains every pitch class of ``base`` and at least one more.

    Examples:
        >>> is_strict_superset(["C", "E", "G"], ["e6", "a", "c4", "g2"])
        True
        >>> is_strict_superset(["C", "E", "G"], ["c6", "e4", "g3"])
        False
    """
    return _superset(_pcnum(base, builder), _pcnum(other, builder))


def subset_test(superset: Any, *, builder: PcsetBuilder | None = None) -> Callable[[Any], bool]:
    """Fix the superset of ``is_strict_subset`` and return the one-argument test.

    Examples:
        >>> in_c_major = subset_test(["C", "E", "G"])
        >>> in_c_major(["C"]), in_c_major(["A#"])
        (True, False)
    """
    s = _pcnum(superset, builder)

    def _test(subset: Any) -> bool:
        return _subset(s, _pcnum(subset, builder))

    return _test


def superset_test(base: Any, *, builder: PcsetBuilder | None = None) -> Callable[[Any], bool]:
    """Fix the base of ``is_strict_superset`` and return the one-argument test."""
    s = _pcnum(base, builder)

    def _test(other: Any) -> bool:
        return _superset(s, _pcnum(other, builder))

    return _test


def contains_note(pcs: Any, note_name: str, *, builder: PcsetBuilder | None = None) -> bool:
    """True if the note's pitch class is a member of the set.

    Octaves are ignored. Invalid note names are never members.
    """
    resolved = note(note_name)
    if not resolved.valid:
        return False
    chroma = (builder or default_builder()).get(pcs).chroma
    return chroma[resolved.chroma] == "1"


def note_filter(
    pcs: Any,
    *,
    builder: PcsetBuilder | None = None,
) -> Callable[[Iterable[str]], list[str]]:
    """Fix the set of ``filter_notes`` and return the one-argument filter."""
    chroma = (builder or default_builder()).get(pcs).chroma

    def _filter(notes: Iterable[str]) -> list[str]:
        members = []
        for name in notes:
            resolved = note(name)
            if resolved.valid and chroma[resolved.chroma] == "1":
                members.append(name)
        return members

    return _filter


def filter_notes(
    pcs: Any,
    notes: Iterable[str],
    *,
    builder: PcsetBuilder | None = None,
) -> list[str]:
    """Keep the notes whose pitch class is in the set, in input order.

    Examples:
        >>> filter_notes(["C"], ["c2", "c#2", "d2", "c3", "c#3", "d3"])
        ['c2', 'c3']
    """
    return note_filter(pcs, builder=builder)(notes)

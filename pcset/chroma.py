"""
pcset/chroma.py - Conversions between chroma strings, pcnums and name lists.

A chroma is a 12-character '0'/'1' string; index i is the pitch class i
semitones above C. Its pcnum is the string read as base-2 (index 0 is the
most significant bit), so the two are a bijection over 0..4095.

List conversions are fail-soft: one unresolvable name turns the whole list
into the empty chroma. Sibling names that did resolve are discarded.

Exports:
    EMPTY_CHROMA, CHROMA_REGEX, MAX_PCNUM
    is_chroma, is_pcnum, is_note_list, is_interval_list
    chroma_from_num(num) → str
    num_from_chroma(chroma) → int
    chroma_from_notes(notes) → str
    chroma_from_intervals(intervals) → str
    intervals_from_chroma(chroma) → tuple[str, ...]
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Sequence

from pcset.intervals import interval, is_interval_name
from pcset.notes import is_note_name, note

EMPTY_CHROMA: str = "0" * 12
CHROMA_REGEX = re.compile(r"[01]{12}")
MAX_PCNUM: int = 4095

# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------


def is_chroma(value: object) -> bool:
    """True if ``value`` is a 12-character binary string."""
    return isinstance(value, str) and CHROMA_REGEX.fullmatch(value) is not None


def is_pcnum(value: object) -> bool:
    """True if ``value`` is an integer in 0..4095 (booleans excluded)."""
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= MAX_PCNUM


def _is_name_list(value: object, is_name: Callable[[object], bool]) -> bool:
    if not isinstance(value, (list, tuple)):
        return False
    return all(is_name(item) for item in value)


def is_note_list(value: object) -> bool:
    """True if ``value`` is a list/tuple whose every element is a valid note name.

    An empty list is a valid (empty) note list.
    """
    return _is_name_list(value, is_note_name)


def is_interval_list(value: object) -> bool:
    """True if ``value`` is a list/tuple whose every element is a valid interval name.

    An empty list is a valid (empty) interval list.
    """
    return _is_name_list(value, is_interval_name)


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------


def chroma_from_num(num: int) -> str:
    """Return the zero-padded 12-bit chroma for a pcnum.

    The range is not checked here; validate with ``is_pcnum`` first.

    Examples:
        >>> chroma_from_num(2048)
        '100000000000'
    """
    return format(num, "012b")


def num_from_chroma(chroma: str) -> int:
    """Return the pcnum of a valid chroma, e.g. '100000000000' → 2048."""
    return int(chroma, 2)


def _chroma_from_pitch_classes(pitch_classes: Iterable[int | None]) -> str:
    bits = ["0"] * 12
    for pc in pitch_classes:
        if pc is None:
            return EMPTY_CHROMA
        bits[pc] = "1"
    return "".join(bits)


def chroma_from_notes(notes: Sequence[str]) -> str:
    """Return the chroma with a bit set for every note's pitch class.

    Octaves are ignored: ["C2", "c5", "E"] sets bits 0 and 4.

    Args:
        notes: Note names

    Returns:
        Chroma string; EMPTY_CHROMA for an empty list or if any name is
        not a valid note
    """
    return _chroma_from_pitch_classes(note(name).chroma for name in notes)


def chroma_from_intervals(intervals: Sequence[str]) -> str:
    """Return the chroma with a bit set for every interval's chroma.

    Same fail-soft policy as ``chroma_from_notes``.
    """
    return _chroma_from_pitch_classes(interval(name).chroma for name in intervals)


def intervals_from_chroma(chroma: str) -> tuple[str, ...]:
    """Return the canonical interval names of the set bits, in index order.

    Examples:
        >>> intervals_from_chroma("100010010000")
        ('1P', '3M', '5P')
    """
    return tuple(interval(index).name for index, bit in enumerate(chroma) if bit == "1")

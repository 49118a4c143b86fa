"""
pcset/intervals.py - Interval name resolution.

Pure module: no I/O, no side effects.

Interval names use shorthand notation with the number and quality in either
order, and an optional leading "-" for descending intervals:
    "3M", "M3", "5P", "-2m", "4A", "5d", "9M", "11P", "4AA"

Names must match exactly: surrounding whitespace or a sign anywhere but the
front ("M-3") makes the name invalid.

Qualities: P (perfect), M (major), m (minor), A (augmented, repeatable),
d (diminished, repeatable). Perfect applies to unisons, fourths and fifths
(and their compounds); major/minor to the rest.

Exports:
    Interval                frozen interval value object
    NO_INTERVAL             the invalid interval
    CANONICAL_NAMES         canonical name per chroma 0-11
    interval(src) → Interval
    is_interval_name(value) → bool
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

# Canonical interval per semitone distance above the root (0-11)
CANONICAL_NAMES: tuple[str, ...] = (
    "1P",
    "2m",
    "2M",
    "3m",
    "3M",
    "4P",
    "5d",
    "5P",
    "6m",
    "6M",
    "7m",
    "7M",
)

# Semitones of the major/perfect interval for each simple step (unison..seventh)
_BASE_SEMITONES: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

# Steps (0-based) that take perfect rather than major/minor qualities
_PERFECTABLE: frozenset[int] = frozenset({0, 3, 4})

# The sign only ever leads the name: "-3M", "-M3"
_SIGN = r"(?P<sign>-?)"
_QUALITY = r"(?P<quality>P|M|m|A+|d+)"
_NUMBER = r"(?P<number>[0-9]+)"
_NUMBER_FIRST = re.compile(rf"{_SIGN}{_NUMBER}{_QUALITY}")
_QUALITY_FIRST = re.compile(rf"{_SIGN}{_QUALITY}{_NUMBER}")


# ---------------------------------------------------------------------------
# Interval
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Interval:
    """A resolved interval.

    Attributes:
        name:       Canonical number-first name, e.g. "3M", "-5P"
        number:     Interval number without sign (1 = unison, 8 = octave)
        quality:    Quality string, e.g. "M", "m", "P", "AA", "d"
        direction:  1 ascending, -1 descending
        semitones:  Signed width in semitones
        chroma:     Pitch class distance 0-11 (``semitones % 12``)
        valid:      False only for NO_INTERVAL
    """

    name: str
    number: int = 0
    quality: str = ""
    direction: int = 1
    semitones: int = 0
    chroma: int | None = None
    valid: bool = True


NO_INTERVAL = Interval(name="", valid=False)


def _alteration(quality: str, perfectable: bool) -> int | None:
    """Semitone offset from the major/perfect interval, None if illegal."""
    head = quality[0]
    if head == "P":
        return 0 if perfectable else None
    if head == "M":
        return None if perfectable else 0
    if head == "m":
        return None if perfectable else -1
    if head == "A":
        return len(quality)
    # Diminished: one below perfect, or one below minor
    return -len(quality) if perfectable else -(len(quality) + 1)


def _from_name(name: str) -> Interval:
    match = _NUMBER_FIRST.fullmatch(name) or _QUALITY_FIRST.fullmatch(name)
    if match is None:
        return NO_INTERVAL

    number = int(match["number"])
    if number == 0:
        return NO_INTERVAL
    quality = match["quality"]
    direction = -1 if match["sign"] else 1

    step = (number - 1) % 7
    octaves = (number - 1) // 7
    alt = _alteration(quality, step in _PERFECTABLE)
    if alt is None:
        return NO_INTERVAL

    semitones = direction * (_BASE_SEMITONES[step] + alt + 12 * octaves)
    prefix = "-" if direction < 0 else ""
    return Interval(
        name=f"{prefix}{number}{quality}",
        number=number,
        quality=quality,
        direction=direction,
        semitones=semitones,
        chroma=semitones % 12,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def interval(src: object) -> Interval:
    """Resolve an interval from a name or a chroma index.

    Args:
        src: Interval name (e.g. "3M", "m3", "-5P") or an integer 0-11, which
            selects the canonical interval for that many semitones

    Returns:
        A valid Interval, or NO_INTERVAL if ``src`` cannot be resolved

    Examples:
        >>> interval("M3").name
        '3M'
        >>> interval(6).name
        '5d'
        >>> interval("4M").valid
        False
    """
    if isinstance(src, bool):
        return NO_INTERVAL
    if isinstance(src, int):
        if not (0 <= src <= 11):
            return NO_INTERVAL
        return _from_name(CANONICAL_NAMES[src])
    if isinstance(src, str):
        return _from_name(src)
    return NO_INTERVAL


def is_interval_name(value: object) -> bool:
    """True if ``value`` is a string that resolves to a valid interval."""
    return isinstance(value, str) and interval(value).valid

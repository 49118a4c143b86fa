"""
pcset/properties.py - Property derivation and the pitch class set constructor.

Every accepted input shape is reduced to a chroma by one ordered match, then
the chroma is turned into a PcsetProperties record (cached per chroma).

Dispatch precedence (first valid field wins):
    1. chroma      12-char binary string
    2. pcnum       integer 0-4095
    3. note        single note name        → [note]
    4. notes       list of note names
    5. interval    single interval name    → [interval]
    6. intervals   list of interval names
    7. nothing valid → EMPTY_PCSET plus an InvalidPcsetConstructor error

Exports:
    derive_properties(chroma) → PcsetProperties
    resolve_chroma(init) → (field, chroma) | None
    PcsetResult, PcsetBuilder
    default_builder(), set_default_builder(builder)
    pcset(...), build_pcset(...)
    pcnum_of, chroma_of, normalized_of, intervals_of, length_of, is_empty
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from pcset.cache import ChromaCache
from pcset.chroma import (
    chroma_from_intervals,
    chroma_from_notes,
    chroma_from_num,
    intervals_from_chroma,
    is_chroma,
    is_interval_list,
    is_note_list,
    is_pcnum,
    num_from_chroma,
)
from pcset.config import PcsetConfig
from pcset.errors import InvalidPcsetConstructor
from pcset.intervals import is_interval_name
from pcset.normalize import normalize
from pcset.notes import is_note_name, pitch_class_name
from pcset.types import EMPTY_PCSET, PcsetInit, PcsetProperties

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Derivation
# ---------------------------------------------------------------------------


def derive_properties(chroma: str) -> PcsetProperties:
    """Compute the full property record of a valid chroma.

    Pure: the same chroma always yields an equal record.

    Examples:
        >>> derive_properties("100010010000").intervals
        ('1P', '3M', '5P')
    """
    length = chroma.count("1")
    return PcsetProperties(
        pcnum=num_from_chroma(chroma),
        chroma=chroma,
        normalized=normalize(chroma),
        intervals=intervals_from_chroma(chroma),
        length=length,
        empty=length == 0,
    )


def resolve_chroma(init: PcsetInit) -> tuple[str, str] | None:
    """Apply the dispatch precedence to a constructor input.

    Returns:
        (matched field name, chroma), or None if no field is valid
    """
    if is_chroma(init.chroma):
        return "chroma", init.chroma
    if is_pcnum(init.pcnum):
        return "pcnum", chroma_from_num(init.pcnum)
    if is_note_name(init.note):
        return "note", chroma_from_notes([init.note])
    if is_note_list(init.notes):
        return "notes", chroma_from_notes(init.notes)
    if is_interval_name(init.interval):
        return "interval", chroma_from_intervals([init.interval])
    if is_interval_list(init.intervals):
        return "intervals", chroma_from_intervals(init.intervals)
    return None


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PcsetResult:
    """
    Outcome of a pitch class set construction.

    Attributes:
        properties: The record; EMPTY_PCSET when construction fell back
        matched: Name of the PcsetInit field that was used, None on fallback
        error: InvalidPcsetConstructor on fallback, None otherwise
    """

    properties: PcsetProperties
    matched: str | None = None
    error: InvalidPcsetConstructor | None = None

    @property
    def ok(self) -> bool:
        """True if a valid input field was found."""
        return self.error is None

    def raise_for_error(self) -> PcsetProperties:
        """Return the record, or raise the construction error if there was one."""
        if self.error is not None:
            raise self.error
        return self.properties


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


class PcsetBuilder:
    """
    Pitch class set constructor that owns its property cache.

    Args:
        cache: Cache to use; a new ChromaCache sized by ``config`` if omitted.
        config: Builder configuration (default: PcsetConfig()).

    Usage::

        builder = PcsetBuilder()
        builder.get(["C", "E", "G"]).chroma          # '100010010000'
        builder.build(chroma="bad", notes=["D"]).matched   # 'notes'
    """

    def __init__(
        self,
        cache: ChromaCache | None = None,
        config: PcsetConfig | None = None,
    ) -> None:
        self.config = config or PcsetConfig()
        self.cache = cache if cache is not None else ChromaCache(max_size=self.config.cache_size)

    def derive(self, chroma: str) -> PcsetProperties:
        """Cached ``derive_properties``."""
        return self.cache.get_or_create(chroma, derive_properties)

    def build(
        self,
        source: Any = None,
        *,
        chroma: Any = None,
        pcnum: Any = None,
        note: Any = None,
        notes: Any = None,
        interval: Any = None,
        intervals: Any = None,
    ) -> PcsetResult:
        """
        Build a pitch class set from any accepted input.

        ``source`` is classified by shape (see ``PcsetInit.from_source``);
        keyword fields are merged over it.

        Args:
            source: Bare input: chroma, pcnum, name, list of names, record,
                mapping or PcsetInit
            chroma, pcnum, note, notes, interval, intervals: Explicit fields

        Returns:
            PcsetResult; never raises for invalid input
        """
        init = PcsetInit.from_source(source).merge(
            chroma=chroma,
            pcnum=pcnum,
            note=note,
            notes=notes,
            interval=interval,
            intervals=intervals,
        )
        resolved = resolve_chroma(init)
        if resolved is None:
            logger.warning("Invalid pitch class set constructor, using empty set: %r", init)
            return PcsetResult(properties=EMPTY_PCSET, error=InvalidPcsetConstructor(init))

        matched, resolved_chroma = resolved
        return PcsetResult(properties=self.derive(resolved_chroma), matched=matched)

    def get(self, source: Any = None, **fields: Any) -> PcsetProperties:
        """Like ``build`` but return only the record (EMPTY_PCSET on fallback)."""
        return self.build(source, **fields).properties

    def note_names(self, source: Any = None, **fields: Any) -> tuple[str, ...]:
        """Pitch class names of the members, spelled per ``config.sharps``.

        Examples:
            >>> PcsetBuilder().note_names("100100010000")
            ('C', 'D#', 'G')
        """
        chroma = self.get(source, **fields).chroma
        return tuple(
            pitch_class_name(pc, self.config.sharps) for pc, bit in enumerate(chroma) if bit == "1"
        )


# ---------------------------------------------------------------------------
# Process-wide default builder
# ---------------------------------------------------------------------------

_default_builder: PcsetBuilder | None = None


def default_builder() -> PcsetBuilder:
    """Return the shared builder, creating it from the environment on first use."""
    global _default_builder
    if _default_builder is None:
        _default_builder = PcsetBuilder(config=PcsetConfig.from_env())
    return _default_builder


def set_default_builder(builder: PcsetBuilder | None) -> PcsetBuilder | None:
    """Replace the shared builder; None resets it to lazy creation.

    Returns:
        The previous builder (None if it was never created)
    """
    global _default_builder
    previous = _default_builder
    _default_builder = builder
    return previous


def build_pcset(source: Any = None, **fields: Any) -> PcsetResult:
    """``PcsetBuilder.build`` on the default builder."""
    return default_builder().build(source, **fields)


def pcset(source: Any = None, **fields: Any) -> PcsetProperties:
    """Return the properties of a pitch class set given in any accepted shape.

    Examples:
        >>> pcset(["C", "E", "G"]).pcnum
        2192
        >>> pcset(chroma="100000000000", notes=["D"]).pcnum
        2048
        >>> pcset("not a set").empty
        True
    """
    return default_builder().get(source, **fields)


# ---------------------------------------------------------------------------
# Property accessors
# ---------------------------------------------------------------------------


def pcnum_of(source: Any) -> int:
    """pcnum of any accepted input."""
    return pcset(source).pcnum


def chroma_of(source: Any) -> str:
    """Chroma of any accepted input."""
    return pcset(source).chroma


def normalized_of(source: Any) -> str:
    """Normalized chroma of any accepted input."""
    return pcset(source).normalized


def intervals_of(source: Any) -> tuple[str, ...]:
    """Interval names of any accepted input."""
    return pcset(source).intervals


def length_of(source: Any) -> int:
    """Number of pitch classes of any accepted input."""
    return pcset(source).length


def is_empty(source: Any) -> bool:
    """True if the input denotes the empty set (or is invalid)."""
    return pcset(source).empty

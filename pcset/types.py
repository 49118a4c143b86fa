"""
pcset/types.py - Frozen value objects for pitch class sets.

Types:
    PcsetProperties  the canonical property record of a pitch class set
    EMPTY_PCSET      the empty set, used as the fallback for invalid input
    PcsetInit        constructor input: one optional field per accepted shape
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pcset.chroma import EMPTY_CHROMA, is_chroma, num_from_chroma

# ---------------------------------------------------------------------------
# PcsetProperties
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PcsetProperties:
    """The properties of a pitch class set.

    Attributes:
        pcnum:      0-4095, the chroma read as a base-2 number
        chroma:     12-char binary membership string, index 0 = C
        normalized: chroma rotated so that it starts with '1'
        intervals:  canonical interval names of the members, index order
        length:     number of pitch classes in the set
        empty:      True when the set has no pitch classes
    """

    pcnum: int
    chroma: str
    normalized: str
    intervals: tuple[str, ...]
    length: int
    empty: bool

    def __post_init__(self) -> None:
        if not is_chroma(self.chroma):
            raise ValueError(
                f"PcsetProperties.chroma must be 12 binary digits, got {self.chroma!r}"
            )
        if not is_chroma(self.normalized):
            raise ValueError(
                f"PcsetProperties.normalized must be 12 binary digits, got {self.normalized!r}"
            )
        if self.pcnum != num_from_chroma(self.chroma):
            raise ValueError(
                f"PcsetProperties.pcnum {self.pcnum} does not match chroma {self.chroma!r}"
            )
        if self.length != self.chroma.count("1"):
            raise ValueError(
                f"PcsetProperties.length {self.length} does not match chroma {self.chroma!r}"
            )
        if len(self.intervals) != self.length:
            raise ValueError(
                f"PcsetProperties.intervals has {len(self.intervals)} names, expected {self.length}"
            )
        if self.empty != (self.length == 0):
            raise ValueError("PcsetProperties.empty must be True exactly when length is 0")

    def is_equal_to(self, other: Any) -> bool:
        """True if ``other`` denotes the same pitch classes."""
        from pcset.algebra import is_equal  # local import to avoid circularity

        return is_equal(self, other)

    def is_subset_of(self, other: Any) -> bool:
        """True if this set is strictly contained in ``other``."""
        from pcset.algebra import is_strict_subset  # local import to avoid circularity

        return is_strict_subset(other, self)

    def is_superset_of(self, other: Any) -> bool:
        """True if this set strictly contains ``other``."""
        from pcset.algebra import is_strict_superset  # local import to avoid circularity

        return is_strict_superset(other, self)

    def to_dict(self) -> dict[str, Any]:
        """Plain dict form for serialization."""
        return {
            "pcnum": self.pcnum,
            "chroma": self.chroma,
            "normalized": self.normalized,
            "intervals": list(self.intervals),
            "length": self.length,
            "empty": self.empty,
        }


EMPTY_PCSET = PcsetProperties(
    pcnum=0,
    chroma=EMPTY_CHROMA,
    normalized=EMPTY_CHROMA,
    intervals=(),
    length=0,
    empty=True,
)


def is_pcset(value: object) -> bool:
    """True if ``value`` is a property record with a valid chroma."""
    return isinstance(value, PcsetProperties) and is_chroma(value.chroma)


# ---------------------------------------------------------------------------
# PcsetInit
# ---------------------------------------------------------------------------

INIT_FIELDS: tuple[str, ...] = ("chroma", "pcnum", "note", "notes", "interval", "intervals")


@dataclass(frozen=True)
class PcsetInit:
    """Constructor input for a pitch class set.

    Each field holds one accepted input shape. Fields are not validated here:
    the dispatcher tries them in declaration order and uses the first valid
    one, so an invalid value simply does not match.

    Attributes:
        chroma:    12-char binary string
        pcnum:     integer 0-4095
        note:      a single note name
        notes:     a list of note names
        interval:  a single interval name
        intervals: a list of interval names
    """

    chroma: Any = None
    pcnum: Any = None
    note: Any = None
    notes: Any = None
    interval: Any = None
    intervals: Any = None

    def __post_init__(self) -> None:
        # Lists are frozen into tuples so the init stays hashable
        for name in ("notes", "intervals"):
            value = getattr(self, name)
            if isinstance(value, list):
                object.__setattr__(self, name, tuple(value))

    @classmethod
    def from_source(cls, source: Any) -> PcsetInit:
        """Classify a bare value into the field(s) it could fill.

        Strings that are not chromas could be a note or an interval name, and
        lists could hold either, so both candidate fields are filled and the
        dispatcher's precedence decides (notes before intervals).

        Args:
            source: chroma string, pcnum, note/interval name, list of names,
                PcsetProperties, mapping of field names, PcsetInit or None

        Returns:
            PcsetInit; empty when ``source`` has no recognizable shape
        """
        if source is None:
            return cls()
        if isinstance(source, PcsetInit):
            return source
        if isinstance(source, PcsetProperties):
            return cls(chroma=source.chroma)
        if isinstance(source, Mapping):
            return cls(**{name: source[name] for name in INIT_FIELDS if name in source})
        if isinstance(source, str):
            if is_chroma(source):
                return cls(chroma=source)
            return cls(note=source, interval=source)
        if isinstance(source, int) and not isinstance(source, bool):
            return cls(pcnum=source)
        if isinstance(source, (list, tuple)):
            return cls(notes=source, intervals=source)
        return cls()

    def merge(self, **fields: Any) -> PcsetInit:
        """Return a copy with every non-None keyword field replaced."""
        updates = {name: value for name, value in fields.items() if value is not None}
        if not updates:
            return self
        return dataclasses.replace(self, **updates)

    @property
    def is_blank(self) -> bool:
        """True when no field was supplied at all."""
        return all(getattr(self, name) is None for name in INIT_FIELDS)

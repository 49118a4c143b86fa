"""
pcset/ - Pitch class set engine.

Exports:
    Types:        PcsetProperties, PcsetInit, EMPTY_PCSET, Note, Interval
    Construction: pcset, build_pcset, PcsetBuilder, PcsetResult,
                  default_builder, set_default_builder
    Accessors:    pcnum_of, chroma_of, normalized_of, intervals_of,
                  length_of, is_empty
    Chroma:       chroma_from_num, num_from_chroma, chroma_from_notes,
                  chroma_from_intervals, intervals_from_chroma, normalize
    Algebra:      is_equal, is_strict_subset, is_strict_superset,
                  subset_test, superset_test, contains_note, filter_notes
    Catalog:      chroma_catalog, modes
    Resolvers:    note, interval, transpose, transposer
    Errors:       PcsetError, InvalidPcsetConstructor
    Config:       PcsetConfig, ChromaCache
"""

from pcset.algebra import (
    contains_note,
    filter_notes,
    is_equal,
    is_strict_subset,
    is_strict_superset,
    note_filter,
    subset_test,
    superset_test,
)
from pcset.cache import ChromaCache
from pcset.catalog import chroma_catalog, modes
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
from pcset.errors import InvalidPcsetConstructor, PcsetError
from pcset.intervals import Interval, interval, is_interval_name
from pcset.normalize import normalize
from pcset.notes import Note, is_note_name, note, note_from_midi, transpose, transposer
from pcset.properties import (
    PcsetBuilder,
    PcsetResult,
    build_pcset,
    chroma_of,
    default_builder,
    derive_properties,
    intervals_of,
    is_empty,
    length_of,
    normalized_of,
    pcnum_of,
    pcset,
    set_default_builder,
)
from pcset.types import EMPTY_PCSET, PcsetInit, PcsetProperties, is_pcset

__all__ = [
    # Types
    "PcsetProperties",
    "PcsetInit",
    "EMPTY_PCSET",
    "Note",
    "Interval",
    # Construction
    "pcset",
    "build_pcset",
    "derive_properties",
    "PcsetBuilder",
    "PcsetResult",
    "default_builder",
    "set_default_builder",
    # Accessors
    "pcnum_of",
    "chroma_of",
    "normalized_of",
    "intervals_of",
    "length_of",
    "is_empty",
    # Chroma
    "chroma_from_num",
    "num_from_chroma",
    "chroma_from_notes",
    "chroma_from_intervals",
    "intervals_from_chroma",
    "normalize",
    "is_chroma",
    "is_pcnum",
    "is_pcset",
    "is_note_list",
    "is_interval_list",
    # Algebra
    "is_equal",
    "is_strict_subset",
    "is_strict_superset",
    "subset_test",
    "superset_test",
    "contains_note",
    "note_filter",
    "filter_notes",
    # Catalog
    "chroma_catalog",
    "modes",
    # Resolvers
    "note",
    "note_from_midi",
    "is_note_name",
    "interval",
    "is_interval_name",
    "transpose",
    "transposer",
    # Errors
    "PcsetError",
    "InvalidPcsetConstructor",
    # Config
    "PcsetConfig",
    "ChromaCache",
]

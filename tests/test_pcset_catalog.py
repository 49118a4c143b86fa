"""
Tests for pcset/catalog.py - chroma catalog and modes.
"""

from math import comb

import pytest

from pcset.catalog import chroma_catalog, modes

C_MAJOR_SCALE = "101011010101"


class TestChromaCatalog:
    def test_unfiltered_size(self):
        assert len(chroma_catalog()) == 2048

    def test_bounds_and_order(self):
        catalog = chroma_catalog()
        assert catalog[0] == "100000000000"
        assert catalog[-1] == "111111111111"
        assert catalog == sorted(catalog)

    def test_every_entry_contains_c(self):
        assert all(chroma[0] == "1" for chroma in chroma_catalog())

    def test_single_note(self):
        assert chroma_catalog(1) == ["100000000000"]

    @pytest.mark.parametrize("length", range(1, 13))
    def test_filtered_sizes(self, length):
        # C is fixed, the other length - 1 members come from 11 pitch classes
        catalog = chroma_catalog(length)
        assert len(catalog) == comb(11, length - 1)
        assert all(chroma.count("1") == length for chroma in catalog)

    def test_empty_length_has_no_entries(self):
        assert chroma_catalog(0) == []

    def test_uses_given_builder(self, builder):
        chroma_catalog(12, builder=builder)
        assert builder.cache.size() == 64


class TestModes:
    def test_major_scale_modes(self):
        result = modes(C_MAJOR_SCALE)
        assert result == [
            "101011010101",
            "101101010110",
            "110101011010",
            "101010110101",
            "101011010110",
            "101101011010",
            "110101101010",
        ]

    def test_no_holes(self):
        assert None not in modes(C_MAJOR_SCALE)
        assert all(mode[0] == "1" for mode in modes(C_MAJOR_SCALE))

    def test_unnormalized_keeps_all_rotations(self):
        result = modes(["C", "D", "E"], normalized=False)
        assert len(result) == 12
        assert result[1] == "010100000001"

    def test_from_note_list(self):
        assert modes(["C", "D", "E"]) == ["101010000000", "101000000010", "100000001010"]

    def test_empty_set(self):
        assert modes("000000000000") == []
        assert modes("000000000000", normalized=False) == ["000000000000"] * 12

"""
Tests for pcset/intervals.py - interval resolution.
"""

import pytest

from pcset.intervals import CANONICAL_NAMES, NO_INTERVAL, interval, is_interval_name


class TestIntervalNames:
    @pytest.mark.parametrize(
        ("name", "semitones"),
        [
            ("1P", 0),
            ("2m", 1),
            ("2M", 2),
            ("3m", 3),
            ("3M", 4),
            ("4P", 5),
            ("4A", 6),
            ("5d", 6),
            ("5P", 7),
            ("6m", 8),
            ("6M", 9),
            ("7m", 10),
            ("7M", 11),
            ("8P", 12),
        ],
    )
    def test_simple_intervals(self, name, semitones):
        ivl = interval(name)
        assert ivl.valid
        assert ivl.semitones == semitones
        assert ivl.chroma == semitones % 12

    def test_quality_first_order(self):
        ivl = interval("M3")
        assert ivl.name == "3M"
        assert ivl.semitones == 4

    def test_compound_interval(self):
        ivl = interval("9M")
        assert ivl.semitones == 14
        assert ivl.chroma == 2

    def test_descending_interval(self):
        ivl = interval("-3m")
        assert ivl.direction == -1
        assert ivl.semitones == -3
        assert ivl.chroma == 9
        assert ivl.name == "-3m"

    def test_descending_quality_first(self):
        ivl = interval("-M3")
        assert ivl.name == "-3M"
        assert ivl.semitones == -4

    @pytest.mark.parametrize("bad", ["M-3", "P-5", "3-M", "--3M"])
    def test_sign_only_leads_the_name(self, bad):
        assert interval(bad) is NO_INTERVAL

    @pytest.mark.parametrize("padded", [" 3M", "3M ", "3M\n", "M3\n"])
    def test_surrounding_whitespace_rejected(self, padded):
        assert interval(padded) is NO_INTERVAL
        assert not is_interval_name(padded)

    def test_repeated_augmented(self):
        assert interval("4AA").semitones == 7

    def test_diminished_imperfect(self):
        assert interval("7d").semitones == 9
        assert interval("3d").semitones == 2

    @pytest.mark.parametrize("bad", ["", "3P", "4M", "5m", "0P", "P", "3", "X3", "3Mm"])
    def test_invalid_names(self, bad):
        assert interval(bad) is NO_INTERVAL
        assert not is_interval_name(bad)


class TestIntervalIndex:
    def test_index_gives_canonical_name(self):
        for index, name in enumerate(CANONICAL_NAMES):
            ivl = interval(index)
            assert ivl.name == name
            assert ivl.chroma == index

    def test_tritone_is_diminished_fifth(self):
        assert interval(6).name == "5d"

    def test_out_of_range_index(self):
        assert interval(12) is NO_INTERVAL
        assert interval(-1) is NO_INTERVAL

    def test_bool_is_not_an_index(self):
        assert interval(True) is NO_INTERVAL

    def test_index_is_not_an_interval_name(self):
        assert not is_interval_name(3)

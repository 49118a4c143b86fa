"""
Tests for pcset/notes.py - note resolution and transposition.

Validates:
    - note(): letters, accidentals, octaves, canonical spelling
    - Invalid input resolves to NO_NOTE
    - note_from_midi, pitch_class_name
    - transpose / transposer
"""

import pytest

from pcset.notes import (
    NO_NOTE,
    is_note_name,
    note,
    note_from_midi,
    pitch_class_name,
    transpose,
    transposer,
)

# ---------------------------------------------------------------------------
# note
# ---------------------------------------------------------------------------


class TestNote:
    def test_natural_pitch_class(self):
        n = note("C")
        assert n.valid
        assert n.chroma == 0
        assert n.midi is None
        assert n.octave is None

    def test_lowercase_is_accepted(self):
        assert note("c#").name == "C#"
        assert note("bb").name == "Bb"

    def test_flat_and_sharp_share_chroma(self):
        assert note("Bb").chroma == note("A#").chroma == 10

    def test_octave_gives_midi(self):
        assert note("C4").midi == 60
        assert note("A4").midi == 69
        assert note("Bb4").midi == 70

    def test_negative_octave(self):
        assert note("C-1").midi == 0

    def test_cb_wraps_to_b(self):
        n = note("Cb4")
        assert n.chroma == 11
        assert n.midi == 59

    def test_double_sharp(self):
        assert note("Fx").chroma == 7
        assert note("F##").chroma == 7
        assert note("Fx").name == "F##"

    def test_double_flat(self):
        assert note("Ebb").chroma == 2

    def test_pitch_class_property(self):
        assert note("Bb4").pitch_class == "Bb"
        assert NO_NOTE.pitch_class == ""

    @pytest.mark.parametrize("padded", [" G ", "G\n", "\tC", "C4\n"])
    def test_surrounding_whitespace_rejected(self, padded):
        assert note(padded) is NO_NOTE
        assert not is_note_name(padded)

    @pytest.mark.parametrize("bad", ["", "H", "X#", "C#b", "not-a-note", "4C", "Cm"])
    def test_invalid_names(self, bad):
        assert note(bad) is NO_NOTE
        assert not is_note_name(bad)

    @pytest.mark.parametrize("bad", [None, 0, 4.5, ["C"]])
    def test_non_strings_are_invalid(self, bad):
        assert note(bad) is NO_NOTE
        assert not is_note_name(bad)

    def test_frozen(self):
        with pytest.raises((TypeError, AttributeError)):
            note("C").chroma = 3  # type: ignore[misc]


# ---------------------------------------------------------------------------
# note_from_midi / pitch_class_name
# ---------------------------------------------------------------------------


class TestMidiAndNames:
    def test_note_from_midi(self):
        assert note_from_midi(60).name == "C4"
        assert note_from_midi(61).name == "C#4"
        assert note_from_midi(61, sharps=False).name == "Db4"

    def test_pitch_class_name(self):
        assert pitch_class_name(3) == "D#"
        assert pitch_class_name(3, sharps=False) == "Eb"

    def test_pitch_class_name_out_of_range(self):
        with pytest.raises(ValueError, match="Pitch class"):
            pitch_class_name(12)


# ---------------------------------------------------------------------------
# transpose
# ---------------------------------------------------------------------------


class TestTranspose:
    def test_note_with_octave(self):
        assert transpose("D3", "3M").name == "F#3"

    def test_pitch_class(self):
        assert transpose("D", "3M").name == "F#"

    def test_flat_spelling(self):
        assert transpose("D", "3M", sharps=False).name == "Gb"

    def test_descending(self):
        assert transpose("C4", "-2M").name == "A#3"

    def test_crosses_octave(self):
        assert transpose("B3", "2m").name == "C4"

    def test_invalid_operands(self):
        assert transpose("H", "3M") is None
        assert transpose("C", "3P") is None

    def test_transposer_partial_application(self):
        up_third = transposer("3M")
        names = [up_third(n).name for n in ("C", "D", "E", "F", "G")]
        assert names == ["E", "F#", "G#", "A", "B"]

"""
pcset/notes.py - Note name resolution and transposition.

Pure module: no I/O, no side effects.

Note names are ``letter + accidentals + optional octave``:
    "C", "c#", "Bb4", "Fx3", "Ebb", "G-1"

A name without an octave is a pitch class: it has a chroma but no MIDI
number. Unparseable input resolves to NO_NOTE (``valid=False``) instead of
raising, so callers can test validity the same way for every input.
Names are matched exactly, so " C " is not a note.

Exports:
    Note                    frozen note value object
    NO_NOTE                 the invalid note
    note(name) → Note
    note_from_midi(midi, sharps) → Note
    is_note_name(value) → bool
    pitch_class_name(pc, sharps) → str
    transpose(note_name, interval_name, sharps) → Note | None
    transposer(interval_name, sharps) → Callable
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from pcset.intervals import interval

# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

LETTERS: str = "CDEFGAB"

# Semitones above C for each natural letter
STEP_SEMITONES: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

SHARP_NAMES: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
FLAT_NAMES: tuple[str, ...] = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

_NOTE_REGEX = re.compile(r"(?P<letter>[a-gA-G])(?P<acc>#+|b+|x+)?(?P<octave>-?[0-9]+)?")


# ---------------------------------------------------------------------------
# Note
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Note:
    """A resolved note or pitch class.

    Attributes:
        name:    Canonical spelling, e.g. "Bb4", "F#", "" when invalid
        letter:  Natural letter "A"-"G"
        alt:     Accidental offset in semitones (+ sharps, - flats)
        octave:  Scientific octave, or None for a pitch class
        chroma:  Pitch class 0 (C) through 11 (B), None when invalid
        midi:    MIDI number, None for pitch classes and invalid notes
        valid:   False only for NO_NOTE
    """

    name: str
    letter: str = ""
    alt: int = 0
    octave: int | None = None
    chroma: int | None = None
    midi: int | None = None
    valid: bool = True

    @property
    def pitch_class(self) -> str:
        """The note name without its octave, e.g. 'Bb' for 'Bb4'."""
        return _spell(self.letter, self.alt) if self.valid else ""


NO_NOTE = Note(name="", valid=False)


def _spell(letter: str, alt: int) -> str:
    accidentals = "#" * alt if alt > 0 else "b" * -alt
    return f"{letter}{accidentals}"


def _alteration(acc: str | None) -> int:
    if not acc:
        return 0
    if acc[0] == "#":
        return len(acc)
    if acc[0] == "x":
        return 2 * len(acc)
    return -len(acc)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def note(name: object) -> Note:
    """Resolve a note name.

    Args:
        name: Note name, e.g. "C", "f#", "Bb3"

    Returns:
        A valid Note, or NO_NOTE if the name cannot be parsed

    Examples:
        >>> note("Bb4").midi
        70
        >>> note("c#").chroma
        1
        >>> note("H").valid
        False
    """
    if not isinstance(name, str):
        return NO_NOTE
    match = _NOTE_REGEX.fullmatch(name)
    if match is None:
        return NO_NOTE

    letter = match["letter"].upper()
    alt = _alteration(match["acc"])
    octave = int(match["octave"]) if match["octave"] is not None else None

    semitones = STEP_SEMITONES[LETTERS.index(letter)] + alt
    midi = (octave + 1) * 12 + semitones if octave is not None else None
    spelled = _spell(letter, alt)

    return Note(
        name=f"{spelled}{octave}" if octave is not None else spelled,
        letter=letter,
        alt=alt,
        octave=octave,
        chroma=semitones % 12,
        midi=midi,
    )


def is_note_name(value: object) -> bool:
    """True if ``value`` is a string that resolves to a valid note."""
    return isinstance(value, str) and note(value).valid


def pitch_class_name(pc: int, sharps: bool = True) -> str:
    """Return the pitch class name for 0-11, spelled with sharps or flats."""
    if not (0 <= pc <= 11):
        raise ValueError(f"Pitch class must be in [0, 11], got {pc}")
    return SHARP_NAMES[pc] if sharps else FLAT_NAMES[pc]


def note_from_midi(midi: int, sharps: bool = True) -> Note:
    """Build a note from a MIDI number, e.g. 60 → C4."""
    octave = midi // 12 - 1
    return note(f"{pitch_class_name(midi % 12, sharps)}{octave}")


def transpose(note_name: str, interval_name: str, sharps: bool = True) -> Note | None:
    """Transpose a note (or pitch class) by an interval.

    The result is re-spelled from its pitch, so "D" + "3M" gives "F#"
    (or "Gb" with ``sharps=False``).

    Args:
        note_name:     Note or pitch class, e.g. "D3", "D"
        interval_name: Interval name, e.g. "3M", "-5P"
        sharps:        Spell altered results with sharps (True) or flats

    Returns:
        Transposed Note, or None if either operand is invalid
    """
    source = note(note_name)
    ivl = interval(interval_name)
    if not (source.valid and ivl.valid):
        return None

    if source.midi is None:
        return note(pitch_class_name((source.chroma + ivl.semitones) % 12, sharps))
    return note_from_midi(source.midi + ivl.semitones, sharps)


def transposer(interval_name: str, sharps: bool = True) -> Callable[[str], Note | None]:
    """Return a one-argument function that transposes notes by ``interval_name``.

    Examples:
        >>> up_third = transposer("3M")
        >>> [up_third(n).name for n in ("C", "D", "E")]
        ['E', 'F#', 'G#']
    """

    def _transpose(note_name: str) -> Note | None:
        return transpose(note_name, interval_name, sharps)

    return _transpose

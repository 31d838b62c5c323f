"""Resolve spelled pitch classes to numbers.

The parser keeps spellings exactly as written; this module is for
consumers of the tree that need the 0-11 value of a pitch class, its
numeral, or the MIDI number of a pitch. Middle C = C4 = MIDI 60.
"""

from __future__ import annotations

from post_office.errors import ParseError, ValidationError
from post_office.model.expression import IntegerClass, NoteClass, Pitch, PitchClass
from post_office.parser import Rule, parse

# Semitone offsets for natural notes (C-based)
NOTE_OFFSETS: dict[str, int] = {
    "C": 0,
    "D": 2,
    "E": 4,
    "F": 5,
    "G": 7,
    "A": 9,
    "B": 11,
}

# Numeral for each pitch class; ten and eleven use the Pitman digits
NUMERALS: tuple[str, ...] = (
    "0", "1", "2", "3", "4", "5", "6", "7", "8", "9", "↊", "↋",
)


def semitones(pc: PitchClass) -> int:
    """Unreduced semitone count of *pc* above C (may be negative or > 11)."""
    if isinstance(pc, IntegerClass):
        return pc.value
    offset = NOTE_OFFSETS[pc.letter.upper()]
    return offset + sum(acc.semitones for acc in pc.accidentals)


def pitch_class_value(pc: PitchClass, zero: str | PitchClass = "C") -> int:
    """Return the 0-11 value of *pc*.

    Integers are taken as already relative to *zero*. Notes are measured
    from *zero*, which may be given as a pitch-class spelling (``"C"``,
    ``"Eb"``, ``"3"``) or as an already parsed pitch class.

    Raises
    ------
    ValidationError
        If *zero* is not a valid pitch-class spelling.
    """
    if isinstance(pc, IntegerClass):
        return pc.value % 12
    return (semitones(pc) - zero_offset(zero)) % 12


def transpose(pc: PitchClass, interval: int, zero: str | PitchClass = "C") -> int:
    """Value of *pc* moved by *interval* semitones, reduced mod 12.

    A negative *interval* transposes down.
    """
    return (pitch_class_value(pc, zero) + interval) % 12


def zero_offset(zero: str | PitchClass) -> int:
    """Semitones above C of the note that pitch class 0 refers to."""
    if isinstance(zero, (IntegerClass, NoteClass)):
        return semitones(zero) % 12
    try:
        pc = parse(zero, Rule.PITCH_CLASS_PERMISSIVE)
    except ParseError as exc:
        raise ValidationError(f"Invalid zero pitch class '{zero}': {exc}") from exc
    return semitones(pc) % 12


def numeral(value: int) -> str:
    """Numeral for *value* reduced mod 12 (``10`` -> ``"↊"``)."""
    return NUMERALS[value % 12]


def midi_number(pitch: Pitch) -> int:
    """MIDI number of *pitch*; accidentals may carry it across octaves."""
    return (pitch.octave + 1) * 12 + semitones(pitch.pitch_class)

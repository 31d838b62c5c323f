"""Notation rules: integers, notes, pitch classes, pitches and collections.

Every choice point is ordered: alternatives are tried one after another from
the same start position and the first one that matches is kept. A rule
returns None without consuming input when it does not match.

Strict rules read one character per integer and refuse a lowercase ``b``
as a note name, so that undelimited collections such as ``{014}`` or
``{cd#}`` split unambiguously. Permissive rules accept signed multi-digit
integers and the letter ``b``; they are only used where commas or an octave
number delimit the value.
"""

from __future__ import annotations

from post_office.model.expression import (
    Collection,
    IntegerClass,
    NoteClass,
    Pitch,
    PitchClass,
)
from post_office.parser import lexical
from post_office.parser.scanner import Scanner


# ---------------------------------------------------------------------------
# Integers
# ---------------------------------------------------------------------------

def integer_strict(scanner: Scanner) -> IntegerClass | None:
    value = lexical.strict_digit(scanner)
    if value is None:
        return None
    return IntegerClass(value, strict=True)


def integer_permissive(scanner: Scanner) -> IntegerClass | None:
    value = lexical.signed_integer(scanner)
    if value is None:
        return None
    return IntegerClass(value, strict=False)


# ---------------------------------------------------------------------------
# Notes
# ---------------------------------------------------------------------------

def _note(scanner: Scanner, strict: bool) -> NoteClass | None:
    letter = lexical.note_letter(scanner, strict)
    if letter is None:
        return None
    accidentals = []
    while True:
        acc = scanner.attempt(lexical.accidental)
        if acc is None:
            break
        accidentals.append(acc)
    return NoteClass(letter, tuple(accidentals))


def note_strict(scanner: Scanner) -> NoteClass | None:
    return _note(scanner, strict=True)


def note_permissive(scanner: Scanner) -> NoteClass | None:
    return _note(scanner, strict=False)


# ---------------------------------------------------------------------------
# Pitch classes and pitches
# ---------------------------------------------------------------------------

def pitch_class(scanner: Scanner) -> PitchClass | None:
    """Strict pitch class: a single-character integer, else a strict note."""
    return scanner.attempt(integer_strict) or scanner.attempt(note_strict)


def pitch_class_permissive(scanner: Scanner) -> PitchClass | None:
    """Permissive pitch class: a signed integer, else a permissive note."""
    return scanner.attempt(integer_permissive) or scanner.attempt(note_permissive)


def pitch(scanner: Scanner) -> Pitch | None:
    """A permissive note immediately followed by an octave number."""
    note = scanner.attempt(note_permissive)
    if note is None:
        return None
    octave = scanner.attempt(integer_permissive)
    if octave is None:
        return None
    return Pitch(note, octave.value)


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------

def _delimited_list(scanner: Scanner) -> list[PitchClass] | None:
    """Comma-separated permissive pitch classes.

    Two or more members take an optional trailing comma; a lone member must
    be followed by one, which is what tells ``{12,}`` apart from ``{12}``.
    """
    first = scanner.attempt(pitch_class_permissive)
    if first is None:
        return None
    members = [first]
    while True:
        mark = scanner.pos
        if not scanner.literal(","):
            break
        member = scanner.attempt(pitch_class_permissive)
        if member is None:
            scanner.pos = mark
            break
        members.append(member)
    if len(members) > 1:
        scanner.attempt(_comma)
        return members
    if scanner.attempt(_comma) is None:
        return None
    return members


def _undelimited_list(scanner: Scanner) -> list[PitchClass] | None:
    """Strict pitch classes written back to back, e.g. ``{014}``."""
    members = []
    while True:
        member = scanner.attempt(pitch_class)
        if member is None:
            break
        members.append(member)
    return members or None


def _comma(scanner: Scanner) -> bool | None:
    return True if scanner.literal(",") else None


def collection(scanner: Scanner) -> Collection | None:
    if not scanner.literal("{"):
        return None
    members = scanner.attempt(_delimited_list)
    if members is None:
        members = scanner.attempt(_undelimited_list)
    if members is None:
        members = []
    if not scanner.literal("}"):
        return None
    return Collection(tuple(members))

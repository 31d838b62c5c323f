"""Expression tree produced by the parser.

Every node is a frozen dataclass and every sequence a tuple, so a parsed
tree can be shared freely once it is returned. Spellings are kept exactly
as written: integers are not reduced mod 12 and accidentals are not summed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Accidental(Enum):
    FLAT = "b"
    DOUBLE_FLAT = "𝄫"
    NATURAL = "n"
    SHARP = "#"
    DOUBLE_SHARP = "x"

    @property
    def symbol(self) -> str:
        """Canonical spelling used when printing."""
        return self.value

    @property
    def semitones(self) -> int:
        return _SEMITONES[self]


_SEMITONES: dict[Accidental, int] = {
    Accidental.DOUBLE_FLAT: -2,
    Accidental.FLAT: -1,
    Accidental.NATURAL: 0,
    Accidental.SHARP: 1,
    Accidental.DOUBLE_SHARP: 2,
}


class Operator(Enum):
    LT = "<"
    EQ = "="
    GT = ">"

    @property
    def symbol(self) -> str:
        return self.value


@dataclass(frozen=True)
class IntegerClass:
    """A pitch class written as an integer.

    ``strict`` is True for the single-character form (``0``-``9``, ``t``,
    ``e``, ``↊``, ``↋``) and False for the signed decimal form only allowed
    inside delimited collections.
    """

    value: int
    strict: bool = True


@dataclass(frozen=True)
class NoteClass:
    """A pitch class written as a note letter plus accidentals."""

    letter: str  # "A"-"G" or "a"-"g", case as written
    accidentals: tuple[Accidental, ...] = ()


PitchClass = Union[IntegerClass, NoteClass]


@dataclass(frozen=True)
class PitchClassNode:
    pitch_class: PitchClass


@dataclass(frozen=True)
class Pitch:
    pitch_class: NoteClass
    octave: int  # may be negative


@dataclass(frozen=True)
class Collection:
    members: tuple[PitchClass, ...] = ()  # textual order, duplicates kept


@dataclass(frozen=True)
class Group:
    inner: Node


@dataclass(frozen=True)
class Chain:
    """A primary followed by ``(operator, primary)`` pairs, left to right."""

    first: Node
    rest: tuple[tuple[Operator, Node], ...] = ()

    @property
    def operands(self) -> tuple[Node, ...]:
        return (self.first,) + tuple(node for _, node in self.rest)

    @property
    def operators(self) -> tuple[Operator, ...]:
        return tuple(op for op, _ in self.rest)


Node = Union[Chain, Group, Collection, Pitch, PitchClassNode]


@dataclass(frozen=True)
class Expression:
    """Root of a parse; spans the entire input."""

    root: Node

"""Expression tree and pitch-class resolution."""

from post_office.model.expression import (
    Accidental,
    Chain,
    Collection,
    Expression,
    Group,
    IntegerClass,
    Node,
    NoteClass,
    Operator,
    Pitch,
    PitchClass,
    PitchClassNode,
)

__all__ = [
    "Accidental",
    "Chain",
    "Collection",
    "Expression",
    "Group",
    "IntegerClass",
    "Node",
    "NoteClass",
    "Operator",
    "Pitch",
    "PitchClass",
    "PitchClassNode",
]

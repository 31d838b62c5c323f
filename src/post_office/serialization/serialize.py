"""Serialize an expression tree back to notation text.

Usage::

    from post_office.serialization.serialize import serialize

    serialize(parse_expression("4<{0,1,4}>c#4"))   # '4 < {0, 1, 4} > c#4'

The canonical form re-parses to an identical tree. With ``numerals=True``
pitch classes are written as resolved numerals instead (``{0, 1, 4}``) and
pitches as ``midi:N``; that form is for display only.
"""

from __future__ import annotations

from post_office.model.expression import (
    Chain,
    Collection,
    Expression,
    Group,
    IntegerClass,
    Node,
    Pitch,
    PitchClass,
    PitchClassNode,
)
from post_office.model.resolve import midi_number, numeral, pitch_class_value, zero_offset

# Strict integers above nine
_DOZENAL: dict[int, str] = {10: "t", 11: "e"}


def serialize(
    node: Expression | Node,
    *,
    numerals: bool = False,
    zero: str | PitchClass = "C",
) -> str:
    """Return the notation text for *node*.

    Parameters
    ----------
    node : Expression | Node
        A parsed expression or any node inside one.
    numerals : bool
        Render resolved numerals rather than the original spellings.
    zero : str | PitchClass
        Note that pitch class 0 refers to when *numerals* is set.

    Raises
    ------
    ValidationError
        If *numerals* is set and *zero* is not a pitch-class spelling.
    """
    if numerals:
        return _NumeralWriter(_resolved_zero(zero)).node(node)
    return _Writer().node(node)


def _resolved_zero(zero: str | PitchClass) -> IntegerClass:
    return IntegerClass(zero_offset(zero), strict=False)


class _Writer:
    """Canonical, re-parseable spelling."""

    def node(self, node: Expression | Node) -> str:
        if isinstance(node, Expression):
            return self.node(node.root)
        if isinstance(node, Chain):
            parts = [self.node(node.first)]
            for op, operand in node.rest:
                parts.append(op.symbol)
                parts.append(self.node(operand))
            return " ".join(parts)
        if isinstance(node, Group):
            return f"({self.node(node.inner)})"
        if isinstance(node, Collection):
            return self.collection(node)
        if isinstance(node, Pitch):
            return f"{self.pitch_class(node.pitch_class)}{node.octave}"
        if isinstance(node, PitchClassNode):
            return self.pitch_class(node.pitch_class)
        raise TypeError(f"Cannot serialize {type(node).__name__}")

    def pitch_class(self, pc: PitchClass) -> str:
        if isinstance(pc, IntegerClass):
            if pc.strict and 0 <= pc.value <= 11:
                return _DOZENAL.get(pc.value, str(pc.value))
            return str(pc.value)
        return pc.letter + "".join(acc.symbol for acc in pc.accidentals)

    def collection(self, coll: Collection) -> str:
        members = [self.pitch_class(pc) for pc in coll.members]
        if not members:
            return "{}"
        strict = any(isinstance(pc, IntegerClass) and pc.strict for pc in coll.members)
        if strict:
            return "{" + "".join(members) + "}"
        if len(members) == 1:
            return "{" + members[0] + ",}"
        return "{" + ", ".join(members) + "}"


class _NumeralWriter(_Writer):
    """Display spelling with every pitch class resolved against a zero note."""

    def __init__(self, zero: PitchClass) -> None:
        self.zero = zero

    def node(self, node: Expression | Node) -> str:
        if isinstance(node, Pitch):
            return f"midi:{midi_number(node)}"
        return super().node(node)

    def pitch_class(self, pc: PitchClass) -> str:
        return numeral(pitch_class_value(pc, self.zero))

    def collection(self, coll: Collection) -> str:
        members = [self.pitch_class(pc) for pc in coll.members]
        return "{" + ", ".join(members) + "}"

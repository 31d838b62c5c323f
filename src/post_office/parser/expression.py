"""Expression assembler and parser entry points.

Grammar (ordered choice, first match wins)::

    expression       = SOI inner EOI
    inner            = primary (binary_operator primary)*
    primary          = pitch | pitch_class | collection | group
    group            = "(" inner ")"
    binary_operator  = "<" | "=" | ">"

``inner`` is kept flat: a primary followed by operators comes back as one
:class:`Chain` holding the operands in textual order, so the tree implies
no associativity. A primary with no operators is returned on its own.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable

from post_office.errors import NestingTooDeep, ParseError, TrailingInput
from post_office.model.expression import (
    Chain,
    Expression,
    Group,
    Node,
    Operator,
    PitchClassNode,
)
from post_office.parser import notation
from post_office.parser.scanner import MAX_NESTING, Scanner

logger = logging.getLogger(__name__)

_OPERATORS: dict[str, Operator] = {op.symbol: op for op in Operator}


def binary_operator(scanner: Scanner) -> Operator | None:
    return scanner.lookup(_OPERATORS, "binary operator")


def _pitch_class_node(scanner: Scanner) -> PitchClassNode | None:
    pc = notation.pitch_class(scanner)
    return PitchClassNode(pc) if pc is not None else None


def group(scanner: Scanner) -> Group | None:
    if not scanner.literal("("):
        return None
    if scanner.depth >= MAX_NESTING:
        raise NestingTooDeep(scanner.text, scanner.pos - 1, ("shallower nesting",))
    scanner.depth += 1
    try:
        inner = scanner.attempt(expression_inner)
    finally:
        scanner.depth -= 1
    if inner is None or not scanner.literal(")"):
        return None
    return Group(inner)


_PRIMARIES: tuple[Callable[[Scanner], Node | None], ...] = (
    notation.pitch,
    _pitch_class_node,
    notation.collection,
    group,
)


def primary(scanner: Scanner) -> Node | None:
    for rule in _PRIMARIES:
        node = scanner.attempt(rule)
        if node is not None:
            return node
    return None


def expression_inner(scanner: Scanner) -> Node | None:
    first = primary(scanner)
    if first is None:
        return None
    rest: list[tuple[Operator, Node]] = []
    while True:
        mark = scanner.pos
        op = binary_operator(scanner)
        if op is None:
            scanner.pos = mark
            break
        operand = primary(scanner)
        if operand is None:
            scanner.pos = mark
            break
        rest.append((op, operand))
    if not rest:
        return first
    return Chain(first, tuple(rest))


def expression(scanner: Scanner) -> Expression | None:
    root = expression_inner(scanner)
    return Expression(root) if root is not None else None


class Rule(Enum):
    """Grammar rules that can be matched against a whole input string."""

    EXPRESSION = "expression"
    GROUP = "group"
    COLLECTION = "collection"
    PITCH = "pitch"
    PITCH_CLASS = "pitch_class"
    PITCH_CLASS_PERMISSIVE = "pitch_class_permissive"
    NOTE_STRICT = "note_strict"
    NOTE_PERMISSIVE = "note_permissive"
    INTEGER_STRICT = "integer_strict"
    INTEGER_PERMISSIVE = "integer_permissive"


RULES: MappingProxyType[Rule, Callable[[Scanner], Any]] = MappingProxyType({
    Rule.EXPRESSION: expression,
    Rule.GROUP: group,
    Rule.COLLECTION: notation.collection,
    Rule.PITCH: notation.pitch,
    Rule.PITCH_CLASS: notation.pitch_class,
    Rule.PITCH_CLASS_PERMISSIVE: notation.pitch_class_permissive,
    Rule.NOTE_STRICT: notation.note_strict,
    Rule.NOTE_PERMISSIVE: notation.note_permissive,
    Rule.INTEGER_STRICT: notation.integer_strict,
    Rule.INTEGER_PERMISSIVE: notation.integer_permissive,
})


def parse(text: str, rule: Rule = Rule.EXPRESSION) -> Any:
    """Match *rule* against the whole of *text* and return its value.

    Whitespace and comments may surround the match; anything else left over
    is an error.

    Raises
    ------
    UnexpectedEndOfInput
        The input ended while more text was required.
    UnexpectedCharacter
        A character was found that no alternative accepts.
    TrailingInput
        The rule matched but unconsumed text follows it.
    NestingTooDeep
        Groups are nested more than ``MAX_NESTING`` levels deep.
    """
    logger.debug("Parsing %r as %s", text, rule.value)
    scanner = Scanner(text)
    try:
        result = RULES[rule](scanner)
        if result is not None:
            scanner.skip_trivia()
            if scanner.at_end():
                return result
            scanner.expect("end of input")
            if scanner.furthest == scanner.pos:
                raise TrailingInput(text, scanner.pos, scanner.expected)
        raise scanner.error()
    except ParseError as exc:
        logger.debug("Failed to parse %r: %s", text, exc)
        raise


def parse_expression(text: str) -> Expression:
    """Parse *text* as a complete expression.

    Examples
    --------
    >>> parse_expression("4 < {0,1,4}").root.operators
    (<Operator.LT: '<'>,)
    """
    return parse(text, Rule.EXPRESSION)

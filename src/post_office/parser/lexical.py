"""Single-token recognizers.

Each recognizer skips leading trivia, then either consumes one token and
returns its value or consumes nothing and returns None.
"""

from __future__ import annotations

import re

from post_office.model.expression import Accidental
from post_office.parser.scanner import Scanner

DIGITS: dict[str, int] = {str(d): d for d in range(10)}

# Dozenal digits for ten and eleven, including the Pitman numerals
DOZENAL_DIGITS: dict[str, int] = {
    "t": 10,
    "T": 10,
    "e": 11,
    "E": 11,
    "↊": 10,
    "↋": 11,
}

# Lowercase "b" is left out of the strict alphabet: it would read as a flat.
STRICT_LETTERS = frozenset("ABCDEFGacdefg")
PERMISSIVE_LETTERS = frozenset("ABCDEFGabcdefg")

ACCIDENTALS: dict[str, Accidental] = {
    "b": Accidental.FLAT,
    "♭": Accidental.FLAT,
    "𝄫": Accidental.DOUBLE_FLAT,
    "n": Accidental.NATURAL,
    "♮": Accidental.NATURAL,
    "s": Accidental.SHARP,
    "#": Accidental.SHARP,
    "♯": Accidental.SHARP,
    "x": Accidental.DOUBLE_SHARP,
    "𝄪": Accidental.DOUBLE_SHARP,
}

# Signed decimal integer, one atomic token (no trivia inside).
_SIGNED_INTEGER_RE = re.compile(r"-?[0-9]+")


def digit(scanner: Scanner) -> int | None:
    return scanner.lookup(DIGITS, "digit")


def dozenal_digit(scanner: Scanner) -> int | None:
    return scanner.lookup(DOZENAL_DIGITS, "dozenal digit")


def strict_digit(scanner: Scanner) -> int | None:
    """A decimal or dozenal digit: a single character worth 0-11."""
    value = digit(scanner)
    if value is None:
        value = dozenal_digit(scanner)
    return value


def signed_integer(scanner: Scanner) -> int | None:
    """Optional ``-`` followed by one or more decimal digits."""
    token = scanner.pattern(_SIGNED_INTEGER_RE, "integer")
    return int(token) if token is not None else None


def note_letter(scanner: Scanner, strict: bool) -> str | None:
    letters = STRICT_LETTERS if strict else PERMISSIVE_LETTERS
    scanner.skip_trivia()
    ch = scanner.peek()
    if ch and ch in letters:
        scanner.pos += 1
        return ch
    scanner.expect("note name")
    return None


def accidental(scanner: Scanner) -> Accidental | None:
    return scanner.lookup(ACCIDENTALS, "accidental")

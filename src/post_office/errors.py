"""Custom exception hierarchy for post-office."""

from __future__ import annotations


class PostalError(Exception):
    """Base exception for all post-office errors."""


class ValidationError(PostalError, ValueError):
    """Invalid user input that is not a syntax error (e.g. a bad zero note)."""


class ParseError(PostalError, ValueError):
    """Input text does not match the notation grammar.

    Attributes
    ----------
    text : str
        The complete input that was being parsed.
    offset : int
        Character index of the failure.
    line, column : int
        1-based position of *offset*.
    expected : tuple[str, ...]
        Descriptions of what would have been accepted at *offset*.
    """

    summary = "syntax error"

    def __init__(self, text: str, offset: int, expected: tuple[str, ...] = ()) -> None:
        self.text = text
        self.offset = offset
        self.expected = tuple(expected)
        self.line, self.column = line_column(text, offset)
        super().__init__(self._describe())

    @property
    def found(self) -> str | None:
        """The character at the failure offset, or None at end of input."""
        if self.offset < len(self.text):
            return self.text[self.offset]
        return None

    def _describe(self) -> str:
        where = f"line {self.line}, column {self.column}"
        message = f"{self.summary} at {where}"
        if self.found is not None:
            message += f": found {self.found!r}"
        if self.expected:
            message += f"; expected {', '.join(self.expected)}"
        return message


class UnexpectedEndOfInput(ParseError):
    """Input ended while a rule still required more characters."""

    summary = "unexpected end of input"


class UnexpectedCharacter(ParseError):
    """No alternative at the failure position accepted the character found."""

    summary = "unexpected character"


class TrailingInput(ParseError):
    """The expression matched a prefix of the input but text remains."""

    summary = "unexpected trailing input"


class NestingTooDeep(ParseError):
    """Groups are nested deeper than the parser allows."""

    summary = "groups nested too deeply"


def line_column(text: str, offset: int) -> tuple[int, int]:
    """Return the 1-based ``(line, column)`` of *offset* within *text*."""
    before = text[:offset]
    line = before.count("\n") + 1
    column = offset - (before.rfind("\n") + 1) + 1
    return line, column

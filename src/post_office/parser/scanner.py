"""Input cursor shared by all grammar rules.

A :class:`Scanner` owns the text being parsed, the current position, and
the furthest position at which any rule failed together with what was
expected there. Rules backtrack by saving and restoring :attr:`pos`; the
failure record is never rolled back, so after a failed parse it points at
the deepest point the grammar reached.

Whitespace and ``/* ... */`` comments are skipped before every token by
:meth:`skip_trivia`.
"""

from __future__ import annotations

import re
from typing import Callable, Mapping, TypeVar

from post_office.errors import (
    ParseError,
    UnexpectedCharacter,
    UnexpectedEndOfInput,
)

T = TypeVar("T")

# Space, tab and the control characters \t through \r; anything else that
# str.isspace() accepts is also skipped.
_WHITESPACE = frozenset(" \t\n\x0b\x0c\r")

_COMMENT_OPEN = "/*"
_COMMENT_CLOSE = "*/"

# Deepest run of open parentheses accepted; each level costs several
# Python stack frames.
MAX_NESTING = 100


class Scanner:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.furthest = 0
        self._expected: list[str] = []
        self.depth = 0

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Return the current character, or ``""`` at end of input."""
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def skip_trivia(self) -> None:
        """Advance past any whitespace and comments.

        Raises
        ------
        UnexpectedEndOfInput
            If a comment is opened and never closed.
        """
        text = self.text
        while self.pos < len(text):
            ch = text[self.pos]
            if ch in _WHITESPACE or ch.isspace():
                self.pos += 1
            elif text.startswith(_COMMENT_OPEN, self.pos):
                close = text.find(_COMMENT_CLOSE, self.pos + len(_COMMENT_OPEN))
                if close < 0:
                    raise UnexpectedEndOfInput(text, len(text), (repr(_COMMENT_CLOSE),))
                self.pos = close + len(_COMMENT_CLOSE)
            else:
                break

    # ------------------------------------------------------------------
    # Token matching
    # ------------------------------------------------------------------

    def literal(self, token: str) -> bool:
        """Consume *token* if it is next; otherwise record it as expected."""
        self.skip_trivia()
        if self.text.startswith(token, self.pos):
            self.pos += len(token)
            return True
        self.expect(repr(token))
        return False

    def lookup(self, table: Mapping[str, T], label: str) -> T | None:
        """Consume one character that is a key of *table* and return its value."""
        self.skip_trivia()
        ch = self.peek()
        if ch and ch in table:
            self.pos += 1
            return table[ch]
        self.expect(label)
        return None

    def pattern(self, regex: re.Pattern[str], label: str) -> str | None:
        """Consume a match of *regex* at the current position."""
        self.skip_trivia()
        m = regex.match(self.text, self.pos)
        if m is None:
            self.expect(label)
            return None
        self.pos = m.end()
        return m.group(0)

    def attempt(self, rule: Callable[[Scanner], T | None]) -> T | None:
        """Run *rule*; on failure restore the position it started from."""
        start = self.pos
        result = rule(self)
        if result is None:
            self.pos = start
        return result

    # ------------------------------------------------------------------
    # Failure tracking
    # ------------------------------------------------------------------

    def expect(self, label: str) -> None:
        """Record that *label* would have been accepted at :attr:`pos`."""
        if self.pos > self.furthest:
            self.furthest = self.pos
            self._expected = [label]
        elif self.pos == self.furthest and label not in self._expected:
            self._expected.append(label)

    @property
    def expected(self) -> tuple[str, ...]:
        return tuple(self._expected)

    def error(self) -> ParseError:
        """Build the error describing the furthest failure."""
        if self.furthest >= len(self.text):
            return UnexpectedEndOfInput(self.text, len(self.text), self.expected)
        return UnexpectedCharacter(self.text, self.furthest, self.expected)

"""post-office: parser for post-tonal music analysis notation."""

from post_office.errors import (
    NestingTooDeep,
    ParseError,
    PostalError,
    TrailingInput,
    UnexpectedCharacter,
    UnexpectedEndOfInput,
    ValidationError,
)
from post_office.model.expression import Expression
from post_office.parser import Rule, parse, parse_expression
from post_office.serialization import serialize

__version__ = "0.1.0"

__all__ = [
    "Expression",
    "NestingTooDeep",
    "ParseError",
    "PostalError",
    "Rule",
    "TrailingInput",
    "UnexpectedCharacter",
    "UnexpectedEndOfInput",
    "ValidationError",
    "parse",
    "parse_expression",
    "serialize",
]

"""Parser package: turn notation text into an expression tree."""

from post_office.parser.expression import RULES, Rule, parse, parse_expression
from post_office.parser.scanner import Scanner

__all__ = [
    "parse",
    "parse_expression",
    "Rule",
    "RULES",
    "Scanner",
]

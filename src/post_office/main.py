"""mailman: parse a post-tonal expression and print it back."""

from __future__ import annotations

import logging

import click

from post_office import __version__
from post_office.errors import ParseError, ValidationError
from post_office.parser import parse_expression
from post_office.serialization import serialize

logger = logging.getLogger(__name__)

_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def _configure_logging(verbose: int, quiet: bool) -> None:
    if quiet:
        level = logging.ERROR
    else:
        level = _LEVELS[min(verbose, len(_LEVELS) - 1)]
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _excerpt(exc: ParseError) -> str:
    """The offending line with a caret under the failure column."""
    line = exc.text.split("\n")[exc.line - 1]
    return f"  {line}\n  {' ' * (exc.column - 1)}^"


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="mailman")
@click.argument("expression")
@click.option(
    "--zero",
    "-z",
    default="C",
    show_default=True,
    envvar="MAILMAN_ZERO",
    metavar="NOTE",
    help="Which note pitch class 0 refers to (used with --numerals).",
)
@click.option(
    "--numerals",
    is_flag=True,
    default=False,
    help="Print pitch classes as numerals 0-9, ↊, ↋ and pitches as midi:N.",
)
@click.option("--verbose", "-v", count=True, help="Increase log verbosity (repeatable).")
@click.option("--quiet", "-q", is_flag=True, default=False, help="Only log errors.")
def main(expression: str, zero: str, numerals: bool, verbose: int, quiet: bool) -> None:
    """Parse a post-tonal EXPRESSION such as '4 < {0,1,4} > c#4'.

    Curly braces ({}) enclose pitch-class collections; parentheses group
    sub-expressions.
    """
    _configure_logging(verbose, quiet)
    try:
        parsed = parse_expression(expression)
    except ParseError as exc:
        raise click.UsageError(f"{exc}\n{_excerpt(exc)}") from exc
    logger.info("Parsed %r", parsed)
    try:
        click.echo(serialize(parsed, numerals=numerals, zero=zero))
    except ValidationError as exc:
        raise click.BadParameter(str(exc), param_hint="'--zero'") from exc


if __name__ == "__main__":
    main()

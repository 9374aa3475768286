"""Dice expression parser.

Turns strings like ``"3d6 + 4"`` or ``"50+2d8-1d4"`` into an ordered list of
signed terms. Only flat sums are supported: each clause is either a die roll
(``NdM``, ``d`` case-insensitive) or a non-negative integer, and clauses are
joined by ``+`` or ``-``.
"""

import re
from collections.abc import Iterator

from aws_lambda_powertools import Logger

from .config import SERVICE_NAME, Config, get_config
from .exceptions import ParseError
from .models import DieRollTerm, ModifierTerm, Term

logger = Logger(service=SERVICE_NAME, child=True)

# Clause shapes: NdM and a plain integer, ASCII digits
_DIE_CLAUSE = re.compile(r"([0-9]+)[dD]([0-9]+)")
_MODIFIER_CLAUSE = re.compile(r"[0-9]+")

_OPERATORS = {"+": 1, "-": -1}


def normalize(expression: str) -> str:
    """Remove all whitespace from an expression.

    Args:
        expression: Raw dice expression

    Returns:
        Expression without whitespace (e.g. "2d6 + 3" -> "2d6+3")
    """
    return "".join(expression.split())


def parse(expression: str) -> list[Term]:
    """Parse a dice expression into signed terms.

    Args:
        expression: Dice expression (e.g., "3d6 + 4", "-2", "1d20-3")

    Returns:
        Terms in input order

    Raises:
        ParseError: If any part of the expression is invalid

    Examples:
        >>> parse("3d6+4")
        [DieRollTerm(count=3, sides=6, sign=1), ModifierTerm(value=4, sign=1)]
    """
    if not isinstance(expression, str):
        raise ParseError(f"Invalid dice expression: {expression!r}", expression=None)

    text = normalize(expression)
    if not text:
        raise ParseError("Invalid dice expression: empty", expression=expression, position=0)

    config = get_config()
    terms = [
        _parse_clause(clause, sign, text, position, config)
        for sign, clause, position in _split_clauses(text)
    ]

    logger.debug("Parsed dice expression", extra={"expression": text, "term_count": len(terms)})
    return terms


def _split_clauses(text: str) -> Iterator[tuple[int, str, int]]:
    """Split on + and - operators.

    Yields:
        Tuples of (sign, clause, position of clause in text)

    Raises:
        ParseError: On an operator with no clause after it
    """
    i = 0
    while i < len(text):
        sign = 1
        if text[i] in _OPERATORS:
            sign = _OPERATORS[text[i]]
            i += 1

        start = i
        while i < len(text) and text[i] not in _OPERATORS:
            i += 1

        if i == start:
            raise ParseError(
                f"Invalid dice expression: expected a term at position {start}",
                expression=text,
                position=start,
            )
        yield sign, text[start:i], start


def _parse_clause(clause: str, sign: int, text: str, position: int, config: Config) -> Term:
    match = _DIE_CLAUSE.fullmatch(clause)
    if match:
        count = _parse_literal(match.group(1), text, position)
        sides = _parse_literal(match.group(2), text, position + match.start(2))

        if count < 1:
            raise ParseError(
                "Invalid dice expression: must roll at least 1 die",
                expression=text,
                position=position,
            )
        if sides < 1:
            raise ParseError(
                "Invalid dice expression: die must have at least 1 side",
                expression=text,
                position=position + match.start(2),
            )
        if count > config.max_dice:
            logger.info("Dice count over limit", extra={"count": count, "max_dice": config.max_dice})
            raise ParseError(
                f"Invalid dice expression: at most {config.max_dice} dice per term",
                expression=text,
                position=position,
            )
        if sides > config.max_sides:
            logger.info("Die sides over limit", extra={"sides": sides, "max_sides": config.max_sides})
            raise ParseError(
                f"Invalid dice expression: at most {config.max_sides} sides per die",
                expression=text,
                position=position + match.start(2),
            )
        return DieRollTerm(count=count, sides=sides, sign=sign)

    if _MODIFIER_CLAUSE.fullmatch(clause):
        return ModifierTerm(value=_parse_literal(clause, text, position), sign=sign)

    raise ParseError(
        f"Invalid dice expression: unrecognized term '{clause}'",
        expression=text,
        position=position,
    )


def _parse_literal(digits: str, text: str, position: int) -> int:
    # Overlong digit strings make int() raise ValueError
    try:
        return int(digits)
    except ValueError:
        raise ParseError(
            "Invalid dice expression: malformed number",
            expression=text,
            position=position,
        ) from None

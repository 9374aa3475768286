"""Dice rolling with standard notation support.

Evaluates parsed expressions like "3d6+4" into a Roll with the total and the
individual die results, and rolls plain integers within a range.
"""

from collections.abc import Iterator, Sequence

from aws_lambda_powertools import Logger

from .config import SERVICE_NAME
from .exceptions import RangeError
from .models import DieRollTerm, Roll, Term, TermResult, format_terms
from .parser import normalize, parse
from .rng import RandomSource, get_random_source

logger = Logger(service=SERVICE_NAME)


def roll_dice(expression: str, rng: RandomSource | None = None) -> Roll:
    """Parse and roll a dice expression.

    Args:
        expression: Dice expression (e.g., "3d6 + 4")
        rng: Random source. Uses the shared default if not provided.

    Returns:
        Evaluated Roll

    Raises:
        ParseError: If expression is invalid

    Examples:
        >>> roll_dice("1d1-3").total
        -2
        >>> str(roll_dice("3d1 + 5"))
        '3d1[1, 1, 1]+5 (Total: 8)'
    """
    terms = parse(expression)
    return evaluate(terms, rng=rng, expression=normalize(expression))


def evaluate(
    terms: Sequence[Term],
    rng: RandomSource | None = None,
    expression: str | None = None,
) -> Roll:
    """Roll every die term and sum all terms.

    Each call draws new values; nothing is cached between calls.

    Args:
        terms: Parsed terms in input order
        rng: Random source. Uses the shared default if not provided.
        expression: Expression text to record. Rebuilt from terms if omitted.

    Returns:
        Evaluated Roll
    """
    source = rng if rng is not None else get_random_source()

    values = [_evaluate_term(term, source) for term in terms]
    total = sum(value.subtotal for value in values)

    roll = Roll(
        expression=expression if expression is not None else format_terms(terms),
        values=values,
        total=total,
    )
    roll._rng = source
    roll._reroller = rerolls

    logger.debug("Rolled dice", extra={"expression": roll.expression, "total": total})
    return roll


def rerolls(roll: Roll) -> Iterator[Roll]:
    """Yield fresh rolls of the expression behind a roll, forever.

    Every pull evaluates the same terms again with the random source that
    produced the roll (or the shared default for a hand-built Roll).

    Args:
        roll: Roll whose expression is rolled again

    Yields:
        A newly evaluated Roll on every pull
    """
    terms = roll.terms
    while True:
        yield evaluate(terms, rng=roll._rng, expression=roll.expression)


def _evaluate_term(term: Term, source: RandomSource) -> TermResult:
    if isinstance(term, DieRollTerm):
        rolls = [source.randint(1, term.sides) for _ in range(term.count)]
        return TermResult(term=term, values=rolls, subtotal=term.sign * sum(rolls))
    return TermResult(term=term, values=[term.value], subtotal=term.signed_value)


def roll_range(low: int, high: int, rng: RandomSource | None = None) -> int:
    """Roll a random integer within an inclusive range.

    Args:
        low: Lowest possible result
        high: Highest possible result
        rng: Random source. Uses the shared default if not provided.

    Returns:
        Integer N such that low <= N <= high

    Raises:
        RangeError: If low is greater than high
    """
    if low > high:
        raise RangeError(low, high)

    source = rng if rng is not None else get_random_source()
    return source.randint(low, high)

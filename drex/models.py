"""Pydantic models for parsed dice terms and evaluated rolls."""

from collections.abc import Callable, Iterator, Sequence
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .exceptions import DrexError
from .rng import RandomSource

Sign = Literal[1, -1]


def _sign_char(sign: int) -> str:
    return "+" if sign > 0 else "-"


class DieRollTerm(BaseModel):
    """Roll ``count`` dice with ``sides`` faces each, e.g. ``3d6``."""

    model_config = ConfigDict(frozen=True)

    count: int = Field(..., ge=1)
    sides: int = Field(..., ge=1)
    sign: Sign = 1

    @property
    def minimum(self) -> int:
        """Lowest signed contribution this term can make."""
        return self.count if self.sign > 0 else -self.count * self.sides

    @property
    def maximum(self) -> int:
        """Highest signed contribution this term can make."""
        return self.count * self.sides if self.sign > 0 else -self.count

    def notation(self) -> str:
        """Notation with an explicit sign, e.g. ``+3d6``."""
        return f"{_sign_char(self.sign)}{self.count}d{self.sides}"

    def __str__(self) -> str:
        return self.notation().removeprefix("+")


class ModifierTerm(BaseModel):
    """Flat modifier, e.g. the ``+4`` in ``3d6+4``."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(..., ge=0)
    sign: Sign = 1

    @property
    def signed_value(self) -> int:
        """Value with its sign applied."""
        return self.sign * self.value

    @property
    def minimum(self) -> int:
        return self.signed_value

    @property
    def maximum(self) -> int:
        return self.signed_value

    def notation(self) -> str:
        """Notation with an explicit sign, e.g. ``-2``."""
        return f"{_sign_char(self.sign)}{self.value}"

    def __str__(self) -> str:
        return self.notation()


Term = DieRollTerm | ModifierTerm


def format_terms(terms: Sequence[Term]) -> str:
    """Render terms back into a compact expression, e.g. ``3d6+4``.

    Args:
        terms: Parsed terms in input order

    Returns:
        Expression string without whitespace
    """
    return "".join(term.notation() for term in terms).removeprefix("+")


class TermResult(BaseModel):
    """Outcome of evaluating a single term."""

    model_config = ConfigDict(frozen=True)

    term: Term
    values: list[int] = Field(default_factory=list)  # die faces, or the literal
    subtotal: int

    def render(self) -> str:
        """Render with an explicit sign, e.g. ``-2d1[1, 1]`` or ``+5``."""
        if isinstance(self.term, DieRollTerm):
            faces = ", ".join(str(v) for v in self.values)
            return f"{self.term.notation()}[{faces}]"
        return self.term.notation()


class Roll(BaseModel):
    """Evaluated dice expression.

    ``values`` holds one ``TermResult`` per term in input order and ``total``
    is the signed sum of their subtotals. A roll can produce further rolls of
    the same expression via ``rerolls()``; every one of those draws fresh
    values from the random source that produced this roll.
    """

    model_config = ConfigDict(frozen=True)

    expression: str
    values: list[TermResult]
    total: int

    _rng: RandomSource | None = PrivateAttr(default=None)
    _reroller: Callable[["Roll"], Iterator["Roll"]] | None = PrivateAttr(default=None)

    @property
    def terms(self) -> list[Term]:
        """Parsed terms this roll was evaluated from."""
        return [value.term for value in self.values]

    @property
    def result(self) -> str:
        """Human-readable breakdown, e.g. ``3d1[1, 1, 1]-2d1[1, 1]-4``."""
        return "".join(value.render() for value in self.values).removeprefix("+")

    @property
    def minimum(self) -> int:
        """Lowest total the expression can produce."""
        return sum(term.minimum for term in self.terms)

    @property
    def maximum(self) -> int:
        """Highest total the expression can produce."""
        return sum(term.maximum for term in self.terms)

    def rerolls(self) -> Iterator["Roll"]:
        """Start an endless sequence of fresh rolls of the same expression.

        The sequence never ends on its own; bound it with ``itertools.islice``
        or similar.

        Returns:
            Iterator producing a newly evaluated Roll on every pull

        Raises:
            DrexError: If the roll was built by hand rather than evaluated
        """
        if self._reroller is None:
            raise DrexError("Roll was not evaluated; use drex.dice.rerolls(roll)")
        return self._reroller(self)

    def __str__(self) -> str:
        return f"{self.result} (Total: {self.total})"

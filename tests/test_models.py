"""Tests for term and roll models."""

import pytest
from pydantic import ValidationError

from drex.exceptions import DrexError
from drex.models import DieRollTerm, ModifierTerm, Roll, TermResult, format_terms


class TestTerms:
    """Tests for DieRollTerm and ModifierTerm."""

    def test_die_term_displays_properly(self):
        """Positive dice have no sign, negative dice do."""
        assert str(DieRollTerm(count=3, sides=6)) == "3d6"
        assert str(DieRollTerm(count=3, sides=6, sign=-1)) == "-3d6"

    def test_modifier_displays_properly(self):
        """Modifiers always show their sign."""
        assert str(ModifierTerm(value=5)) == "+5"
        assert str(ModifierTerm(value=6, sign=-1)) == "-6"

    def test_die_term_bounds(self):
        """Bounds follow the sign of the term."""
        term = DieRollTerm(count=2, sides=8)
        negative = DieRollTerm(count=2, sides=8, sign=-1)

        assert (term.minimum, term.maximum) == (2, 16)
        assert (negative.minimum, negative.maximum) == (-16, -2)

    def test_modifier_signed_value(self):
        """Signed value applies the sign."""
        assert ModifierTerm(value=7, sign=-1).signed_value == -7
        assert ModifierTerm(value=7).minimum == ModifierTerm(value=7).maximum == 7

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"count": 0, "sides": 6},
            {"count": 1, "sides": 0},
            {"count": 1, "sides": 6, "sign": 2},
        ],
    )
    def test_die_term_validation(self, kwargs):
        """Invalid die terms are rejected by the model."""
        with pytest.raises(ValidationError):
            DieRollTerm(**kwargs)

    def test_modifier_validation(self):
        """Modifier values are non-negative; the sign carries direction."""
        with pytest.raises(ValidationError):
            ModifierTerm(value=-1)

    def test_terms_are_immutable(self):
        """Terms cannot be changed after construction."""
        term = DieRollTerm(count=1, sides=6)

        with pytest.raises(ValidationError):
            term.count = 2

    def test_format_terms(self):
        """Terms render back to a compact expression."""
        terms = [
            ModifierTerm(value=50),
            DieRollTerm(count=2, sides=8),
            DieRollTerm(count=1, sides=4, sign=-1),
        ]

        assert format_terms(terms) == "50+2d8-1d4"


class TestRoll:
    """Tests for the Roll model."""

    @pytest.fixture
    def roll(self):
        """Roll of 3d1-2d1-4."""
        return Roll(
            expression="3d1-2d1-4",
            values=[
                TermResult(term=DieRollTerm(count=3, sides=1), values=[1, 1, 1], subtotal=3),
                TermResult(term=DieRollTerm(count=2, sides=1, sign=-1), values=[1, 1], subtotal=-2),
                TermResult(term=ModifierTerm(value=4, sign=-1), values=[4], subtotal=-4),
            ],
            total=-3,
        )

    def test_result_breakdown(self, roll):
        """Result lists each term in input order."""
        assert roll.result == "3d1[1, 1, 1]-2d1[1, 1]-4"

    def test_str_includes_total(self, roll):
        """String form appends the total."""
        assert str(roll) == "3d1[1, 1, 1]-2d1[1, 1]-4 (Total: -3)"

    def test_terms(self, roll):
        """Terms are recovered from the term results."""
        assert [str(term) for term in roll.terms] == ["3d1", "-2d1", "-4"]

    def test_bounds(self, roll):
        """Bounds sum the bounds of every term."""
        assert roll.minimum == -3
        assert roll.maximum == -3

    def test_roll_is_immutable(self, roll):
        """Rolls cannot be changed after construction."""
        with pytest.raises(ValidationError):
            roll.total = 100

    def test_rerolls_requires_evaluated_roll(self, roll):
        """A hand-built roll has no evaluator to reroll with."""
        with pytest.raises(DrexError, match="not evaluated"):
            roll.rerolls()

    def test_model_dump(self, roll):
        """Rolls serialize to plain data."""
        data = roll.model_dump()

        assert data["total"] == -3
        assert data["values"][0]["values"] == [1, 1, 1]
        assert "_rng" not in data

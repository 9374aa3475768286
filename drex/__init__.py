"""Dice roll expression parsing and evaluation."""

from .config import Config, get_config
from .dice import evaluate, rerolls, roll_dice, roll_range
from .exceptions import ConfigurationError, DrexError, ParseError, RangeError
from .models import DieRollTerm, ModifierTerm, Roll, Term, TermResult
from .parser import parse
from .rng import RandomSource, get_random_source

__all__ = [
    # Rolling
    "evaluate",
    "parse",
    "rerolls",
    "roll_dice",
    "roll_range",
    # Config
    "Config",
    "get_config",
    "get_random_source",
    "RandomSource",
    # Exceptions
    "ConfigurationError",
    "DrexError",
    "ParseError",
    "RangeError",
    # Models
    "DieRollTerm",
    "ModifierTerm",
    "Roll",
    "Term",
    "TermResult",
]

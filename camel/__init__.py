"""Top-level package for the Camel Cards hand ranking engine."""

from . import cards, errors, frequency, hands, parsing, report, rules, scoreboard
from .cards import Mode, Rank
from .hands import Hand, compare
from .rules import Category, HandType, classify
from .scoreboard import score

__all__ = [
    "cards",
    "errors",
    "frequency",
    "hands",
    "parsing",
    "report",
    "rules",
    "scoreboard",
    "Category",
    "Hand",
    "HandType",
    "Mode",
    "Rank",
    "classify",
    "compare",
    "score",
]

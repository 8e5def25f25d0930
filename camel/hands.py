"""Hand value objects and the hand ordering."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Sequence

from .cards import HAND_SIZE, Mode, Rank, ranks_for_symbols
from .errors import WrongHandLength
from .frequency import count_ranks, normalize_wildcards
from .rules import HandType, classify

__all__ = ["Hand", "compare", "hand_type_for"]


def hand_type_for(ranks: Sequence[Rank], mode: Mode) -> HandType:
    """Return the classification of ``ranks`` under ``mode``."""

    counts = count_ranks(ranks)
    if Mode(mode) is Mode.WILDCARD:
        counts = normalize_wildcards(counts)
    return classify(counts)


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Hand:
    """Five ranks in the order they were dealt, with a cached classification."""

    ranks: tuple[Rank, ...]
    mode: Mode = Mode.STANDARD
    hand_type: HandType = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", Mode(self.mode))
        if len(self.ranks) != HAND_SIZE:
            raise WrongHandLength(f"a hand needs {HAND_SIZE} cards, got {len(self.ranks)}")
        if self.mode is Mode.STANDARD and Rank.WILDCARD in self.ranks:
            raise ValueError("standard hands cannot contain wildcards")
        if self.mode is Mode.WILDCARD and Rank.JACK in self.ranks:
            raise ValueError("wildcard hands read J as a wildcard, not a jack")
        object.__setattr__(self, "hand_type", hand_type_for(self.ranks, self.mode))

    @classmethod
    def from_symbols(cls, symbols: str, mode: Mode = Mode.STANDARD) -> "Hand":
        """Build a hand from card symbols; unknown symbols are reported before the length."""

        ranks = ranks_for_symbols(symbols, mode)
        if len(ranks) != HAND_SIZE:
            raise WrongHandLength(f"a hand needs {HAND_SIZE} cards, got {len(ranks)} in {symbols!r}")
        return cls(ranks, mode)

    @property
    def symbols(self) -> str:
        return "".join(rank.symbol for rank in self.ranks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        if self.mode is not other.mode:
            return False
        return compare(self, other) == 0

    def __lt__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return compare(self, other) < 0

    def __hash__(self) -> int:
        return hash((self.ranks, self.mode))

    def __str__(self) -> str:
        return self.symbols


def compare(left: Hand, right: Hand) -> int:
    """Return -1, 0 or 1 as ``left`` is weaker than, equal to or stronger than ``right``.

    Categories decide first. Within a category the ranks are compared one
    position at a time in dealt order; the ranks carried by the category are
    never consulted.
    """

    if left.mode is not right.mode:
        raise ValueError(f"cannot compare a {left.mode.value} hand with a {right.mode.value} hand")
    left_category = left.hand_type.category
    right_category = right.hand_type.category
    if left_category != right_category:
        return -1 if left_category < right_category else 1
    for left_rank, right_rank in zip(left.ranks, right.ranks):
        if left_rank != right_rank:
            return -1 if left_rank < right_rank else 1
    return 0

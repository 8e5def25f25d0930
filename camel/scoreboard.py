"""Rounds, games and the rank-weighted winnings total."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterator

from .hands import Hand, compare

__all__ = ["Round", "Game", "RankedRound", "rank_rounds", "ranked_entries", "score"]


@dataclass(frozen=True, slots=True)
class Round:
    """A hand and the bid placed on it."""

    hand: Hand
    bid: int
    line: int = 0

    def __post_init__(self) -> None:
        if self.bid < 0:
            raise ValueError("bid must be non-negative")


Game = list[Round]

_ROUND_KEY = cmp_to_key(lambda left, right: compare(left.hand, right.hand))


@dataclass(frozen=True, slots=True)
class RankedRound:
    """A round together with its 1-based position and winnings."""

    position: int
    round: Round

    @property
    def winnings(self) -> int:
        return self.position * self.round.bid


def rank_rounds(game: Game) -> Game:
    """Sort ``game`` in place, weakest hand first, and return it.

    The sort is stable so rounds with identical hands keep their input order.
    """

    game.sort(key=_ROUND_KEY)
    return game


def ranked_entries(game: Game) -> Iterator[RankedRound]:
    """Yield every round of an already ranked game with its position."""

    for position, round_ in enumerate(game, start=1):
        yield RankedRound(position=position, round=round_)


def score(game: Game) -> int:
    """Rank ``game`` and return the sum of position times bid."""

    rank_rounds(game)
    return sum(entry.winnings for entry in ranked_entries(game))

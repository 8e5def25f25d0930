"""Card ranks and symbol helpers for Camel Cards."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Final

from .errors import UnknownSymbol

__all__ = ["Mode", "Rank", "HAND_SIZE", "SYMBOLS", "rank_for_symbol", "ranks_for_symbols"]

HAND_SIZE: Final[int] = 5
SYMBOLS: Final[str] = "23456789TJQKA"


class Mode(str, Enum):
    """How the ``J`` symbol is read."""

    STANDARD = "standard"
    WILDCARD = "wildcard"

    @property
    def label(self) -> str:
        return "part 1" if self is Mode.STANDARD else "part 2"


class Rank(IntEnum):
    """Card ranks, weakest first.

    Both orderings live in one enum: a standard hand never contains
    ``WILDCARD`` and a wildcard hand never contains ``JACK``.
    """

    WILDCARD = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @classmethod
    def ordered(cls, mode: Mode) -> tuple["Rank", ...]:
        """Return the ranks legal in ``mode`` in ascending order."""

        excluded = cls.JACK if mode is Mode.WILDCARD else cls.WILDCARD
        return tuple(rank for rank in cls if rank is not excluded)

    @property
    def symbol(self) -> str:
        """Return the input character for this rank."""

        if self is Rank.WILDCARD:
            return "J"
        return SYMBOLS[self.value - 2]

    @property
    def is_wildcard(self) -> bool:
        return self is Rank.WILDCARD


_STANDARD_RANKS: Final[dict[str, Rank]] = {symbol: Rank(idx + 2) for idx, symbol in enumerate(SYMBOLS)}
_WILDCARD_RANKS: Final[dict[str, Rank]] = {**_STANDARD_RANKS, "J": Rank.WILDCARD}


def rank_for_symbol(symbol: str, mode: Mode = Mode.STANDARD) -> Rank:
    """Convert a single card symbol into a :class:`Rank`."""

    table = _WILDCARD_RANKS if Mode(mode) is Mode.WILDCARD else _STANDARD_RANKS
    try:
        return table[symbol]
    except KeyError:
        raise UnknownSymbol(f"unknown card symbol {symbol!r}") from None


def ranks_for_symbols(symbols: str, mode: Mode = Mode.STANDARD) -> tuple[Rank, ...]:
    """Convert every character of ``symbols``; errors carry a 1-based column."""

    ranks: list[Rank] = []
    mode = Mode(mode)
    for column, symbol in enumerate(symbols, start=1):
        try:
            ranks.append(rank_for_symbol(symbol, mode))
        except UnknownSymbol as exc:
            raise UnknownSymbol(exc.message, column=column) from None
    return tuple(ranks)

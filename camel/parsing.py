"""Parsers turning puzzle text into hands, rounds and games."""

from __future__ import annotations

import logging
import re

from .cards import Mode
from .errors import EmptyGame, MalformedBid, UnknownSymbol, WrongHandLength
from .hands import Hand
from .scoreboard import Game, Round

__all__ = ["parse_hand", "parse_round", "parse_game"]

logger = logging.getLogger(__name__)

# Always matches: the hand runs up to the first space or tab, the bid is the rest.
_ROUND_PATTERN = re.compile(r"(?P<hand>[^ \t]*)(?:[ \t]+(?P<bid>.*))?")
_BID_PATTERN = re.compile(r"[0-9]+")


def parse_hand(text: str, mode: Mode = Mode.STANDARD) -> Hand:
    """Parse exactly five card symbols into a :class:`Hand`."""

    return Hand.from_symbols(text, mode)


def parse_round(line: str, mode: Mode = Mode.STANDARD, line_number: int = 1) -> Round:
    """Parse ``<hand> <bid>`` from a single line without its terminator."""

    if not line.strip():
        raise EmptyGame("blank line inside the hand block", line=line_number)

    match = _ROUND_PATTERN.fullmatch(line)
    try:
        hand = parse_hand(match.group("hand"), mode)
    except UnknownSymbol as exc:
        raise exc.at(line=line_number) from None
    except WrongHandLength as exc:
        raise WrongHandLength(exc.message, line=line_number, column=1) from None

    bid_text = match.group("bid")
    if bid_text is None:
        raise MalformedBid(f"missing bid after hand {hand.symbols!r}", line=line_number, column=len(line) + 1)
    if not _BID_PATTERN.fullmatch(bid_text):
        raise MalformedBid(
            f"bid must be a non-negative integer, got {bid_text!r}",
            line=line_number,
            column=match.start("bid") + 1,
        )
    return Round(hand=hand, bid=int(bid_text), line=line_number)


def parse_game(text: str, mode: Mode = Mode.STANDARD) -> Game:
    """Parse every round in ``text``; the first failure aborts the whole game."""

    mode = Mode(mode)
    lines = text.split("\n")
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise EmptyGame("input contains no rounds")

    game: Game = [
        parse_round(line.rstrip("\r"), mode, line_number) for line_number, line in enumerate(lines, start=1)
    ]
    logger.debug("parsed %d round(s) in %s mode", len(game), mode.value)
    return game

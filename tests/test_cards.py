from __future__ import annotations

import pytest

from camel.cards import SYMBOLS, Mode, Rank, rank_for_symbol, ranks_for_symbols
from camel.errors import ParseError, UnknownSymbol


@pytest.mark.parametrize(
    ("symbol", "expected"),
    [
        ("2", Rank.TWO),
        ("9", Rank.NINE),
        ("T", Rank.TEN),
        ("J", Rank.JACK),
        ("Q", Rank.QUEEN),
        ("K", Rank.KING),
        ("A", Rank.ACE),
    ],
)
def test_standard_symbols(symbol: str, expected: Rank) -> None:
    assert rank_for_symbol(symbol, Mode.STANDARD) is expected


def test_wildcard_mode_only_changes_jack() -> None:
    for symbol in SYMBOLS:
        standard = rank_for_symbol(symbol, Mode.STANDARD)
        wildcard = rank_for_symbol(symbol, Mode.WILDCARD)
        if symbol == "J":
            assert standard is Rank.JACK
            assert wildcard is Rank.WILDCARD
        else:
            assert standard is wildcard


def test_wildcard_sorts_below_two() -> None:
    assert Rank.WILDCARD < Rank.TWO
    assert Rank.ordered(Mode.WILDCARD)[0] is Rank.WILDCARD


@pytest.mark.parametrize("mode", list(Mode))
def test_ordered_has_thirteen_ascending_ranks(mode: Mode) -> None:
    ranks = Rank.ordered(mode)

    assert len(ranks) == 13
    assert list(ranks) == sorted(ranks)
    assert ranks[-1] is Rank.ACE


def test_symbol_round_trips_for_both_jack_readings() -> None:
    assert Rank.JACK.symbol == "J"
    assert Rank.WILDCARD.symbol == "J"
    assert "".join(rank.symbol for rank in Rank.ordered(Mode.STANDARD)) == SYMBOLS


@pytest.mark.parametrize("symbol", ["1", "t", "X", "*", " "])
def test_unknown_symbol_rejected(symbol: str) -> None:
    with pytest.raises(UnknownSymbol):
        rank_for_symbol(symbol)


def test_ranks_for_symbols_reports_column() -> None:
    with pytest.raises(UnknownSymbol) as excinfo:
        ranks_for_symbols("32X3K")

    assert excinfo.value.column == 3
    assert isinstance(excinfo.value, ParseError)
    assert isinstance(excinfo.value, ValueError)

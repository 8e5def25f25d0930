"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Sequence

from rich import box
from rich.table import Table

from ..cards import Rank
from ..hands import Hand
from ..report import ModeReport

_FACE_STYLE = "bold cyan"
_WILDCARD_STYLE = "bold magenta"


def format_rank(rank: Rank) -> str:
    """Return a Rich-rendered label for ``rank``."""

    if rank.is_wildcard:
        return f"[{_WILDCARD_STYLE}]{rank.symbol}[/{_WILDCARD_STYLE}]"
    if rank >= Rank.TEN:
        return f"[{_FACE_STYLE}]{rank.symbol}[/{_FACE_STYLE}]"
    return rank.symbol


def format_hand(hand: Hand) -> str:
    return "".join(format_rank(rank) for rank in hand.ranks)


def totals_table(reports: Sequence[ModeReport]) -> Table:
    table = Table(title="Camel Cards", box=box.SIMPLE_HEAVY)
    table.add_column("Part", justify="left", style="bold")
    table.add_column("Mode", justify="left")
    table.add_column("Total", justify="right")
    for report in reports:
        table.add_row(report.label, report.mode.value, str(report.total))
    return table


def ranking_table(report: ModeReport) -> Table:
    table = Table(title=f"Ranking ({report.mode.value})", box=box.ROUNDED, expand=True)
    table.add_column("#", justify="right")
    table.add_column("Hand", justify="left")
    table.add_column("Category", justify="left")
    table.add_column("Bid", justify="right")
    table.add_column("Winnings", justify="right")
    table.add_column("Line", justify="right", style="dim")
    for entry in report.ranking:
        hand = entry.round.hand
        table.add_row(
            str(entry.position),
            format_hand(hand),
            hand.hand_type.describe(),
            str(entry.round.bid),
            str(entry.winnings),
            str(entry.round.line),
        )
    return table

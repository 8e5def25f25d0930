"""Evaluate one puzzle input under each card-reading mode."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from . import parsing, scoreboard
from .cards import Mode

__all__ = ["ReportConfig", "ModeReport", "evaluate_text"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReportConfig:
    """Which modes to evaluate and how much detail to keep."""

    modes: tuple[Mode, ...] = (Mode.STANDARD, Mode.WILDCARD)
    include_ranking: bool = False

    def __post_init__(self) -> None:
        if not self.modes:
            raise ValueError("at least one mode is required")
        object.__setattr__(self, "modes", tuple(Mode(mode) for mode in self.modes))


@dataclass(frozen=True, slots=True)
class ModeReport:
    """Ranked game and winnings total for a single mode."""

    mode: Mode
    total: int
    ranking: Sequence[scoreboard.RankedRound] = ()

    @property
    def label(self) -> str:
        return self.mode.label


def evaluate_text(text: str, config: ReportConfig = ReportConfig()) -> list[ModeReport]:
    """Parse ``text`` once per configured mode and score each game.

    Every mode parses the whole text before scoring; a parse error in any mode
    propagates and no report is produced.
    """

    games = [(mode, parsing.parse_game(text, mode)) for mode in dict.fromkeys(config.modes)]
    reports: list[ModeReport] = []
    for mode, game in games:
        total = scoreboard.score(game)
        logger.info("%s (%s mode): %d across %d round(s)", mode.label, mode.value, total, len(game))
        ranking: tuple[scoreboard.RankedRound, ...] = ()
        if config.include_ranking:
            ranking = tuple(scoreboard.ranked_entries(game))
        reports.append(ModeReport(mode=mode, total=total, ranking=ranking))
    return reports

"""Hand categories and the frequency-shape classifier."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Mapping

from .cards import HAND_SIZE, Rank
from .errors import ClassificationDefect

__all__ = ["Category", "HandType", "classify"]


class Category(IntEnum):
    """Hand categories in strength order."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FULL_SET = 6

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass(frozen=True, slots=True)
class HandType:
    """A category together with the rank(s) that produced it.

    ``minor`` is only set for two pair and full house. The carried ranks are
    informational; hand ordering never looks at them.
    """

    category: Category
    major: Rank
    minor: Rank | None = None

    def describe(self) -> str:
        if self.minor is None:
            return f"{self.category.label} ({self.major.name.title()})"
        return f"{self.category.label} ({self.major.name.title()} over {self.minor.name.title()})"


def _ranks_with_count(counts: Mapping[Rank, int], count: int) -> list[Rank]:
    return sorted(rank for rank, value in counts.items() if value == count)


def _single_rank_with_count(counts: Mapping[Rank, int], count: int, shape: str) -> Rank:
    ranks = _ranks_with_count(counts, count)
    if len(ranks) != 1:
        raise ClassificationDefect(f"{shape} expected but counts are {_format_counts(counts)}")
    return ranks[0]


def _format_counts(counts: Mapping[Rank, int]) -> str:
    return "{" + ", ".join(f"{rank.name}: {value}" for rank, value in sorted(counts.items())) + "}"


def classify(counts: Mapping[Rank, int]) -> HandType:
    """Classify normalized rank counts by their number of singletons."""

    if Rank.WILDCARD in counts:
        raise ClassificationDefect(f"wildcards must be folded before classifying: {_format_counts(counts)}")
    if sum(counts.values()) != HAND_SIZE:
        raise ClassificationDefect(f"counts must sum to {HAND_SIZE}: {_format_counts(counts)}")

    singles = _ranks_with_count(counts, 1)
    singleton_count = len(singles)
    if singleton_count == 5:
        return HandType(Category.HIGH_CARD, singles[-1])
    if singleton_count == 3:
        return HandType(Category.ONE_PAIR, _single_rank_with_count(counts, 2, "pair"))
    if singleton_count == 2:
        return HandType(Category.THREE_OF_A_KIND, _single_rank_with_count(counts, 3, "three of a kind"))
    if singleton_count == 1:
        quads = _ranks_with_count(counts, 4)
        if quads:
            return HandType(Category.FOUR_OF_A_KIND, quads[0])
        pairs = _ranks_with_count(counts, 2)
        if len(pairs) != 2:
            raise ClassificationDefect(f"two pair expected but counts are {_format_counts(counts)}")
        return HandType(Category.TWO_PAIR, pairs[1], pairs[0])
    if singleton_count == 0:
        fives = _ranks_with_count(counts, 5)
        if fives:
            return HandType(Category.FULL_SET, fives[0])
        return HandType(
            Category.FULL_HOUSE,
            _single_rank_with_count(counts, 3, "three of a kind"),
            _single_rank_with_count(counts, 2, "pair"),
        )
    raise ClassificationDefect(f"impossible singleton count {singleton_count}: {_format_counts(counts)}")

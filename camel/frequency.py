"""Rank frequency analysis and wildcard folding."""

from __future__ import annotations

from typing import Iterable, Mapping

import numpy as np

from .cards import HAND_SIZE, Rank

__all__ = ["Counts", "count_ranks", "normalize_wildcards"]

Counts = dict[Rank, int]

_BINS = max(Rank) + 1


def count_ranks(ranks: Iterable[Rank]) -> Counts:
    """Return occurrences per rank, keyed in ascending rank order."""

    values = np.fromiter((int(rank) for rank in ranks), dtype=np.int64)
    bins = np.bincount(values, minlength=_BINS)
    return {Rank(int(idx)): int(bins[idx]) for idx in np.flatnonzero(bins)}


def normalize_wildcards(counts: Mapping[Rank, int]) -> Counts:
    """Fold wildcard occurrences into the strongest other rank.

    The receiving rank is the one with the greatest count; ties go to the
    highest rank. A hand made only of wildcards becomes five aces.
    """

    wildcards = counts.get(Rank.WILDCARD, 0)
    remaining = {rank: count for rank, count in counts.items() if rank is not Rank.WILDCARD}
    if wildcards == 0:
        return remaining
    if not remaining:
        return {Rank.ACE: HAND_SIZE}

    best_count = max(remaining.values())
    target = max(rank for rank, count in remaining.items() if count == best_count)
    remaining[target] += wildcards
    return remaining

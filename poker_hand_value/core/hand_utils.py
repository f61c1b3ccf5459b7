"""Rank helpers shared by the category matchers."""
from __future__ import annotations

from collections import Counter
from typing import Dict, List, Optional, Sequence

from .cards import Card, Suit

ACE_HIGH = 14
ACE_LOW = 1


def ranks_only(cards: Sequence[Card]) -> List[int]:
    """Drop the suits and return the ranks in ascending order."""

    return sorted(card.rank for card in cards)


def highest_group_of_size(ranks: Sequence[int], size: int) -> Optional[int]:
    """Return the highest rank held exactly ``size`` times, if any."""

    counts = Counter(ranks)
    matching = [rank for rank, count in counts.items() if count == size]
    return max(matching, default=None)


def remove_rank(ranks: Sequence[int], value: Optional[int]) -> List[int]:
    """Remove every ``value`` from ``ranks`` and sort the rest high to low."""

    if value is None:
        return sorted(ranks, reverse=True)
    return sorted((rank for rank in ranks if rank != value), reverse=True)


def descending_run(high: int, length: int = 5) -> List[int]:
    return list(range(high, high - length, -1))


def contains_ace(ranks: Sequence[int]) -> bool:
    return ACE_HIGH in ranks


def prefix_low_ace(ranks: Sequence[int]) -> List[int]:
    """Add a low ace in front of the ranks so the wheel can be found."""

    if contains_ace(ranks):
        return [ACE_LOW, *ranks]
    return list(ranks)


def group_by_suit(cards: Sequence[Card]) -> Dict[Suit, List[Card]]:
    groups: Dict[Suit, List[Card]] = {}
    for suit in Suit:
        suited = [card for card in cards if card.suit == suit]
        if suited:
            groups[suit] = suited
    return groups


__all__ = [
    "ranks_only",
    "highest_group_of_size",
    "remove_rank",
    "descending_run",
    "contains_ace",
    "prefix_low_ace",
    "group_by_suit",
]

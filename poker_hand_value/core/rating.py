"""Rate poker hands and compare the ratings."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple, Union

from .cards import VALUE_TO_RANK, parse_hand
from .categories import Category
from .matchers import MATCHERS, HandLike
from .scoring import score_digits

LOGGER = logging.getLogger(__name__)

MIN_HAND_SIZE = 5


@dataclass(frozen=True)
class Rating:
    """Category of a hand plus a value that orders every hand."""

    category: Category
    value: float
    ranks: Tuple[int, ...] = ()

    def __lt__(self, other: "Rating") -> bool:
        return self.value < other.value

    def __str__(self) -> str:
        return format_rating(self)


class Comparison(IntEnum):
    LT = -1
    EQ = 0
    GT = 1

    def __str__(self) -> str:
        return self.name.lower()


def rate_hand(hand: HandLike) -> Rating:
    """Rate the best five card hand from five or more cards."""

    cards = parse_hand(hand) if isinstance(hand, str) else list(hand)
    if len(cards) < MIN_HAND_SIZE:
        raise ValueError("At least five cards are required")
    for category, matcher in MATCHERS:
        match = matcher(cards)
        if match is None:
            continue
        LOGGER.debug("Matched %s with ranks %s", category, match.ranks)
        return Rating(category, category.base + match.score, match.ranks)
    # The high card matcher accepts every hand.
    raise RuntimeError("Unable to rate the hand")


def compare_ratings(first: Rating, second: Rating) -> Comparison:
    if first.value > second.value:
        return Comparison.GT
    if first.value < second.value:
        return Comparison.LT
    return Comparison.EQ


def compare_hands(first: Union[Rating, HandLike], second: Union[Rating, HandLike]) -> Comparison:
    """Compare two hands, rating any argument that is not already a :class:`Rating`."""

    if not isinstance(first, Rating):
        first = rate_hand(first)
    if not isinstance(second, Rating):
        second = rate_hand(second)
    return compare_ratings(first, second)


def format_rating(rating: Rating, precision: Optional[int] = None) -> str:
    """Render ``"<category>, <value>"`` as the command line prints it."""

    if precision is not None:
        value = f"{rating.value:.{precision}f}"
    elif rating.ranks:
        # Trailing zeros dropped: a last rank of 10 renders 5.1, not 5.10.
        value = f"{rating.category.base}.{score_digits(rating.ranks).rstrip('0')}"
    else:
        value = str(rating.value)
    return f"{rating.category}, {value}"


def _name(rank: int) -> str:
    return VALUE_TO_RANK[rank]


def describe_rating(rating: Rating) -> str:
    """Human readable description of a rating."""

    category = rating.category
    ranks = rating.ranks
    if not ranks:
        return category.label
    primary = _name(ranks[0])
    if category in (Category.STRAIGHT_FLUSH, Category.STRAIGHT):
        return f"{category.label} ({primary} high)"
    if category == Category.FOUR_OF_A_KIND:
        return f"Four of a Kind ({primary}s)"
    if category == Category.FULL_HOUSE:
        return f"Full House ({primary}s over {_name(ranks[1])}s)"
    if category == Category.THREE_OF_A_KIND:
        return f"Three of a Kind ({primary}s)"
    if category == Category.TWO_PAIR:
        text = f"Two Pair ({primary}s and {_name(ranks[1])}s"
        if len(ranks) > 2:
            text += f", {_name(ranks[2])} kicker"
        return text + ")"
    if category == Category.PAIR:
        kickers = " ".join(_name(rank) for rank in ranks[1:])
        return f"Pair of {primary}s ({kickers} kickers)"
    cards = " ".join(_name(rank) for rank in ranks)
    return f"{category.label} ({cards})"


__all__ = [
    "Rating",
    "Comparison",
    "rate_hand",
    "compare_ratings",
    "compare_hands",
    "format_rating",
    "describe_rating",
]

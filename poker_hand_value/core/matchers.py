"""Category matchers.

Every matcher takes a hand of five or more cards and returns a :class:`Match`
when the hand contains the category, or ``None`` otherwise. Surplus cards are
never an error; each matcher picks the best five on its own.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple, Union

from .cards import Card, parse_hand
from .categories import Category
from .hand_utils import (
    descending_run,
    group_by_suit,
    highest_group_of_size,
    prefix_low_ace,
    ranks_only,
    remove_rank,
)
from .scoring import encode_score

FLUSH_SIZE = 5


@dataclass(frozen=True)
class Match:
    """A detected category with the score of its deciding ranks."""

    category: Category
    score: float
    ranks: Tuple[int, ...]


HandLike = Union[str, Sequence[Card]]
Matcher = Callable[[HandLike], Optional[Match]]


def _cards(hand: HandLike) -> Sequence[Card]:
    return parse_hand(hand) if isinstance(hand, str) else hand


def _match(category: Category, ranks: Sequence[int]) -> Match:
    deciding = tuple(ranks)[:5]
    return Match(category, encode_score(deciding), deciding)


def match_high_card(hand: HandLike) -> Optional[Match]:
    cards = _cards(hand)
    ranks = sorted(ranks_only(cards), reverse=True)
    return _match(Category.HIGH_CARD, ranks[:5])


def match_pair(hand: HandLike) -> Optional[Match]:
    cards = _cards(hand)
    ranks = ranks_only(cards)
    pair = highest_group_of_size(ranks, 2)
    if pair is None:
        return None
    return _match(Category.PAIR, [pair, *remove_rank(ranks, pair)[:3]])


def match_two_pair(hand: HandLike) -> Optional[Match]:
    cards = _cards(hand)
    ranks = ranks_only(cards)
    high_pair = highest_group_of_size(ranks, 2)
    ranks = remove_rank(ranks, high_pair)
    low_pair = highest_group_of_size(ranks, 2)
    ranks = remove_rank(ranks, low_pair)
    if high_pair is None or low_pair is None:
        return None
    return _match(Category.TWO_PAIR, [high_pair, low_pair, *ranks[:1]])


def match_three_of_a_kind(hand: HandLike) -> Optional[Match]:
    cards = _cards(hand)
    ranks = ranks_only(cards)
    trips = highest_group_of_size(ranks, 3)
    if trips is None:
        return None
    return _match(Category.THREE_OF_A_KIND, [trips, *remove_rank(ranks, trips)[:2]])


def match_straight(hand: HandLike) -> Optional[Match]:
    cards = _cards(hand)
    """Find the highest five card run, counting an ace as low for the wheel."""

    ranks = set(prefix_low_ace(ranks_only(cards)))
    for high in sorted(ranks, reverse=True):
        if ranks.issuperset(descending_run(high)):
            return _match(Category.STRAIGHT, [high])
    return None


def match_flush(hand: HandLike) -> Optional[Match]:
    cards = _cards(hand)
    """Score the top five cards of the strongest suit holding five or more.

    When several suits qualify (only possible with more than one deck) the
    suit with the higher top five wins, then the suit with more cards.
    """

    candidates = [
        sorted(ranks_only(suited), reverse=True)
        for suited in group_by_suit(cards).values()
        if len(suited) >= FLUSH_SIZE
    ]
    if not candidates:
        return None
    best = max(candidates, key=lambda ranks: (ranks[:5], len(ranks)))
    return _match(Category.FLUSH, best[:5])


def match_full_house(hand: HandLike) -> Optional[Match]:
    cards = _cards(hand)
    ranks = ranks_only(cards)
    trips = highest_group_of_size(ranks, 3)
    if trips is None:
        return None
    pair = highest_group_of_size(remove_rank(ranks, trips), 2)
    if pair is None:
        return None
    return _match(Category.FULL_HOUSE, [trips, pair])


def match_four_of_a_kind(hand: HandLike) -> Optional[Match]:
    cards = _cards(hand)
    ranks = ranks_only(cards)
    quads = highest_group_of_size(ranks, 4)
    if quads is None:
        return None
    return _match(Category.FOUR_OF_A_KIND, [quads, *remove_rank(ranks, quads)[:1]])


def match_straight_flush(hand: HandLike) -> Optional[Match]:
    """Run the straight test on each suit holding five or more ranks.

    Suits are tried clubs, diamonds, hearts, spades and the first straight
    found is used. Two suits can only both qualify with more than one deck.
    """

    cards = _cards(hand)
    for suited in group_by_suit(cards).values():
        unique = list({card.rank: card for card in suited}.values())
        if len(unique) < FLUSH_SIZE:
            continue
        straight = match_straight(unique)
        if straight is not None:
            return Match(Category.STRAIGHT_FLUSH, straight.score, straight.ranks)
    return None


# Strongest first; the first match decides the category.
MATCHERS: Tuple[Tuple[Category, Matcher], ...] = (
    (Category.STRAIGHT_FLUSH, match_straight_flush),
    (Category.FOUR_OF_A_KIND, match_four_of_a_kind),
    (Category.FULL_HOUSE, match_full_house),
    (Category.FLUSH, match_flush),
    (Category.STRAIGHT, match_straight),
    (Category.THREE_OF_A_KIND, match_three_of_a_kind),
    (Category.TWO_PAIR, match_two_pair),
    (Category.PAIR, match_pair),
    (Category.HIGH_CARD, match_high_card),
)


__all__ = [
    "Match",
    "Matcher",
    "MATCHERS",
    "match_high_card",
    "match_pair",
    "match_two_pair",
    "match_three_of_a_kind",
    "match_straight",
    "match_flush",
    "match_full_house",
    "match_four_of_a_kind",
    "match_straight_flush",
]

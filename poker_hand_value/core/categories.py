"""Poker hand categories and their strength table."""
from __future__ import annotations

from enum import Enum
from typing import Dict


class Category(Enum):
    STRAIGHT_FLUSH = "straight_flush"
    FOUR_OF_A_KIND = "four_of_a_kind"
    FULL_HOUSE = "full_house"
    FLUSH = "flush"
    STRAIGHT = "straight"
    THREE_OF_A_KIND = "three_of_a_kind"
    TWO_PAIR = "two_pair"
    PAIR = "pair"
    HIGH_CARD = "high_card"

    def __str__(self) -> str:
        return self.value

    @property
    def base(self) -> int:
        return CATEGORY_BASE[self]

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


# Bases are spaced by exactly one and scores stay below one, so a higher
# category always outranks a lower one.
CATEGORY_BASE: Dict[Category, int] = {
    Category.STRAIGHT_FLUSH: 9,
    Category.FOUR_OF_A_KIND: 8,
    Category.FULL_HOUSE: 7,
    Category.FLUSH: 6,
    Category.STRAIGHT: 5,
    Category.THREE_OF_A_KIND: 4,
    Category.TWO_PAIR: 3,
    Category.PAIR: 2,
    Category.HIGH_CARD: 1,
}

CATEGORY_LABELS: Dict[Category, str] = {
    Category.STRAIGHT_FLUSH: "Straight Flush",
    Category.FOUR_OF_A_KIND: "Four of a Kind",
    Category.FULL_HOUSE: "Full House",
    Category.FLUSH: "Flush",
    Category.STRAIGHT: "Straight",
    Category.THREE_OF_A_KIND: "Three of a Kind",
    Category.TWO_PAIR: "Two Pair",
    Category.PAIR: "Pair",
    Category.HIGH_CARD: "High Card",
}


__all__ = ["Category", "CATEGORY_BASE", "CATEGORY_LABELS"]

"""Card model and shorthand notation."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Sequence


class Suit(Enum):
    CLUBS = "c"
    DIAMONDS = "d"
    HEARTS = "h"
    SPADES = "s"

    def __str__(self) -> str:
        return self.value


RANKS = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A")
RANK_TO_VALUE = {r: i + 2 for i, r in enumerate(RANKS)}
RANK_TO_VALUE["T"] = 10
VALUE_TO_RANK = {i + 2: r for i, r in enumerate(RANKS)}
# Low ace only ever appears in straight scores.
VALUE_TO_RANK[1] = "A"
LETTER_TO_SUIT = {suit.value.upper(): suit for suit in Suit}

MIN_RANK = 2
MAX_RANK = 14


class InvalidCardError(ValueError):
    """Raised when a card or card token cannot be decoded."""


@dataclass(frozen=True)
class Card:
    """Representation of a standard playing card."""

    suit: Suit
    rank: int

    def __post_init__(self) -> None:
        if not MIN_RANK <= self.rank <= MAX_RANK:
            raise InvalidCardError(f"Rank must be between {MIN_RANK} and {MAX_RANK}, got {self.rank}")

    def __str__(self) -> str:
        return format_card(self)


def parse_card(token: str) -> Card:
    """Parse a token such as ``As``, ``10h`` or ``td`` into a :class:`Card`."""

    token = token.strip()
    if len(token) < 2:
        raise InvalidCardError(f"Invalid card: {token!r}")
    rank_symbol, suit_letter = token[:-1].upper(), token[-1].upper()
    if rank_symbol not in RANK_TO_VALUE or suit_letter not in LETTER_TO_SUIT:
        raise InvalidCardError(f"Invalid card: {token!r}")
    return Card(LETTER_TO_SUIT[suit_letter], RANK_TO_VALUE[rank_symbol])


def parse_hand(text: str) -> List[Card]:
    """Parse a whitespace separated hand such as ``"As Ad Ac Js Jd"``."""

    return parse_cards(text.split())


def parse_cards(tokens: Iterable[str]) -> List[Card]:
    return [parse_card(token) for token in tokens]


def format_card(card: Card) -> str:
    return f"{VALUE_TO_RANK[card.rank]}{card.suit}"


def format_hand(cards: Sequence[Card]) -> str:
    return " ".join(format_card(card) for card in cards)


__all__ = [
    "Card",
    "Suit",
    "InvalidCardError",
    "parse_card",
    "parse_cards",
    "parse_hand",
    "format_card",
    "format_hand",
    "RANKS",
    "VALUE_TO_RANK",
]

"""Text shown by the desktop windows after rating two hands."""
from __future__ import annotations

from typing import List

from ..core.rating import compare_ratings, describe_rating, format_rating, rate_hand

OUTCOME_TEXT = {
    "gt": "First hand wins",
    "lt": "Second hand wins",
    "eq": "Split: the hands tie",
}


def summarize(first: str, second: str = "") -> List[str]:
    """Rate one or two textual hands and return display lines.

    Raises :class:`ValueError` for hands that cannot be parsed or are too short.
    """

    lines = []
    rating = rate_hand(first)
    lines.append(f"{describe_rating(rating)}: {format_rating(rating)}")
    if second.strip():
        other = rate_hand(second)
        lines.append(f"{describe_rating(other)}: {format_rating(other)}")
        lines.append(OUTCOME_TEXT[str(compare_ratings(rating, other))])
    return lines


__all__ = ["summarize"]

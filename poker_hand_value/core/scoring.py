"""Fractional tie-break scores built from deciding card ranks."""
from __future__ import annotations

from typing import Sequence

MAX_SCORED_RANKS = 5
DIGIT_BASE = 100


def encode_score(ranks: Sequence[int]) -> float:
    """Encode up to five ranks as base-100 digits after the decimal point.

    ``[14, 11]`` becomes ``0.1411`` and ``[5]`` becomes ``0.05``. Rank lists of
    equal length compare the same way their encoded scores do, and every score
    stays below 1.
    """

    used = list(ranks)[:MAX_SCORED_RANKS]
    numerator = 0
    for rank in used:
        if not 0 <= rank < DIGIT_BASE:
            raise ValueError(f"Rank {rank} does not fit in a two digit score")
        numerator = numerator * DIGIT_BASE + rank
    return numerator / DIGIT_BASE ** len(used)


def score_digits(ranks: Sequence[int]) -> str:
    """Decimal digits of :func:`encode_score` for display, e.g. ``"1411"``."""

    return "".join(f"{rank:02d}" for rank in list(ranks)[:MAX_SCORED_RANKS])


__all__ = ["encode_score", "score_digits", "MAX_SCORED_RANKS"]

"""``rate-hand`` command line tool."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .core.rating import Rating, compare_ratings, describe_rating, format_rating, rate_hand
from .core.settings import RaterSettings, default_settings, load_settings

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rate-hand",
        description="Rate a poker hand of five or more cards, e.g. \"As Ad Ac Js Jd\".",
    )
    parser.add_argument("-H", "--hand", required=True, help="hand to rate")
    parser.add_argument("--against", help="second hand to compare with")
    parser.add_argument("--describe", action="store_true", default=None, help="append a description")
    parser.add_argument("--precision", type=int, help="decimal places for the value")
    parser.add_argument("--config", type=Path, help="settings JSON file")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def _render(rating: Rating, settings: RaterSettings) -> str:
    line = format_rating(rating, settings.precision)
    if settings.describe:
        line += f" ({describe_rating(rating)})"
    return line


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.precision is not None and args.precision < 0:
        parser.error("--precision must not be negative")

    try:
        settings = load_settings(args.config) if args.config else default_settings()
    except (OSError, ValueError) as exc:
        parser.error(f"unable to load settings: {exc}")
    settings = settings.with_overrides(
        precision=args.precision,
        describe=args.describe,
        log_level="DEBUG" if args.verbose else None,
    )
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        rating = rate_hand(args.hand)
        other = rate_hand(args.against) if args.against else None
    except ValueError as exc:
        LOGGER.error("Unable to rate hand: %s", exc)
        parser.error(str(exc))

    print(_render(rating, settings))
    if other is not None:
        print(_render(other, settings))
        print(compare_ratings(rating, other))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

import pytest

from poker_hand_value.core.cards import Card, Suit
from poker_hand_value.core.categories import Category
from poker_hand_value.core.matchers import (
    MATCHERS,
    match_flush,
    match_four_of_a_kind,
    match_full_house,
    match_high_card,
    match_pair,
    match_straight,
    match_straight_flush,
    match_three_of_a_kind,
    match_two_pair,
)

H, D, S, C = Suit.HEARTS, Suit.DIAMONDS, Suit.SPADES, Suit.CLUBS


def hand(*pairs):
    return [Card(suit, rank) for suit, rank in pairs]


def scored(match):
    assert match is not None
    return match.category, match.score


def test_high_card():
    assert scored(match_high_card(hand((H, 4), (D, 2), (S, 9), (H, 11), (D, 3)))) == (
        Category.HIGH_CARD,
        0.1109040302,
    )
    assert scored(match_high_card(hand((H, 4), (D, 2), (S, 9), (H, 11), (D, 3), (C, 12)))) == (
        Category.HIGH_CARD,
        0.1211090403,
    )


def test_pair():
    assert scored(match_pair(hand((H, 4), (D, 2), (S, 9), (H, 9), (D, 3)))) == (Category.PAIR, 0.09040302)
    assert scored(match_pair(hand((H, 5), (D, 2), (S, 13), (H, 13), (D, 3), (C, 7)))) == (
        Category.PAIR,
        0.13070503,
    )
    assert match_pair(hand((H, 5), (D, 2), (S, 13), (H, 7), (D, 3))) is None


def test_two_pair():
    assert scored(match_two_pair(hand((H, 4), (D, 4), (S, 9), (H, 6), (D, 6)))) == (Category.TWO_PAIR, 0.060409)
    assert scored(match_two_pair(hand((H, 4), (D, 4), (S, 9), (H, 6), (D, 6), (H, 2)))) == (
        Category.TWO_PAIR,
        0.060409,
    )
    assert match_two_pair(hand((H, 4), (D, 2), (S, 9), (H, 6), (D, 6))) is None
    assert match_two_pair(hand((H, 4), (D, 2), (S, 9), (H, 10), (D, 6))) is None


def test_two_pair_third_pair_becomes_kicker():
    match = match_two_pair(hand((H, 4), (D, 4), (S, 9), (H, 9), (D, 6), (C, 6), (S, 2)))
    assert match.ranks == (9, 6, 4)


def test_three_of_a_kind():
    assert scored(match_three_of_a_kind(hand((H, 12), (D, 12), (S, 12), (H, 3), (D, 6)))) == (
        Category.THREE_OF_A_KIND,
        0.120603,
    )
    assert scored(match_three_of_a_kind(hand((H, 12), (D, 12), (S, 12), (H, 3), (D, 6), (S, 2)))) == (
        Category.THREE_OF_A_KIND,
        0.120603,
    )
    assert match_three_of_a_kind(hand((H, 12), (D, 12), (S, 10), (H, 3), (D, 6))) is None
    assert match_three_of_a_kind(hand((H, 12), (D, 10), (S, 9), (H, 3), (D, 6))) is None


def test_straight():
    assert scored(match_straight(hand((H, 4), (D, 5), (S, 6), (H, 7), (D, 8)))) == (Category.STRAIGHT, 0.08)
    assert scored(match_straight(hand((H, 14), (D, 13), (S, 12), (H, 11), (D, 10)))) == (Category.STRAIGHT, 0.14)
    assert match_straight(hand((H, 13), (D, 5), (S, 9), (H, 7), (D, 8))) is None


def test_wheel_scores_five_high():
    assert scored(match_straight(hand((H, 14), (D, 5), (S, 3), (H, 4), (D, 2)))) == (Category.STRAIGHT, 0.05)
    assert scored(match_straight(hand((H, 14), (D, 5), (S, 3), (H, 4), (D, 2), (S, 10)))) == (
        Category.STRAIGHT,
        0.05,
    )


def test_straight_picks_highest_run():
    match = match_straight(hand((H, 14), (D, 2), (S, 3), (H, 4), (D, 5), (C, 6), (S, 7)))
    assert match.ranks == (7,)


def test_straight_ignores_duplicate_ranks():
    match = match_straight(hand((H, 5), (D, 5), (S, 6), (H, 7), (D, 8), (C, 9)))
    assert match.ranks == (9,)


def test_flush():
    assert scored(match_flush(hand((H, 9), (H, 11), (H, 14), (H, 7), (H, 3)))) == (Category.FLUSH, 0.1411090703)
    assert scored(match_flush(hand((H, 9), (H, 11), (H, 14), (H, 7), (H, 3), (H, 2)))) == (
        Category.FLUSH,
        0.1411090703,
    )
    assert match_flush(hand((H, 9), (D, 11), (H, 2), (S, 7), (H, 3))) is None


def test_flush_uses_top_five_of_suit_in_larger_hand():
    cards = hand((S, 2), (S, 13), (D, 14), (S, 9), (S, 4), (S, 6), (C, 14))
    match = match_flush(cards)
    assert match.ranks == (13, 9, 6, 4, 2)


def test_flush_prefers_suit_with_higher_cards():
    cards = hand((H, 2), (H, 3), (H, 4), (H, 5), (H, 7), (D, 14), (D, 9), (D, 8), (D, 6), (D, 3))
    assert match_flush(cards).ranks == (14, 9, 8, 6, 3)


def test_full_house():
    assert scored(match_full_house(hand((H, 9), (D, 9), (S, 9), (H, 3), (D, 3)))) == (Category.FULL_HOUSE, 0.0903)
    assert match_full_house(hand((H, 2), (D, 9), (S, 9), (H, 3), (D, 3))) is None


def test_two_sets_of_trips_are_not_a_full_house():
    cards = hand((S, 9), (D, 9), (C, 9), (S, 3), (D, 3), (C, 3), (H, 13))
    assert match_full_house(cards) is None
    assert match_three_of_a_kind(cards).ranks == (9, 13, 3)


def test_matchers_accept_text():
    assert scored(match_full_house("9h 9d 9s 3h 3d")) == (Category.FULL_HOUSE, 0.0903)
    assert scored(match_straight("Ah 5d 3s 4h 2d")) == (Category.STRAIGHT, 0.05)
    assert match_flush("9h Jd 2h 7s 3h") is None


def test_four_of_a_kind():
    assert scored(match_four_of_a_kind(hand((H, 12), (D, 12), (S, 12), (C, 12), (D, 6)))) == (
        Category.FOUR_OF_A_KIND,
        0.1206,
    )
    assert scored(match_four_of_a_kind(hand((H, 12), (D, 12), (S, 12), (C, 12), (D, 6), (S, 4)))) == (
        Category.FOUR_OF_A_KIND,
        0.1206,
    )
    assert match_four_of_a_kind(hand((H, 12), (D, 11), (S, 12), (C, 12), (D, 6))) is None


def test_straight_flush():
    assert scored(match_straight_flush(hand((H, 9), (H, 5), (H, 6), (H, 7), (H, 8)))) == (
        Category.STRAIGHT_FLUSH,
        0.09,
    )
    assert match_straight_flush(hand((H, 9), (H, 5), (H, 10), (H, 7), (H, 8))) is None


def test_straight_flush_not_fooled_by_mixed_suits():
    cards = hand((H, 9), (H, 5), (H, 6), (H, 7), (D, 8), (H, 2), (H, 13))
    assert match_straight_flush(cards) is None


def test_straight_flush_with_pair_of_other_suit():
    cards = hand((S, 9), (H, 9), (H, 5), (H, 6), (H, 7), (H, 8))
    assert match_straight_flush(cards).ranks == (9,)


def test_steel_wheel():
    cards = hand((C, 14), (C, 2), (C, 3), (C, 4), (C, 5), (D, 6))
    assert scored(match_straight_flush(cards)) == (Category.STRAIGHT_FLUSH, 0.05)


def test_matchers_in_strength_order():
    categories = [category for category, _ in MATCHERS]
    assert categories == sorted(categories, key=lambda category: category.base, reverse=True)
    assert len(categories) == len(Category)


@pytest.mark.parametrize("category, matcher", MATCHERS)
def test_matchers_report_their_own_category(category, matcher):
    cards = hand((H, 14), (H, 13), (H, 12), (H, 11), (H, 10), (D, 14), (S, 14), (C, 14), (D, 13), (S, 12), (C, 2))
    match = matcher(cards)
    if match is not None:
        assert match.category == category
        assert 0 <= match.score < 1


def test_straight_flush_takes_first_suit_in_order():
    cards = hand((C, 5), (C, 6), (C, 7), (C, 8), (C, 9), (S, 10), (S, 11), (S, 12), (S, 13), (S, 14))
    assert match_straight_flush(cards).ranks == (9,)

import pytest

from poker_hand_value.ui.summary import summarize


def test_summarize_single_hand():
    assert summarize("As Ad Ac Js Jd") == ["Full House (As over Js): full_house, 7.1411"]


def test_summarize_two_hands():
    lines = summarize("As Ad Ac Js Jd", "2c 3d 4h 5s 6c")
    assert lines[1] == "Straight (6 high): straight, 5.06"
    assert lines[2] == "First hand wins"


def test_summarize_tie():
    assert summarize("Ks Kh 2d 2h 3d", "Kc Kd 2c 2s 3c")[-1] == "Split: the hands tie"


def test_summarize_reports_bad_input():
    with pytest.raises(ValueError):
        summarize("As Ad")
